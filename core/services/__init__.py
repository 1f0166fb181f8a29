# core/services/__init__.py
from .author_service import AuthorService
from .book_service import BookService

__all__ = ['AuthorService', 'BookService']
