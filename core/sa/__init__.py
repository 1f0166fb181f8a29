# core/sa/__init__.py
from .database import Database
from .models import Base, Book, Author

__all__ = [
    'Database',
    'Base',
    'Book',
    'Author',
]
