# core/sa/models/__init__.py
from .base import Base, TimestampMixin, SoftDeleteMixin
from .author import Author
from .book import Book

__all__ = [
    'Base',
    'TimestampMixin',
    'SoftDeleteMixin',
    'Author',
    'Book',
]
