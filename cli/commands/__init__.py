# cli/commands/__init__.py
from .author import author
from .book import book
from .db import db
from .serve import serve

__all__ = ['author', 'book', 'db', 'serve']
