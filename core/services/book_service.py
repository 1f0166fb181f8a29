# core/services/book_service.py

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from core.errors import CatalogError
from core.pagination import Pagination, get_paginate_data
from core.sa.models import Book
from core.sa.repositories.book import BookRepository
from core.services.author_service import AuthorService

logger = logging.getLogger(__name__)

BOOK_FIELDS = ('title', 'isbn', 'published_date', 'genre', 'author_id')


class BookService:
    def __init__(self, session: Session, author_service: Optional[AuthorService] = None):
        self.session = session
        self.repo = BookRepository(session)
        self.author_service = author_service or AuthorService(session)

    def create(self, data: Dict[str, Any]) -> Book:
        """Create a book for an existing author.

        Raises:
            CatalogError: not_found when the author does not exist or was deleted
        """
        self.author_service.find_one(data.get('author_id'))

        book = self.repo.create(**{key: data.get(key) for key in BOOK_FIELDS})
        logger.info(f"Created book {book.id} (isbn {book.isbn}) for author {book.author_id}")

        # Return with author information
        return self.find_one(book.id)

    def find_all(self, pagination: Pagination, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """List live books. title and isbn match case-insensitive fragments, author_id matches exactly."""
        books, total = self.repo.search(
            filters=filters,
            offset=pagination.offset,
            limit=pagination.limit
        )
        return get_paginate_data(books, total, pagination)

    def find_one(self, book_id: int) -> Book:
        book = self.repo.get_by_id(book_id)
        if book is None:
            raise CatalogError.not_found("Book", book_id)
        return book

    def update(self, book_id: int, changes: Dict[str, Any]) -> Book:
        book = self.find_one(book_id)

        # If author_id is being updated, verify the new author exists
        if changes.get('author_id') is not None:
            book.author = self.author_service.find_one(changes['author_id'])

        for key, value in changes.items():
            if key in BOOK_FIELDS:
                setattr(book, key, value)
        self.repo.save()
        logger.info(f"Updated book {book_id}: {sorted(changes)}")
        return book

    def remove(self, book_id: int) -> None:
        book = self.repo.get_by_id(book_id)
        if book is None:
            raise CatalogError.not_found_while_deleting("Book")
        self.repo.soft_delete(book)
        logger.info(f"Deleted book {book_id}")
