# core/services/author_service.py

import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from core.errors import CatalogError
from core.pagination import Pagination, get_paginate_data
from core.sa.models import Author
from core.sa.repositories.author import AuthorRepository

logger = logging.getLogger(__name__)

AUTHOR_FIELDS = ('first_name', 'last_name', 'bio', 'birth_date')


class AuthorService:
    def __init__(self, session: Session):
        self.session = session
        self.repo = AuthorRepository(session)

    def create(self, data: Dict[str, Any]) -> Author:
        author = self.repo.create(**{key: data.get(key) for key in AUTHOR_FIELDS})
        logger.info(f"Created author {author.id}")
        return author

    def find_all(self, pagination: Pagination, filters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """List live authors matching any of the first_name / last_name fragments"""
        authors, total = self.repo.search(
            filters=filters,
            offset=pagination.offset,
            limit=pagination.limit
        )
        return get_paginate_data(authors, total, pagination)

    def find_one(self, author_id: int) -> Author:
        author = self.repo.get_by_id(author_id)
        if author is None:
            raise CatalogError.not_found("Author", author_id)
        return author

    def update(self, author_id: int, changes: Dict[str, Any]) -> Author:
        """Apply only the fields present in changes"""
        author = self.find_one(author_id)
        for key, value in changes.items():
            if key in AUTHOR_FIELDS:
                setattr(author, key, value)
        self.repo.save()
        logger.info(f"Updated author {author_id}: {sorted(changes)}")
        return author

    def remove(self, author_id: int) -> None:
        """Soft-delete an author together with its books"""
        author = self.repo.get_by_id(author_id)
        if author is None:
            raise CatalogError.not_found_while_deleting("Author")
        books = self.repo.soft_delete(author)
        logger.info(f"Deleted author {author_id} and {len(books)} of its books")
