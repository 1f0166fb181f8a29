# core/sa/repositories/author.py
from typing import Optional, List, Dict, Any, Tuple
from datetime import datetime, UTC
from sqlalchemy import desc, or_
from sqlalchemy.orm import Session
from ..models import Author, Book

class AuthorRepository:
    """Repository for managing Author entities."""

    # Filters matched case-insensitively against a substring of the column
    SEARCHABLE_FIELDS = ('first_name', 'last_name')

    def __init__(self, session: Session):
        self.session = session

    def _live(self):
        return self.session.query(Author).filter(Author.deleted_at.is_(None))

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get a live (not soft-deleted) author by ID"""
        return self._live().filter(Author.id == author_id).first()

    def search(
        self,
        filters: Optional[Dict[str, Any]] = None,
        offset: int = 0,
        limit: int = 10
    ) -> Tuple[List[Author], int]:
        """Search live authors, newest first.

        Name filters are alternatives: an author matches when any of the
        given name fragments matches.

        Args:
            filters: Mapping of first_name / last_name to a search fragment
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Tuple of (authors on this page, total matching authors)
        """
        base_query = self._live()

        conditions = [
            getattr(Author, field).ilike(f"%{value}%")
            for field, value in (filters or {}).items()
            if field in self.SEARCHABLE_FIELDS and value
        ]
        if conditions:
            base_query = base_query.filter(or_(*conditions))

        total = base_query.count()
        authors = (
            base_query
            .order_by(desc(Author.created_at), desc(Author.id))
            .offset(offset)
            .limit(limit)
            .all()
        )
        return authors, total

    def create(self, **values) -> Author:
        """Persist a new author"""
        author = Author(**values)
        self.session.add(author)
        self.save()
        return author

    def save(self) -> None:
        """Commit pending changes, rolling back if the database refuses them"""
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def soft_delete(self, author: Author) -> List[Book]:
        """Hide an author and every live book it owns.

        The author is stamped first, then each of its live books, and both
        steps land in a single commit.

        Returns:
            The books that were hidden along with the author
        """
        now = datetime.now(UTC)
        author.mark_deleted(now)
        cascaded = author.live_books
        for book in cascaded:
            book.mark_deleted(now)
        self.save()
        return cascaded
