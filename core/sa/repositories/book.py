# core/sa/repositories/book.py
from typing import Optional, List, Dict, Any, Tuple
from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload
from ..models import Book

class BookRepository:
    """Repository for managing Book entities."""

    SEARCHABLE_FIELDS = ('title', 'isbn')

    def __init__(self, session: Session):
        self.session = session

    def _live(self):
        return (
            self.session.query(Book)
            .options(joinedload(Book.author))
            .filter(Book.deleted_at.is_(None))
        )

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a live book by ID with its author loaded"""
        return self._live().filter(Book.id == book_id).first()

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        """Get a book by ISBN, soft-deleted rows included"""
        return self.session.query(Book).filter(Book.isbn == isbn).first()

    def search(
        self,
        filters: Optional[Dict[str, Any]] = None,
        offset: int = 0,
        limit: int = 10
    ) -> Tuple[List[Book], int]:
        """Search live books, newest first.

        Args:
            filters: title / isbn fragments (case-insensitive, all must match)
                     and an exact author_id
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Tuple of (books on this page with authors loaded, total matching books)
        """
        filters = filters or {}
        base_query = self._live()

        for field in self.SEARCHABLE_FIELDS:
            value = filters.get(field)
            if value:
                base_query = base_query.filter(getattr(Book, field).ilike(f"%{value}%"))

        if filters.get('author_id') is not None:
            base_query = base_query.filter(Book.author_id == filters['author_id'])

        total = base_query.count()
        books = (
            base_query
            .order_by(desc(Book.created_at), desc(Book.id))
            .offset(offset)
            .limit(limit)
            .all()
        )
        return books, total

    def create(self, **values) -> Book:
        """Persist a new book"""
        book = Book(**values)
        self.session.add(book)
        self.save()
        return book

    def save(self) -> None:
        """Commit pending changes, rolling back if the database refuses them"""
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def soft_delete(self, book: Book) -> None:
        book.mark_deleted()
        self.save()
