# core/sa/models/author.py
from datetime import date
from sqlalchemy import Integer, String, Date, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, SoftDeleteMixin

class Author(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    bio: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Relationships
    books = relationship('Book', back_populates='author', passive_deletes=True)

    __table_args__ = (
        # Search indexes
        Index('idx_author_first_name', 'first_name'),
        Index('idx_author_last_name', 'last_name'),
    )

    @property
    def live_books(self):
        """Books of this author that have not been soft-deleted"""
        return [book for book in self.books if book.deleted_at is None]

    def __repr__(self) -> str:
        return f"<Author id={self.id} {self.first_name} {self.last_name}>"
