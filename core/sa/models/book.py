# core/sa/models/book.py
from datetime import date
from sqlalchemy import Integer, String, Date, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, SoftDeleteMixin

class Book(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    published_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    genre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # Physical deletes of an author remove its books at the database level
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id', ondelete='CASCADE'), nullable=False)

    # Relationships
    author = relationship('Author', back_populates='books')

    __table_args__ = (
        Index('idx_book_title', 'title'),
        Index('idx_book_author_id', 'author_id'),
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} isbn={self.isbn}>"
