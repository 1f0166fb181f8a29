# api/schemas/book.py
import re
from datetime import date, datetime
from typing import Optional
from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError
from .common import CamelModel, PositiveId
from .author import AuthorSummary

ISBN_MESSAGE = "isbn must be a valid ISBN format (e.g., 978-3-16-148410-0)"
_ISBN_SEPARATORS = re.compile(r"[\s-]")


def is_isbn13(value: str) -> bool:
    """Check an ISBN-13, allowing hyphens and spaces between digit groups"""
    digits = _ISBN_SEPARATORS.sub("", value)
    if len(digits) != 13 or not digits.isdigit():
        return False
    total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(digits[:12]))
    return (10 - total % 10) % 10 == int(digits[12])


def _check_isbn(value: Optional[str]) -> Optional[str]:
    if value is not None and not is_isbn13(value):
        raise PydanticCustomError("isbn", ISBN_MESSAGE)
    return value


class BookCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    isbn: str = Field(min_length=1, max_length=255)
    published_date: Optional[date] = None
    genre: Optional[str] = Field(default=None, max_length=100)
    author_id: PositiveId

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, value):
        return _check_isbn(value)

class BookUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    isbn: Optional[str] = Field(default=None, min_length=1, max_length=255)
    published_date: Optional[date] = None
    genre: Optional[str] = Field(default=None, max_length=100)
    author_id: Optional[PositiveId] = None

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, value):
        return _check_isbn(value)

class BookSchema(CamelModel):
    id: int
    title: str
    isbn: str
    published_date: Optional[date] = None
    genre: Optional[str] = None
    author_id: int
    author: Optional[AuthorSummary] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
