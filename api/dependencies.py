# api/dependencies.py
from typing import Optional
from fastapi import Depends, Query
from sqlalchemy.orm import Session

from core.errors import CatalogError
from core.pagination import Pagination, resolve_pagination
from core.sa.database import get_db
from core.services import AuthorService, BookService


def pagination_params(
    page: Optional[str] = Query(default=None, description="Zero-based page number"),
    limit: Optional[str] = Query(default=None, description="Items per page (max 100)"),
) -> Pagination:
    return resolve_pagination(page, limit)


def parse_id(id: str) -> int:
    """Path id as an integer; anything else is a bad request"""
    try:
        return int(id)
    except ValueError:
        raise CatalogError.invalid_request("Validation failed (numeric string is expected)")


def get_author_service(db: Session = Depends(get_db)) -> AuthorService:
    return AuthorService(db)


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    return BookService(db)
