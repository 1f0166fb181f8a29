# core/pagination.py
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from core.errors import CatalogError

DEFAULT_PAGE = 0
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class Pagination:
    """Resolved paging window. Pages are zero-based."""
    page: int
    limit: int
    size: int
    offset: int


def _parse(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    raw = str(raw).strip()
    if raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise CatalogError.invalid_request("Invalid pagination params")


def resolve_pagination(page: Optional[str] = None, limit: Optional[str] = None) -> Pagination:
    """Turn raw page/limit query values into a Pagination.

    Missing values fall back to page 0 and limit 10; a limit of 0 also means
    the default. Non-numeric or negative values, and limits above 100, are
    rejected with an invalid-request error.
    """
    parsed_page = _parse(page)
    parsed_limit = _parse(limit)

    page_value = DEFAULT_PAGE if parsed_page is None else parsed_page
    limit_value = parsed_limit or DEFAULT_LIMIT

    if page_value < 0 or limit_value < 0:
        raise CatalogError.invalid_request("Invalid pagination params")
    # do not allow to fetch large slices of the dataset
    if limit_value > MAX_LIMIT:
        raise CatalogError.invalid_request(f"Invalid pagination params: Max limit is {MAX_LIMIT}")

    return Pagination(
        page=page_value,
        limit=limit_value,
        size=limit_value,
        offset=page_value * limit_value,
    )


def has_next(total: int, pagination: Pagination) -> bool:
    return total > (pagination.page + 1) * pagination.limit


def get_paginate_data(items: Sequence[Any], total: int, pagination: Pagination) -> Dict[str, Any]:
    """Shape a page of results the way list endpoints return them"""
    return {
        "item": list(items),
        "total": total,
        "page": pagination.page,
        "limit": pagination.limit,
        "has_next_page": has_next(total, pagination),
    }
