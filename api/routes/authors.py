# api/routes/authors.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_author_service, pagination_params, parse_id
from api.envelope import EnvelopeRoute
from api.schemas.author import AuthorCreate, AuthorSchema, AuthorUpdate
from api.schemas.common import PaginatedResponse
from core.pagination import Pagination
from core.services import AuthorService

router = APIRouter(prefix="/authors", tags=["authors"], route_class=EnvelopeRoute)

@router.post("", response_model=AuthorSchema, status_code=status.HTTP_201_CREATED)
def create_author(
    payload: AuthorCreate,
    service: AuthorService = Depends(get_author_service)
):
    return service.create(payload.model_dump())

@router.get("", response_model=PaginatedResponse[AuthorSchema])
def get_authors(
    pagination: Pagination = Depends(pagination_params),
    first_name: Optional[str] = Query(None, alias="firstName", description="Case-insensitive fragment of the first name"),
    last_name: Optional[str] = Query(None, alias="lastName", description="Case-insensitive fragment of the last name"),
    service: AuthorService = Depends(get_author_service)
):
    """
    Get a paginated list of authors, newest first.

    When both name filters are given an author matching either one is returned.
    """
    return service.find_all(pagination, {"first_name": first_name, "last_name": last_name})

@router.get("/{id}", response_model=AuthorSchema)
def get_author(
    author_id: int = Depends(parse_id),
    service: AuthorService = Depends(get_author_service)
):
    return service.find_one(author_id)

@router.patch("/{id}", response_model=AuthorSchema)
def update_author(
    payload: AuthorUpdate,
    author_id: int = Depends(parse_id),
    service: AuthorService = Depends(get_author_service)
):
    return service.update(author_id, payload.model_dump(exclude_unset=True))

@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(
    author_id: int = Depends(parse_id),
    service: AuthorService = Depends(get_author_service)
):
    """Soft-delete an author; its books are soft-deleted with it."""
    service.remove(author_id)
