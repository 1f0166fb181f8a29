# api/routes/books.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_book_service, pagination_params, parse_id
from api.envelope import EnvelopeRoute
from api.schemas.book import BookCreate, BookSchema, BookUpdate
from api.schemas.common import PaginatedResponse
from core.pagination import Pagination
from core.services import BookService

router = APIRouter(prefix="/books", tags=["books"], route_class=EnvelopeRoute)

@router.post("", response_model=BookSchema, status_code=status.HTTP_201_CREATED)
def create_book(
    payload: BookCreate,
    service: BookService = Depends(get_book_service)
):
    """
    Create a book.

    The referenced author must exist; otherwise the request fails with 404.
    A duplicate ISBN fails with 409.
    """
    return service.create(payload.model_dump())

@router.get("", response_model=PaginatedResponse[BookSchema])
def get_books(
    pagination: Pagination = Depends(pagination_params),
    title: Optional[str] = Query(None, description="Case-insensitive fragment of the title"),
    isbn: Optional[str] = Query(None, description="Case-insensitive fragment of the ISBN"),
    author_id: Optional[int] = Query(None, alias="authorId", description="Only books by this author"),
    service: BookService = Depends(get_book_service)
):
    """
    Get a paginated list of books with their authors, newest first.

    Args:
        pagination: Resolved page/limit query parameters
        title: Optional title fragment
        isbn: Optional ISBN fragment
        author_id: Optional exact author ID

    Returns:
        PaginatedResponse of books
    """
    return service.find_all(pagination, {"title": title, "isbn": isbn, "author_id": author_id})

@router.get("/{id}", response_model=BookSchema)
def get_book(
    book_id: int = Depends(parse_id),
    service: BookService = Depends(get_book_service)
):
    return service.find_one(book_id)

@router.patch("/{id}", response_model=BookSchema)
def update_book(
    payload: BookUpdate,
    book_id: int = Depends(parse_id),
    service: BookService = Depends(get_book_service)
):
    return service.update(book_id, payload.model_dump(exclude_unset=True))

@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int = Depends(parse_id),
    service: BookService = Depends(get_book_service)
):
    service.remove(book_id)
