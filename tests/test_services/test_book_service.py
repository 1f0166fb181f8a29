# tests/test_services/test_book_service.py
import pytest
from datetime import date
from sqlalchemy.exc import IntegrityError
from core.errors import CatalogError, ErrorKind, classify
from core.pagination import resolve_pagination
from core.services import AuthorService, BookService
from tests.utils import VALID_ISBNS

@pytest.fixture
def book_service(db_session):
    return BookService(db_session)

def book_data(author_id, isbn=VALID_ISBNS[1], **extra):
    return {"title": "Catalog Tales", "isbn": isbn, "author_id": author_id, **extra}

def test_create_returns_book_with_author(book_service, sample_author):
    book = book_service.create(book_data(sample_author.id, genre="Essays", published_date=date(2019, 3, 1)))
    assert book.id > 0
    assert book.title == "Catalog Tales"
    assert book.isbn == VALID_ISBNS[1]
    assert book.genre == "Essays"
    assert book.published_date == date(2019, 3, 1)
    assert book.author.first_name == "Tanjin"

def test_create_with_unknown_author(book_service):
    with pytest.raises(CatalogError) as exc_info:
        book_service.create(book_data(4242))
    assert exc_info.value.kind == ErrorKind.NOT_FOUND
    assert exc_info.value.message == "Author with ID 4242 not found"

def test_create_for_deleted_author(book_service, db_session, sample_author):
    AuthorService(db_session).remove(sample_author.id)
    with pytest.raises(CatalogError) as exc_info:
        book_service.create(book_data(sample_author.id))
    assert exc_info.value.status_code == 404

def test_duplicate_isbn_is_conflict(book_service, sample_author):
    book_service.create(book_data(sample_author.id))
    with pytest.raises(IntegrityError) as exc_info:
        book_service.create(book_data(sample_author.id))
    assert classify(exc_info.value).status_code == 409

def test_find_all_filters(book_service, sample_author, db_session):
    other = AuthorService(db_session).create({"first_name": "Grace", "last_name": "Hopper"})
    book_service.create(book_data(sample_author.id, VALID_ISBNS[1], title="Alpha"))
    book_service.create(book_data(other.id, VALID_ISBNS[2], title="Beta"))

    page = book_service.find_all(resolve_pagination(), {"author_id": other.id})
    assert page["total"] == 1
    assert page["item"][0].title == "Beta"

    page = book_service.find_all(resolve_pagination(), {"title": "ALP"})
    assert [b.title for b in page["item"]] == ["Alpha"]

def test_update_changes_author(book_service, sample_book, db_session):
    other = AuthorService(db_session).create({"first_name": "Grace", "last_name": "Hopper"})
    book = book_service.update(sample_book.id, {"author_id": other.id})
    assert book.author_id == other.id
    assert book.author.last_name == "Hopper"

def test_update_to_unknown_author(book_service, sample_book):
    with pytest.raises(CatalogError) as exc_info:
        book_service.update(sample_book.id, {"author_id": 9999})
    assert exc_info.value.kind == ErrorKind.NOT_FOUND
    assert book_service.find_one(sample_book.id).author_id == sample_book.author_id

def test_partial_update_keeps_other_fields(book_service, sample_book):
    book_service.update(sample_book.id, {"genre": "Mystery"})
    fetched = book_service.find_one(sample_book.id)
    assert fetched.genre == "Mystery"
    assert fetched.title == "The Quiet Catalog"
    assert fetched.isbn == VALID_ISBNS[0]
    assert fetched.published_date == date(2020, 1, 15)

def test_remove_book(book_service, sample_book, sample_author, db_session):
    book_service.remove(sample_book.id)
    with pytest.raises(CatalogError):
        book_service.find_one(sample_book.id)
    # the author is untouched
    assert AuthorService(db_session).find_one(sample_author.id).id == sample_author.id

def test_remove_missing_book(book_service):
    with pytest.raises(CatalogError) as exc_info:
        book_service.remove(31337)
    assert exc_info.value.kind == ErrorKind.NOT_FOUND_WHILE_DELETING
    assert exc_info.value.message == "Book not found during delete operation"
