# tests/test_repositories/test_book_repository.py
import pytest
from datetime import date
from sqlalchemy.exc import IntegrityError
from core.sa.repositories.book import BookRepository
from core.sa.models import Author, Book
from tests.utils import VALID_ISBNS

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance"""
    return BookRepository(db_session)

@pytest.fixture
def second_author(db_session):
    author = Author(first_name="Grace", last_name="Hopper")
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def books(book_repo, sample_author, second_author):
    specs = [
        ("Compilers in Practice", VALID_ISBNS[1], sample_author.id),
        ("Practical Catalogs", VALID_ISBNS[2], sample_author.id),
        ("The COBOL Story", VALID_ISBNS[3], second_author.id),
    ]
    return [book_repo.create(title=title, isbn=isbn, author_id=author_id) for title, isbn, author_id in specs]

def test_get_by_id_loads_author(book_repo, sample_book, sample_author):
    book = book_repo.get_by_id(sample_book.id)
    assert book.author.id == sample_author.id
    assert book.author.last_name == "Alam"

def test_get_by_id_skips_soft_deleted(book_repo, sample_book):
    book_repo.soft_delete(sample_book)
    assert book_repo.get_by_id(sample_book.id) is None
    # still there for ISBN lookups
    assert book_repo.get_by_isbn(sample_book.isbn).id == sample_book.id

def test_search_by_title_fragment(book_repo, books):
    results, total = book_repo.search({"title": "PRACTIC"})
    assert total == 2
    assert {b.title for b in results} == {"Compilers in Practice", "Practical Catalogs"}

def test_search_filters_combine(book_repo, books, sample_author):
    results, total = book_repo.search({"title": "practic", "author_id": sample_author.id, "isbn": "978-1"})
    assert total == 1
    assert results[0].title == "Practical Catalogs"

def test_search_by_author_id(book_repo, books, second_author):
    results, total = book_repo.search({"author_id": second_author.id})
    assert total == 1
    assert results[0].author.first_name == "Grace"

def test_search_newest_first(book_repo, books):
    results, _ = book_repo.search()
    assert [b.id for b in results] == [b.id for b in reversed(books)]

def test_search_count_ignores_page(book_repo, books):
    results, total = book_repo.search(offset=2, limit=2)
    assert total == 3
    assert len(results) == 1

def test_duplicate_isbn_rolls_back(book_repo, db_session, sample_book):
    with pytest.raises(IntegrityError):
        book_repo.create(title="Copy", isbn=sample_book.isbn, author_id=sample_book.author_id)
    # session is usable again after the rollback
    assert db_session.query(Book).count() == 1

def test_create_keeps_optional_fields(book_repo, sample_author):
    book = book_repo.create(
        title="Dated",
        isbn=VALID_ISBNS[4],
        author_id=sample_author.id,
        published_date=date(2001, 9, 9),
        genre="History"
    )
    fetched = book_repo.get_by_id(book.id)
    assert fetched.published_date == date(2001, 9, 9)
    assert fetched.genre == "History"
