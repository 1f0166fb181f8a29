# tests/test_schemas.py
import pytest
from datetime import date
from pydantic import ValidationError
from api.schemas.author import AuthorCreate, AuthorUpdate, AuthorSchema
from api.schemas.book import BookCreate, BookUpdate, is_isbn13

@pytest.mark.parametrize("isbn", [
    "978-3-16-148410-0",
    "9783161484100",
    "978 0 306 40615 7",
    "9781449355739",
])
def test_valid_isbn13(isbn):
    assert is_isbn13(isbn)

@pytest.mark.parametrize("isbn", [
    "978-3-16-148410-1",  # wrong check digit
    "0306406152",         # ISBN-10
    "97831614841000",
    "978316148410X",
    "",
])
def test_invalid_isbn13(isbn):
    assert not is_isbn13(isbn)

def test_author_create_accepts_camel_case():
    author = AuthorCreate.model_validate({"firstName": "Tanjin", "lastName": "Alam", "birthDate": "1990-05-17"})
    assert author.first_name == "Tanjin"
    assert author.birth_date == date(1990, 5, 17)
    assert author.bio is None

def test_author_create_accepts_snake_case():
    author = AuthorCreate.model_validate({"first_name": "Tanjin", "last_name": "Alam"})
    assert author.last_name == "Alam"

def test_unknown_fields_are_ignored():
    author = AuthorCreate.model_validate({"firstName": "A", "lastName": "B", "role": "admin"})
    assert "role" not in author.model_dump()

def test_bio_length_is_bounded():
    with pytest.raises(ValidationError):
        AuthorCreate.model_validate({"firstName": "A", "lastName": "B", "bio": "x" * 1001})

def test_update_only_dumps_given_fields():
    update = AuthorUpdate.model_validate({"bio": "New bio"})
    assert update.model_dump(exclude_unset=True) == {"bio": "New bio"}

def test_book_create_requires_positive_integer_author():
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"title": "T", "isbn": "9783161484100", "authorId": -1})
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"title": "T", "isbn": "9783161484100", "authorId": 1.5})

def test_book_genre_is_bounded():
    with pytest.raises(ValidationError):
        BookCreate.model_validate({"title": "T", "isbn": "9783161484100", "authorId": 1, "genre": "g" * 101})

def test_book_update_allows_missing_isbn_but_checks_a_given_one():
    assert BookUpdate.model_validate({"title": "Renamed"}).isbn is None
    with pytest.raises(ValidationError):
        BookUpdate.model_validate({"isbn": "123-456"})

def test_response_schema_serializes_camel_case(sample_author):
    dumped = AuthorSchema.model_validate(sample_author).model_dump(by_alias=True, mode="json")
    assert dumped["firstName"] == "Tanjin"
    assert dumped["birthDate"] == "1990-05-17"
    assert dumped["deletedAt"] is None
    assert "first_name" not in dumped
