# tests/conftest.py
import os
import sys
import pytest
from datetime import date
from pathlib import Path
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from core.sa.models import Base, Author, Book
from core.sa.database import Database
from api.main import create_app
from tests.utils import VALID_ISBNS


@pytest.fixture(scope="session")
def database_url(tmp_path_factory):
    """SQLite file in a temporary directory for the whole test session."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_catalog.db'}"

@pytest.fixture(scope="session")
def database(database_url):
    """Create a test database instance"""
    db = Database(database_url)

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.dispose()
    try:
        os.remove(database_url.removeprefix("sqlite:///"))
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM book"))
    db_session.execute(text("DELETE FROM author"))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(
        first_name="Tanjin",
        last_name="Alam",
        bio="Writes about libraries",
        birth_date=date(1990, 5, 17)
    )
    db_session.add(author)
    db_session.commit()
    return author

@pytest.fixture
def sample_book(db_session, sample_author):
    """Create a sample book for testing."""
    book = Book(
        title="The Quiet Catalog",
        isbn=VALID_ISBNS[0],
        published_date=date(2020, 1, 15),
        genre="Fiction",
        author_id=sample_author.id
    )
    db_session.add(book)
    db_session.commit()
    return book

@pytest.fixture
def app(database):
    return create_app(database)

@pytest.fixture
def client(app):
    """TestClient with the application lifespan running"""
    with TestClient(app) as test_client:
        yield test_client
