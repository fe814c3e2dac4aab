import os

# Must be set before `models` is imported: DBStorage picks its engine at import time
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = ""
os.environ["MESSAGE_LOCALE"] = "en"

from datetime import date

import pytest

from api import create_app
from models import storage
from models.entities import Author
from models.repositories import AuthorRepository


@pytest.fixture(autouse=True)
def clean_db():
    # Every test starts from empty tables in the shared in-memory database
    storage.reset()
    yield
    storage.close()


@pytest.fixture
def session():
    return storage.get_session()


@pytest.fixture
def app():
    return create_app("test")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_author(session):
    """Persist an author and return the entity."""

    def _make(name="Test Author", date_of_birth=date(1990, 1, 1)):
        author = AuthorRepository(session).save(Author.new(name, date_of_birth))
        session.commit()
        return author

    return _make
