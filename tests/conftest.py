from datetime import date

import pytest

from api import create_app
from models import storage
from services.author_service import AuthorService
from services.book_service import BookService


@pytest.fixture
def app():
    # Testing config binds storage to a fresh in-memory database
    app = create_app("testing")
    yield app
    storage.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    session = storage.get_session()
    yield session
    session.rollback()
    storage.close()


@pytest.fixture
def author_service(app):
    return AuthorService(storage)


@pytest.fixture
def book_service(app):
    return BookService(storage)


@pytest.fixture
def make_author(author_service):
    def _make(name="Jane Doe", birth_date=date(1980, 1, 1)):
        return author_service.create_author(name=name, birth_date=birth_date)

    return _make
