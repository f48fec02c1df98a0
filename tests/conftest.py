import pytest

from bookstore import create_app
from bookstore.config import TestConfig
from bookstore.repositories.books_repo import BooksRepository


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "books.json"


@pytest.fixture
def app(data_file):
    class StoreTestConfig(TestConfig):
        SECRET_KEY = "test-secret"
        BOOKS_DATA_FILE = str(data_file)

    return create_app(StoreTestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repo(data_file):
    return BooksRepository(data_file)
