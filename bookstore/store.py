from flask import current_app

from .repositories.books_repo import BooksRepository
from .repositories.shelf_repo import ShelfRepository


def init_store(app):
    data_file = app.config.get("BOOKS_DATA_FILE", "")
    if not data_file:
        raise RuntimeError("BOOKS_DATA_FILE must point to the catalog backing file")

    app.extensions["book_catalog"] = BooksRepository(data_file)
    app.extensions["book_shelf"] = ShelfRepository()
    app.logger.info("Catalog store backed by '%s'", data_file)


def get_catalog_repo() -> BooksRepository:
    return current_app.extensions["book_catalog"]


def get_shelf_repo() -> ShelfRepository:
    return current_app.extensions["book_shelf"]
