from __future__ import annotations

from typing import Any

from ..repositories.books_repo import BooksRepository
from ..utils import find_book_index, next_book_id
from ..validators import validate_book_payload


class CatalogService:
    """File-backed catalog. Identifiers are always assigned by the store;
    an ``id`` sent by the caller is ignored."""

    def __init__(self, repo: BooksRepository):
        self.repo = repo

    def list_books(self, author: str | None = None) -> list[dict[str, Any]]:
        books = self.repo.load()
        if author is None:
            return books
        return [book for book in books if isinstance(book, dict) and book.get("author") == author]

    def list_available_books(self) -> list[dict[str, Any]]:
        return [book for book in self.repo.load() if isinstance(book, dict) and book.get("available") is True]

    def get_book(self, book_id: int) -> dict[str, Any] | None:
        books = self.repo.load()
        index = find_book_index(books, book_id)
        return None if index is None else books[index]

    def create_book(self, payload: dict[str, Any]) -> dict[str, Any]:
        fields = validate_book_payload(payload)
        with self.repo.transaction() as books:
            book = {"id": next_book_id(books), **fields}
            books.append(book)
            self.repo.save(books)
        return book

    def update_book(self, book_id: int, payload: dict[str, Any]) -> dict[str, Any] | None:
        with self.repo.transaction() as books:
            index = find_book_index(books, book_id)
            if index is None:
                return None

            fields = validate_book_payload(payload, partial=True)
            books[index].update(fields)
            self.repo.save(books)
            return books[index]

    def delete_book(self, book_id: int) -> bool:
        with self.repo.transaction() as books:
            index = find_book_index(books, book_id)
            if index is None:
                return False

            del books[index]
            self.repo.save(books)
            return True
