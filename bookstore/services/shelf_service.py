from __future__ import annotations

from typing import Any

from ..repositories.shelf_repo import ShelfRepository
from ..utils import find_book_index, next_book_id
from ..validators import DuplicateBookError, validate_shelf_payload


class ShelfService:
    """In-memory shelf. Callers may pick the identifier; a clash with a
    book already on the shelf is rejected."""

    def __init__(self, repo: ShelfRepository):
        self.repo = repo

    def list_books(self, author: str | None = None) -> list[dict[str, Any]]:
        books = self.repo.load()
        if author is None:
            return books
        return [book for book in books if book.get("author") == author]

    def get_book(self, book_id: int) -> dict[str, Any] | None:
        books = self.repo.load()
        index = find_book_index(books, book_id)
        return None if index is None else books[index]

    def add_book(self, payload: dict[str, Any]) -> dict[str, Any]:
        book = validate_shelf_payload(payload)
        with self.repo.transaction() as books:
            if "id" not in book:
                book = {"id": next_book_id(books), **book}
            elif find_book_index(books, book["id"]) is not None:
                raise DuplicateBookError("Already Available")
            books.append(book)
        return dict(book)
