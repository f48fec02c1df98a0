from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator

from ..utils import copy_books

DEFAULT_SHELF_BOOKS: list[dict[str, Any]] = [
    {"id": 1, "name": "Harry Potter", "author": "J.K Rawling"},
    {"id": 2, "name": "Rich Dad Poor Dad", "author": "Robert Kiyosaki"},
    {"id": 3, "name": "Physcilogy of Money", "author": "N/A"},
    {"id": 4, "name": "October Junction", "author": "Prakash"},
    {"id": 5, "name": "Musafir Cafe", "author": "Prakash"},
]


class ShelfRepository:
    """Process-memory book shelf. State is lost on restart."""

    def __init__(self, seed: list[dict[str, Any]] | None = None):
        self._books = copy_books(DEFAULT_SHELF_BOOKS if seed is None else seed)
        self._lock = threading.Lock()

    @contextmanager
    def transaction(self) -> Iterator[list[dict[str, Any]]]:
        # Yields the live list; changes are visible once the block exits.
        with self._lock:
            yield self._books

    def load(self) -> list[dict[str, Any]]:
        with self._lock:
            return copy_books(self._books)

    def count_books(self) -> int:
        with self._lock:
            return len(self._books)
