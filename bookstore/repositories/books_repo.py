from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from ..utils import copy_books

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_BOOKS: list[dict[str, Any]] = [
    {"id": 1, "title": "Atomic Habits", "author": "James Clear", "available": True},
    {"id": 2, "title": "Deep Work", "author": "Cal Newport", "available": True},
]

_file_locks: dict[str, threading.RLock] = {}
_file_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = str(path.resolve())
    with _file_locks_guard:
        lock = _file_locks.get(key)
        if lock is None:
            lock = threading.RLock()
            _file_locks[key] = lock
        return lock


class BooksRepository:
    """Catalog books stored as one JSON array in a backing file.

    Every load reads the whole file and every save rewrites it. A missing
    file is created with the default seed, and content that is not a JSON
    array is replaced by the seed. Readers and writers of the same file
    share one lock, so a ``transaction()`` spanning load and save is never
    interleaved with another one in this process.
    """

    def __init__(self, data_file: str | os.PathLike, seed: list[dict[str, Any]] | None = None):
        self.path = Path(data_file)
        self.seed = copy_books(DEFAULT_CATALOG_BOOKS if seed is None else seed)
        self._lock = _lock_for(self.path)

    @contextmanager
    def transaction(self) -> Iterator[list[dict[str, Any]]]:
        with self._lock:
            yield self.load()

    def load(self) -> list[dict[str, Any]]:
        with self._lock:
            try:
                raw = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info("Book store %s not found, writing default seed", self.path)
                return self._reset()
            except UnicodeDecodeError:
                return self._heal("content is not valid UTF-8")

            try:
                books = json.loads(raw)
            except json.JSONDecodeError as exc:
                return self._heal(f"invalid JSON ({exc.msg} at line {exc.lineno})")

            if not isinstance(books, list):
                return self._heal(f"expected a JSON array, found {type(books).__name__}")
            return books

    def save(self, books: list[dict[str, Any]]) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(books, handle, indent=2, ensure_ascii=False)
                    handle.write("\n")
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise

    def ping(self) -> int:
        return len(self.load())

    def _heal(self, reason: str) -> list[dict[str, Any]]:
        logger.warning("Book store %s is corrupted (%s); discarding it and writing default seed", self.path, reason)
        return self._reset()

    def _reset(self) -> list[dict[str, Any]]:
        books = copy_books(self.seed)
        self.save(books)
        return books
