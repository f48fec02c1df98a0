from typing import Any


def parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 1 else None
    if not isinstance(value, str):
        return None

    candidate = value.strip()
    if not candidate.isdecimal():
        return None
    parsed = int(candidate)
    return parsed if parsed >= 1 else None


def next_book_id(books: list[dict[str, Any]]) -> int:
    ids = [
        book["id"]
        for book in books
        if isinstance(book, dict) and isinstance(book.get("id"), int) and not isinstance(book.get("id"), bool)
    ]
    return max(ids, default=0) + 1


def find_book_index(books: list[dict[str, Any]], book_id: int) -> int | None:
    for index, book in enumerate(books):
        if isinstance(book, dict) and book.get("id") == book_id:
            return index
    return None


def copy_books(books: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [dict(book) for book in books]
