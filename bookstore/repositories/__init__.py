from .books_repo import BooksRepository
from .shelf_repo import ShelfRepository

__all__ = [
    "BooksRepository",
    "ShelfRepository",
]
