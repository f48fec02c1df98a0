from .catalog_service import CatalogService
from .shelf_service import ShelfService

__all__ = [
    "CatalogService",
    "ShelfService",
]
