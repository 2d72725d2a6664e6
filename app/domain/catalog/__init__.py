"""
Catalog Domain

The salon's service registry: bookable offerings with a fixed duration,
price and category. Scheduling only reads from it (``get_service``).
"""

from .repository import CatalogRepository
from .router import router

__all__ = ["CatalogRepository", "router"]
