"""Domain Entities."""

from waste_guide.domain.entities.cached_entry import CachedEntry
from waste_guide.domain.entities.catalog_item import (
    CatalogItem,
    CatalogItemId,
    RecyclingMethod,
    WasteType,
    strip_markup,
)

__all__ = [
    "CachedEntry",
    "CatalogItem",
    "CatalogItemId",
    "RecyclingMethod",
    "WasteType",
    "strip_markup",
]
