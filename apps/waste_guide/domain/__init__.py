"""Waste Guide Domain Layer."""

from waste_guide.domain.entities import CachedEntry, CatalogItem
from waste_guide.domain.enums import CacheState
from waste_guide.domain.value_objects import (
    CacheSnapshot,
    ItemDescription,
    MatchCandidate,
    PaginationFormat,
)

__all__ = [
    "CacheSnapshot",
    "CacheState",
    "CachedEntry",
    "CatalogItem",
    "ItemDescription",
    "MatchCandidate",
    "PaginationFormat",
]
