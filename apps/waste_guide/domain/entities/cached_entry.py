"""Cached Entry Entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from waste_guide.domain.entities.catalog_item import CatalogItem, CatalogItemId


@dataclass(frozen=True)
class CachedEntry:
    """캐시용 축약 카탈로그 엔트리.

    CatalogItem에서 id, title, synonyms만 유지한 projection.
    """

    id: CatalogItemId
    title: str
    synonyms: tuple[str, ...] = ()

    @classmethod
    def from_item(cls, item: CatalogItem) -> CachedEntry | None:
        """CatalogItem을 축약. id 또는 title이 없으면 None."""
        if item.id is None or item.id == "" or not item.title:
            return None
        return cls(id=item.id, title=item.title, synonyms=tuple(item.synonyms))
