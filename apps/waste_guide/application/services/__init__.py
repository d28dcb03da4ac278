"""Application Services."""

from waste_guide.application.services.catalog_cache import CacheInfo, CatalogCacheManager
from waste_guide.application.services.catalog_fetcher import (
    CatalogFetcher,
    CatalogFetchResult,
)
from waste_guide.application.services.detail_resolver import DetailResolver
from waste_guide.application.services.match_scorer import (
    LexicalMatchScorer,
    LexicalMatchStrategy,
)
from waste_guide.application.services.pagination_discovery import PaginationDiscovery

__all__ = [
    "CacheInfo",
    "CatalogCacheManager",
    "CatalogFetchResult",
    "CatalogFetcher",
    "DetailResolver",
    "LexicalMatchScorer",
    "LexicalMatchStrategy",
    "PaginationDiscovery",
]
