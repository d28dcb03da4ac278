"""Search Catalog Query - 캐시된 카탈로그 검색."""

from __future__ import annotations

from typing import TYPE_CHECKING

from waste_guide.application.dto.match_response import WasteGuideMatch
from waste_guide.domain.constants import SEARCH_RESULT_LIMIT

if TYPE_CHECKING:
    from waste_guide.application.services.catalog_cache import CatalogCacheManager


class SearchCatalogQuery:
    """캐시된 엔트리 부분 문자열 검색 Query.

    캐시가 비어있으면 먼저 채운 뒤 검색한다.
    """

    def __init__(self, catalog_cache: CatalogCacheManager):
        """초기화.

        Args:
            catalog_cache: 카탈로그 캐시 매니저
        """
        self._catalog_cache = catalog_cache

    async def execute(
        self,
        term: str,
        limit: int = SEARCH_RESULT_LIMIT,
    ) -> tuple[int, list[WasteGuideMatch]]:
        """검색 실행.

        Args:
            term: 검색어
            limit: 최대 결과 수

        Returns:
            (전체 일치 수, 상위 limit개 결과)
        """
        await self._catalog_cache.get_catalog()
        matches = self._catalog_cache.search(term, limit=None)
        return len(matches), [WasteGuideMatch.from_entry(e) for e in matches[:limit]]
