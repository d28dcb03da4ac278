"""Find Best Match Command.

물품 설명 → 카탈로그 매칭 UseCase.
캐시된 카탈로그 조회 → 매칭 전략 → (매칭 시) 상세 조회.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waste_guide.application.dto.match_response import WasteGuideMatch

if TYPE_CHECKING:
    from waste_guide.application.ports.match_strategy import MatchStrategyPort
    from waste_guide.application.services.catalog_cache import CatalogCacheManager
    from waste_guide.application.services.detail_resolver import DetailResolver
    from waste_guide.domain.value_objects import ItemDescription

logger = logging.getLogger(__name__)


class FindBestMatchCommand:
    """카탈로그 매칭 Command (UseCase).

    플로우:
    1. 캐시에서 카탈로그 조회 (필요 시 갱신)
    2. 매칭 전략으로 최적 엔트리 선택
    3. 매칭 시 상세 레코드 조회 (실패하면 캐시 엔트리만 반환, details_available=False)
    4. 매칭 없음 → None

    None 또는 details_available=False면 호출자가 AI 조언으로 대체한다.
    """

    def __init__(
        self,
        catalog_cache: CatalogCacheManager,
        match_strategy: MatchStrategyPort,
        detail_resolver: DetailResolver,
    ):
        """초기화.

        Args:
            catalog_cache: 카탈로그 캐시 매니저
            match_strategy: 매칭 전략 (lexical, llm)
            detail_resolver: 상세 조회기
        """
        self._catalog_cache = catalog_cache
        self._match_strategy = match_strategy
        self._detail_resolver = detail_resolver

    @property
    def strategy_name(self) -> str:
        """사용 중인 매칭 전략 이름."""
        return self._match_strategy.strategy_name

    async def execute(self, description: ItemDescription) -> WasteGuideMatch | None:
        """Command 실행.

        Args:
            description: 물품 설명

        Returns:
            WasteGuideMatch 또는 None
        """
        if description.is_blank:
            return None

        catalog = await self._catalog_cache.get_catalog()
        if not catalog:
            logger.warning(
                "Catalog empty, no match possible",
                extra={"description": description.summary()},
            )
            return None

        candidate = await self._match_strategy.find_best_match(description, catalog)
        if candidate is None:
            logger.info(
                "No waste guide match",
                extra={
                    "description": description.summary(),
                    "strategy": self._match_strategy.strategy_name,
                },
            )
            return None

        details = await self._detail_resolver.get_details(candidate.item.id)

        logger.info(
            "Waste guide match found",
            extra={
                "description": description.summary(),
                "match_id": candidate.item.id,
                "title": candidate.item.title,
                "score": candidate.score,
                "details_available": details is not None,
            },
        )

        return WasteGuideMatch.from_candidate(candidate, details)
