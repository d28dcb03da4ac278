"""Pagination Discovery Service.

upstream 페이지네이션 규칙이 문서화되어 있지 않으므로,
후보 쿼리 파라미터를 차례로 시도해 실제로 다음 결과를 주는 규칙을 찾는다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from waste_guide.application.exceptions import CatalogError
from waste_guide.domain.constants import PAGINATION_TRIAL_PAGE
from waste_guide.domain.value_objects import (
    DEFAULT_CONVENTIONS,
    PaginationConvention,
    PaginationFormat,
)

if TYPE_CHECKING:
    from waste_guide.application.ports.catalog_source import CatalogSourcePort
    from waste_guide.domain.entities import CatalogItem

logger = logging.getLogger(__name__)


class PaginationDiscovery:
    """페이지네이션 형식 탐색기.

    정책:
    1. 후보 규칙을 고정 순서로 시도 (page, offset, from, skip, start)
    2. 각 후보마다 시험 페이지(3번째 페이지)로 GET 1회
    3. 비어있지 않고 1페이지와 다른 아이템이 하나라도 있으면 채택
    4. 후보 실패(HTTP 오류, 타임아웃, 파싱 실패)는 기각으로 처리
    5. 전부 실패하면 None

    발견한 형식은 캐싱하지 않는다. 갱신 주기마다 다시 탐색한다.
    """

    def __init__(
        self,
        source: CatalogSourcePort,
        conventions: Sequence[PaginationConvention] = DEFAULT_CONVENTIONS,
        trial_page: int = PAGINATION_TRIAL_PAGE,
        probe_timeout: float | None = 10.0,
    ):
        """초기화.

        Args:
            source: 카탈로그 소스
            conventions: 시도할 후보 규칙 (순서대로)
            trial_page: 시험할 페이지 번호 (1부터)
            probe_timeout: 탐색 요청 타임아웃 (초)
        """
        self._source = source
        self._conventions = tuple(conventions)
        self._trial_page = trial_page
        self._probe_timeout = probe_timeout

    async def discover(
        self,
        base_url: str,
        page_size: int,
        first_page_items: Iterable[CatalogItem] = (),
    ) -> PaginationFormat | None:
        """동작하는 페이지네이션 형식 탐색.

        Args:
            base_url: 카탈로그 기본 URL
            page_size: 1페이지 아이템 수 (offset 계산 힌트)
            first_page_items: 1페이지 아이템 (신규 여부 비교용)

        Returns:
            PaginationFormat 또는 None
        """
        if page_size <= 0:
            logger.warning(
                "Pagination discovery skipped: empty first page",
                extra={"base_url": base_url},
            )
            return None

        first_page_ids = {item.id for item in first_page_items}

        for convention in self._conventions:
            candidate = PaginationFormat(
                base_url=base_url,
                page_size=page_size,
                convention=convention,
            )
            probe_url = candidate.url_for(self._trial_page)

            try:
                page = await self._source.fetch_page(probe_url, timeout=self._probe_timeout)
            except CatalogError as e:
                logger.info(
                    "Pagination format rejected",
                    extra={
                        "format": candidate.name,
                        "url": probe_url,
                        "classification": e.classification,
                        "error": e.message,
                    },
                )
                continue

            if not page.items:
                logger.info(
                    "Pagination format rejected: empty page",
                    extra={"format": candidate.name, "url": probe_url},
                )
                continue

            if page.ids <= first_page_ids:
                logger.info(
                    "Pagination format rejected: same items as first page",
                    extra={"format": candidate.name, "url": probe_url},
                )
                continue

            logger.info(
                "Pagination format discovered",
                extra={
                    "format": candidate.name,
                    "url": probe_url,
                    "probe_items": len(page.items),
                },
            )
            return candidate

        logger.warning(
            "No working pagination format found",
            extra={
                "base_url": base_url,
                "tried": [c.param for c in self._conventions],
            },
        )
        return None
