"""Catalog Fetcher Service.

한 번의 갱신 주기에서 카탈로그 전체를 수집한다.
1페이지 → (total이 더 크면) 페이지네이션 탐색 → 순차 페이지 수집 → 중복 제거.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from waste_guide.application.exceptions import CatalogError
from waste_guide.domain.constants import (
    DEFAULT_PAGE_CEILING,
    DEFAULT_PAGE_DELAY_SECONDS,
)

if TYPE_CHECKING:
    from waste_guide.application.ports.catalog_source import CatalogSourcePort
    from waste_guide.application.services.pagination_discovery import (
        PaginationDiscovery,
    )
    from waste_guide.domain.entities import CatalogItem
    from waste_guide.domain.value_objects import PaginationFormat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogFetchResult:
    """카탈로그 수집 결과.

    Attributes:
        items: 중복 제거된 아이템 (최초 등장 순서 유지)
        reported_total: upstream이 보고한 전체 개수
        pages_fetched: 성공적으로 받은 페이지 수 (1페이지 포함)
        pagination: 사용한 페이지네이션 규칙 이름 (없으면 None)
        is_partial: total에 못 미친 채 종료된 degraded 결과 여부
    """

    items: tuple[CatalogItem, ...]
    reported_total: int | None = None
    pages_fetched: int = 1
    pagination: str | None = None
    is_partial: bool = False


class CatalogFetcher:
    """카탈로그 전체 수집기.

    종료 조건 (먼저 도달하는 것):
    a. 새 아이템이 0개인 페이지 (빈 페이지 또는 전부 중복)
    b. 누적 개수가 upstream total에 도달
    c. 페이지 상한 (기본 35페이지, 1페이지 포함)

    total과 page size는 힌트로만 취급한다.
    페이지 루프는 중복 제거 집합의 정확성을 위해 순차 실행한다.
    """

    def __init__(
        self,
        source: CatalogSourcePort,
        discovery: PaginationDiscovery,
        page_ceiling: int = DEFAULT_PAGE_CEILING,
        page_delay: float = DEFAULT_PAGE_DELAY_SECONDS,
        page_timeout: float | None = None,
    ):
        """초기화.

        Args:
            source: 카탈로그 소스
            discovery: 페이지네이션 탐색기
            page_ceiling: 최대 페이지 수 (1페이지 포함)
            page_delay: 페이지 요청 간 지연 (초)
            page_timeout: 페이지 요청 타임아웃 (초, None이면 소스 기본값)
        """
        self._source = source
        self._discovery = discovery
        self._page_ceiling = max(1, page_ceiling)
        self._page_delay = page_delay
        self._page_timeout = page_timeout

    async def fetch_all(self, base_url: str | None = None) -> CatalogFetchResult:
        """카탈로그 전체 수집.

        Args:
            base_url: 카탈로그 URL (None이면 소스 기본 URL)

        Returns:
            CatalogFetchResult

        Raises:
            CatalogError: 1페이지 요청 실패 (TransportError, AuthError, ParseError)
        """
        url = base_url or self._source.catalog_url

        # 1. 1페이지 (페이지네이션 파라미터 없음)
        first_page = await self._source.fetch_page(url, timeout=self._page_timeout)
        items = list(first_page.items)
        total = first_page.total

        logger.info(
            "Catalog first page fetched",
            extra={"items": len(items), "reported_total": total},
        )

        # 2. total이 없거나 이미 충족
        if total is None or total <= len(items):
            return CatalogFetchResult(
                items=tuple(self.deduplicate(items)),
                reported_total=total,
            )

        # 3. 페이지네이션 형식 탐색
        pagination = await self._discovery.discover(url, len(items), items)
        if pagination is None:
            logger.warning(
                "Catalog degraded: upstream total unreachable without pagination",
                extra={"reported_total": total, "fetched": len(items)},
            )
            return CatalogFetchResult(
                items=tuple(self.deduplicate(items)),
                reported_total=total,
                is_partial=True,
            )

        # 4. 나머지 페이지 순차 수집
        items, pages_fetched = await self._fetch_remaining_pages(items, total, pagination)

        unique_items = self.deduplicate(items)
        is_partial = len(unique_items) < total

        if is_partial:
            logger.warning(
                "Catalog pagination ended before reported total",
                extra={
                    "reported_total": total,
                    "fetched": len(unique_items),
                    "pages_fetched": pages_fetched,
                    "page_ceiling": self._page_ceiling,
                },
            )
        else:
            logger.info(
                "Catalog pagination complete",
                extra={"fetched": len(unique_items), "pages_fetched": pages_fetched},
            )

        return CatalogFetchResult(
            items=tuple(unique_items),
            reported_total=total,
            pages_fetched=pages_fetched,
            pagination=pagination.name,
            is_partial=is_partial,
        )

    async def _fetch_remaining_pages(
        self,
        items: list[CatalogItem],
        total: int,
        pagination: PaginationFormat,
    ) -> tuple[list[CatalogItem], int]:
        """2페이지부터 순차 수집.

        Args:
            items: 1페이지 아이템
            total: upstream total
            pagination: 발견된 형식

        Returns:
            (누적 아이템, 성공한 페이지 수)
        """
        seen_ids = {item.id for item in items}
        pages_fetched = 1

        for page_number in range(2, self._page_ceiling + 1):
            await asyncio.sleep(self._page_delay)

            page_url = pagination.url_for(page_number)

            try:
                page = await self._source.fetch_page(page_url, timeout=self._page_timeout)
            except CatalogError as e:
                # 한 페이지 실패는 건너뛰고 다음 페이지 계속
                logger.error(
                    "Catalog page fetch failed, skipping",
                    extra={
                        "page": page_number,
                        "url": page_url,
                        "classification": e.classification,
                        "error": e.message,
                    },
                )
                continue

            pages_fetched += 1

            new_items = []
            for item in page.items:
                if item.id in seen_ids:
                    continue
                seen_ids.add(item.id)
                new_items.append(item)

            if not new_items:
                logger.info(
                    "Catalog page had no new items, stopping pagination",
                    extra={"page": page_number, "page_items": len(page.items)},
                )
                break

            items.extend(new_items)
            logger.debug(
                "Catalog page fetched",
                extra={
                    "page": page_number,
                    "new_items": len(new_items),
                    "duplicates": len(page.items) - len(new_items),
                    "accumulated": len(items),
                },
            )

            if len(items) >= total:
                break
        else:
            logger.warning(
                "Catalog page ceiling reached",
                extra={"page_ceiling": self._page_ceiling, "accumulated": len(items)},
            )

        return items, pages_fetched

    @staticmethod
    def deduplicate(items: Iterable[CatalogItem]) -> list[CatalogItem]:
        """id 기반 중복 제거 (최초 등장 유지).

        Args:
            items: 아이템 목록

        Returns:
            중복 제거된 아이템 목록
        """
        seen_ids: set = set()
        unique_items: list[CatalogItem] = []

        for item in items:
            if item.id not in seen_ids:
                seen_ids.add(item.id)
                unique_items.append(item)

        return unique_items
