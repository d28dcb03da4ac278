"""Catalog Cache Manager.

축약 카탈로그 스냅샷을 메모리에 보관하고 TTL 기반으로 갱신한다.

상태:
    EMPTY → (갱신 성공) → FRESH → (TTL 경과) → STALE → (갱신 성공) → FRESH
    STALE에서 갱신 실패 → STALE 유지 (이전 스냅샷 반환)
    EMPTY에서 갱신 실패 → 빈 목록 반환
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Iterable

from waste_guide.application.exceptions import AuthError, CatalogError
from waste_guide.domain.constants import (
    DEFAULT_CACHE_TTL_SECONDS,
    EXPECTED_MIN_CATALOG_ITEMS,
    SEARCH_RESULT_LIMIT,
)
from waste_guide.domain.entities import CachedEntry
from waste_guide.domain.enums import CacheState
from waste_guide.domain.value_objects import CacheSnapshot

if TYPE_CHECKING:
    from waste_guide.application.services.catalog_fetcher import CatalogFetcher
    from waste_guide.domain.entities import CatalogItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheInfo:
    """캐시 상태 정보 (운영 가시성용)."""

    item_count: int
    fetched_at: datetime | None
    age_millis: int | None
    state: CacheState
    is_partial: bool = False


class CatalogCacheManager:
    """카탈로그 캐시 매니저.

    - get_catalog()가 유일한 갱신 진입점 (refresh는 운영용 강제 갱신)
    - Single-flight: 진행 중인 갱신이 있으면 새로 시작하지 않고 같은 작업을 기다림
    - 스냅샷은 통째로 교체되므로 읽는 쪽은 부분 갱신 상태를 보지 않음
    - upstream 실패는 호출자에게 전파하지 않음
    """

    def __init__(
        self,
        fetcher: CatalogFetcher,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        expected_min_items: int = EXPECTED_MIN_CATALOG_ITEMS,
        clock: Callable[[], float] = time.time,
    ):
        """초기화.

        Args:
            fetcher: 카탈로그 수집기
            ttl_seconds: 스냅샷 TTL (초)
            expected_min_items: 이보다 적으면 경고 로그
            clock: 현재 시각 함수 (Unix timestamp, 테스트 주입용)
        """
        self._fetcher = fetcher
        self._ttl_seconds = ttl_seconds
        self._expected_min_items = expected_min_items
        self._clock = clock
        self._snapshot: CacheSnapshot | None = None
        self._refresh_task: asyncio.Task[None] | None = None

    @property
    def snapshot(self) -> CacheSnapshot | None:
        """현재 스냅샷 (읽기 전용)."""
        return self._snapshot

    @property
    def state(self) -> CacheState:
        """현재 캐시 상태."""
        if self._snapshot is None:
            return CacheState.EMPTY
        if self._snapshot.is_expired(self._clock(), self._ttl_seconds):
            return CacheState.STALE
        return CacheState.FRESH

    async def get_catalog(self) -> list[CachedEntry]:
        """카탈로그 조회 (필요 시 갱신).

        예외를 던지지 않는다. 갱신 실패 시 이전 스냅샷, 없으면 빈 목록.

        Returns:
            축약 엔트리 목록
        """
        if self.state is not CacheState.FRESH:
            await self._refresh_single_flight()

        if self._snapshot is None:
            return []
        return list(self._snapshot.entries)

    async def refresh(self) -> CacheInfo:
        """TTL과 무관하게 강제 갱신 (진행 중이면 그 갱신을 기다림).

        Returns:
            갱신 후 캐시 정보
        """
        await self._refresh_single_flight()
        return self.get_cache_info()

    def get_cache_info(self) -> CacheInfo:
        """캐시 상태 정보 (탐색 상태는 노출하지 않음)."""
        snapshot = self._snapshot
        if snapshot is None:
            return CacheInfo(
                item_count=0,
                fetched_at=None,
                age_millis=None,
                state=CacheState.EMPTY,
            )

        return CacheInfo(
            item_count=len(snapshot.entries),
            fetched_at=snapshot.fetched_at_datetime,
            age_millis=int(snapshot.age_seconds(self._clock()) * 1000),
            state=self.state,
            is_partial=snapshot.is_partial,
        )

    def search(self, term: str, limit: int | None = SEARCH_RESULT_LIMIT) -> list[CachedEntry]:
        """캐시된 엔트리 부분 문자열 검색 (갱신하지 않음).

        Args:
            term: 검색어 (대소문자 무시)
            limit: 최대 결과 수 (None이면 전체)

        Returns:
            title 또는 synonyms에 검색어가 포함된 엔트리
        """
        snapshot = self._snapshot
        needle = term.strip().lower()
        if snapshot is None or not needle:
            return []

        matches = [
            entry
            for entry in snapshot.entries
            if needle in entry.title.lower()
            or any(needle in synonym.lower() for synonym in entry.synonyms)
        ]
        return matches if limit is None else matches[:limit]

    @staticmethod
    def project(items: Iterable[CatalogItem]) -> list[CachedEntry]:
        """CatalogItem → CachedEntry projection (id, title 없는 아이템 제외).

        Args:
            items: 카탈로그 아이템

        Returns:
            축약 엔트리 목록
        """
        entries = []
        for item in items:
            entry = CachedEntry.from_item(item)
            if entry is not None:
                entries.append(entry)
        return entries

    async def _refresh_single_flight(self) -> None:
        """진행 중인 갱신이 있으면 합류, 없으면 새로 시작."""
        task = self._refresh_task
        if task is None or task.done():
            task = asyncio.ensure_future(self._refresh())
            self._refresh_task = task
        else:
            logger.info("Catalog refresh in progress, awaiting in-flight refresh")

        # 호출자 취소가 진행 중인 갱신으로 전파되지 않도록 shield
        await asyncio.shield(task)

    async def _refresh(self) -> None:
        """카탈로그 갱신. 실패는 로깅 후 흡수한다."""
        logger.info(
            "Refreshing waste guide catalog",
            extra={"state": self.state.value},
        )

        try:
            result = await self._fetcher.fetch_all()
        except AuthError as e:
            logger.error(
                "HSY authentication failed, catalog not refreshed",
                extra={
                    "classification": e.classification,
                    "status": e.status_code,
                    "error": e.message,
                    "degraded": self._snapshot is not None,
                },
            )
            self._log_degraded_mode()
            return
        except CatalogError as e:
            logger.error(
                "Catalog refresh failed",
                extra={"classification": e.classification, "error": e.message},
            )
            self._log_degraded_mode()
            return
        except Exception:
            logger.exception("Unexpected error during catalog refresh")
            self._log_degraded_mode()
            return

        entries = self.project(result.items)
        self._snapshot = CacheSnapshot(
            entries=tuple(entries),
            fetched_at=self._clock(),
            is_partial=result.is_partial,
        )

        if len(entries) < self._expected_min_items:
            logger.warning(
                "Catalog has fewer items than expected",
                extra={"items": len(entries), "expected_min": self._expected_min_items},
            )

        logger.info(
            "Waste guide catalog cached",
            extra={
                "cached": len(entries),
                "fetched": len(result.items),
                "reported_total": result.reported_total,
                "pages": result.pages_fetched,
                "pagination": result.pagination,
                "is_partial": result.is_partial,
            },
        )

    def _log_degraded_mode(self) -> None:
        if self._snapshot is not None:
            logger.warning(
                "Serving stale catalog snapshot (degraded mode)",
                extra={"items": len(self._snapshot.entries)},
            )
        else:
            logger.warning("No catalog snapshot available, serving empty catalog")
