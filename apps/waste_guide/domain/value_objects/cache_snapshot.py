"""Cache Snapshot Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from waste_guide.domain.entities import CachedEntry


@dataclass(frozen=True, slots=True)
class CacheSnapshot:
    """타임스탬프가 있는 불변 카탈로그 스냅샷.

    TTL이 지나도 폐기하지 않고 upstream 장애 시 fallback으로 사용한다.

    Attributes:
        entries: 축약 엔트리 목록 (id 유일)
        fetched_at: 수집 시각 (Unix timestamp, 초)
        is_partial: upstream total에 못 미치는 부분 결과 여부
    """

    entries: tuple[CachedEntry, ...]
    fetched_at: float
    is_partial: bool = False

    def age_seconds(self, now: float) -> float:
        """스냅샷 나이 (초)."""
        return max(0.0, now - self.fetched_at)

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        """TTL 만료 여부 (나이가 TTL을 넘어야 만료)."""
        return self.age_seconds(now) > ttl_seconds

    @property
    def fetched_at_datetime(self) -> datetime:
        """수집 시각 (UTC datetime)."""
        return datetime.fromtimestamp(self.fetched_at, tz=timezone.utc)
