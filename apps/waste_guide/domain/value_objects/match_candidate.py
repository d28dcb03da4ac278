"""Match Candidate Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from waste_guide.domain.entities import CachedEntry


@dataclass(frozen=True)
class MatchCandidate:
    """매칭 후보 (질의마다 생성 후 폐기)."""

    item: CachedEntry
    score: int
