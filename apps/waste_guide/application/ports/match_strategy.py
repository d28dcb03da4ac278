"""Match Strategy Port.

물품 설명 → 카탈로그 엔트리 매칭 전략 인터페이스.
- Lexical: 결정적 어휘 점수 (application/services/match_scorer.py)
- LLM-assisted: OpenAI 프롬프트 기반 (infrastructure/llm/gpt)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from waste_guide.domain.entities import CachedEntry
    from waste_guide.domain.value_objects import ItemDescription, MatchCandidate


class MatchStrategyPort(ABC):
    """매칭 전략 포트."""

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """전략 식별자 (예: "lexical", "llm")."""
        pass

    @abstractmethod
    async def find_best_match(
        self,
        description: ItemDescription,
        catalog: Sequence[CachedEntry],
    ) -> MatchCandidate | None:
        """최적 매칭 엔트리 탐색.

        예외를 던지지 않는다. 매칭이 없으면 None.

        Args:
            description: 물품 설명
            catalog: 현재 캐시된 카탈로그

        Returns:
            MatchCandidate 또는 None
        """
        pass
