"""LLM-assisted Match Strategy.

카탈로그 전체를 프롬프트로 전달하고 GPT가 고른 id를 카탈로그와 대조.
GPT 실패, id 없음, 알 수 없는 id → 어휘 점수 매칭으로 대체.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from openai import AsyncOpenAI
from pydantic import BaseModel

from waste_guide.application.ports.match_strategy import MatchStrategyPort
from waste_guide.application.services.match_scorer import (
    LexicalMatchScorer,
    LexicalMatchStrategy,
)
from waste_guide.domain.value_objects import MatchCandidate
from waste_guide.infrastructure.llm.gpt.vision import build_async_openai

if TYPE_CHECKING:
    from waste_guide.domain.entities import CachedEntry
    from waste_guide.domain.value_objects import ItemDescription

logger = logging.getLogger(__name__)

MATCH_PROMPT = """Find the best HSY waste guide match for this item:

ITEM: "{item}"

HSY Waste Guide Items (Finnish waste management):
{catalog}

MATCHING STRATEGY:
1. FIRST: Try to find an exact match based on the item type ({name}) and category ({category})
2. IF NO EXACT MATCH: Fall back to matching by primary material type ({material})
   - For example: if item is "plastic bottle" but not found, match to general "plastic" waste category
   - If item is "aluminum can" but not found, match to general "metal" or "aluminum" waste category

Return the ID of the best match and a brief explanation of your matching decision.
If no match exists even by material, return id as null."""


class MatchDecision(BaseModel):
    """GPT 매칭 응답 구조."""

    id: Optional[str] = None
    reasoning: str = ""


def format_catalog(catalog: Sequence[CachedEntry]) -> str:
    """프롬프트용 카탈로그 목록.

    ID: 1, Title: "Plastic bottle", Synonyms: [PET bottle]
    """
    lines = []
    for entry in catalog:
        line = f'ID: {entry.id}, Title: "{entry.title}"'
        if entry.synonyms:
            line += f", Synonyms: [{', '.join(entry.synonyms)}]"
        lines.append(line)
    return "\n".join(lines)


class LLMAssistedMatchStrategy(MatchStrategyPort):
    """GPT 기반 매칭 전략 (어휘 매칭 fallback)."""

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: str | None = None,
        timeout: float = 30.0,
        client: AsyncOpenAI | None = None,
        fallback: MatchStrategyPort | None = None,
        scorer: LexicalMatchScorer | None = None,
    ):
        """초기화.

        Args:
            model: GPT 모델명
            api_key: OpenAI API 키
            timeout: 읽기 타임아웃 (초)
            client: AsyncOpenAI 클라이언트 (테스트 주입용)
            fallback: 대체 전략 (기본: LexicalMatchStrategy)
            scorer: 선택된 엔트리 점수 계산용
        """
        self._client = client or build_async_openai(api_key, timeout)
        self._model = model
        self._scorer = scorer or LexicalMatchScorer()
        self._fallback = fallback or LexicalMatchStrategy(self._scorer)

    @property
    def strategy_name(self) -> str:
        return "llm"

    async def find_best_match(
        self,
        description: ItemDescription,
        catalog: Sequence[CachedEntry],
    ) -> MatchCandidate | None:
        if not catalog:
            return None

        decision = await self._ask(description, catalog)
        if decision is None or decision.id is None:
            return await self._fallback.find_best_match(description, catalog)

        entry = next(
            (e for e in catalog if str(e.id) == decision.id.strip()),
            None,
        )
        if entry is None:
            logger.warning(
                "LLM returned unknown catalog id, using lexical match",
                extra={"llm_id": decision.id, "description": description.summary()},
            )
            return await self._fallback.find_best_match(description, catalog)

        logger.info(
            "LLM match selected",
            extra={
                "description": description.summary(),
                "match_id": entry.id,
                "reasoning": decision.reasoning,
            },
        )
        return MatchCandidate(item=entry, score=self._scorer.score(description, entry))

    async def _ask(
        self,
        description: ItemDescription,
        catalog: Sequence[CachedEntry],
    ) -> MatchDecision | None:
        prompt = MATCH_PROMPT.format(
            item=description.summary(),
            catalog=format_catalog(catalog),
            name=description.name,
            category=description.category,
            material=description.material,
        )

        try:
            response = await self._client.chat.completions.parse(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                response_format=MatchDecision,
                temperature=0.1,
                max_tokens=200,
            )
        except Exception as e:
            logger.error("LLM match call failed", extra={"error": str(e)})
            return None

        return response.choices[0].message.parsed

    async def close(self) -> None:
        """OpenAI 클라이언트 종료."""
        await self._client.close()
