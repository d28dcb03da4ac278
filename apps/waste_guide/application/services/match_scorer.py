"""Lexical Match Scorer.

물품 설명(name, material, category)과 캐시된 카탈로그 엔트리 사이의
결정적 어휘 점수 계산. 대소문자 무시, 공백 기준 토큰화.

점수 규칙 (엔트리마다 0에서 시작):
    +4  title이 name을 포함 (name 길이 > 2)
    +3  synonym마다: name을 포함하거나 name에 포함됨
    +2  material 토큰(길이 > 2)마다: title에 포함
    +2  material 토큰마다: 어떤 synonym에든 포함
    +1  category(길이 > 2)가 title에 포함
    +1  synonym마다: category 포함
    +1  (title 단어, name 단어) 쌍마다: 한쪽이 다른 쪽을 포함 (둘 다 길이 > 2)
    +1  (synonym 단어, name 단어) 쌍마다: 동일 규칙

정확한 title 적중(+4) > synonym 적중(+3) > 재질 키워드(+2) > 분류/단어 겹침(+1).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from waste_guide.application.ports.match_strategy import MatchStrategyPort
from waste_guide.domain.constants import (
    MIN_TERM_LENGTH,
    SCORE_CATEGORY,
    SCORE_MATERIAL_TOKEN,
    SCORE_SYNONYM_NAME,
    SCORE_TITLE_CONTAINS_NAME,
    SCORE_WORD_OVERLAP,
)
from waste_guide.domain.value_objects import MatchCandidate

if TYPE_CHECKING:
    from waste_guide.domain.entities import CachedEntry
    from waste_guide.domain.value_objects import ItemDescription

logger = logging.getLogger(__name__)


def _significant_words(text: str) -> list[str]:
    return [word for word in text.split() if len(word) > MIN_TERM_LENGTH]


@dataclass(frozen=True)
class _NormalizedQuery:
    name: str
    name_words: tuple[str, ...]
    material_tokens: tuple[str, ...]
    category: str

    @classmethod
    def from_description(cls, description: ItemDescription) -> _NormalizedQuery:
        name = description.name.strip().lower()
        return cls(
            name=name,
            name_words=tuple(_significant_words(name)),
            material_tokens=tuple(_significant_words(description.material.lower())),
            category=description.category.strip().lower(),
        )


class LexicalMatchScorer:
    """결정적 어휘 매칭 점수 계산기.

    상태가 없으며 같은 입력에 항상 같은 결과를 낸다.
    """

    def score(self, description: ItemDescription, entry: CachedEntry) -> int:
        """엔트리 하나의 점수.

        Args:
            description: 물품 설명
            entry: 카탈로그 엔트리

        Returns:
            0 이상의 정수 점수
        """
        return self._score(_NormalizedQuery.from_description(description), entry)

    def rank(
        self,
        description: ItemDescription,
        catalog: Sequence[CachedEntry],
        limit: int | None = None,
    ) -> list[MatchCandidate]:
        """점수 내림차순 후보 목록 (0점 제외, 동점은 카탈로그 순서 유지).

        Args:
            description: 물품 설명
            catalog: 카탈로그 엔트리
            limit: 최대 후보 수 (None이면 전체)

        Returns:
            MatchCandidate 목록
        """
        query = _NormalizedQuery.from_description(description)

        candidates = []
        for entry in catalog:
            score = self._score(query, entry)
            if score > 0:
                candidates.append(MatchCandidate(item=entry, score=score))

        # sorted는 stable: 동점이면 먼저 나온 엔트리가 앞
        candidates = sorted(candidates, key=lambda c: c.score, reverse=True)
        return candidates if limit is None else candidates[:limit]

    def find_best_match(
        self,
        description: ItemDescription,
        catalog: Sequence[CachedEntry],
    ) -> MatchCandidate | None:
        """최고 점수 엔트리.

        Args:
            description: 물품 설명
            catalog: 카탈로그 엔트리

        Returns:
            MatchCandidate 또는 None (빈 카탈로그, 모든 점수 0)
        """
        query = _NormalizedQuery.from_description(description)

        best: MatchCandidate | None = None
        for entry in catalog:
            score = self._score(query, entry)
            if score > 0 and (best is None or score > best.score):
                best = MatchCandidate(item=entry, score=score)

        return best

    def _score(self, query: _NormalizedQuery, entry: CachedEntry) -> int:
        title = entry.title.lower()
        synonyms = [synonym.lower() for synonym in entry.synonyms if synonym]
        score = 0

        # name
        if len(query.name) > MIN_TERM_LENGTH and query.name in title:
            score += SCORE_TITLE_CONTAINS_NAME
        if query.name:
            for synonym in synonyms:
                if query.name in synonym or synonym in query.name:
                    score += SCORE_SYNONYM_NAME

        # material
        for token in query.material_tokens:
            if token in title:
                score += SCORE_MATERIAL_TOKEN
            if any(token in synonym for synonym in synonyms):
                score += SCORE_MATERIAL_TOKEN

        # category
        if len(query.category) > MIN_TERM_LENGTH:
            if query.category in title:
                score += SCORE_CATEGORY
            for synonym in synonyms:
                if query.category in synonym:
                    score += SCORE_CATEGORY

        # 단어 겹침
        if query.name_words:
            score += self._word_overlap(_significant_words(title), query.name_words)
            for synonym in synonyms:
                score += self._word_overlap(_significant_words(synonym), query.name_words)

        return score

    @staticmethod
    def _word_overlap(words: Sequence[str], name_words: Sequence[str]) -> int:
        return sum(
            SCORE_WORD_OVERLAP
            for word in words
            for name_word in name_words
            if word in name_word or name_word in word
        )


class LexicalMatchStrategy(MatchStrategyPort):
    """MatchStrategyPort의 어휘 점수 구현."""

    def __init__(self, scorer: LexicalMatchScorer | None = None):
        self._scorer = scorer or LexicalMatchScorer()

    @property
    def strategy_name(self) -> str:
        return "lexical"

    async def find_best_match(
        self,
        description: ItemDescription,
        catalog: Sequence[CachedEntry],
    ) -> MatchCandidate | None:
        match = self._scorer.find_best_match(description, catalog)

        logger.debug(
            "Lexical match evaluated",
            extra={
                "description": description.summary(),
                "catalog_size": len(catalog),
                "match_id": match.item.id if match else None,
                "score": match.score if match else 0,
            },
        )

        return match
