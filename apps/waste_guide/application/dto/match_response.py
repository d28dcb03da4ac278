"""Match Response DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from waste_guide.domain.entities import (
        CachedEntry,
        CatalogItem,
        CatalogItemId,
        RecyclingMethod,
        WasteType,
    )
    from waste_guide.domain.value_objects import MatchCandidate


@dataclass
class WasteGuideMatch:
    """카탈로그 매칭 결과 DTO.

    {id, title, synonyms, notes?, wasteTypes?, recyclingMethods?}
    상세 조회에 실패하면 캐시 엔트리 정보만 채워진다.
    """

    id: CatalogItemId
    title: str
    synonyms: list[str]
    score: int | None = None
    notes: str | None = None
    waste_types: list[dict[str, Any]] | None = None
    recycling_methods: list[dict[str, Any]] | None = None
    details_available: bool = False

    @classmethod
    def from_entry(cls, entry: CachedEntry, score: int | None = None) -> WasteGuideMatch:
        """캐시 엔트리만으로 생성."""
        return cls(
            id=entry.id,
            title=entry.title,
            synonyms=list(entry.synonyms),
            score=score,
        )

    @classmethod
    def from_candidate(
        cls,
        candidate: MatchCandidate,
        details: CatalogItem | None,
    ) -> WasteGuideMatch:
        """매칭 후보 + 상세 레코드에서 생성."""
        if details is None:
            return cls.from_entry(candidate.item, score=candidate.score)

        return cls(
            id=details.id if details.id is not None else candidate.item.id,
            title=details.title or candidate.item.title,
            synonyms=list(details.synonyms or candidate.item.synonyms),
            score=candidate.score,
            notes=details.plain_notes,
            waste_types=[_waste_type_to_dict(w) for w in details.waste_types],
            recycling_methods=[_recycling_method_to_dict(m) for m in details.recycling_methods],
            details_available=True,
        )


@dataclass
class AlternativeMatch:
    """대안 설명과 그 매칭 결과."""

    name: str
    material: str
    category: str
    match: WasteGuideMatch | None = None


@dataclass
class AdviceResponse:
    """AI 배출 조언 DTO."""

    advice: str
    is_dangerous: bool
    danger_warning: str | None
    tips: list[str] = field(default_factory=list)


@dataclass
class ScanResult:
    """스캔 결과 DTO.

    match가 없거나 상세 조회에 실패하면 advice가 채워진다.
    """

    name: str
    material: str
    category: str
    confidence: int | None
    match: WasteGuideMatch | None
    advice: AdviceResponse | None
    alternatives: list[AlternativeMatch] = field(default_factory=list)
    match_strategy: str = "lexical"


def _waste_type_to_dict(waste_type: WasteType) -> dict[str, Any]:
    return {
        "id": waste_type.id,
        "title": waste_type.title,
        "description": waste_type.description,
    }


def _recycling_method_to_dict(method: RecyclingMethod) -> dict[str, Any]:
    return {
        "id": method.id,
        "title": method.title,
        "description": method.description,
        "is_free": method.is_free,
    }
