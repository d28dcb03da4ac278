"""Catalog Item Entity."""

from __future__ import annotations

import re
from dataclasses import dataclass

CatalogItemId = str | int

_TAG_PATTERN = re.compile(r"<[^>]+>")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_HTML_ENTITIES = {
    "&nbsp;": " ",
    "&quot;": '"',
    "&lt;": "<",
    "&gt;": ">",
    "&apos;": "'",
    "&#39;": "'",
    "&amp;": "&",
}


@dataclass(frozen=True)
class WasteType:
    """폐기물 유형.

    Attributes:
        id: 유형 식별자
        title: 유형 이름 (예: "Mixed waste")
        description: 설명
    """

    id: CatalogItemId | None
    title: str
    description: str | None = None


@dataclass(frozen=True)
class RecyclingMethod:
    """배출/재활용 방법.

    Attributes:
        id: 방법 식별자
        title: 방법 이름 (예: "Recycling station")
        description: 설명
        is_free: 무료 여부 (upstream isFree)
    """

    id: CatalogItemId | None
    title: str
    description: str | None = None
    is_free: bool | None = None


@dataclass(frozen=True)
class CatalogItem:
    """폐기물 가이드 카탈로그 아이템 엔티티.

    HSY가 소유하는 원본 레코드. 이 서비스는 미러링/축약만 하고 수정하지 않는다.

    Attributes:
        id: 불투명 식별자 (문자열 또는 숫자)
        title: 제목
        synonyms: 동의어 (순서 유지)
        notes: 안내문 (마크업 포함 가능)
        waste_types: 폐기물 유형 목록
        recycling_methods: 배출 방법 목록
    """

    id: CatalogItemId | None
    title: str
    synonyms: tuple[str, ...] = ()
    notes: str | None = None
    waste_types: tuple[WasteType, ...] = ()
    recycling_methods: tuple[RecyclingMethod, ...] = ()

    @property
    def plain_notes(self) -> str | None:
        """마크업을 제거한 안내문."""
        if not self.notes:
            return None
        return strip_markup(self.notes) or None


def strip_markup(text: str) -> str:
    """HTML 태그/엔티티 제거."""
    clean = _TAG_PATTERN.sub(" ", text)
    for entity, replacement in _HTML_ENTITIES.items():
        clean = clean.replace(entity, replacement)
    return _WHITESPACE_PATTERN.sub(" ", clean).strip()
