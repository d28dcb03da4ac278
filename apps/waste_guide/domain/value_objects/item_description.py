"""Item Description Value Objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ItemDescription:
    """매칭 질의 입력.

    Vision 분석 결과에서 파생된 물품 설명.

    Attributes:
        name: 물품 이름 (예: "Plastic bottle")
        material: 주 재질 (예: "plastic")
        category: 물품 분류 (예: "Beverage container")
    """

    name: str = ""
    material: str = ""
    category: str = ""

    @property
    def is_blank(self) -> bool:
        """모든 필드가 비어있는지 여부."""
        return not (self.name.strip() or self.material.strip() or self.category.strip())

    def summary(self) -> str:
        """"name, material, category" 형태의 한 줄 요약."""
        return ", ".join(p for p in (self.name, self.material, self.category) if p)


@dataclass(frozen=True)
class ImageDescription:
    """이미지 분석 결과.

    Attributes:
        primary: 가장 가능성 높은 설명
        alternatives: 대안 설명 목록
        confidence: 주 답변 신뢰도 (0-100)
    """

    primary: ItemDescription
    alternatives: tuple[ItemDescription, ...] = field(default_factory=tuple)
    confidence: int | None = None
