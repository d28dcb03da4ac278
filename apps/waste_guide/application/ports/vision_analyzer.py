"""Vision Analyzer Port.

이미지 분석 LLM 추상화 (외부 협력자).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from waste_guide.domain.value_objects import (
        DisposalAdvice,
        ImageDescription,
        ItemDescription,
    )


class VisionAnalyzerPort(ABC):
    """이미지 분석 포트.

    describeImage(imageBytes) -> {name, material, category, alternatives[]}
    """

    @abstractmethod
    async def describe_image(
        self,
        image_bytes: bytes,
        content_type: str = "image/jpeg",
    ) -> ImageDescription:
        """이미지 속 물품과 재질 추정.

        Args:
            image_bytes: 이미지 바이트
            content_type: MIME 타입

        Returns:
            ImageDescription (주 답변 + 대안)
        """
        pass

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass


class DisposalAdvisorPort(ABC):
    """배출 조언 포트.

    adviseOnDisposal(description) -> {advice, isDangerous, tips[]}
    """

    @abstractmethod
    async def advise_on_disposal(
        self,
        description: ItemDescription,
    ) -> DisposalAdvice:
        """카탈로그 매칭이 없을 때의 일반 배출 조언.

        Args:
            description: 물품 설명

        Returns:
            DisposalAdvice
        """
        pass
