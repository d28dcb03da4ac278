"""Analyze Scan Command.

사진 한 장 → 물품 추정 → 카탈로그 매칭 → 상세 또는 AI 조언.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waste_guide.application.dto.match_response import (
    AdviceResponse,
    AlternativeMatch,
    ScanResult,
)
from waste_guide.application.exceptions import EmptyImageError

if TYPE_CHECKING:
    from waste_guide.application.commands.find_best_match_command import (
        FindBestMatchCommand,
    )
    from waste_guide.application.ports.vision_analyzer import (
        DisposalAdvisorPort,
        VisionAnalyzerPort,
    )
    from waste_guide.domain.value_objects import DisposalAdvice

logger = logging.getLogger(__name__)


class AnalyzeScanCommand:
    """스캔 분석 Command (UseCase).

    플로우:
    1. Vision 분석 (주 답변 + 대안)
    2. 주 답변 카탈로그 매칭 (+ 상세)
    3. 매칭이 없거나 상세 조회에 실패하면 AI 배출 조언
    4. 대안별 매칭 (+ 상세)

    사용자는 항상 상세가 있는 매칭 또는 조언 중 하나를 받는다.
    """

    def __init__(
        self,
        vision_analyzer: VisionAnalyzerPort,
        disposal_advisor: DisposalAdvisorPort,
        find_best_match: FindBestMatchCommand,
    ):
        """초기화.

        Args:
            vision_analyzer: 이미지 분석기
            disposal_advisor: 배출 조언기
            find_best_match: 카탈로그 매칭 Command
        """
        self._vision_analyzer = vision_analyzer
        self._disposal_advisor = disposal_advisor
        self._find_best_match = find_best_match

    async def execute(
        self,
        image_bytes: bytes,
        content_type: str = "image/jpeg",
    ) -> ScanResult:
        """Command 실행.

        Args:
            image_bytes: 업로드된 이미지
            content_type: MIME 타입

        Returns:
            ScanResult

        Raises:
            EmptyImageError: 이미지가 비어있음
        """
        if not image_bytes:
            raise EmptyImageError()

        # 1. Vision 분석
        description = await self._vision_analyzer.describe_image(image_bytes, content_type)
        primary = description.primary

        logger.info(
            "Image described",
            extra={
                "description": primary.summary(),
                "confidence": description.confidence,
                "alternatives": len(description.alternatives),
            },
        )

        # 2. 주 답변 매칭
        match = await self._find_best_match.execute(primary)

        # 3. 매칭 없음 또는 상세 없음 → AI 조언
        advice = None
        if match is None or not match.details_available:
            logger.info(
                "No waste guide details, falling back to AI advice",
                extra={
                    "description": primary.summary(),
                    "matched_id": match.id if match is not None else None,
                },
            )
            advice = self._to_advice_response(
                await self._disposal_advisor.advise_on_disposal(primary)
            )

        # 4. 대안 매칭
        alternatives = []
        for alternative in description.alternatives:
            alternatives.append(
                AlternativeMatch(
                    name=alternative.name,
                    material=alternative.material,
                    category=alternative.category,
                    match=await self._find_best_match.execute(alternative),
                )
            )

        return ScanResult(
            name=primary.name,
            material=primary.material,
            category=primary.category,
            confidence=description.confidence,
            match=match,
            advice=advice,
            alternatives=alternatives,
            match_strategy=self._find_best_match.strategy_name,
        )

    @staticmethod
    def _to_advice_response(advice: DisposalAdvice) -> AdviceResponse:
        return AdviceResponse(
            advice=advice.advice,
            is_dangerous=advice.is_dangerous,
            danger_warning=advice.danger_warning,
            tips=list(advice.tips),
        )
