"""Scan Controller.

이미지 업로드 → 물품 추정 → HSY 매칭 또는 AI 조언.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from waste_guide.application.commands.analyze_scan_command import AnalyzeScanCommand
from waste_guide.presentation.http.controllers.waste_guide_controller import (
    to_match_schema,
)
from waste_guide.presentation.http.schemas import (
    AdviceSchema,
    AlternativeMatchSchema,
    ScanResponseSchema,
)
from waste_guide.setup.dependencies import get_analyze_scan_command

router = APIRouter(tags=["scan"])


@router.post(
    "/scan",
    response_model=ScanResponseSchema,
    summary="이미지 스캔",
    description="사진 속 물품을 추정하고 HSY 폐기물 가이드와 매칭합니다.",
)
async def scan_image(
    image: UploadFile = File(..., description="물품 사진"),
    command: AnalyzeScanCommand = Depends(get_analyze_scan_command),
) -> ScanResponseSchema:
    """이미지 스캔."""
    image_bytes = await image.read()
    result = await command.execute(image_bytes, image.content_type or "image/jpeg")

    return ScanResponseSchema(
        name=result.name,
        material=result.material,
        category=result.category,
        confidence=result.confidence,
        match=to_match_schema(result.match),
        advice=(
            AdviceSchema(
                advice=result.advice.advice,
                is_dangerous=result.advice.is_dangerous,
                danger_warning=result.advice.danger_warning,
                tips=result.advice.tips,
            )
            if result.advice
            else None
        ),
        alternatives=[
            AlternativeMatchSchema(
                name=a.name,
                material=a.material,
                category=a.category,
                match=to_match_schema(a.match),
            )
            for a in result.alternatives
        ],
        match_strategy=result.match_strategy,
    )
