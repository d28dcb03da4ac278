"""GPT Vision Adapter - VisionAnalyzerPort / DisposalAdvisorPort 구현체.

OpenAI chat.completions.parse API 사용 (Pydantic 구조화 출력).
"""

from __future__ import annotations

import base64
import logging
from typing import List, Optional

import httpx
from openai import AsyncOpenAI
from pydantic import BaseModel, Field

from waste_guide.application.ports.vision_analyzer import (
    DisposalAdvisorPort,
    VisionAnalyzerPort,
)
from waste_guide.domain.constants import UNKNOWN_OBJECT
from waste_guide.domain.value_objects import (
    DisposalAdvice,
    ImageDescription,
    ItemDescription,
)
from waste_guide.infrastructure.llm.gpt.config import (
    MAX_RETRIES,
    OPENAI_LIMITS,
    openai_timeout,
)

logger = logging.getLogger(__name__)

MAX_ALTERNATIVES = 4

DESCRIBE_PROMPT = """Analyze the item in this image. Identify what it is and what material it's made of.

Provide 1 PRIMARY answer (most likely) and up to 4 ALTERNATIVE answers (other possibilities).

- item_name: simple item name (e.g. "Plastic bottle", "Metal can", "Glass jar")
- material: primary material (plastic, metal, glass, paper, cardboard, etc.)
- category: item category (e.g. "Beverage container", "Food packaging", "Electronics")
- confidence: 0-100"""

ADVICE_PROMPT = """Analyze this waste item and provide recycling/disposal advice.

ITEM: "{item}"
MATERIAL: "{material}"

RULES:
1. If the item contains hazardous materials (batteries, chemicals, electronics, medical waste, asbestos, paint, motor oil, etc.), set is_dangerous to true and danger_warning to "This item may contain hazardous materials. Please check official waste guide for proper disposal."
2. Focus on practical disposal advice for common household waste
3. Keep advice clear and actionable
4. Include sorting instructions (plastic recycling bin, metal recycling, composting, etc.)
5. general_tips: 2-3 practical recycling tips"""


# ==========================================
# Pydantic 모델 (구조화 출력)
# ==========================================


class DescribedItem(BaseModel):
    """물품 추정."""

    item_name: str
    material: str
    category: str
    confidence: Optional[int] = None


class ImageAnalysis(BaseModel):
    """Vision 응답 구조."""

    primary: DescribedItem
    alternatives: List[DescribedItem] = Field(default_factory=list)


class AdviceResult(BaseModel):
    """배출 조언 응답 구조."""

    recycling_advice: str
    is_dangerous: bool = False
    danger_warning: Optional[str] = None
    general_tips: List[str] = Field(default_factory=list)


def build_async_openai(api_key: str | None, timeout: float) -> AsyncOpenAI:
    """공통 설정의 AsyncOpenAI 클라이언트."""
    http_client = httpx.AsyncClient(
        timeout=openai_timeout(timeout),
        limits=OPENAI_LIMITS,
    )
    return AsyncOpenAI(
        api_key=api_key,
        http_client=http_client,
        max_retries=MAX_RETRIES,
    )


class GPTVisionAdapter(VisionAnalyzerPort, DisposalAdvisorPort):
    """GPT Vision/조언 구현체.

    실패 시 예외 대신 기본값을 반환한다 (사용자는 항상 답을 받음).
    """

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: str | None = None,
        timeout: float = 30.0,
        client: AsyncOpenAI | None = None,
    ):
        """초기화.

        Args:
            model: GPT 모델명
            api_key: OpenAI API 키 (None이면 환경변수 사용)
            timeout: 읽기 타임아웃 (초)
            client: AsyncOpenAI 클라이언트 (테스트 주입용)
        """
        self._client = client or build_async_openai(api_key, timeout)
        self._model = model
        logger.info("GPTVisionAdapter initialized (model=%s)", model)

    async def describe_image(
        self,
        image_bytes: bytes,
        content_type: str = "image/jpeg",
    ) -> ImageDescription:
        """이미지 속 물품 추정."""
        encoded = base64.b64encode(image_bytes).decode("ascii")
        data_url = f"data:{content_type};base64,{encoded}"

        logger.debug("Vision API call starting (model=%s)", self._model)

        try:
            response = await self._client.chat.completions.parse(
                model=self._model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": DESCRIBE_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {"url": data_url, "detail": "high"},
                            },
                        ],
                    }
                ],
                response_format=ImageAnalysis,
                temperature=0.1,
            )
            parsed = response.choices[0].message.parsed
        except Exception as e:
            logger.error("Vision API call failed", extra={"error": str(e)})
            return ImageDescription(primary=ItemDescription(name=UNKNOWN_OBJECT))

        if parsed is None:
            logger.warning("Vision API returned no parsed output")
            return ImageDescription(primary=ItemDescription(name=UNKNOWN_OBJECT))

        logger.debug(
            "Vision API call completed (item=%s, material=%s)",
            parsed.primary.item_name,
            parsed.primary.material,
        )

        return ImageDescription(
            primary=self._to_description(parsed.primary),
            alternatives=tuple(
                self._to_description(a) for a in parsed.alternatives[:MAX_ALTERNATIVES]
            ),
            confidence=parsed.primary.confidence,
        )

    async def advise_on_disposal(self, description: ItemDescription) -> DisposalAdvice:
        """일반 배출 조언."""
        prompt = ADVICE_PROMPT.format(
            item=f"{description.name}, {description.category}",
            material=description.material,
        )

        try:
            response = await self._client.chat.completions.parse(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                response_format=AdviceResult,
                temperature=0.3,
            )
            parsed = response.choices[0].message.parsed
        except Exception as e:
            logger.error("Disposal advice call failed", extra={"error": str(e)})
            return DisposalAdvice.generic()

        if parsed is None or not parsed.recycling_advice:
            return DisposalAdvice.generic()

        return DisposalAdvice(
            advice=parsed.recycling_advice,
            is_dangerous=parsed.is_dangerous,
            danger_warning=parsed.danger_warning if parsed.is_dangerous else None,
            tips=tuple(parsed.general_tips),
        )

    @staticmethod
    def _to_description(item: DescribedItem) -> ItemDescription:
        return ItemDescription(
            name=item.item_name.strip(),
            material=item.material.strip(),
            category=item.category.strip(),
        )

    async def close(self) -> None:
        """OpenAI 클라이언트 종료."""
        await self._client.close()
