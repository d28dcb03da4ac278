"""Disposal Advice Value Object."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ADVICE = "Check local recycling guidelines for this item."
DEFAULT_TIP = "Check product packaging for recycling symbols"


@dataclass(frozen=True)
class DisposalAdvice:
    """AI 배출 조언 (카탈로그 매칭 실패 시 사용).

    Attributes:
        advice: 배출 안내
        is_dangerous: 유해물질 포함 여부
        danger_warning: 유해물질 경고 문구
        tips: 실용 팁 목록
    """

    advice: str
    is_dangerous: bool = False
    danger_warning: str | None = None
    tips: tuple[str, ...] = ()

    @classmethod
    def generic(cls) -> DisposalAdvice:
        """AI 호출 실패 시 기본 조언."""
        return cls(advice=DEFAULT_ADVICE, tips=(DEFAULT_TIP,))
