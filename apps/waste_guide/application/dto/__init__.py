"""Application DTOs."""

from waste_guide.application.dto.match_response import (
    AdviceResponse,
    AlternativeMatch,
    ScanResult,
    WasteGuideMatch,
)

__all__ = [
    "AdviceResponse",
    "AlternativeMatch",
    "ScanResult",
    "WasteGuideMatch",
]
