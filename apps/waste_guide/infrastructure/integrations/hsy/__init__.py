"""HSY Integration - 헬싱키 지역 폐기물 가이드 API.

HSY Waste Guide API:
- 폐기물 가이드 목록/상세 (영문)
"""

from waste_guide.infrastructure.integrations.hsy.hsy_waste_guide_client import (
    HsyWasteGuideClient,
)

__all__ = ["HsyWasteGuideClient"]
