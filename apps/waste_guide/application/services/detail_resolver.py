"""Detail Resolver Service.

단일 카탈로그 아이템의 전체 레코드(notes, waste types, recycling methods)를
캐시를 거치지 않고 조회한다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waste_guide.application.exceptions import AuthError, CatalogError

if TYPE_CHECKING:
    from waste_guide.application.ports.catalog_source import CatalogSourcePort
    from waste_guide.domain.entities import CatalogItem, CatalogItemId

logger = logging.getLogger(__name__)


class DetailResolver:
    """상세 레코드 조회기.

    예외를 던지지 않는다. 실패 시 None을 반환하며,
    호출자는 None을 "배출 상세 없음"으로 보고 일반 조언으로 대체한다.
    """

    def __init__(self, source: CatalogSourcePort, timeout: float | None = 10.0):
        """초기화.

        Args:
            source: 카탈로그 소스
            timeout: 상세 요청 타임아웃 (초)
        """
        self._source = source
        self._timeout = timeout

    async def get_details(self, item_id: CatalogItemId | None) -> CatalogItem | None:
        """상세 레코드 조회.

        Args:
            item_id: 카탈로그 식별자

        Returns:
            CatalogItem 또는 None
        """
        if item_id is None or str(item_id).strip() == "":
            return None

        try:
            item = await self._source.fetch_detail(item_id, timeout=self._timeout)
        except AuthError as e:
            logger.error(
                "HSY authentication failed while fetching details",
                extra={
                    "item_id": item_id,
                    "classification": e.classification,
                    "status": e.status_code,
                },
            )
            return None
        except CatalogError as e:
            logger.error(
                "Waste guide details unavailable",
                extra={
                    "item_id": item_id,
                    "classification": e.classification,
                    "error": e.message,
                },
            )
            return None
        except Exception as e:
            logger.error(
                "Waste guide details lookup failed",
                extra={"item_id": item_id, "error": str(e)},
            )
            return None

        logger.info(
            "Waste guide details fetched",
            extra={"item_id": item_id, "title": item.title},
        )
        return item
