"""Catalog Source Port.

폐기물 가이드 카탈로그 upstream 추상화 인터페이스.
HSY 등 다양한 카탈로그 API 어댑터 구현 가능.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from waste_guide.domain.entities import CatalogItem, CatalogItemId


@dataclass(frozen=True)
class CatalogPage:
    """카탈로그 한 페이지 응답.

    Attributes:
        items: 파싱된 아이템 목록
        total: upstream이 보고한 전체 개수 (힌트일 뿐, 정확하다고 가정하지 않음)
    """

    items: tuple[CatalogItem, ...]
    total: int | None = None

    @property
    def ids(self) -> frozenset[CatalogItemId | None]:
        """페이지 아이템 식별자 집합."""
        return frozenset(item.id for item in self.items)


class CatalogSourcePort(ABC):
    """카탈로그 소스 포트.

    재시도 없는 GET 래퍼. 인증 헤더와 타임아웃은 어댑터가 관리한다.

    Raises (fetch_page, fetch_detail 공통):
        TransportError: 네트워크 오류, 타임아웃, 5xx 등
        AuthError: 401/403 또는 자격증명 미설정
        ParseError: 응답 형태 불일치
    """

    @property
    @abstractmethod
    def catalog_url(self) -> str:
        """카탈로그 목록 기본 URL (페이지네이션 파라미터 없음)."""
        pass

    @abstractmethod
    async def fetch_page(
        self,
        url: str,
        timeout: float | None = None,
    ) -> CatalogPage:
        """카탈로그 페이지 조회.

        Args:
            url: 요청 URL (페이지네이션 파라미터 포함 가능)
            timeout: 요청 타임아웃 (초, None이면 어댑터 기본값)

        Returns:
            CatalogPage
        """
        pass

    @abstractmethod
    async def fetch_detail(
        self,
        item_id: CatalogItemId,
        timeout: float | None = None,
    ) -> CatalogItem:
        """단일 아이템 상세 조회.

        Args:
            item_id: 카탈로그 식별자
            timeout: 요청 타임아웃 (초)

        Returns:
            CatalogItem (notes, waste_types, recycling_methods 포함)
        """
        pass

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
