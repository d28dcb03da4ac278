"""HSY Waste Guide API Client.

HSY (Helsinki Region Environmental Services) 폐기물 가이드 API 클라이언트.

엔드포인트:
- 목록: GET https://dev.klapi.hsy.fi/int2001/v1/waste-guide-api/waste-pages?lang=en
- 상세: GET https://dev.klapi.hsy.fi/int2001/v1/waste-guide-api/waste-pages/{id}?lang=en

인증:
- client_id / client_secret 헤더

응답:
- 배열 또는 {"hits": [...], "total": n} 형태 (페이지네이션 규칙 비공개)
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from waste_guide.application.exceptions import (
    AuthError,
    MissingCredentialsError,
    ParseError,
    TransportError,
)
from waste_guide.application.ports.catalog_source import CatalogPage, CatalogSourcePort
from waste_guide.domain.constants import (
    HSY_CATALOG_URL,
    HSY_DETAIL_URL,
    ITEM_ARRAY_KEYS,
    TOTAL_COUNT_KEYS,
)
from waste_guide.domain.entities import (
    CatalogItem,
    CatalogItemId,
    RecyclingMethod,
    WasteType,
)

logger = logging.getLogger(__name__)

AUTH_FAILURE_STATUSES = frozenset({401, 403})


class HsyWasteGuideClient(CatalogSourcePort):
    """HSY 폐기물 가이드 HTTP 클라이언트.

    재시도 없는 GET 래퍼. 모든 실패를 CatalogError 계열로 변환한다.

    Attributes:
        DEFAULT_TIMEOUT: 기본 타임아웃 (초)
    """

    DEFAULT_TIMEOUT = 15.0

    def __init__(
        self,
        client_id: str | None,
        client_secret: str | None,
        catalog_url: str = HSY_CATALOG_URL,
        detail_url: str = HSY_DETAIL_URL,
        language: str = "en",
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ):
        """초기화.

        Args:
            client_id: HSY API 클라이언트 ID
            client_secret: HSY API 클라이언트 Secret
            catalog_url: 목록 URL
            detail_url: 상세 기본 URL ({detail_url}/{id})
            language: 상세 조회 언어 (lang 쿼리 파라미터)
            timeout: 기본 HTTP 타임아웃 (초)
            http_client: HTTP 클라이언트 (None이면 lazy 생성)
        """
        self._client_id = client_id
        self._client_secret = client_secret
        self._catalog_url = catalog_url
        self._detail_url = detail_url.rstrip("/")
        self._language = language
        self._timeout = timeout
        self._client = http_client

    @property
    def catalog_url(self) -> str:
        """카탈로그 목록 URL."""
        return self._catalog_url

    @property
    def has_credentials(self) -> bool:
        """자격증명 설정 여부."""
        return bool(self._client_id and self._client_secret)

    def _headers(self) -> dict[str, str]:
        """인증 헤더.

        Raises:
            MissingCredentialsError: 자격증명 미설정
        """
        if not self.has_credentials:
            raise MissingCredentialsError()
        return {
            "Content-Type": "application/json",
            "client_id": self._client_id or "",
            "client_secret": self._client_secret or "",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 lazy 초기화."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def _get_json(
        self,
        url: str,
        params: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """GET 요청 후 JSON 반환.

        Raises:
            AuthError: 401/403, 자격증명 미설정
            TransportError: 네트워크 오류, 타임아웃, 기타 HTTP 오류
            ParseError: JSON이 아닌 응답
        """
        headers = self._headers()
        client = await self._get_client()

        try:
            response = await client.get(
                url,
                params=params,
                headers=headers,
                timeout=timeout if timeout is not None else self._timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status in AUTH_FAILURE_STATUSES:
                logger.error(
                    "HSY authentication failed",
                    extra={"classification": "auth", "status": status, "url": url},
                )
                raise AuthError(url=url, status_code=status) from e
            logger.error(
                "HSY API HTTP error",
                extra={
                    "status": status,
                    "url": url,
                    "detail": e.response.text[:200],
                },
            )
            raise TransportError(f"HTTP {status}", url=url) from e
        except httpx.TimeoutException as e:
            logger.error("HSY API timeout", extra={"url": url, "timeout": timeout})
            raise TransportError("timeout", url=url) from e
        except httpx.HTTPError as e:
            logger.error("HSY API request failed", extra={"url": url, "error": str(e)})
            raise TransportError(str(e) or type(e).__name__, url=url) from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseError("response body is not JSON", url=url) from e

    async def fetch_page(
        self,
        url: str,
        timeout: float | None = None,
    ) -> CatalogPage:
        """카탈로그 페이지 조회.

        Args:
            url: 요청 URL
            timeout: 요청 타임아웃 (초)

        Returns:
            CatalogPage
        """
        data = await self._get_json(url, timeout=timeout)
        page = self.parse_page(data, url=url)

        logger.debug(
            "HSY catalog page fetched",
            extra={"url": url, "items": len(page.items), "total": page.total},
        )
        return page

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
            CatalogItem
        """
        url = f"{self._detail_url}/{quote(str(item_id), safe='')}"
        data = await self._get_json(url, params={"lang": self._language}, timeout=timeout)

        if not isinstance(data, dict):
            raise ParseError(
                f"detail response is {type(data).__name__}, expected object", url=url
            )

        item = self.parse_item(data)
        if item is None or (item.id is None and not item.title):
            raise ParseError("detail response is empty", url=url)
        return item

    @classmethod
    def parse_page(cls, data: Any, url: str | None = None) -> CatalogPage:
        """응답 본문을 CatalogPage로 변환.

        배열 또는 hits/items/results/data 배열을 가진 객체를 허용한다.

        Raises:
            ParseError: 아이템 배열이 없음
        """
        total = None
        raw_items: Any = data

        if isinstance(data, dict):
            raw_items = next(
                (data[key] for key in ITEM_ARRAY_KEYS if isinstance(data.get(key), list)),
                None,
            )
            total = next(
                (
                    cls._safe_total(data[key])
                    for key in TOTAL_COUNT_KEYS
                    if data.get(key) is not None
                ),
                None,
            )

        if not isinstance(raw_items, list):
            logger.warning(
                "HSY response items is not an array",
                extra={
                    "url": url,
                    "type": type(raw_items).__name__,
                    "keys": list(data.keys()) if isinstance(data, dict) else None,
                },
            )
            raise ParseError("response items is not an array", url=url)

        items = [
            item
            for item in (cls.parse_item(raw) for raw in raw_items if isinstance(raw, dict))
            if item is not None
        ]
        return CatalogPage(items=tuple(items), total=total)

    @classmethod
    def parse_item(cls, raw: dict[str, Any]) -> CatalogItem | None:
        """API 응답 아이템을 CatalogItem으로 변환.

        Returns:
            CatalogItem 또는 None (파싱 실패 시)
        """
        try:
            return CatalogItem(
                id=raw.get("id"),
                title=str(raw.get("title") or "").strip(),
                synonyms=tuple(
                    str(s).strip() for s in (raw.get("synonyms") or []) if s
                ),
                notes=raw.get("notes") or None,
                waste_types=tuple(
                    WasteType(
                        id=w.get("id"),
                        title=str(w.get("title") or ""),
                        description=w.get("description"),
                    )
                    for w in (raw.get("wasteTypes") or [])
                    if isinstance(w, dict)
                ),
                recycling_methods=tuple(
                    RecyclingMethod(
                        id=m.get("id"),
                        title=str(m.get("title") or ""),
                        description=m.get("description"),
                        is_free=m.get("isFree"),
                    )
                    for m in (raw.get("recyclingMethods") or [])
                    if isinstance(m, dict)
                ),
            )
        except (TypeError, AttributeError) as e:
            logger.warning("Failed to parse HSY waste guide item: %s", e)
            return None

    @staticmethod
    def _safe_total(value: Any) -> int | None:
        """total 힌트 변환 (숫자, 숫자 문자열, {"value": n})."""
        if isinstance(value, dict):
            value = value.get("value")
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            return None

    async def close(self) -> None:
        """HTTP 클라이언트 종료."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug("HSY waste guide HTTP client closed")
