"""HSY Waste Guide Client 단위 테스트."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from waste_guide.application.exceptions import (
    AuthError,
    MissingCredentialsError,
    ParseError,
    TransportError,
)
from waste_guide.infrastructure.integrations.hsy import HsyWasteGuideClient

CATALOG_URL = "https://hsy.test/waste-pages?lang=en"
DETAIL_URL = "https://hsy.test/waste-pages"


@pytest.fixture
def client() -> HsyWasteGuideClient:
    """테스트용 클라이언트."""
    return HsyWasteGuideClient(
        client_id="test-client-id",
        client_secret="test-client-secret",
        catalog_url=CATALOG_URL,
        detail_url=DETAIL_URL,
        timeout=5.0,
    )


@pytest.fixture
def mock_page_data() -> dict:
    """모의 목록 응답 데이터."""
    return {
        "hits": [
            {"id": 101, "title": "Plastic bottle", "synonyms": ["PET bottle", ""]},
            {"id": 102, "title": "Glass jar", "synonyms": None},
            "not-an-object",
        ],
        "total": 683,
    }


def _http_client_returning(data) -> AsyncMock:
    mock_response = MagicMock()
    mock_response.json.return_value = data
    mock_response.raise_for_status = MagicMock()

    mock_http_client = AsyncMock()
    mock_http_client.get.return_value = mock_response
    return mock_http_client


def _http_client_raising_status(status: int, text: str = "error") -> AsyncMock:
    mock_response = MagicMock()
    mock_response.status_code = status
    mock_response.text = text

    mock_http_client = AsyncMock()
    mock_http_client.get.side_effect = httpx.HTTPStatusError(
        text,
        request=MagicMock(),
        response=mock_response,
    )
    return mock_http_client


class TestHsyWasteGuideClient:
    """HsyWasteGuideClient 테스트."""

    @pytest.mark.asyncio
    async def test_fetch_page_hits_object(
        self, client: HsyWasteGuideClient, mock_page_data: dict
    ) -> None:
        """{"hits": [...], "total": n} 응답 파싱."""
        mock_http_client = _http_client_returning(mock_page_data)

        with patch.object(client, "_get_client", return_value=mock_http_client):
            page = await client.fetch_page(CATALOG_URL)

        assert page.total == 683
        assert [item.id for item in page.items] == [101, 102]
        assert page.items[0].synonyms == ("PET bottle",)
        assert page.items[1].synonyms == ()

    @pytest.mark.asyncio
    async def test_fetch_page_sends_credentials(
        self, client: HsyWasteGuideClient, mock_page_data: dict
    ) -> None:
        """client_id/client_secret 헤더 전송."""
        mock_http_client = _http_client_returning(mock_page_data)

        with patch.object(client, "_get_client", return_value=mock_http_client):
            await client.fetch_page(f"{CATALOG_URL}&page=2", timeout=3.0)

        mock_http_client.get.assert_awaited_once()
        args, kwargs = mock_http_client.get.call_args
        assert args[0] == f"{CATALOG_URL}&page=2"
        assert kwargs["headers"]["client_id"] == "test-client-id"
        assert kwargs["headers"]["client_secret"] == "test-client-secret"
        assert kwargs["timeout"] == 3.0

    @pytest.mark.asyncio
    async def test_fetch_page_bare_array(self, client: HsyWasteGuideClient) -> None:
        """배열 응답은 total 없음."""
        mock_http_client = _http_client_returning(
            [{"id": "a", "title": "Battery"}, {"id": "b", "title": "Paint"}]
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            page = await client.fetch_page(CATALOG_URL)

        assert page.total is None
        assert [item.title for item in page.items] == ["Battery", "Paint"]

    @pytest.mark.asyncio
    async def test_missing_item_array_raises_parse_error(
        self, client: HsyWasteGuideClient
    ) -> None:
        """아이템 배열이 없는 응답 → ParseError."""
        mock_http_client = _http_client_returning({"message": "ok"})

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(ParseError):
                await client.fetch_page(CATALOG_URL)

    @pytest.mark.asyncio
    async def test_invalid_json_raises_parse_error(self, client: HsyWasteGuideClient) -> None:
        """JSON이 아닌 본문 → ParseError."""
        mock_http_client = _http_client_returning(None)
        mock_http_client.get.return_value.json.side_effect = ValueError("bad json")

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(ParseError):
                await client.fetch_page(CATALOG_URL)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_auth_failure(
        self,
        client: HsyWasteGuideClient,
        status: int,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """401/403 → AuthError, "authentication failed" 분류 로깅."""
        mock_http_client = _http_client_raising_status(status, "Unauthorized")

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with caplog.at_level(logging.ERROR):
                with pytest.raises(AuthError) as exc_info:
                    await client.fetch_page(CATALOG_URL)

        assert exc_info.value.status_code == status
        assert exc_info.value.classification == "auth"
        assert any(
            r.getMessage() == "HSY authentication failed" and r.classification == "auth"
            for r in caplog.records
        )

    @pytest.mark.asyncio
    async def test_server_error_raises_transport_error(
        self, client: HsyWasteGuideClient
    ) -> None:
        """5xx → TransportError."""
        mock_http_client = _http_client_raising_status(503, "Service Unavailable")

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(TransportError):
                await client.fetch_page(CATALOG_URL)

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self, client: HsyWasteGuideClient) -> None:
        """타임아웃 → TransportError."""
        mock_http_client = AsyncMock()
        mock_http_client.get.side_effect = httpx.ReadTimeout("timed out")

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(TransportError):
                await client.fetch_page(CATALOG_URL)

    @pytest.mark.asyncio
    async def test_network_error_raises_transport_error(
        self, client: HsyWasteGuideClient
    ) -> None:
        """연결 실패 → TransportError."""
        mock_http_client = AsyncMock()
        mock_http_client.get.side_effect = httpx.ConnectError("connection refused")

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(TransportError):
                await client.fetch_page(CATALOG_URL)

    @pytest.mark.asyncio
    async def test_missing_credentials(self) -> None:
        """자격증명 미설정 → 요청 없이 MissingCredentialsError (AuthError)."""
        client = HsyWasteGuideClient(client_id=None, client_secret=None)
        mock_http_client = AsyncMock()

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(AuthError) as exc_info:
                await client.fetch_page(client.catalog_url)

        assert isinstance(exc_info.value, MissingCredentialsError)
        assert client.has_credentials is False
        mock_http_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_detail(self, client: HsyWasteGuideClient) -> None:
        """상세 조회: {detail_url}/{id}?lang=en, 세부 필드 파싱."""
        mock_http_client = _http_client_returning(
            {
                "id": 101,
                "title": "Plastic bottle",
                "synonyms": ["PET bottle"],
                "notes": "<p>Rinse and recycle.</p>",
                "wasteTypes": [{"id": 7, "title": "Plastic packaging"}],
                "recyclingMethods": [
                    {"id": 9, "title": "Rinki eco point", "isFree": True}
                ],
            }
        )

        with patch.object(client, "_get_client", return_value=mock_http_client):
            item = await client.fetch_detail(101)

        args, kwargs = mock_http_client.get.call_args
        assert args[0] == f"{DETAIL_URL}/101"
        assert kwargs["params"] == {"lang": "en"}
        assert item.plain_notes == "Rinse and recycle."
        assert item.waste_types[0].title == "Plastic packaging"
        assert item.recycling_methods[0].is_free is True

    @pytest.mark.asyncio
    async def test_fetch_detail_non_object_raises_parse_error(
        self, client: HsyWasteGuideClient
    ) -> None:
        """상세 응답이 객체가 아니면 ParseError."""
        mock_http_client = _http_client_returning([])

        with patch.object(client, "_get_client", return_value=mock_http_client):
            with pytest.raises(ParseError):
                await client.fetch_detail(101)

    @pytest.mark.asyncio
    async def test_close(self, client: HsyWasteGuideClient) -> None:
        """close 후 클라이언트 재생성 가능."""
        await client._get_client()

        await client.close()

        assert client._client is None


class TestParsePage:
    """parse_page total 힌트 테스트."""

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({"hits": [], "total": 12}, 12),
            ({"items": [], "totalCount": "34"}, 34),
            ({"results": [], "total": {"value": 56}}, 56),
            ({"data": [], "total": True}, None),
            ({"hits": [], "total": "many"}, None),
        ],
    )
    def test_total_variants(self, payload: dict, expected) -> None:
        assert HsyWasteGuideClient.parse_page(payload).total == expected
