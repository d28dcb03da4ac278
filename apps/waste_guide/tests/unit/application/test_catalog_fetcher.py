"""CatalogFetcher Unit Tests.

종료 조건: 새 아이템 없음 / total 도달 / 페이지 상한.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, call, patch
from urllib.parse import parse_qs, urlsplit

import pytest

from waste_guide.application.exceptions import AuthError, TransportError
from waste_guide.application.ports.catalog_source import CatalogPage, CatalogSourcePort
from waste_guide.application.services.catalog_fetcher import CatalogFetcher
from waste_guide.application.services.pagination_discovery import PaginationDiscovery
from waste_guide.domain.entities import CatalogItem


class EndlessCatalogSource(CatalogSourcePort):
    """page 파라미터마다 항상 새 아이템을 주는 소스 (total 과장)."""

    def __init__(self, base_url: str, page_size: int = 10, total: int = 10_000):
        self._base_url = base_url
        self._page_size = page_size
        self._total = total
        self.requested: list[str] = []

    @property
    def catalog_url(self) -> str:
        return self._base_url

    async def fetch_page(self, url: str, timeout: float | None = None) -> CatalogPage:
        self.requested.append(url)
        query = parse_qs(urlsplit(url).query)
        if "page" not in query and url != self._base_url:
            raise TransportError("HTTP 400", url=url)
        page = int(query.get("page", ["1"])[0])
        start = (page - 1) * self._page_size
        return CatalogPage(
            items=tuple(
                CatalogItem(id=start + i, title=f"Item {start + i}")
                for i in range(self._page_size)
            ),
            total=self._total,
        )

    async def fetch_detail(self, item_id, timeout: float | None = None) -> CatalogItem:
        raise TransportError("HTTP 404")


def _fetcher(
    source: CatalogSourcePort, page_ceiling: int = 35, page_delay: float = 0
) -> CatalogFetcher:
    return CatalogFetcher(
        source=source,
        discovery=PaginationDiscovery(source),
        page_ceiling=page_ceiling,
        page_delay=page_delay,
    )


class TestCatalogFetcher:
    """CatalogFetcher 테스트."""

    @pytest.mark.asyncio
    async def test_single_page_without_total(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """total이 없으면 1페이지만 사용 (탐색 없음)."""
        # Arrange
        source = fake_source_factory({base_url: CatalogPage(items=items_factory(1, 5))})

        # Act
        result = await _fetcher(source).fetch_all()

        # Assert
        assert [item.id for item in result.items] == [1, 2, 3, 4, 5]
        assert result.pages_fetched == 1
        assert result.is_partial is False
        assert source.requested == [base_url]

    @pytest.mark.asyncio
    async def test_single_page_when_total_already_reached(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """total <= 1페이지 아이템 수면 탐색하지 않음."""
        # Arrange
        source = fake_source_factory(
            {base_url: CatalogPage(items=items_factory(1, 5), total=5)}
        )

        # Act
        result = await _fetcher(source).fetch_all()

        # Assert
        assert len(result.items) == 5
        assert result.reported_total == 5
        assert source.requested == [base_url]

    @pytest.mark.asyncio
    async def test_paginates_until_total_reached(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """offset 규칙 발견 후 total에 도달할 때까지 순차 수집."""
        # Arrange
        source = fake_source_factory(
            {
                base_url: CatalogPage(items=items_factory(1, 3), total=7),
                f"{base_url}&offset=3": CatalogPage(items=items_factory(4, 3), total=7),
                f"{base_url}&offset=6": CatalogPage(items=items_factory(7, 1), total=7),
            }
        )

        # Act
        result = await _fetcher(source).fetch_all()

        # Assert
        assert [item.id for item in result.items] == [1, 2, 3, 4, 5, 6, 7]
        assert result.pagination == "offset"
        assert result.pages_fetched == 3
        assert result.is_partial is False
        # 1페이지, 탐색(page=3 실패, offset=6 성공), 2페이지, 3페이지
        assert source.requested[-2:] == [f"{base_url}&offset=3", f"{base_url}&offset=6"]

    @pytest.mark.asyncio
    async def test_delay_before_every_page_after_first(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """2페이지부터 매 요청 전에 지연 (탐색 직후 2페이지 포함)."""
        # Arrange
        source = fake_source_factory(
            {
                base_url: CatalogPage(items=items_factory(1, 3), total=7),
                f"{base_url}&offset=3": CatalogPage(items=items_factory(4, 3), total=7),
                f"{base_url}&offset=6": CatalogPage(items=items_factory(7, 1), total=7),
            }
        )
        fetcher = _fetcher(source, page_delay=0.25)

        # Act
        with patch(
            "waste_guide.application.services.catalog_fetcher.asyncio.sleep",
            new_callable=AsyncMock,
        ) as mock_sleep:
            result = await fetcher.fetch_all()

        # Assert
        assert result.pages_fetched == 3
        assert mock_sleep.await_args_list == [call(0.25), call(0.25)]

    @pytest.mark.asyncio
    async def test_duplicates_keep_first_seen(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """겹치는 페이지의 중복 id는 최초 등장 아이템 유지."""
        # Arrange
        overlapping = (
            CatalogItem(id=3, title="Duplicate 3"),
            CatalogItem(id=4, title="Item 4"),
            CatalogItem(id=5, title="Item 5"),
        )
        source = fake_source_factory(
            {
                base_url: CatalogPage(items=items_factory(1, 3), total=6),
                f"{base_url}&page=3": CatalogPage(items=items_factory(5, 2), total=6),
                f"{base_url}&page=2": CatalogPage(items=overlapping, total=6),
            }
        )

        # Act
        result = await _fetcher(source).fetch_all()

        # Assert
        ids = [item.id for item in result.items]
        assert ids == [1, 2, 3, 4, 5, 6]
        assert len(ids) == len(set(ids))
        assert next(i for i in result.items if i.id == 3).title == "Item 3"

    @pytest.mark.asyncio
    async def test_stops_on_page_without_new_items(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """새 아이템 0개 페이지에서 종료 (total 미달이면 partial)."""
        # Arrange
        source = fake_source_factory(
            {
                base_url: CatalogPage(items=items_factory(1, 3), total=100),
                f"{base_url}&page=3": CatalogPage(items=items_factory(7, 3)),
                f"{base_url}&page=2": CatalogPage(items=items_factory(4, 3)),
                # 4페이지는 1페이지 반복
                f"{base_url}&page=4": CatalogPage(items=items_factory(1, 3)),
            }
        )

        # Act
        result = await _fetcher(source).fetch_all()

        # Assert
        assert len(result.items) == 9
        assert result.is_partial is True
        assert f"{base_url}&page=5" not in source.requested

    @pytest.mark.asyncio
    async def test_terminates_at_page_ceiling(self, base_url: str) -> None:
        """upstream이 끝없이 새 아이템을 줘도 페이지 상한에서 종료."""
        # Arrange
        source = EndlessCatalogSource(base_url, page_size=10)

        # Act
        result = await _fetcher(source, page_ceiling=5).fetch_all()

        # Assert
        assert len(result.items) == 50
        assert result.pages_fetched == 5
        assert result.is_partial is True
        # 1페이지 + 탐색 1회 + 2~5페이지
        assert len(source.requested) == 6

    @pytest.mark.asyncio
    async def test_skips_failed_page(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """중간 페이지 실패는 건너뛰고 계속 진행."""
        # Arrange
        source = fake_source_factory(
            {
                base_url: CatalogPage(items=items_factory(1, 3), total=9),
                f"{base_url}&page=2": TransportError("timeout"),
                f"{base_url}&page=3": CatalogPage(items=items_factory(7, 3)),
            }
        )

        # Act
        result = await _fetcher(source, page_ceiling=4).fetch_all()

        # Assert
        assert [item.id for item in result.items] == [1, 2, 3, 7, 8, 9]
        assert result.pages_fetched == 2
        assert result.is_partial is True

    @pytest.mark.asyncio
    async def test_degraded_when_no_pagination_found(
        self, fake_source_factory, items_factory, base_url: str
    ) -> None:
        """total이 크지만 형식 탐색 실패 → 1페이지만, partial."""
        # Arrange
        source = fake_source_factory(
            {base_url: CatalogPage(items=items_factory(1, 3), total=600)}
        )

        # Act
        result = await _fetcher(source).fetch_all()

        # Assert
        assert len(result.items) == 3
        assert result.is_partial is True
        assert result.pagination is None

    @pytest.mark.asyncio
    async def test_first_page_error_propagates(
        self, fake_source_factory, base_url: str
    ) -> None:
        """1페이지 실패는 호출자(캐시)에게 전파."""
        # Arrange
        source = fake_source_factory({base_url: AuthError(status_code=401)})

        # Act & Assert
        with pytest.raises(AuthError):
            await _fetcher(source).fetch_all()

    def test_deduplicate_is_stable(self) -> None:
        """deduplicate는 최초 등장 순서 유지."""
        items = [
            CatalogItem(id="a", title="A"),
            CatalogItem(id="b", title="B"),
            CatalogItem(id="a", title="A again"),
        ]

        result = CatalogFetcher.deduplicate(items)

        assert [(i.id, i.title) for i in result] == [("a", "A"), ("b", "B")]
