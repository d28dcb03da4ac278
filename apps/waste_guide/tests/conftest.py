"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from typing import Generator
from unittest.mock import AsyncMock

import pytest

from waste_guide.application.exceptions import TransportError
from waste_guide.application.ports.catalog_source import CatalogPage, CatalogSourcePort
from waste_guide.domain.entities import CachedEntry, CatalogItem, RecyclingMethod, WasteType
from waste_guide.setup.config import get_settings

# pytest-asyncio 자동 모드 설정
pytest_plugins = ("pytest_asyncio",)

BASE_URL = "https://hsy.test/waste-pages?lang=en"


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "WASTE_GUIDE_HSY_CLIENT_ID": "test-client-id",
            "WASTE_GUIDE_HSY_CLIENT_SECRET": "test-client-secret",
            "WASTE_GUIDE_CATALOG_PAGE_DELAY": "0",
            "WASTE_GUIDE_ENVIRONMENT": "test",
        }
    )
    get_settings.cache_clear()
    yield
    os.environ.clear()
    os.environ.update(original)
    get_settings.cache_clear()


# ============================================================
# Helpers
# ============================================================


def make_items(start: int, count: int, prefix: str = "Item") -> tuple[CatalogItem, ...]:
    """id가 start부터 연속인 아이템 생성."""
    return tuple(
        CatalogItem(id=i, title=f"{prefix} {i}") for i in range(start, start + count)
    )


class FakeCatalogSource(CatalogSourcePort):
    """URL → 응답 매핑 기반 카탈로그 소스.

    등록되지 않은 URL은 TransportError(HTTP 404).
    """

    def __init__(
        self,
        pages: dict[str, CatalogPage | Exception],
        catalog_url: str = BASE_URL,
    ):
        self.pages = pages
        self.requested: list[str] = []
        self._catalog_url = catalog_url

    @property
    def catalog_url(self) -> str:
        return self._catalog_url

    async def fetch_page(self, url: str, timeout: float | None = None) -> CatalogPage:
        self.requested.append(url)
        result = self.pages.get(url)
        if result is None:
            raise TransportError("HTTP 404", url=url)
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_detail(self, item_id, timeout: float | None = None) -> CatalogItem:
        raise TransportError("HTTP 404")


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def sample_entries() -> list[CachedEntry]:
    """샘플 캐시 엔트리."""
    return [
        CachedEntry(id=1, title="Plastic bottle", synonyms=("PET bottle",)),
        CachedEntry(id=2, title="Glass jar"),
        CachedEntry(id=3, title="Metal packaging", synonyms=("Tin can", "Aluminium can")),
        CachedEntry(id=4, title="Small electronics", synonyms=("Phone charger",)),
    ]


@pytest.fixture
def sample_detail() -> CatalogItem:
    """샘플 상세 레코드."""
    return CatalogItem(
        id=1,
        title="Plastic bottle",
        synonyms=("PET bottle",),
        notes="<p>Empty the bottle and put it in <b>plastic packaging</b> collection.</p>",
        waste_types=(WasteType(id=10, title="Plastic packaging"),),
        recycling_methods=(
            RecyclingMethod(
                id=20,
                title="Recycling point",
                description="Nearest Rinki eco point",
                is_free=True,
            ),
        ),
    )


# ============================================================
# Mock Fixtures
# ============================================================


@pytest.fixture
def mock_catalog_source() -> AsyncMock:
    """Mock CatalogSourcePort."""
    mock = AsyncMock(spec=CatalogSourcePort)
    mock.catalog_url = BASE_URL
    return mock


@pytest.fixture
def mock_catalog_cache(sample_entries: list[CachedEntry]) -> AsyncMock:
    """Mock CatalogCacheManager."""
    mock = AsyncMock()
    mock.get_catalog = AsyncMock(return_value=sample_entries)
    return mock


@pytest.fixture
def mock_detail_resolver() -> AsyncMock:
    """Mock DetailResolver."""
    mock = AsyncMock()
    mock.get_details = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def fake_source_factory() -> type[FakeCatalogSource]:
    """FakeCatalogSource 클래스 (URL → 응답 매핑으로 생성)."""
    return FakeCatalogSource


@pytest.fixture
def items_factory():
    """make_items 헬퍼."""
    return make_items


@pytest.fixture
def base_url() -> str:
    """테스트용 카탈로그 URL (lang 쿼리 포함)."""
    return BASE_URL
