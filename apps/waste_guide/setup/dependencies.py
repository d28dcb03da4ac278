"""Dependency Injection.

FastAPI 의존성 주입 팩토리.
HSY 클라이언트, 카탈로그 캐시, OpenAI 클라이언트는 프로세스당 1개 (construct-once).
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator

from openai import AsyncOpenAI

from waste_guide.application.commands.analyze_scan_command import AnalyzeScanCommand
from waste_guide.application.commands.find_best_match_command import (
    FindBestMatchCommand,
)
from waste_guide.application.exceptions import AnalyzerNotConfiguredError
from waste_guide.application.ports.match_strategy import MatchStrategyPort
from waste_guide.application.queries.search_catalog import SearchCatalogQuery
from waste_guide.application.services import (
    CatalogCacheManager,
    CatalogFetcher,
    DetailResolver,
    LexicalMatchStrategy,
    PaginationDiscovery,
)
from waste_guide.infrastructure.integrations.hsy import HsyWasteGuideClient
from waste_guide.infrastructure.llm.gpt import GPTVisionAdapter, LLMAssistedMatchStrategy
from waste_guide.infrastructure.llm.gpt.vision import build_async_openai
from waste_guide.setup.config import get_settings

logger = logging.getLogger(__name__)

# 싱글톤
_hsy_client: HsyWasteGuideClient | None = None
_catalog_cache: CatalogCacheManager | None = None
_openai_client: AsyncOpenAI | None = None


def get_hsy_client() -> HsyWasteGuideClient:
    """HSY 폐기물 가이드 클라이언트 (싱글톤)."""
    global _hsy_client
    if _hsy_client is None:
        settings = get_settings()
        secret = settings.hsy_client_secret
        _hsy_client = HsyWasteGuideClient(
            client_id=settings.hsy_client_id,
            client_secret=secret.get_secret_value() if secret else None,
            catalog_url=settings.hsy_catalog_url,
            detail_url=settings.hsy_detail_url,
            language=settings.hsy_language,
            timeout=settings.catalog_request_timeout,
        )
    return _hsy_client


def get_catalog_cache() -> CatalogCacheManager:
    """카탈로그 캐시 매니저 (싱글톤).

    PaginationDiscovery → CatalogFetcher → CatalogCacheManager 조립.
    """
    global _catalog_cache
    if _catalog_cache is None:
        settings = get_settings()
        source = get_hsy_client()
        discovery = PaginationDiscovery(
            source=source,
            probe_timeout=settings.pagination_probe_timeout,
        )
        fetcher = CatalogFetcher(
            source=source,
            discovery=discovery,
            page_ceiling=settings.catalog_page_ceiling,
            page_delay=settings.catalog_page_delay,
            page_timeout=settings.catalog_request_timeout,
        )
        _catalog_cache = CatalogCacheManager(
            fetcher=fetcher,
            ttl_seconds=settings.catalog_cache_ttl,
            expected_min_items=settings.catalog_expected_min_items,
        )
    return _catalog_cache


def get_detail_resolver() -> DetailResolver:
    """상세 조회기."""
    settings = get_settings()
    return DetailResolver(
        source=get_hsy_client(),
        timeout=settings.detail_request_timeout,
    )


def get_openai_client() -> AsyncOpenAI | None:
    """AsyncOpenAI 클라이언트 (싱글톤).

    API Key가 없으면 None.
    """
    global _openai_client
    settings = get_settings()
    if settings.openai_api_key is None:
        return None

    if _openai_client is None:
        _openai_client = build_async_openai(
            api_key=settings.openai_api_key.get_secret_value(),
            timeout=settings.openai_timeout,
        )
    return _openai_client


def get_match_strategy() -> MatchStrategyPort:
    """설정된 매칭 전략.

    llm 전략인데 OpenAI API Key가 없으면 lexical로 동작.
    """
    settings = get_settings()
    if settings.match_strategy == "llm":
        client = get_openai_client()
        if client is not None:
            return LLMAssistedMatchStrategy(model=settings.openai_model, client=client)
        logger.warning("LLM match strategy requested without OpenAI API key, using lexical")
    return LexicalMatchStrategy()


def get_find_best_match_command() -> FindBestMatchCommand:
    """FindBestMatchCommand 의존성 주입."""
    return FindBestMatchCommand(
        catalog_cache=get_catalog_cache(),
        match_strategy=get_match_strategy(),
        detail_resolver=get_detail_resolver(),
    )


async def get_analyze_scan_command() -> AsyncGenerator[AnalyzeScanCommand, None]:
    """AnalyzeScanCommand 의존성 주입.

    Raises:
        AnalyzerNotConfiguredError: OpenAI API Key 미설정
    """
    settings = get_settings()
    client = get_openai_client()
    if client is None:
        raise AnalyzerNotConfiguredError()

    vision = GPTVisionAdapter(model=settings.openai_model, client=client)

    yield AnalyzeScanCommand(
        vision_analyzer=vision,
        disposal_advisor=vision,
        find_best_match=get_find_best_match_command(),
    )


def get_search_catalog_query() -> SearchCatalogQuery:
    """SearchCatalogQuery 의존성 주입."""
    return SearchCatalogQuery(catalog_cache=get_catalog_cache())


async def cleanup() -> None:
    """리소스 정리."""
    global _hsy_client, _catalog_cache, _openai_client

    if _hsy_client:
        await _hsy_client.close()
        _hsy_client = None

    if _openai_client:
        await _openai_client.close()
        _openai_client = None

    _catalog_cache = None
