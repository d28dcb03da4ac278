"""Waste Guide Controller.

카탈로그 캐시, 검색, 상세, 매칭 API 엔드포인트 핸들러.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from waste_guide.application.commands.find_best_match_command import (
    FindBestMatchCommand,
)
from waste_guide.application.dto.match_response import WasteGuideMatch
from waste_guide.application.queries.search_catalog import SearchCatalogQuery
from waste_guide.application.services import (
    CacheInfo,
    CatalogCacheManager,
    DetailResolver,
)
from waste_guide.domain.constants import MIN_TERM_LENGTH, SEARCH_RESULT_LIMIT
from waste_guide.domain.value_objects import ItemDescription
from waste_guide.presentation.http.schemas import (
    AuthCheckResponseSchema,
    CacheInfoResponseSchema,
    MatchRequestSchema,
    MatchResponseSchema,
    SearchResponseSchema,
    WasteGuideMatchSchema,
)
from waste_guide.setup.config import Settings, get_settings
from waste_guide.setup.dependencies import (
    get_catalog_cache,
    get_detail_resolver,
    get_find_best_match_command,
    get_search_catalog_query,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["waste-guide"])


def to_match_schema(match: WasteGuideMatch | None) -> WasteGuideMatchSchema | None:
    """매칭 DTO → 응답 스키마."""
    if match is None:
        return None
    return WasteGuideMatchSchema.model_validate(asdict(match))


def _to_cache_info_schema(info: CacheInfo) -> CacheInfoResponseSchema:
    return CacheInfoResponseSchema(
        item_count=info.item_count,
        fetched_at=info.fetched_at,
        age_millis=info.age_millis,
        state=info.state.value,
        is_partial=info.is_partial,
    )


@router.get(
    "/cache",
    response_model=CacheInfoResponseSchema,
    summary="캐시 상태 조회",
)
async def get_cache_info(
    catalog_cache: CatalogCacheManager = Depends(get_catalog_cache),
) -> CacheInfoResponseSchema:
    """카탈로그 캐시 상태 (엔트리 수, 갱신 시각, 경과 시간).

    갱신을 일으키지 않는다.
    """
    return _to_cache_info_schema(catalog_cache.get_cache_info())


@router.post(
    "/cache/refresh",
    response_model=CacheInfoResponseSchema,
    summary="캐시 강제 갱신",
)
async def refresh_cache(
    catalog_cache: CatalogCacheManager = Depends(get_catalog_cache),
) -> CacheInfoResponseSchema:
    """TTL과 무관하게 갱신. upstream 실패 시 기존 스냅샷 유지."""
    info = await catalog_cache.refresh()
    return _to_cache_info_schema(info)


@router.get(
    "/items/search",
    response_model=SearchResponseSchema,
    summary="카탈로그 검색",
    description="title/synonym 부분 일치 검색 (대소문자 무시).",
)
async def search_items(
    term: Annotated[
        str,
        Query(min_length=MIN_TERM_LENGTH, max_length=100, description="검색어"),
    ],
    limit: Annotated[
        int,
        Query(ge=1, le=SEARCH_RESULT_LIMIT, description="최대 결과 수"),
    ] = SEARCH_RESULT_LIMIT,
    query: SearchCatalogQuery = Depends(get_search_catalog_query),
) -> SearchResponseSchema:
    """카탈로그 검색."""
    count, results = await query.execute(term, limit=limit)
    return SearchResponseSchema(
        term=term,
        count=count,
        results=[to_match_schema(r) for r in results],
    )


@router.get(
    "/items/{item_id}",
    response_model=WasteGuideMatchSchema,
    summary="항목 상세 조회",
)
async def get_item(
    item_id: str,
    detail_resolver: DetailResolver = Depends(get_detail_resolver),
) -> WasteGuideMatchSchema:
    """HSY 상세 레코드 조회.

    upstream 실패도 404로 응답한다.
    """
    details = await detail_resolver.get_details(item_id)
    if details is None:
        raise HTTPException(status_code=404, detail=f"Waste guide item {item_id} not available")

    return WasteGuideMatchSchema(
        id=details.id if details.id is not None else item_id,
        title=details.title,
        synonyms=list(details.synonyms),
        notes=details.plain_notes,
        waste_types=[asdict(w) for w in details.waste_types],
        recycling_methods=[asdict(m) for m in details.recycling_methods],
        details_available=True,
    )


@router.post(
    "/match",
    response_model=MatchResponseSchema,
    summary="물품 설명 매칭",
)
async def match_item(
    request: MatchRequestSchema,
    command: FindBestMatchCommand = Depends(get_find_best_match_command),
) -> MatchResponseSchema:
    """물품 설명(name, material, category)으로 최적 카탈로그 항목 탐색."""
    description = ItemDescription(
        name=request.name,
        material=request.material,
        category=request.category,
    )
    match = await command.execute(description)
    return MatchResponseSchema(
        match=to_match_schema(match),
        match_strategy=command.strategy_name,
    )


@router.get(
    "/auth-check",
    response_model=AuthCheckResponseSchema,
    summary="HSY 자격증명 점검",
)
async def auth_check(
    settings: Settings = Depends(get_settings),
) -> AuthCheckResponseSchema:
    """자격증명 설정 여부 (secret은 마스킹)."""
    return AuthCheckResponseSchema(
        configured=settings.hsy_credentials_configured,
        client_id=settings.hsy_client_id,
        client_secret=settings.masked_hsy_secret(),
    )
