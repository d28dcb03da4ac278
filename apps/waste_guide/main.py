"""Waste Guide Service Application.

HSY 폐기물 가이드 동기화 및 물품 매칭 서비스.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from waste_guide.presentation.http import router
from waste_guide.presentation.http.errors import register_exception_handlers
from waste_guide.setup.config import get_settings
from waste_guide.setup.dependencies import cleanup
from waste_guide.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Waste guide service starting",
        extra={
            "catalog_url": settings.hsy_catalog_url,
            "cache_ttl": settings.catalog_cache_ttl,
            "page_ceiling": settings.catalog_page_ceiling,
            "hsy_credentials": settings.hsy_credentials_configured,
            "match_strategy": settings.match_strategy,
            "openai_enabled": settings.openai_api_key is not None,
        },
    )
    if not settings.hsy_credentials_configured:
        logger.warning("HSY credentials not configured, catalog refresh will fail")
    yield
    logger.info("Waste guide service shutting down")
    await cleanup()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    app = FastAPI(
        title="Waste Guide Service",
        description="HSY 폐기물 가이드 카탈로그 동기화 및 물품 매칭 서비스",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # Router
    app.include_router(router)

    return app


# Uvicorn entrypoint
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "waste_guide.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
