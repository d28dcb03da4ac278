"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
카탈로그 upstream 예외는 캐시/상세 조회에서 흡수되므로 여기까지 오지 않는다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from waste_guide.application.exceptions import (
    AnalyzerNotConfiguredError,
    ApplicationError,
    EmptyImageError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(EmptyImageError)
    async def empty_image_handler(request: Request, exc: EmptyImageError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "EMPTY_IMAGE"},
        )

    @app.exception_handler(AnalyzerNotConfiguredError)
    async def analyzer_not_configured_handler(
        request: Request, exc: AnalyzerNotConfiguredError
    ):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "ANALYZER_NOT_CONFIGURED"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
