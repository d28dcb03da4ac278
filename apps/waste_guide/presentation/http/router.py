"""HTTP Router.

FastAPI 라우터 설정.
"""

from fastapi import APIRouter

from waste_guide.presentation.http.controllers import scan_router, waste_guide_router
from waste_guide.presentation.http.schemas import HealthCheckResponseSchema

router = APIRouter(prefix="/api/v1/waste-guide")

router.include_router(waste_guide_router)
router.include_router(scan_router)


@router.get(
    "/health",
    response_model=HealthCheckResponseSchema,
    tags=["health"],
    summary="헬스체크",
)
async def health_check() -> HealthCheckResponseSchema:
    """서비스 헬스체크."""
    return HealthCheckResponseSchema(status="ok", service="waste-guide")
