"""HTTP Controllers."""

from waste_guide.presentation.http.controllers.scan_controller import router as scan_router
from waste_guide.presentation.http.controllers.waste_guide_controller import (
    router as waste_guide_router,
)

__all__ = ["scan_router", "waste_guide_router"]
