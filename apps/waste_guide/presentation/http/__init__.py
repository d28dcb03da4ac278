"""HTTP Presentation Layer."""

from waste_guide.presentation.http.router import router

__all__ = ["router"]
