"""HTTP Error Handling."""

from waste_guide.presentation.http.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
