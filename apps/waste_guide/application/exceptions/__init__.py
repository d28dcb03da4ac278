"""Application Exceptions."""

from waste_guide.application.exceptions.base import ApplicationError
from waste_guide.application.exceptions.catalog import (
    AuthError,
    CatalogError,
    MissingCredentialsError,
    ParseError,
    TransportError,
)
from waste_guide.application.exceptions.validation import (
    AnalyzerNotConfiguredError,
    EmptyImageError,
)

__all__ = [
    "AnalyzerNotConfiguredError",
    "ApplicationError",
    "AuthError",
    "CatalogError",
    "EmptyImageError",
    "MissingCredentialsError",
    "ParseError",
    "TransportError",
]
