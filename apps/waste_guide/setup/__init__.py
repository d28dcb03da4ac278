"""Waste Guide Service Setup."""

from waste_guide.setup.config import get_settings
from waste_guide.setup.dependencies import (
    get_analyze_scan_command,
    get_catalog_cache,
    get_find_best_match_command,
    get_search_catalog_query,
)
from waste_guide.setup.logging import setup_logging

__all__ = [
    "get_analyze_scan_command",
    "get_catalog_cache",
    "get_find_best_match_command",
    "get_search_catalog_query",
    "get_settings",
    "setup_logging",
]
