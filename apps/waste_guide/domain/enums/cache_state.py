"""Catalog Cache State Enum."""

from enum import Enum


class CacheState(str, Enum):
    """카탈로그 캐시 상태.

    EMPTY → FRESH → STALE → FRESH
    """

    EMPTY = "empty"
    FRESH = "fresh"
    STALE = "stale"
