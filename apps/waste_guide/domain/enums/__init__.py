"""Domain Enums."""

from waste_guide.domain.enums.cache_state import CacheState

__all__ = ["CacheState"]
