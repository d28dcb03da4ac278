"""Domain Value Objects."""

from waste_guide.domain.value_objects.cache_snapshot import CacheSnapshot
from waste_guide.domain.value_objects.disposal_advice import DisposalAdvice
from waste_guide.domain.value_objects.item_description import (
    ImageDescription,
    ItemDescription,
)
from waste_guide.domain.value_objects.match_candidate import MatchCandidate
from waste_guide.domain.value_objects.pagination_format import (
    DEFAULT_CONVENTIONS,
    PaginationConvention,
    PaginationFormat,
)

__all__ = [
    "CacheSnapshot",
    "DEFAULT_CONVENTIONS",
    "DisposalAdvice",
    "ImageDescription",
    "ItemDescription",
    "MatchCandidate",
    "PaginationConvention",
    "PaginationFormat",
]
