"""Application Ports (Interfaces)."""

from waste_guide.application.ports.catalog_source import CatalogPage, CatalogSourcePort
from waste_guide.application.ports.match_strategy import MatchStrategyPort
from waste_guide.application.ports.vision_analyzer import (
    DisposalAdvisorPort,
    VisionAnalyzerPort,
)

__all__ = [
    "CatalogPage",
    "CatalogSourcePort",
    "DisposalAdvisorPort",
    "MatchStrategyPort",
    "VisionAnalyzerPort",
]
