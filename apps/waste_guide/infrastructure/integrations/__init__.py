"""External Integrations."""

from waste_guide.infrastructure.integrations.hsy import HsyWasteGuideClient

__all__ = ["HsyWasteGuideClient"]
