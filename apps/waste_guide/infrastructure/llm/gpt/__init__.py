"""GPT LLM Adapters."""

from waste_guide.infrastructure.llm.gpt.llm_match_strategy import (
    LLMAssistedMatchStrategy,
)
from waste_guide.infrastructure.llm.gpt.vision import GPTVisionAdapter

__all__ = [
    "GPTVisionAdapter",
    "LLMAssistedMatchStrategy",
]
