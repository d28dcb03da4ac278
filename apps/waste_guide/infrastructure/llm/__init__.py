"""LLM Infrastructure Adapters.

- gpt/: GPT 모델 (vision 분석, 배출 조언, 카탈로그 매칭)
"""

from waste_guide.infrastructure.llm.gpt import (
    GPTVisionAdapter,
    LLMAssistedMatchStrategy,
)

__all__ = [
    "GPTVisionAdapter",
    "LLMAssistedMatchStrategy",
]
