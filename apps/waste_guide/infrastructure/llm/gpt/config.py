"""OpenAI 공통 설정.

타임아웃, 연결 제한, 재시도 설정 등.
"""

import httpx

# ==========================================
# HTTP 연결 제한 설정
# ==========================================

OPENAI_LIMITS = httpx.Limits(
    max_connections=20,
    max_keepalive_connections=5,
    keepalive_expiry=30.0,
)

# ==========================================
# OpenAI 클라이언트 공통 설정
# ==========================================

MAX_RETRIES = 2


def openai_timeout(read_seconds: float) -> httpx.Timeout:
    """읽기 타임아웃만 설정값으로 바꾼 OpenAI HTTP 타임아웃."""
    return httpx.Timeout(connect=5.0, read=read_seconds, write=10.0, pool=5.0)
