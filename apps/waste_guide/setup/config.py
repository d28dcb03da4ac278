"""Waste Guide Service Configuration.

외부화 원칙:
- HSY 자격증명, OpenAI API Key → SecretStr (로깅 마스킹)
- 캐시/페이지네이션 정책 → env
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from waste_guide.domain.constants import (
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_PAGE_CEILING,
    DEFAULT_PAGE_DELAY_SECONDS,
    EXPECTED_MIN_CATALOG_ITEMS,
    HSY_CATALOG_URL,
    HSY_DETAIL_URL,
)


class Settings(BaseSettings):
    """Waste Guide Service 설정."""

    # Environment
    environment: str = "local"
    debug: bool = False

    # CORS (production: 명시적 origins 필수)
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:8081"]

    # === HSY Waste Guide API ===
    hsy_catalog_url: str = HSY_CATALOG_URL
    hsy_detail_url: str = HSY_DETAIL_URL
    hsy_language: str = "en"
    hsy_client_id: str | None = None
    hsy_client_secret: SecretStr | None = None

    # === 카탈로그 캐시 ===
    catalog_cache_ttl: int = Field(DEFAULT_CACHE_TTL_SECONDS, ge=1)  # 24시간
    catalog_page_ceiling: int = Field(DEFAULT_PAGE_CEILING, ge=1)
    catalog_page_delay: float = Field(DEFAULT_PAGE_DELAY_SECONDS, ge=0)
    catalog_request_timeout: float = 15.0
    pagination_probe_timeout: float = 10.0
    detail_request_timeout: float = 10.0
    catalog_expected_min_items: int = EXPECTED_MIN_CATALOG_ITEMS

    # === 매칭 / OpenAI ===
    match_strategy: Literal["lexical", "llm"] = "lexical"
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="WASTE_GUIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def hsy_credentials_configured(self) -> bool:
        """HSY 자격증명 설정 여부."""
        return bool(
            self.hsy_client_id
            and self.hsy_client_secret
            and self.hsy_client_secret.get_secret_value()
        )

    def masked_hsy_secret(self) -> str | None:
        """로그/응답용 마스킹된 Secret (앞 4자리만 노출)."""
        if not self.hsy_client_secret:
            return None
        secret = self.hsy_client_secret.get_secret_value()
        return f"{secret[:4]}***" if len(secret) > 4 else "***"


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤."""
    return Settings()
