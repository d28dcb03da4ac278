"""카탈로그 upstream 관련 예외.

- TransportError: 네트워크/타임아웃 (나중에 재시도하면 복구 가능)
- AuthError: 자격증명 누락/거부 (이번 갱신만 실패, 프로세스는 유지)
- ParseError: 응답 형태 불일치 (해당 요청은 사용 가능한 아이템 0개)
"""

from __future__ import annotations

from waste_guide.application.exceptions.base import ApplicationError


class CatalogError(ApplicationError):
    """카탈로그 upstream 예외 베이스."""

    classification = "catalog"

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class TransportError(CatalogError):
    """네트워크 오류 또는 타임아웃."""

    classification = "transport"


class AuthError(CatalogError):
    """인증 실패 (401/403)."""

    classification = "auth"

    def __init__(
        self,
        message: str = "authentication failed",
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, url=url)


class MissingCredentialsError(AuthError):
    """HSY 자격증명 미설정."""

    def __init__(self) -> None:
        super().__init__(
            "HSY credentials not configured. "
            "Set WASTE_GUIDE_HSY_CLIENT_ID and WASTE_GUIDE_HSY_CLIENT_SECRET."
        )


class ParseError(CatalogError):
    """예상하지 못한 응답 형태."""

    classification = "parse"
