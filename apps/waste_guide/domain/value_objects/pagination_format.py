"""Pagination Format Value Objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PaginationConvention:
    """페이지네이션 쿼리 파라미터 규칙 후보.

    Attributes:
        param: 쿼리 파라미터 이름 (예: "page", "offset")
        uses_offset: True면 값이 아이템 offset, False면 1부터 시작하는 페이지 번호
    """

    param: str
    uses_offset: bool = True

    def value_for(self, page_number: int, page_size: int) -> int:
        """페이지 번호(1부터)에 해당하는 파라미터 값."""
        if self.uses_offset:
            return (page_number - 1) * page_size
        return page_number


DEFAULT_CONVENTIONS: tuple[PaginationConvention, ...] = (
    PaginationConvention("page", uses_offset=False),
    PaginationConvention("offset"),
    PaginationConvention("from"),
    PaginationConvention("skip"),
    PaginationConvention("start"),
)


@dataclass(frozen=True, slots=True)
class PaginationFormat:
    """발견된 페이지네이션 형식 (page_number -> url).

    갱신 주기마다 새로 발견하며 저장하지 않는다.
    """

    base_url: str
    page_size: int
    convention: PaginationConvention

    @property
    def name(self) -> str:
        """규칙 이름 (로깅용)."""
        return self.convention.param

    def url_for(self, page_number: int) -> str:
        """페이지 번호(1부터)의 URL."""
        separator = "&" if "?" in self.base_url else "?"
        value = self.convention.value_for(page_number, self.page_size)
        return f"{self.base_url}{separator}{self.convention.param}={value}"

    def __call__(self, page_number: int) -> str:
        return self.url_for(page_number)
