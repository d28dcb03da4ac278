"""HTTP Request/Response Schemas.

Pydantic 모델 기반 API 스키마.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class HealthCheckResponseSchema(BaseModel):
    """헬스체크 응답 스키마."""

    status: str = Field(..., description="서비스 상태")
    service: str = Field(..., description="서비스 이름")


class CacheInfoResponseSchema(BaseModel):
    """카탈로그 캐시 상태 스키마."""

    item_count: int = Field(..., description="캐시된 엔트리 수")
    fetched_at: datetime | None = Field(None, description="마지막 갱신 시각 (UTC)")
    age_millis: int | None = Field(None, description="스냅샷 경과 시간 (ms)")
    state: str = Field(..., description="캐시 상태 (empty, fresh, stale)")
    is_partial: bool = Field(False, description="페이지 상한/탐색 실패로 일부만 수집됨")


class WasteTypeSchema(BaseModel):
    """폐기물 분류 스키마."""

    id: str | int | None = Field(None, description="분류 ID")
    title: str = Field(..., description="분류 이름")
    description: str | None = Field(None, description="설명")


class RecyclingMethodSchema(BaseModel):
    """재활용/배출 방법 스키마."""

    id: str | int | None = Field(None, description="방법 ID")
    title: str = Field(..., description="방법 이름")
    description: str | None = Field(None, description="설명")
    is_free: bool | None = Field(None, description="무료 여부")


class WasteGuideMatchSchema(BaseModel):
    """카탈로그 매칭/검색 결과 스키마."""

    id: str | int = Field(..., description="HSY 카탈로그 ID")
    title: str = Field(..., description="항목 이름")
    synonyms: list[str] = Field(default_factory=list, description="동의어")
    score: int | None = Field(None, description="어휘 매칭 점수")
    notes: str | None = Field(None, description="배출 안내 (마크업 제거)")
    waste_types: list[WasteTypeSchema] | None = Field(None, description="폐기물 분류")
    recycling_methods: list[RecyclingMethodSchema] | None = Field(
        None, description="재활용/배출 방법"
    )
    details_available: bool = Field(False, description="상세 조회 성공 여부")


class SearchResponseSchema(BaseModel):
    """카탈로그 검색 응답 스키마."""

    term: str = Field(..., description="검색어")
    count: int = Field(..., description="전체 일치 수")
    results: list[WasteGuideMatchSchema] = Field(..., description="상위 결과")


class MatchRequestSchema(BaseModel):
    """매칭 요청 스키마.

    모든 필드가 비어있으면 매칭 결과는 null.
    """

    name: str = Field("", max_length=200, description="물품 이름 (예: Plastic bottle)")
    material: str = Field("", max_length=200, description="주 재질 (예: plastic)")
    category: str = Field("", max_length=200, description="물품 분류 (예: Beverage container)")


class MatchResponseSchema(BaseModel):
    """매칭 응답 스키마."""

    match: WasteGuideMatchSchema | None = Field(None, description="최적 매칭 (없으면 null)")
    match_strategy: str = Field(..., description="사용된 매칭 전략 (lexical, llm)")


class AdviceSchema(BaseModel):
    """AI 배출 조언 스키마."""

    advice: str = Field(..., description="배출 조언")
    is_dangerous: bool = Field(False, description="유해 물질 포함 가능성")
    danger_warning: str | None = Field(None, description="유해 물질 경고")
    tips: list[str] = Field(default_factory=list, description="재활용 팁")


class AlternativeMatchSchema(BaseModel):
    """대안 추정 스키마."""

    name: str = Field(..., description="물품 이름")
    material: str = Field(..., description="주 재질")
    category: str = Field(..., description="물품 분류")
    match: WasteGuideMatchSchema | None = Field(None, description="매칭 결과")


class ScanResponseSchema(BaseModel):
    """이미지 스캔 응답 스키마.

    match가 null이면 advice가 채워진다.
    """

    name: str = Field(..., description="물품 이름")
    material: str = Field(..., description="주 재질")
    category: str = Field(..., description="물품 분류")
    confidence: int | None = Field(None, description="신뢰도 (0-100)")
    match: WasteGuideMatchSchema | None = Field(None, description="HSY 매칭 결과")
    advice: AdviceSchema | None = Field(None, description="AI 배출 조언")
    alternatives: list[AlternativeMatchSchema] = Field(
        default_factory=list, description="대안 추정과 매칭 결과"
    )
    match_strategy: str = Field(..., description="사용된 매칭 전략")


class AuthCheckResponseSchema(BaseModel):
    """HSY 자격증명 점검 스키마."""

    configured: bool = Field(..., description="client_id/client_secret 설정 여부")
    client_id: str | None = Field(None, description="client_id")
    client_secret: str | None = Field(None, description="마스킹된 client_secret")
