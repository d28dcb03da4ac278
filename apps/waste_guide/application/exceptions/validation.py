"""검증 및 설정 관련 예외."""

from waste_guide.application.exceptions.base import ApplicationError


class EmptyImageError(ApplicationError):
    """업로드된 이미지가 비어있음."""

    def __init__(self) -> None:
        super().__init__("Uploaded image is empty.")


class AnalyzerNotConfiguredError(ApplicationError):
    """이미지 분석기(OpenAI API Key) 미설정."""

    def __init__(self) -> None:
        super().__init__(
            "Image analyzer not configured. Set WASTE_GUIDE_OPENAI_API_KEY."
        )
