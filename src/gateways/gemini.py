from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from ..domain.errors import (
    NON_JSON_RESPONSE,
    UNEXPECTED_SHAPE,
    UNKNOWN_GEMINI_ERROR,
    UnexpectedShapeError,
    UpstreamError,
)
from ..domain.models import UpstreamPayload
from ..domain.ports import TextGenerator
from ..infrastructure.logging import Timer

logger = structlog.get_logger()


class GeminiPart(BaseModel):
    text: str | None = None


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = []


class GeminiCandidate(BaseModel):
    content: GeminiContent | None = None


class GenerateContentResponse(BaseModel):
    """Subset of the generateContent response the relay reads."""

    candidates: list[GeminiCandidate] = []

    def first_text(self) -> str | None:
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


class GeminiErrorDetail(BaseModel):
    message: str | None = None


class GeminiErrorResponse(BaseModel):
    error: GeminiErrorDetail | None = None


class GeminiGateway(TextGenerator):
    """Google Gemini generateContent gateway."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
    MODEL = "gemini-2.5-flash-preview-09-2025"

    def __init__(self, api_key: str, model: str = MODEL) -> None:
        self._api_key = api_key
        self._model = model

    @property
    def url(self) -> str:
        return f"{self.BASE_URL}/models/{self._model}:generateContent"

    async def generate(self, payload: UpstreamPayload) -> str:
        """Send one prompt to Gemini and return the first candidate's text."""
        headers = {"Content-Type": "application/json"}

        # No client timeout: the hosting platform's invocation limit applies
        async with httpx.AsyncClient(timeout=None) as client:
            with Timer() as t:
                response = await client.post(
                    self.url,
                    params={"key": self._api_key},
                    headers=headers,
                    json=payload.to_dict(),
                )

        data = self._parse_body(response)

        if not response.is_success:
            logger.error(
                "Gemini API Error",
                status_code=response.status_code,
                response=data,
            )
            raise UpstreamError(
                self._error_message(data),
                upstream_status=response.status_code,
            )

        logger.info(
            "Gemini response received",
            status_code=response.status_code,
            duration_ms=t.duration_ms,
        )

        if data is None:
            raise UnexpectedShapeError(NON_JSON_RESPONSE)
        return self._extract_text(data)

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Decode the body as JSON whatever the status; None if it is not JSON."""
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_message(data: Any) -> str:
        try:
            parsed = GeminiErrorResponse.model_validate(data)
        except ValidationError:
            return UNKNOWN_GEMINI_ERROR
        if parsed.error is None or not parsed.error.message:
            return UNKNOWN_GEMINI_ERROR
        return parsed.error.message

    @staticmethod
    def _extract_text(data: Any) -> str:
        try:
            text = GenerateContentResponse.model_validate(data).first_text()
        except ValidationError as e:
            raise UnexpectedShapeError(UNEXPECTED_SHAPE) from e
        if text is None:
            raise UnexpectedShapeError(UNEXPECTED_SHAPE)
        return text
