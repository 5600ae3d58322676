import httpx
import pytest

from src.config import Settings
from src.gateways import GeminiGateway

GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.5-flash-preview-09-2025:generateContent"
)


@pytest.fixture
def gemini_response():
    """Factory for httpx responses as returned by a generateContent call."""

    def build(status_code: int = 200, **kwargs) -> httpx.Response:
        return httpx.Response(
            status_code,
            request=httpx.Request("POST", GEMINI_URL),
            **kwargs,
        )

    return build


@pytest.fixture
def api_key() -> str:
    return "test-gemini-key"


@pytest.fixture
def settings(api_key) -> Settings:
    return Settings(gemini_api_key=api_key)


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(gemini_api_key="")


@pytest.fixture
def gateway(api_key) -> GeminiGateway:
    return GeminiGateway(api_key=api_key)


@pytest.fixture
def success_body() -> dict:
    return {"candidates": [{"content": {"parts": [{"text": "Hi there"}]}}]}
