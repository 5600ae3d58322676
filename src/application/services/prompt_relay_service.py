"""
Application service for relaying prompts to a text generator.

This service runs the relay pipeline for one invocation:
credential check, body parsing, prompt validation, upstream call and
response mapping. It depends on the TextGenerator port, not on a
concrete API client.
"""

import json
from collections.abc import Callable
from typing import Any

import structlog

from ...config import Settings, load_settings
from ...domain.errors import (
    INVALID_REQUEST_BODY,
    PROMPT_MISSING,
    ConfigurationError,
    MalformedRequestError,
    RelayError,
)
from ...domain.models import RelayResponse, UpstreamPayload
from ...domain.ports import TextGenerator
from ...infrastructure.logging import redact_secret

logger = structlog.get_logger()

GatewayFactory = Callable[[str], TextGenerator]


def _reject_constant(token: str) -> Any:
    """Reject NaN and Infinity, which are not valid JSON."""
    raise ValueError(f"Invalid JSON constant: {token}")


class PromptRelayService:
    """
    Application service that relays a single prompt.

    Every failure is converted into a RelayResponse; nothing raised while
    handling an invocation escapes relay().
    """

    def __init__(
        self,
        gateway_factory: GatewayFactory,
        settings_loader: Callable[[], Settings] = load_settings,
    ) -> None:
        """
        Initialize with the upstream gateway factory.

        Args:
            gateway_factory: Builds a TextGenerator from the API key
            settings_loader: Reads settings for the current invocation
        """
        self._gateway_factory = gateway_factory
        self._settings_loader = settings_loader

    async def relay(self, body: str | None) -> RelayResponse:
        """
        Relay the prompt contained in a raw request body.

        Args:
            body: Raw request body, expected to be JSON with a "prompt" field

        Returns:
            RelayResponse with the generated text or an error message
        """
        api_key = self._settings_loader().gemini_api_key

        try:
            if not api_key:
                raise ConfigurationError()
            prompt = self._extract_prompt(body)
        except RelayError as e:
            logger.warning("Request rejected", reason=e.message, status_code=e.status_code)
            return RelayResponse.failure(e.status_code, e.message)

        logger.info("Relaying prompt", prompt_length=len(prompt))

        try:
            gateway = self._gateway_factory(api_key)
            text = await gateway.generate(UpstreamPayload(prompt=prompt))
        except Exception as e:
            message = redact_secret(str(e), api_key) or type(e).__name__
            logger.error(
                "Serverless function error",
                error=message,
                error_type=type(e).__name__,
            )
            return RelayResponse.failure(500, message)

        return RelayResponse.success(text)

    @staticmethod
    def _extract_prompt(body: str | None) -> str:
        """Parse the body and return a non-empty prompt."""
        if body is None:
            raise MalformedRequestError(INVALID_REQUEST_BODY)
        try:
            data: Any = json.loads(body, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise MalformedRequestError(INVALID_REQUEST_BODY) from e
        if data is None:
            raise MalformedRequestError(INVALID_REQUEST_BODY)

        prompt = data.get("prompt") if isinstance(data, dict) else None
        if not prompt:
            raise MalformedRequestError(PROMPT_MISSING)
        if not isinstance(prompt, str):
            return json.dumps(prompt)
        return prompt
