"""Lambda handler for the prompt relay (API Gateway / Netlify proxy events)."""

import asyncio
import base64
import binascii
import json

import structlog

from .application.services import PromptRelayService
from .config import settings
from .domain.models import RelayResponse
from .gateways import GeminiGateway
from .infrastructure.logging import configure_logging, set_correlation_id

configure_logging(settings.service_name)

logger = structlog.get_logger()


def create_relay_service() -> PromptRelayService:
    """Wire the relay service to the Gemini gateway."""
    return PromptRelayService(gateway_factory=GeminiGateway)


def extract_body(event: dict) -> str | None:
    """Return the event body as text, decoding base64 bodies."""
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        # Undecodable bodies fail JSON parsing downstream
        return None


def to_lambda_response(result: RelayResponse) -> dict:
    return {
        "statusCode": result.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(result.body),
    }


async def handle(event: dict, context=None) -> dict:
    """Relay one inbound event and build the proxy response."""
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        set_correlation_id(request_id)

    result = await create_relay_service().relay(extract_body(event))
    return to_lambda_response(result)


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    return asyncio.run(handle(event, context))
