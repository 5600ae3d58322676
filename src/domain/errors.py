"""
Error taxonomy for the prompt relay.

Every failure a relay invocation can report is a RelayError carrying the
HTTP status it maps to. Anything else raised while calling Gemini is
reported as a 500 with the exception's own message.
"""

INVALID_REQUEST_BODY = "Invalid request body."
PROMPT_MISSING = "Prompt is missing."
API_KEY_NOT_CONFIGURED = "API key is not configured."
UNKNOWN_GEMINI_ERROR = "Unknown Gemini API Error"
UNEXPECTED_SHAPE = "Unexpected response shape from Gemini API."
NON_JSON_RESPONSE = "Gemini API returned a non-JSON response."


class RelayError(Exception):
    """Base class for failures reported with a fixed status code."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(RelayError):
    """Raised when the Gemini API key is not configured."""

    def __init__(self, message: str = API_KEY_NOT_CONFIGURED) -> None:
        super().__init__(message)


class MalformedRequestError(RelayError):
    """Raised when the inbound body is not JSON or has no prompt."""

    status_code = 400


class UpstreamError(RelayError):
    """Raised when the Gemini API answers with a non-2xx status."""

    def __init__(self, message: str, upstream_status: int) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class UnexpectedShapeError(RelayError):
    """Raised when a Gemini response cannot be read as generated text."""

    pass
