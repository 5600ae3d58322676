from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UpstreamPayload:
    """Immutable generateContent request body for a single user prompt."""
    prompt: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": self.prompt}],
                }
            ]
        }


@dataclass(frozen=True)
class RelayResponse:
    """Outcome of one relay invocation: generated text or an error, never both."""
    status_code: int
    body: dict[str, str] = field(default_factory=dict)

    @classmethod
    def success(cls, text: str) -> "RelayResponse":
        return cls(status_code=200, body={"text": text})

    @classmethod
    def failure(cls, status_code: int, error: str) -> "RelayResponse":
        return cls(status_code=status_code, body={"error": error})
