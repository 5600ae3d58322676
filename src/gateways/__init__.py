from .gemini import GeminiGateway, GenerateContentResponse

__all__ = [
    "GeminiGateway",
    "GenerateContentResponse",
]
