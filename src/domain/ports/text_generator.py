"""
Outbound port for text generation.

This is the interface the application layer uses to turn a prompt into
generated text. Infrastructure adapters implement this interface.
"""

from abc import ABC, abstractmethod

from ..models import UpstreamPayload


class TextGenerator(ABC):
    """
    Outbound port for a generative-language API.

    Implementations perform exactly one upstream attempt per call and
    raise on failure; they never return partial text.
    """

    @abstractmethod
    async def generate(self, payload: UpstreamPayload) -> str:
        """
        Generate text for a single user prompt.

        Args:
            payload: Request body built from the user's prompt

        Returns:
            The generated text of the first candidate

        Raises:
            UpstreamError: If the API answers with a non-2xx status
            UnexpectedShapeError: If the response carries no readable text
        """
        ...
