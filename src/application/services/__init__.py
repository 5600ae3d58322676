from .prompt_relay_service import PromptRelayService

__all__ = ["PromptRelayService"]
