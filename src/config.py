from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Relay settings loaded from environment."""

    # Service
    service_name: str = "prompt-relay"

    # Gemini API
    gemini_api_key: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = False


def load_settings() -> Settings:
    """Read settings fresh from the environment for one invocation."""
    return Settings()


settings = Settings()
