from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Itinerary Generation API"
    api_prefix: str = "/api"

    openai_api_key: str = Field(default="", description="OpenAI API key, required per request")
    openai_chat_completions_url: str = "https://api.openai.com/v1/chat/completions"
    # None disables the client timeout; the platform's request ceiling applies instead.
    openai_timeout_seconds: Optional[float] = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


def get_request_settings() -> Settings:
    """Fresh settings for a single request, so credential changes are picked up without a restart."""
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
