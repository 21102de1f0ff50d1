"""OpenAI API configuration."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """Settings for the OpenAI Responses API.

    Values come from the ``.env`` file; process environment variables take
    precedence. The ``EXPO_PUBLIC_*`` names used by the mobile build are
    accepted as well.

    Attributes:
        api_key: OpenAI API key. Optional here so that a missing key surfaces
            as a configuration error on the first request, not at import time
        model_name: Model identifier sent with every request
        endpoint_url: Responses API endpoint
        request_timeout: HTTP timeout in seconds for one model call
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "EXPO_PUBLIC_OPENAI_API_KEY"),
        description="OpenAI API key",
    )
    model_name: str = Field(
        default="gpt-4.1-mini",
        validation_alias=AliasChoices("OPENAI_MODEL_NAME", "EXPO_PUBLIC_OPENAI_MODEL"),
        description="OpenAI model used for assistant replies",
    )
    endpoint_url: str = Field(
        default="https://api.openai.com/v1/responses",
        description="Responses API endpoint",
    )
    request_timeout: float = Field(
        default=300,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    def resolved_api_key(self) -> str | None:
        """Return the API key, treating blank values as missing."""
        if self.api_key is None or not self.api_key.strip():
            return None
        return self.api_key.strip()


@lru_cache
def get_openai_settings() -> OpenAISettings:
    """Get cached OpenAI settings instance.

    Returns:
        OpenAISettings: Cached settings instance
    """
    return OpenAISettings()
