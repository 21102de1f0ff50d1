"""Configuration for the chat pipeline."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatSettings(BaseSettings):
    """Settings for prompt composition."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    history_turn_limit: int = Field(
        default=6,
        ge=0,
        description="Most recent conversation turns included in each request",
    )


@lru_cache
def get_chat_settings() -> ChatSettings:
    """Get cached chat settings instance.

    Returns:
        ChatSettings: Cached settings instance
    """
    return ChatSettings()
