"""
Configuration for the company memory corpus.

The corpus ships inside the package; ``MEMORY_DOCUMENTS_PATH`` points the
loader at a directory on disk instead, which keeps the same manifest.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEPARATOR = "\n\n---\n\n"
TRUNCATION_MARKER = "\n\n[Memory truncated]"


class MemorySettings(BaseSettings):
    """Settings for loading and bounding the company memory."""

    model_config = SettingsConfigDict(
        env_prefix="MEMORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_chars: int = Field(
        default=6000,
        gt=0,
        description="Hard character budget for the merged memory (marker excluded)",
    )
    documents_path: Path | None = Field(
        default=None,
        description="Directory to read the manifest documents from instead of the bundled copies",
    )


@lru_cache
def get_memory_settings() -> MemorySettings:
    """Get cached memory settings instance.

    Returns:
        MemorySettings: Cached settings instance
    """
    return MemorySettings()
