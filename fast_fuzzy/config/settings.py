"""Library settings and configuration management."""

from functools import lru_cache
from typing import Optional

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library defaults with environment variable support.

    Every field can be overridden with a ``FAST_FUZZY_``-prefixed environment
    variable, e.g. ``FAST_FUZZY_DEFAULT_THRESHOLD=0.4``.
    """

    # Search defaults
    default_threshold: float = Field(default=0.0)
    default_limit: Optional[int] = Field(default=None)
    default_ignore_case: bool = Field(default=True)
    default_normalize: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="json")

    model_config = ConfigDict(
        env_prefix="FAST_FUZZY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()
