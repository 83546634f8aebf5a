"""
Configuration — typed, validated settings loaded from the environment.

Nothing in the library requires configuration. The settings only tune
ambient behaviour and are read lazily, the first time they are needed:

  COMPOSABLE_LOG_LEVEL  — level used by configure_logging() (default INFO)
  COMPOSABLE_MAX_ARITY  — largest arity curry() accepts (default 16)

Uses pydantic-settings so an out-of-range COMPOSABLE_MAX_ARITY is rejected
when the settings are loaded. The log level is only normalised: an unknown
name falls back to INFO in configure_logging().
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ComposableSettings(BaseSettings):
    """
    Root settings for the composable package.

    Load order (highest priority first):
      1. Keyword arguments (tests, explicit overrides)
      2. Environment variables prefixed with COMPOSABLE_
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPOSABLE_",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level name for configure_logging()")
    max_arity: int = Field(
        default=16,
        ge=1,
        le=255,
        description="Upper bound on the number of parameters curry() will chain",
    )

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        """
        Normalise to upper case.

        Unknown names are kept as given; configure_logging() maps them to
        INFO, so a bad logging variable never stops the settings loading.
        """
        return value.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> ComposableSettings:
    """Return the process-wide settings, loading them on first use."""
    return ComposableSettings()
