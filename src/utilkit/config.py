"""Runtime configuration using Pydantic Settings.

This module defines the `Settings` class, which loads tunable parameters from
environment variables (prefixed with ``UTILKIT_``) and an optional `.env`
file. The library functions themselves are pure; configuration only supplies
defaults that callers did not pass explicitly (for example the concurrency cap
of `utilkit.aio.map_async`) and the logging level used by the CLI.

The `get_settings` function provides a cached, singleton instance of the
configuration. Tests that change the environment call
``get_settings.cache_clear()`` afterwards.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict

__all__ = ["Settings", "get_settings"]

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class Settings(BaseSettings):
    """Defines all utilkit configuration parameters.

    Values come from ``UTILKIT_*`` environment variables or a `.env` file in
    the working directory; unknown keys are ignored so the file can be shared
    with other tools.
    """

    model_config = _SettingsConfigDict(
        env_prefix="UTILKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    LOG_LEVEL: str = Field(default="WARNING", description="Logging level used by the CLI")
    MAP_ASYNC_CONCURRENCY: int = Field(
        default=8,
        description=(
            "Default number of worker coroutines map_async keeps in flight when "
            "the caller does not pass a concurrency cap"
        ),
    )
    JSON_INDENT: Optional[int] = Field(
        default=None,
        description="Indentation for JSON printed by the CLI (unset = compact single line)",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        """Upper-case and validate the level name.

        Blank values fall back to the default so an empty ``UTILKIT_LOG_LEVEL=``
        line in a `.env` file behaves like an unset variable.
        """
        if v is None:
            return "WARNING"
        level = str(v).strip().upper()
        if not level:
            return "WARNING"
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}; expected one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("MAP_ASYNC_CONCURRENCY")
    @classmethod
    def require_positive_concurrency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MAP_ASYNC_CONCURRENCY must be at least 1")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, singleton instance of the settings."""
    return Settings()
