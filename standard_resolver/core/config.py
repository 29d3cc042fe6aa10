"""
standard_resolver.core.config
──────────────────────────────
Typed configuration with env layering. Reads from .env → environment
variables. All fields are typed via Pydantic. Invalid values raise
ConfigurationError when the config is first loaded.

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from standard_resolver.core.errors import ConfigurationError
from standard_resolver.resolver.standard import ErrorPriority, normalize_priority


class ResolverConfig(BaseSettings):
    """
    Process-wide resolver settings. All env vars are prefixed with RESOLVER_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Resolution ────────────────────────────────────────────────────────────
    # Used when a resolver is built without an explicit error_priority.
    # Anything other than "first" is read as "last".
    error_priority: ErrorPriority = Field(default="last", alias="RESOLVER_ERROR_PRIORITY")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="RESOLVER_LOG_LEVEL")
    log_format: str = Field(default="json", alias="RESOLVER_LOG_FORMAT")

    @field_validator("error_priority", mode="before")
    @classmethod
    def coerce_priority(cls, v: Any) -> ErrorPriority:
        return normalize_priority(v)

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "console"}
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got {v!r}")
        return v.lower()


@lru_cache(maxsize=1)
def get_config() -> ResolverConfig:
    """
    Return the singleton resolver config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    try:
        return ResolverConfig()
    except ValidationError as exc:
        raise ConfigurationError(
            user_message="Invalid resolver configuration.",
            detail=str(exc),
        ) from exc


def _reset_config() -> None:
    """For tests: clear the config cache."""
    get_config.cache_clear()
