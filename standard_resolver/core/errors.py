"""
standard_resolver.core.errors
──────────────────────────────
Error taxonomy for the resolver. Every error carries a stable snake_case
code and a message that is safe to surface to end users.

Schema-internal failures are never wrapped here: they propagate unchanged
from the schema to the caller.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class ResolverError(Exception):
    """
    Base class for all resolver errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: safe to surface to end users
    - detail: internal context, never shown to users
    - status_code: HTTP status code when the error reaches an API response
    """

    status_code: int = 500
    code: str = "resolver_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "An unexpected error occurred.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class SchemaContractError(ResolverError, TypeError):
    """The schema returned a deferred result instead of completing synchronously."""
    code = "schema_not_synchronous"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "Schema validation must be synchronous",
        **metadata: Any,
    ) -> None:
        super().__init__(code, user_message, **metadata)


class FormValidationError(ResolverError):
    """Submitted values failed schema validation."""
    status_code = 422
    code = "validation_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "Validation failed.",
        fields: dict[str, str] | None = None,
        **metadata: Any,
    ) -> None:
        self.fields = fields or {}
        super().__init__(code, user_message, **metadata)

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.fields:
            d["error"]["fields"] = self.fields
        return d


class ConfigurationError(ResolverError):
    """Misconfiguration detected while loading settings."""
    code = "configuration_error"


__all__ = [
    "ResolverError",
    "SchemaContractError",
    "FormValidationError",
    "ConfigurationError",
]
