"""
standard_resolver.resolver.resolve
───────────────────────────────────
Turns a Standard Schema into a form validator: a function from submitted
values to a flat ``{"dotted.path": "message"}`` error map.

Usage:
    validate = standard_resolver(SignupSchema, {"errorPriority": "first"})
    errors = validate({"name": "", "email": "", "age": 16})
    # {"name": "...", "email": "...", "age": "..."}
"""
from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from standard_resolver.core.config import get_config
from standard_resolver.core.errors import FormValidationError, SchemaContractError
from standard_resolver.core.logging import get_logger
from standard_resolver.resolver.standard import (
    ErrorPriority,
    StandardSchema,
    issue_message,
    issue_path,
    normalize_priority,
    result_issues,
)

logger = get_logger(__name__)

ErrorMap = dict[str, str]
FormValidator = Callable[[Mapping[str, Any]], ErrorMap]


class ResolverOptions(BaseModel):
    """
    Options bound when a resolver is built. Accepts ``errorPriority`` as an
    alias so option dicts written for the JS form libraries work unchanged.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # None falls back to RESOLVER_ERROR_PRIORITY.
    error_priority: ErrorPriority | None = Field(default=None, alias="errorPriority")

    @field_validator("error_priority", mode="before")
    @classmethod
    def coerce_priority(cls, v: Any) -> ErrorPriority | None:
        return None if v is None else normalize_priority(v)


def _coerce_options(options: ResolverOptions | Mapping[str, Any] | None) -> ResolverOptions:
    if options is None:
        return ResolverOptions()
    if isinstance(options, ResolverOptions):
        return options
    return ResolverOptions.model_validate(options)


def extract_path(segment: Any) -> Any:
    """Normalize one path segment to a plain key."""
    if isinstance(segment, (str, int, float)):
        return segment
    if isinstance(segment, Mapping):
        return segment.get("key", segment)
    return getattr(segment, "key", segment)


def fold_issues(issues: Iterable[Any]) -> ErrorMap:
    """
    Fold issues into an error map, later issues overwriting earlier ones on
    the same path. Issues without a path cannot be attributed to a field and
    are dropped.
    """
    results: ErrorMap = {}
    for issue in issues:
        path = issue_path(issue)
        if not path:
            logger.debug("resolver.issue_dropped", reason="no_path")
            continue
        results[".".join(str(extract_path(segment)) for segment in path)] = issue_message(issue)
    return results


def standard_resolver(
    schema: StandardSchema,
    options: ResolverOptions | Mapping[str, Any] | None = None,
) -> FormValidator:
    """
    Build a form validator around *schema*.

    With ``error_priority="first"`` the first issue raised for a field wins;
    anything else (the default) keeps the last one. The returned function
    raises SchemaContractError if the schema hands back an awaitable, and
    lets any exception raised by the schema itself propagate unchanged.
    """
    priority = _coerce_options(options).error_priority
    if priority is None:
        priority = get_config().error_priority

    def validate(values: Mapping[str, Any]) -> ErrorMap:
        parsed = schema.validate(values)

        if inspect.isawaitable(parsed):
            if inspect.iscoroutine(parsed):
                parsed.close()
            logger.error("resolver.schema_not_synchronous", schema=type(schema).__name__)
            raise SchemaContractError(schema=type(schema).__name__)

        issues = result_issues(parsed)
        if not issues:
            return {}

        ordered = list(issues)
        if priority == "first":
            ordered.reverse()

        results = fold_issues(ordered)
        logger.debug(
            "resolver.validated",
            issue_count=len(ordered),
            error_paths=sorted(results),
        )
        return results

    return validate


def validate_form(
    schema: StandardSchema,
    values: Mapping[str, Any],
    options: ResolverOptions | Mapping[str, Any] | None = None,
) -> None:
    """
    Validate *values* once and raise FormValidationError carrying the error
    map when anything fails.

    Usage:
        validate_form(SignupSchema, request.json())
    """
    errors = standard_resolver(schema, options)(values)
    if errors:
        raise FormValidationError(
            user_message="Form validation failed.",
            fields=errors,
        )


__all__ = [
    "ErrorMap",
    "FormValidator",
    "ResolverOptions",
    "extract_path",
    "fold_issues",
    "standard_resolver",
    "validate_form",
]
