"""
standard_resolver.resolver.standard
────────────────────────────────────
The Standard Schema contract as seen from Python.

A schema is anything with a synchronous ``validate(values)`` method. The
result is either a SuccessResult or a FailureResult carrying an ordered list
of issues. Third-party libraries rarely return these exact classes, so the
resolver reads results, issues and path segments by duck typing: attributes
first, then mapping keys.
"""
from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, Union, runtime_checkable

ErrorPriority = Literal["first", "last"]


def normalize_priority(value: Any) -> ErrorPriority:
    """Only "first" (any case) selects first-wins; every other value means "last"."""
    if isinstance(value, str) and value.strip().lower() == "first":
        return "first"
    return "last"


@dataclass(frozen=True)
class PathSegment:
    """Structured path step. Libraries use these to attach a key to extra metadata."""
    key: Hashable


PathItem = Union[PathSegment, Hashable]


@dataclass(frozen=True)
class Issue:
    message: str
    path: Sequence[PathItem] | None = None


@dataclass(frozen=True)
class SuccessResult:
    value: Any = None
    issues: None = None


@dataclass(frozen=True)
class FailureResult:
    issues: Sequence[Issue] = field(default_factory=tuple)


ValidationResult = Union[SuccessResult, FailureResult]


@runtime_checkable
class StandardSchema(Protocol):
    """
    Capability contract for a schema. ``validate`` must return its result
    immediately; returning an awaitable is a contract violation.
    """

    def validate(self, values: Any) -> ValidationResult: ...


def _read(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def result_issues(result: Any) -> Sequence[Any] | None:
    """Issues carried by a validation result, or None for a success."""
    return _read(result, "issues")


def issue_path(issue: Any) -> Sequence[Any] | None:
    return _read(issue, "path")


def issue_message(issue: Any) -> str:
    return _read(issue, "message")


__all__ = [
    "ErrorPriority",
    "normalize_priority",
    "PathSegment",
    "PathItem",
    "Issue",
    "SuccessResult",
    "FailureResult",
    "ValidationResult",
    "StandardSchema",
    "result_issues",
    "issue_path",
    "issue_message",
]
