"""
standard_resolver.adapters.pydantic_schema
───────────────────────────────────────────
Exposes a Pydantic v2 model (or any type TypeAdapter accepts) through the
Standard Schema ``validate`` contract. Each entry of
``ValidationError.errors()`` becomes one issue: ``loc`` is the path, ``msg``
the message.

Pydantic stops at the first failing validator of a field, so a field never
yields more than one issue from this adapter.
"""
from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from standard_resolver.resolver.standard import FailureResult, Issue, SuccessResult


class PydanticSchema:
    """
    Usage:
        class Signup(BaseModel):
            name: str
            age: int

        validate = standard_resolver(PydanticSchema(Signup))
    """

    version = 1
    vendor = "pydantic"

    def __init__(self, target: Any) -> None:
        self.target = target
        self._adapter = TypeAdapter(target)

    def validate(self, values: Any) -> SuccessResult | FailureResult:
        try:
            return SuccessResult(value=self._adapter.validate_python(values))
        except PydanticValidationError as exc:
            return FailureResult(issues=tuple(
                Issue(message=err["msg"], path=tuple(err["loc"]))
                for err in exc.errors()
            ))

    def __repr__(self) -> str:
        return f"PydanticSchema({self.target!r})"


__all__ = ["PydanticSchema"]
