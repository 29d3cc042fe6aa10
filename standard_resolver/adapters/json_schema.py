"""
standard_resolver.adapters.json_schema
───────────────────────────────────────
Exposes a JSON Schema document through the Standard Schema ``validate``
contract, backed by the ``jsonschema`` library.

Every error from ``iter_errors`` becomes one issue, in the order jsonschema
produces them, so several keywords failing on one field yield several
issues. Custom messages follow the ajv-errors ``errorMessage`` convention:

    {"type": "string", "minLength": 1, "pattern": "#",
     "errorMessage": {"minLength": "Required", "pattern": "Needs a #"}}

A string ``errorMessage`` applies to every keyword of its subschema.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from jsonschema.validators import validator_for

from standard_resolver.resolver.standard import FailureResult, Issue, SuccessResult

ERROR_MESSAGE_KEYWORD = "errorMessage"


def _message_for(error: JsonSchemaValidationError) -> str:
    custom = error.schema.get(ERROR_MESSAGE_KEYWORD) if isinstance(error.schema, Mapping) else None
    if isinstance(custom, str):
        return custom
    if isinstance(custom, Mapping) and error.validator in custom:
        return custom[error.validator]
    return error.message


class JsonSchema:
    """
    Usage:
        schema = JsonSchema({
            "type": "object",
            "properties": {"age": {"type": "number", "minimum": 18}},
        })
        validate = standard_resolver(schema)

    Raises jsonschema.exceptions.SchemaError if *document* is not a valid
    JSON Schema.
    """

    version = 1
    vendor = "jsonschema"

    def __init__(self, document: Mapping[str, Any], *, format_checker: bool = True) -> None:
        validator_cls = validator_for(document)
        validator_cls.check_schema(document)
        self.document = document
        self._validator = validator_cls(
            document,
            format_checker=validator_cls.FORMAT_CHECKER if format_checker else None,
        )

    def validate(self, values: Any) -> SuccessResult | FailureResult:
        issues = tuple(
            Issue(message=_message_for(error), path=tuple(error.absolute_path))
            for error in self._validator.iter_errors(values)
        )
        if not issues:
            return SuccessResult(value=values)
        return FailureResult(issues=issues)


__all__ = ["JsonSchema", "ERROR_MESSAGE_KEYWORD"]
