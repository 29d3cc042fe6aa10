"""
standard_resolver
─────────────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from standard_resolver.core.config import get_config, ResolverConfig
from standard_resolver.core.errors import (
    ResolverError,
    SchemaContractError,
    FormValidationError,
    ConfigurationError,
)
from standard_resolver.core.logging import get_logger, configure_logging

from standard_resolver.resolver.standard import (
    ErrorPriority,
    normalize_priority,
    PathSegment,
    Issue,
    SuccessResult,
    FailureResult,
    StandardSchema,
)
from standard_resolver.resolver.resolve import (
    ErrorMap,
    ResolverOptions,
    extract_path,
    standard_resolver,
    validate_form,
)

from standard_resolver.adapters.pydantic_schema import PydanticSchema
from standard_resolver.adapters.json_schema import JsonSchema

__version__ = "0.1.0"
__all__ = [
    # config
    "get_config", "ResolverConfig",
    # errors
    "ResolverError", "SchemaContractError", "FormValidationError",
    "ConfigurationError",
    # logging
    "get_logger", "configure_logging",
    # standard schema model
    "ErrorPriority", "normalize_priority", "PathSegment", "Issue", "SuccessResult",
    "FailureResult", "StandardSchema",
    # resolver
    "ErrorMap", "ResolverOptions", "extract_path", "standard_resolver",
    "validate_form",
    # adapters
    "PydanticSchema", "JsonSchema",
]
