"""
standard_resolver.core.logging
───────────────────────────────
Structured logging for a library. Loggers are structlog wrappers around
stdlib loggers under the ``standard_resolver`` namespace, so records obey
whatever logging setup the host application already has. Importing the
package configures nothing.

Hosts that want the package's own rendering call ``configure_logging()``,
which attaches one handler to the ``standard_resolver`` logger (never the
root logger).

Configure via: RESOLVER_LOG_LEVEL, RESOLVER_LOG_FORMAT=json|console
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from standard_resolver.core.config import get_config

ROOT_LOGGER_NAME = "standard_resolver"


# ── Redaction processor ───────────────────────────────────────────────────────

# Form values can carry credentials; events must never ship them.
_REDACT_KEYS = frozenset({
    "password", "secret", "token", "api_key", "authorization",
    "credit_card", "values",
})

_REDACTED = "[REDACTED]"


def _redact_processor(
    logger: Any, method: str, event_dict: dict
) -> dict:
    """Strip sensitive fields from log records before output."""
    for key in list(event_dict.keys()):
        if key.lower() in _REDACT_KEYS:
            event_dict[key] = _REDACTED
    return event_dict


# ── Public API ────────────────────────────────────────────────────────────────

def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structured logger that writes through stdlib logging.

    Usage:
        logger = get_logger(__name__)
        logger.debug("resolver.validated", issue_count=3)
    """
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            _redact_processor,
            structlog.stdlib.render_to_log_kwargs,
        ],
    )


_handler: logging.Handler | None = None


def configure_logging() -> logging.Handler:
    """
    Render ``standard_resolver`` records as JSON or console lines on stdout,
    at RESOLVER_LOG_LEVEL. Calling it again replaces the previous handler.
    Raises ConfigurationError if the logging settings are invalid.
    """
    global _handler
    config = get_config()

    if config.log_format == "console":
        renderer: Any = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(formatter)
    package_logger.addHandler(_handler)
    package_logger.setLevel(getattr(logging, config.log_level, logging.INFO))
    return _handler
