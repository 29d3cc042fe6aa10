"""Tests for core modules: errors, config, logging."""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from standard_resolver.core.config import ResolverConfig, get_config
from standard_resolver.core.errors import (
    ConfigurationError,
    FormValidationError,
    ResolverError,
    SchemaContractError,
)
from standard_resolver.core.logging import (
    ROOT_LOGGER_NAME,
    _REDACTED,
    _redact_processor,
    configure_logging,
    get_logger,
)


# ── errors ─────────────────────────────────────────────────────────────────

class TestErrors:
    def test_resolver_error_has_code(self):
        e = ResolverError("custom_code", user_message="Something broke")
        assert e.code == "custom_code"
        assert "Something broke" in str(e)

    def test_contract_error_is_type_error(self):
        e = SchemaContractError()
        assert isinstance(e, TypeError)
        assert isinstance(e, ResolverError)
        assert e.code == "schema_not_synchronous"
        assert str(e) == "Schema validation must be synchronous"

    def test_contract_error_keeps_metadata(self):
        e = SchemaContractError(schema="AsyncSchema")
        assert e.metadata == {"schema": "AsyncSchema"}

    def test_form_validation_error_with_fields(self):
        e = FormValidationError(fields={"email": "Invalid email"})
        assert e.status_code == 422
        assert e.fields == {"email": "Invalid email"}
        assert e.to_dict()["error"]["fields"] == {"email": "Invalid email"}

    def test_form_validation_error_without_fields_omits_key(self):
        d = FormValidationError().to_dict()
        assert d == {"error": {"code": "validation_error", "message": "Validation failed."}}

    def test_configuration_error(self):
        e = ConfigurationError(user_message="Bad RESOLVER_LOG_FORMAT")
        assert isinstance(e, ResolverError)
        assert e.code == "configuration_error"


# ── config ─────────────────────────────────────────────────────────────────

class TestConfig:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RESOLVER_ERROR_PRIORITY", raising=False)
        monkeypatch.delenv("RESOLVER_LOG_FORMAT", raising=False)
        config = ResolverConfig(_env_file=None)
        assert config.error_priority == "last"
        assert config.log_format == "json"

    def test_error_priority_from_env_is_lowercased(self, monkeypatch):
        monkeypatch.setenv("RESOLVER_ERROR_PRIORITY", "FIRST")
        assert get_config().error_priority == "first"

    def test_unknown_error_priority_reads_as_last(self, monkeypatch):
        monkeypatch.setenv("RESOLVER_ERROR_PRIORITY", "newest")
        assert get_config().error_priority == "last"

    def test_invalid_log_format_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("RESOLVER_LOG_FORMAT", "xml")
        with pytest.raises(ConfigurationError):
            get_config()

    def test_config_is_cached(self):
        assert get_config() is get_config()


# ── logging ────────────────────────────────────────────────────────────────

_IMPORT_SCRIPT = """
import logging
root = logging.getLogger()
root.setLevel(logging.DEBUG)
before = (len(root.handlers), root.level)
import standard_resolver
print(before == (len(root.handlers), root.level))
"""


@pytest.fixture
def package_logger():
    """The package logger, with handlers and level restored after the test."""
    target = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(target.handlers), target.level
    yield target
    target.handlers[:] = handlers
    target.setLevel(level)


class TestLogging:
    def test_redacts_sensitive_keys(self):
        event = {"event": "resolver.validated", "password": "hunter2", "values": {"a": 1}}
        result = _redact_processor(None, "info", event)
        assert result["password"] == _REDACTED
        assert result["values"] == _REDACTED
        assert result["event"] == "resolver.validated"

    def test_non_sensitive_keys_unchanged(self):
        event = {"event": "resolver.validated", "issue_count": 2}
        assert _redact_processor(None, "info", dict(event)) == event

    @pytest.mark.parametrize("log_format", ["json", "xml"])
    def test_import_leaves_root_logger_alone(self, log_format):
        source_root = str(Path(__file__).resolve().parents[2])
        env = dict(
            os.environ,
            RESOLVER_LOG_FORMAT=log_format,
            PYTHONPATH=os.pathsep.join(filter(None, [source_root, os.environ.get("PYTHONPATH")])),
        )
        proc = subprocess.run(
            [sys.executable, "-c", _IMPORT_SCRIPT],
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout.strip() == "True"

    def test_records_reach_stdlib_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
        get_logger(f"{ROOT_LOGGER_NAME}.tests").debug(
            "tests.event", issue_count=2, password="hunter2"
        )
        record = next(r for r in caplog.records if r.getMessage() == "tests.event")
        assert record.issue_count == 2
        assert record.password == _REDACTED

    def test_records_below_level_are_skipped(self, caplog):
        caplog.set_level(logging.WARNING, logger=ROOT_LOGGER_NAME)
        get_logger(f"{ROOT_LOGGER_NAME}.tests").debug("tests.quiet")
        assert not [r for r in caplog.records if r.getMessage() == "tests.quiet"]

    def test_configure_logging_targets_package_logger(self, monkeypatch, package_logger):
        monkeypatch.setenv("RESOLVER_LOG_LEVEL", "debug")
        root_handlers = list(logging.getLogger().handlers)

        handler = configure_logging()

        assert handler in package_logger.handlers
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger().handlers == root_handlers

    def test_configure_logging_replaces_previous_handler(self, package_logger):
        first = configure_logging()
        second = configure_logging()
        assert first not in package_logger.handlers
        assert package_logger.handlers.count(second) == 1

    def test_configure_logging_rejects_bad_format(self, monkeypatch):
        monkeypatch.setenv("RESOLVER_LOG_FORMAT", "xml")
        with pytest.raises(ConfigurationError):
            configure_logging()
