"""
standard_resolver test configuration.

Environment defaults are pinned before any standard_resolver module is
imported. Override by setting environment variables before running pytest.
"""
from __future__ import annotations

import os

import pytest

# ── Pin settings for all tests ─────────────────────────────────────────────
# These must be set before any standard_resolver modules are imported.

os.environ.setdefault("RESOLVER_ERROR_PRIORITY", "last")
os.environ.setdefault("RESOLVER_LOG_LEVEL", "WARNING")
os.environ.setdefault("RESOLVER_LOG_FORMAT", "console")


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_config_cache():
    """
    Clear the cached config around every test so env changes made with
    monkeypatch are picked up and never leak into the next test.
    """
    from standard_resolver.core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def default_priority(monkeypatch):
    """Force the process-wide default priority back to "last"."""
    monkeypatch.setenv("RESOLVER_ERROR_PRIORITY", "last")
