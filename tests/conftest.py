"""Shared test fixtures and configuration."""

import logging
import os

import pytest

from resource_search.config import reset_settings
from resource_search.observability.context import reset_trace_context, trace_context


# Keep ambient settings deterministic regardless of the developer's shell
TEST_ENV = {
    "RESOURCE_SEARCH_LOG_LEVEL": "info",
    "RESOURCE_SEARCH_LOG_JSON": "false",
    "RESOURCE_SEARCH_TRACING_ENABLED": "false",
    "RESOURCE_SEARCH_SERVICE_NAME": "resource-search-tests",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset test environment variables, cached settings and log trace context for every test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("RESOURCE_SEARCH_LOGGER_LEVELS", raising=False)
    reset_settings()
    token = trace_context.set(None)
    yield
    reset_trace_context(token)
    reset_settings()


@pytest.fixture
def preserve_root_logger():
    """Drop handlers added by the test and restore the root level."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def name_records():
    """Flattened records with a single ``name`` field."""
    return [
        {"name": "prod-web-01"},
        {"name": "prod-web-02"},
        {"name": "staging-db-01"},
    ]
