"""Shared pytest configuration and fixtures."""

import pytest
import respx

from jira_markdown_mcp.guards.rate_limit import reset_limiter

JIRA_ENV = {
    "JIRA_URL": "https://test.atlassian.net",
    "JIRA_EMAIL": "test@example.com",
    "JIRA_API_TOKEN": "tok",
    "JIRA_RETRY_ATTEMPTS": "1",
    "JIRA_READ_ONLY_MODE": "false",
}


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if "integration" not in (config.getoption("-m", default="") or ""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


@pytest.fixture
def jira_env(monkeypatch):
    """Server settings in the environment and a fresh rate limiter for the lifespan."""
    for name, value in JIRA_ENV.items():
        monkeypatch.setenv(name, value)
    reset_limiter()
    yield JIRA_ENV
    reset_limiter()


@pytest.fixture(autouse=True)
def _clear_global_respx_routes():
    """Keep routes added to respx's global router from leaking into later tests."""
    respx.mock.clear()
    yield
    respx.mock.clear()
