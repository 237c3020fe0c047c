"""Server lifespan: loads settings and creates the JiraClient on startup, closes it on shutdown."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from jira_markdown_mcp.jira.client import JiraClient
from jira_markdown_mcp.logging.logger import setup_logger
from jira_markdown_mcp.settings import JiraSettings

_client: JiraClient | None = None
_settings: JiraSettings | None = None


def get_jira_client() -> JiraClient:
    """Return the active JiraClient. Only valid during server lifespan."""
    if _client is None:
        raise RuntimeError("JiraClient not initialized. Is the server running?")
    return _client


def get_settings() -> JiraSettings:
    """Return the loaded settings. Only valid during server lifespan."""
    if _settings is None:
        raise RuntimeError("Settings not loaded. Is the server running?")
    return _settings


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Async context manager that manages the settings and JiraClient lifecycle."""
    global _client, _settings

    _settings = JiraSettings()
    logger = setup_logger(level=_settings.log_level)
    logger.info(
        "Starting jira-markdown-mcp server (url=%s, read_only=%s)",
        _settings.url,
        _settings.read_only_mode,
    )

    _client = JiraClient(
        base_url=_settings.url,
        email=_settings.email,
        api_token=_settings.api_token,
        timeout=_settings.timeout,
        ssl_verify=_settings.ssl_verify,
        retry_attempts=_settings.retry_attempts,
    )

    try:
        yield
    finally:
        logger.info("Shutting down jira-markdown-mcp server")
        await _client.close()
        _client = None
        _settings = None
