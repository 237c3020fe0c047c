"""Retry helper with exponential backoff for transient Jira errors."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable

from jira_markdown_mcp.jira.errors import JiraAPIError

logger = logging.getLogger("jira_markdown_mcp")

# Throttling and gateway/server failures
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def retry(max_attempts: int = 3, base_delay: float = 1.0) -> Callable:
    """Decorator that retries an async call on retryable ``JiraAPIError`` statuses.

    Args:
        max_attempts: Total number of attempts, including the first one.
        base_delay: Delay in seconds before the first retry, doubled on each retry.
    """
    attempts = max(1, max_attempts)

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, attempts + 1):
                try:
                    return await fn(*args, **kwargs)
                except JiraAPIError as e:
                    if e.status_code not in RETRYABLE_STATUS_CODES or attempt == attempts:
                        raise
                    delay = base_delay * (2 ** (attempt - 1))
                    logger.warning(
                        "Retrying %s (attempt %d/%d) after %ss: %s",
                        fn.__name__,
                        attempt,
                        attempts,
                        delay,
                        e,
                    )
                    await asyncio.sleep(delay)

        return wrapper

    return decorator
