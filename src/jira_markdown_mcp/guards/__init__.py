from jira_markdown_mcp.guards.permissions import ALL_TOOLS, READ_TOOLS, WRITE_TOOLS
from jira_markdown_mcp.guards.rate_limit import RateLimiter, rate_limit, reset_limiter
from jira_markdown_mcp.guards.read_only import check_read_only

__all__ = [
    "ALL_TOOLS",
    "READ_TOOLS",
    "WRITE_TOOLS",
    "RateLimiter",
    "check_read_only",
    "rate_limit",
    "reset_limiter",
]
