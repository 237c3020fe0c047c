from jira_markdown_mcp.jira.client import JiraClient
from jira_markdown_mcp.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraRateLimitError,
    JiraValidationError,
)

__all__ = [
    "JiraClient",
    "JiraAPIError",
    "JiraAuthenticationError",
    "JiraNotFoundError",
    "JiraPermissionError",
    "JiraRateLimitError",
    "JiraValidationError",
]
