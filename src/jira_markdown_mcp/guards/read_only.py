"""Guard that blocks write operations when read-only mode is enabled."""

from jira_markdown_mcp.jira.errors import JiraPermissionError
from jira_markdown_mcp.lifespan import get_settings


def check_read_only(tool_name: str = "") -> None:
    """Raise JiraPermissionError if JIRA_READ_ONLY_MODE is true."""
    settings = get_settings()
    if settings.read_only_mode:
        target = f" {tool_name}" if tool_name else ""
        raise JiraPermissionError(
            f"Write operation{target} blocked: JIRA_READ_ONLY_MODE is enabled."
        )
