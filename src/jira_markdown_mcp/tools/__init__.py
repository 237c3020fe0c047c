"""MCP tool modules. Importing this package registers every tool with the server."""

from jira_markdown_mcp.tools import comments, issues

__all__ = ["comments", "issues"]
