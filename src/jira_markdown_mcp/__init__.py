"""Jira MCP server that accepts markdown and speaks Atlassian Document Format."""

from jira_markdown_mcp.adf import adf_to_text, convert, markdown_to_adf
from jira_markdown_mcp.jira.client import JiraClient
from jira_markdown_mcp.server import mcp
from jira_markdown_mcp.settings import JiraSettings

__all__ = ["mcp", "JiraSettings", "JiraClient", "adf_to_text", "convert", "markdown_to_adf"]
