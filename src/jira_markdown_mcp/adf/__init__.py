"""Atlassian Document Format (ADF) conversion.

Jira REST API v3 requires rich text in ADF. Markdown is converted to ADF for
request bodies, and ADF is rendered back to plain text for tool output.
"""

from jira_markdown_mcp.adf.convert import convert, markdown_to_adf
from jira_markdown_mcp.adf.nodes import Document
from jira_markdown_mcp.adf.render import adf_to_text

__all__ = ["Document", "adf_to_text", "convert", "markdown_to_adf"]
