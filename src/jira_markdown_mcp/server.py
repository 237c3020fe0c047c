"""FastMCP server instance."""

from fastmcp import FastMCP

from jira_markdown_mcp.lifespan import lifespan

mcp = FastMCP("jira-markdown-mcp", lifespan=lifespan)
