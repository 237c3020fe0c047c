"""Entry point for running the Jira MCP server: python -m jira_markdown_mcp"""

import jira_markdown_mcp.tools  # noqa: F401 (registers all tools with the server)
from jira_markdown_mcp.server import mcp


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
