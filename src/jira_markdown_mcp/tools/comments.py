"""Comment tools: add and retrieve comments on issues."""

from __future__ import annotations

import logging
from typing import Any

from jira_markdown_mcp.adf import adf_to_text, markdown_to_adf
from jira_markdown_mcp.guards.rate_limit import rate_limit
from jira_markdown_mcp.guards.read_only import check_read_only
from jira_markdown_mcp.jira.models import JiraComment
from jira_markdown_mcp.lifespan import get_jira_client, get_settings
from jira_markdown_mcp.server import mcp

logger = logging.getLogger("jira_markdown_mcp")


@mcp.tool()
@rate_limit
async def add_comment(issue_key: str, comment: str) -> dict[str, Any]:
    """Add a comment to a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        comment: Markdown comment body. Headings, lists, code blocks, quotes,
            links and bold/italic/strikethrough/inline code are preserved.

    Returns:
        The created comment's id, author and creation time.
    """
    check_read_only("add_comment")
    client = get_jira_client()
    created = JiraComment.model_validate(
        await client.add_comment(issue_key, markdown_to_adf(comment))
    )
    logger.info("Added comment %s to %s", created.id, issue_key)
    return {"id": created.id, "author": created.author_name, "created": created.created}


@mcp.tool()
@rate_limit
async def get_comments(issue_key: str) -> list[dict[str, Any]]:
    """Get the comments on a Jira issue (first page, JIRA_MAX_RESULTS per page).

    Args:
        issue_key: The issue key (e.g. "PROJ-123").

    Returns:
        List of comments, each with id, author, timestamps, raw ADF body and
        plain text body (_body_text).
    """
    client = get_jira_client()
    result = await client.get_comments(issue_key, max_results=get_settings().max_results)

    comments = []
    for raw in result.get("comments", []):
        comment = JiraComment.model_validate(raw)
        comments.append({
            "id": comment.id,
            "author": comment.author_name,
            "created": comment.created,
            "updated": comment.updated,
            "body": comment.body,
            "_body_text": adf_to_text(comment.body),
        })
    return comments
