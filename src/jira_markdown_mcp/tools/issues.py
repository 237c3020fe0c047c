"""Issue management tools: get, create, create child, update, delete, list issue types."""

from __future__ import annotations

from typing import Any

from jira_markdown_mcp.adf import adf_to_text, markdown_to_adf
from jira_markdown_mcp.guards.rate_limit import rate_limit
from jira_markdown_mcp.guards.read_only import check_read_only
from jira_markdown_mcp.jira.models import JiraIssue, JiraProject
from jira_markdown_mcp.lifespan import get_jira_client
from jira_markdown_mcp.server import mcp

DEFAULT_EXPAND = ["transitions", "changelog", "subtasks", "description"]
DEFAULT_CHILD_ISSUE_TYPE = "Subtask"


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@mcp.tool()
@rate_limit
async def get_issue(issue_key: str, fields: str = "", expand: str = "") -> dict[str, Any]:
    """Get a Jira issue by its key, including status, assignee, description and subtasks.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        fields: Comma-separated fields to return (e.g. "summary,status,assignee").
            All fields are returned when empty.
        expand: Comma-separated fields to expand. Defaults to
            "transitions,changelog,subtasks,description".

    Returns:
        Full issue data. The description is returned as both raw ADF and
        extracted plain text (_description_text).
    """
    client = get_jira_client()
    issue = await client.get_issue(
        issue_key,
        fields=_split_csv(fields) or None,
        expand=_split_csv(expand) or DEFAULT_EXPAND,
    )

    fields_data = issue.get("fields", {})
    if fields_data.get("description"):
        issue["_description_text"] = adf_to_text(fields_data["description"])

    return issue


@mcp.tool()
@rate_limit
async def create_issue(
    project_key: str,
    summary: str,
    description: str,
    issue_type: str = "Task",
    priority: str | None = None,
    labels: list[str] | None = None,
    extra_fields: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a new Jira issue.

    Args:
        project_key: The project key (e.g. "PROJ").
        summary: Issue title/summary.
        description: Markdown description. Converted to ADF internally.
        issue_type: Issue type name (e.g. "Task", "Bug", "Story", "Epic"). Defaults to "Task".
        priority: Priority name (e.g. "High", "Medium", "Low"). Optional.
        labels: List of labels to attach. Optional.
        extra_fields: Additional fields dict merged into the payload. Optional.

    Returns:
        Created issue data with id, key, and self URL.
    """
    check_read_only("create_issue")
    client = get_jira_client()

    fields: dict[str, Any] = {
        "project": {"key": project_key},
        "summary": summary,
        "issuetype": {"name": issue_type},
        "description": markdown_to_adf(description),
    }
    if priority:
        fields["priority"] = {"name": priority}
    if labels:
        fields["labels"] = labels
    if extra_fields:
        fields.update(extra_fields)

    return await client.create_issue(fields)


@mcp.tool()
@rate_limit
async def create_child_issue(
    parent_issue_key: str,
    summary: str,
    description: str,
    issue_type: str = DEFAULT_CHILD_ISSUE_TYPE,
) -> dict[str, Any]:
    """Create a child issue (sub-task) under a parent issue, in the parent's project.

    Args:
        parent_issue_key: Key of the parent issue (e.g. "PROJ-2").
        summary: Child issue title/summary.
        description: Markdown description. Converted to ADF internally.
        issue_type: Child issue type. Defaults to "Subtask".

    Returns:
        Created issue data with id, key, self URL and the parent key.
    """
    check_read_only("create_child_issue")
    client = get_jira_client()

    parent = JiraIssue.model_validate(await client.get_issue(parent_issue_key, fields=["project"]))
    fields: dict[str, Any] = {
        "project": {"key": parent.project_key},
        "parent": {"key": parent_issue_key},
        "summary": summary,
        "issuetype": {"name": issue_type or DEFAULT_CHILD_ISSUE_TYPE},
        "description": markdown_to_adf(description),
    }

    result = await client.create_issue(fields)
    result["parent"] = parent_issue_key
    if issue_type == "Bug":
        result["_hint"] = (
            "A bug should be linked to a Story or Task. Next step should be to "
            "create a relationship between the bug and the story or task."
        )
    return result


@mcp.tool()
@rate_limit
async def update_issue(
    issue_key: str,
    summary: str | None = None,
    description: str | None = None,
    priority: str | None = None,
    labels: list[str] | None = None,
    extra_fields: dict[str, Any] | None = None,
) -> str:
    """Update fields on an existing Jira issue. Only the given fields change.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        summary: New summary. Optional.
        description: New markdown description. Optional.
        priority: New priority name. Optional.
        labels: New labels list (replaces existing). Optional.
        extra_fields: Additional fields to set. Optional.

    Returns:
        Confirmation message.
    """
    check_read_only("update_issue")
    client = get_jira_client()

    fields: dict[str, Any] = {}
    if summary:
        fields["summary"] = summary
    if description:
        fields["description"] = markdown_to_adf(description)
    if priority is not None:
        fields["priority"] = {"name": priority}
    if labels is not None:
        fields["labels"] = labels
    if extra_fields:
        fields.update(extra_fields)

    if not fields:
        return "No fields to update."

    await client.update_issue(issue_key, fields)
    return f"Issue {issue_key} updated successfully."


@mcp.tool()
@rate_limit
async def delete_issue(issue_key: str) -> str:
    """Delete a Jira issue. This action is irreversible.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").

    Returns:
        Confirmation message.
    """
    check_read_only("delete_issue")
    client = get_jira_client()
    await client.delete_issue(issue_key)
    return f"Issue {issue_key} deleted."


@mcp.tool()
@rate_limit
async def list_issue_types(project_key: str) -> list[dict[str, Any]]:
    """List the issue types available in a Jira project.

    Args:
        project_key: The project key (e.g. "PROJ").

    Returns:
        Issue types, each with id, name, description and subtask flag.
    """
    client = get_jira_client()
    project = JiraProject.model_validate(await client.get_project(project_key))
    return [
        issue_type.model_dump(include={"id", "name", "description", "subtask"})
        for issue_type in project.issue_types
    ]
