"""Pydantic models for Jira API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class JiraUser(BaseModel):
    account_id: str = Field(alias="accountId", default="")
    display_name: str = Field(alias="displayName", default="")
    email_address: str | None = Field(alias="emailAddress", default=None)

    model_config = {"populate_by_name": True}


class JiraIssueFields(BaseModel):
    summary: str = ""
    description: Any | None = None
    status: dict[str, Any] | None = None
    issue_type: dict[str, Any] | None = Field(alias="issuetype", default=None)
    project: dict[str, Any] | None = None
    parent: dict[str, Any] | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    created: str | None = None
    updated: str | None = None

    model_config = {"populate_by_name": True}


class JiraIssue(BaseModel):
    id: str = ""
    key: str = ""
    self_url: str = Field(alias="self", default="")
    fields: JiraIssueFields = Field(default_factory=JiraIssueFields)

    model_config = {"populate_by_name": True}

    @property
    def project_key(self) -> str:
        return (self.fields.project or {}).get("key", "")


class JiraIssueType(BaseModel):
    id: str = ""
    name: str = ""
    description: str = ""
    subtask: bool = False
    icon_url: str | None = Field(alias="iconUrl", default=None)

    model_config = {"populate_by_name": True}


class JiraProject(BaseModel):
    id: str = ""
    key: str = ""
    name: str = ""
    issue_types: list[JiraIssueType] = Field(alias="issueTypes", default_factory=list)

    model_config = {"populate_by_name": True}


class JiraComment(BaseModel):
    id: str = ""
    author: JiraUser | None = None
    body: Any | None = None
    created: str | None = None
    updated: str | None = None

    model_config = {"populate_by_name": True}

    @property
    def author_name(self) -> str:
        return self.author.display_name if self.author and self.author.display_name else "Unknown"
