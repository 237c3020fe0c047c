"""Tests for JiraClient using respx to mock httpx."""

import json

import pytest
import respx
from httpx import Response

from jira_markdown_mcp.adf import markdown_to_adf
from jira_markdown_mcp.jira.client import JiraClient
from jira_markdown_mcp.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraRateLimitError,
    JiraValidationError,
)

BASE_URL = "https://test.atlassian.net"
API_BASE = f"{BASE_URL}/rest/api/3"


@pytest.fixture
async def client():
    c = JiraClient(
        base_url=f"{BASE_URL}/",
        email="test@example.com",
        api_token="tok",
        retry_attempts=3,
        retry_base_delay=0,
    )
    yield c
    await c.close()


@respx.mock
async def test_get_issue(client):
    route = respx.get(f"{API_BASE}/issue/PROJ-1").mock(
        return_value=Response(200, json={"key": "PROJ-1", "fields": {"summary": "Test"}})
    )
    result = await client.get_issue("PROJ-1")
    assert result["key"] == "PROJ-1"
    assert route.called
    assert "expand" not in route.calls.last.request.url.params


@respx.mock
async def test_get_issue_fields_and_expand(client):
    route = respx.get(f"{API_BASE}/issue/PROJ-1").mock(
        return_value=Response(200, json={"key": "PROJ-1"})
    )
    await client.get_issue("PROJ-1", fields=["summary", "status"], expand=["changelog"])
    params = route.calls.last.request.url.params
    assert params["fields"] == "summary,status"
    assert params["expand"] == "changelog"


@respx.mock
async def test_create_issue(client):
    route = respx.post(f"{API_BASE}/issue").mock(
        return_value=Response(201, json={"id": "1", "key": "PROJ-2", "self": "..."})
    )
    description = markdown_to_adf("**Steps**")
    result = await client.create_issue(
        {"summary": "New", "project": {"key": "PROJ"}, "description": description}
    )
    assert result["key"] == "PROJ-2"
    sent = json.loads(route.calls.last.request.content)
    assert sent["fields"]["description"] == description


@respx.mock
async def test_update_issue(client):
    route = respx.put(f"{API_BASE}/issue/PROJ-1").mock(return_value=Response(204))
    assert await client.update_issue("PROJ-1", {"summary": "Updated"}) is None
    assert json.loads(route.calls.last.request.content) == {"fields": {"summary": "Updated"}}


@respx.mock
async def test_delete_issue(client):
    respx.delete(f"{API_BASE}/issue/PROJ-1").mock(return_value=Response(204))
    await client.delete_issue("PROJ-1")


@respx.mock
async def test_add_comment(client):
    route = respx.post(f"{API_BASE}/issue/PROJ-1/comment").mock(
        return_value=Response(201, json={"id": "10"})
    )
    body = markdown_to_adf("hello")
    result = await client.add_comment("PROJ-1", body)
    assert result["id"] == "10"
    assert json.loads(route.calls.last.request.content) == {"body": body}


@respx.mock
async def test_get_comments_pagination_params(client):
    route = respx.get(f"{API_BASE}/issue/PROJ-1/comment").mock(
        return_value=Response(200, json={"comments": [], "total": 0})
    )
    await client.get_comments("PROJ-1", max_results=25)
    params = route.calls.last.request.url.params
    assert params["startAt"] == "0"
    assert params["maxResults"] == "25"


@respx.mock
async def test_get_project(client):
    respx.get(f"{API_BASE}/project/PROJ").mock(
        return_value=Response(200, json={"key": "PROJ", "issueTypes": [{"id": "1", "name": "Bug"}]})
    )
    result = await client.get_project("PROJ")
    assert result["issueTypes"][0]["name"] == "Bug"


@respx.mock
async def test_list_projects(client):
    respx.get(f"{API_BASE}/project").mock(
        return_value=Response(200, json=[{"key": "PROJ", "name": "Project"}])
    )
    result = await client.list_projects()
    assert result[0]["key"] == "PROJ"


@pytest.mark.parametrize(
    ("status", "error_cls"),
    [
        (400, JiraValidationError),
        (401, JiraAuthenticationError),
        (403, JiraPermissionError),
        (404, JiraNotFoundError),
    ],
)
@respx.mock
async def test_status_maps_to_error(client, status, error_cls):
    route = respx.get(f"{API_BASE}/issue/PROJ-1").mock(return_value=Response(status, text="nope"))
    with pytest.raises(error_cls) as exc_info:
        await client.get_issue("PROJ-1")
    assert exc_info.value.status_code == status
    assert route.call_count == 1


@respx.mock
async def test_unmapped_status_keeps_code(client):
    respx.get(f"{API_BASE}/issue/PROJ-1").mock(return_value=Response(418, text="teapot"))
    with pytest.raises(JiraAPIError) as exc_info:
        await client.get_issue("PROJ-1")
    assert exc_info.value.status_code == 418


@respx.mock
async def test_transient_error_is_retried(client):
    route = respx.get(f"{API_BASE}/issue/PROJ-1").mock(
        side_effect=[Response(503, text="busy"), Response(200, json={"key": "PROJ-1"})]
    )
    result = await client.get_issue("PROJ-1")
    assert result["key"] == "PROJ-1"
    assert route.call_count == 2


@respx.mock
async def test_rate_limit_gives_up_after_max_attempts(client):
    route = respx.get(f"{API_BASE}/issue/PROJ-1").mock(return_value=Response(429, text="slow down"))
    with pytest.raises(JiraRateLimitError):
        await client.get_issue("PROJ-1")
    assert route.call_count == 3
