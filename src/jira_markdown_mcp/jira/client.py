"""Async Jira REST API v3 client using httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jira_markdown_mcp.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraRateLimitError,
    JiraValidationError,
)
from jira_markdown_mcp.utils.retry import retry

logger = logging.getLogger("jira_markdown_mcp")

_ERROR_MAP: dict[int, type[JiraAPIError]] = {
    400: JiraValidationError,
    401: JiraAuthenticationError,
    403: JiraPermissionError,
    404: JiraNotFoundError,
    429: JiraRateLimitError,
}


class JiraClient:
    """Async wrapper around the Jira REST API v3 issue and comment endpoints."""

    def __init__(
        self,
        base_url: str,
        email: str,
        api_token: str,
        timeout: int = 30,
        ssl_verify: bool | str = True,
        retry_attempts: int = 3,
        retry_base_delay: float = 1.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/rest/api/3",
            auth=(email, api_token),
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            timeout=timeout,
            verify=ssl_verify,
        )
        self._request = retry(retry_attempts, retry_base_delay)(self._request)

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if response.status_code >= 400:
            error_cls = _ERROR_MAP.get(response.status_code)
            message = f"Jira API {method} {path} failed ({response.status_code}): {response.text}"
            if error_cls is None:
                raise JiraAPIError(message, status_code=response.status_code)
            raise error_cls(message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def _get(self, path: str, **params: Any) -> Any:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, json: Any) -> Any:
        return await self._request("POST", path, json=json)

    async def _put(self, path: str, json: Any) -> Any:
        return await self._request("PUT", path, json=json)

    async def _delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def get_issue(
        self,
        issue_key: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
    ) -> dict[str, Any]:
        params: dict[str, str] = {}
        if fields:
            params["fields"] = ",".join(fields)
        if expand:
            params["expand"] = ",".join(expand)
        return await self._get(f"/issue/{issue_key}", **params)

    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self._post("/issue", json={"fields": fields})

    async def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        await self._put(f"/issue/{issue_key}", json={"fields": fields})

    async def delete_issue(self, issue_key: str) -> None:
        await self._delete(f"/issue/{issue_key}")

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def get_comments(
        self, issue_key: str, start_at: int = 0, max_results: int = 50
    ) -> dict[str, Any]:
        return await self._get(
            f"/issue/{issue_key}/comment", startAt=start_at, maxResults=max_results
        )

    async def add_comment(self, issue_key: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"/issue/{issue_key}/comment", json={"body": body})

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def list_projects(self) -> list[dict[str, Any]]:
        return await self._get("/project")

    async def get_project(self, project_key: str) -> dict[str, Any]:
        return await self._get(f"/project/{project_key}")
