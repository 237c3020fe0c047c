#!/usr/bin/env python3
"""Validate jira-markdown-mcp configuration, markdown conversion and Jira connectivity."""

import asyncio
import sys

import httpx
from pydantic import ValidationError

from jira_markdown_mcp.adf import convert
from jira_markdown_mcp.jira.client import JiraClient
from jira_markdown_mcp.jira.errors import JiraAPIError
from jira_markdown_mcp.settings import JiraSettings

SAMPLE_MARKDOWN = "# Health check\n\nSome **bold** text.\n\n- item\n\n```sh\necho ok\n```\n"


async def main() -> int:
    print("Loading settings...")
    try:
        settings = JiraSettings()
    except ValidationError as e:
        print(f"FAIL: Could not load settings: {e}")
        print("Ensure JIRA_URL, JIRA_EMAIL, and JIRA_API_TOKEN are set.")
        return 1

    print(f"  JIRA_URL: {settings.url}")
    print(f"  JIRA_EMAIL: {settings.email}")
    print(f"  JIRA_API_TOKEN: {'*' * 8}...{settings.api_token[-4:]}")
    print(f"  JIRA_READ_ONLY_MODE: {settings.read_only_mode}")

    print("\nConverting sample markdown...")
    doc = convert(SAMPLE_MARKDOWN)
    print(f"  OK: {' / '.join(block.type for block in doc.content)}")

    print("\nTesting connectivity...")
    client = JiraClient(
        base_url=settings.url,
        email=settings.email,
        api_token=settings.api_token,
        timeout=settings.timeout,
        ssl_verify=settings.ssl_verify,
        retry_attempts=1,
    )

    try:
        projects = await client.list_projects()
        print(f"  OK: Found {len(projects)} accessible projects")
        for p in projects[:5]:
            print(f"    - {p.get('key')}: {p.get('name')}")
        if len(projects) > 5:
            print(f"    ... and {len(projects) - 5} more")
        return 0
    except (JiraAPIError, httpx.HTTPError) as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
