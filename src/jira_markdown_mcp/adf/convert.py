"""Markdown to ADF document conversion.

Jira REST API v3 only accepts rich text as ADF. ``convert`` never fails for a
string input: anything that produces no blocks (empty or whitespace-only
markdown, lone HTML) still yields a valid document with one empty paragraph.
"""

from __future__ import annotations

import logging
from typing import Any

from jira_markdown_mcp.adf.blocks import convert_blocks
from jira_markdown_mcp.adf.nodes import Document, Paragraph
from jira_markdown_mcp.adf.parser import parse

logger = logging.getLogger("jira_markdown_mcp")


def convert(markdown: str) -> Document:
    """Convert markdown to an ADF ``Document`` model."""
    tree = parse(markdown)
    content = convert_blocks(tree.children)
    if not content:
        content = [Paragraph()]
    logger.debug("Converted %d chars of markdown into %d ADF blocks", len(markdown), len(content))
    return Document(content=tuple(content))


def markdown_to_adf(markdown: str) -> dict[str, Any]:
    """Convert markdown to the ADF JSON payload used in Jira request bodies."""
    return convert(markdown).to_dict()
