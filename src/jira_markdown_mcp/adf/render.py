"""Best-effort ADF to plain text rendering for tool output.

Bodies come back from Jira in whatever shape the editor produced, so nothing
here may raise: unknown nodes contribute the text nested inside them and
anything that is not a node contributes nothing.
"""

from __future__ import annotations

from typing import Any, Mapping

from jira_markdown_mcp.adf.nodes import Document


def adf_to_text(adf: Mapping[str, Any] | Document | None) -> str:
    """Extract readable plain text from an ADF document."""
    if not adf:
        return ""
    if isinstance(adf, Document):
        adf = adf.to_dict()
    if isinstance(adf, str):
        return adf.strip()
    return _extract_text(adf).strip()


def _children(node: Mapping[str, Any]) -> list[Any]:
    content = node.get("content")
    return list(content) if isinstance(content, (list, tuple)) else []


def _prefix_lines(text: str, first: str, rest: str) -> str:
    lines = text.split("\n")
    return "\n".join([first + lines[0]] + [rest + line for line in lines[1:]])


def _extract_text(node: Any) -> str:
    if not isinstance(node, Mapping):
        return ""
    node_type = node.get("type")

    if node_type == "text":
        return str(node.get("text") or "")
    if node_type == "hardBreak":
        return "\n"
    if node_type == "rule":
        return "---\n"

    children = _children(node)

    if node_type in ("bulletList", "orderedList"):
        items = []
        for index, item in enumerate(children, start=1):
            marker = f"{index}. " if node_type == "orderedList" else "- "
            body = _extract_text(item).rstrip("\n")
            items.append(_prefix_lines(body, marker, " " * len(marker)))
        return "\n".join(items) + "\n"

    parts = [_extract_text(child) for child in children]

    if node_type == "doc":
        return "\n".join(parts)
    if node_type == "codeBlock":
        attrs = node.get("attrs")
        language = attrs.get("language", "") if isinstance(attrs, Mapping) else ""
        code = "".join(parts)
        if code and not code.endswith("\n"):
            code += "\n"
        return f"```{language}\n{code}```\n"
    if node_type == "blockquote":
        quoted = "".join(parts).rstrip("\n")
        return _prefix_lines(quoted, "> ", "> ") + "\n"
    if node_type in ("paragraph", "heading"):
        return "".join(parts) + "\n"
    return "".join(parts)
