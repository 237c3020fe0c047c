"""Inline renderer: markdown inline nodes to ADF ``text``/``hardBreak`` nodes.

ADF keeps styling as flat marks on text nodes while markdown nests it, so the
walk carries the marks accumulated from enclosing nodes and stamps them onto
each text leaf. Marks are tuples; a nested span gets ``marks + (mark,)`` and
siblings never see each other's additions.
"""

from __future__ import annotations

from jira_markdown_mcp.adf import parser
from jira_markdown_mcp.adf.nodes import (
    CODE,
    EM,
    STRIKE,
    STRONG,
    HardBreak,
    InlineNode,
    Mark,
    Marks,
    Text,
    link_mark,
)
from jira_markdown_mcp.adf.parser import MarkdownNode

_WRAPPER_MARKS: dict[str, Mark] = {
    parser.EMPHASIS: EM,
    parser.STRONG: STRONG,
    parser.STRIKETHROUGH: STRIKE,
}


def render_inline(node: MarkdownNode, marks: Marks = ()) -> list[InlineNode]:
    """Render the inline children of ``node`` with ``marks`` applied."""
    result: list[InlineNode] = []
    for child in node.children:
        result.extend(_render_child(child, marks))
    return result


def _render_child(node: MarkdownNode, marks: Marks) -> list[InlineNode]:
    kind = node.type

    if kind in (parser.TEXT, parser.TEXT_SPECIAL):
        return _text(node.content, marks)

    # Soft breaks are emitted as hard breaks as well.
    if kind in (parser.SOFTBREAK, parser.HARDBREAK):
        return [HardBreak()]

    if kind in _WRAPPER_MARKS:
        return render_inline(node, marks + (_WRAPPER_MARKS[kind],))

    if kind == parser.CODE_INLINE:
        return _text(node.content, marks + (CODE,))

    if kind == parser.LINK:
        href = parser.link_destination(node)
        if parser.is_autolink(node):
            return _text(href, marks + (link_mark(href),))
        return render_inline(node, marks + (link_mark(href),))

    if kind == parser.IMAGE:
        href = parser.image_destination(node)
        alt = parser.plain_text(node).strip()
        return _text(alt or href, marks + (link_mark(href),))

    return render_inline(node, marks)


def _text(text: str, marks: Marks) -> list[InlineNode]:
    if not text:
        return []
    return [Text(text=text, marks=marks or None)]
