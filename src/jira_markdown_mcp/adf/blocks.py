"""Block dispatcher: markdown block nodes to ADF block nodes."""

from __future__ import annotations

from typing import Callable, Iterable

from jira_markdown_mcp.adf import parser
from jira_markdown_mcp.adf.inline import render_inline
from jira_markdown_mcp.adf.nodes import (
    Blockquote,
    BlockNode,
    BulletList,
    CodeBlock,
    CodeBlockAttrs,
    Heading,
    HeadingAttrs,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
    Text,
)
from jira_markdown_mcp.adf.parser import MarkdownNode


def convert_blocks(nodes: Iterable[MarkdownNode]) -> list[BlockNode]:
    """Convert sibling block nodes, skipping the ones that produce nothing."""
    result: list[BlockNode] = []
    for node in nodes:
        block = convert_block(node)
        if block is not None:
            result.append(block)
    return result


def convert_block(node: MarkdownNode) -> BlockNode | None:
    """Convert one block node. Unknown kinds are tried as a paragraph."""
    handler = _BLOCK_HANDLERS.get(node.type, _convert_paragraph)
    return handler(node)


def _convert_paragraph(node: MarkdownNode) -> Paragraph | None:
    content = render_inline(node)
    if not content:
        return None
    return Paragraph(content=tuple(content))


def _convert_heading(node: MarkdownNode) -> Heading:
    content = render_inline(node)
    return Heading(
        attrs=HeadingAttrs(level=parser.heading_level(node)),
        content=tuple(content) or None,
    )


def _convert_code_block(node: MarkdownNode) -> CodeBlock:
    # Indented code blocks have an empty info string, hence no language.
    language = parser.fence_language(node) if node.type == parser.FENCE else ""
    body = parser.code_body(node)
    return CodeBlock(
        attrs=CodeBlockAttrs(language=language) if language else None,
        content=(Text(text=body),) if body else None,
    )


def _convert_blockquote(node: MarkdownNode) -> Blockquote:
    return Blockquote(content=tuple(convert_blocks(node.children)) or None)


def _convert_list(node: MarkdownNode) -> BulletList | OrderedList:
    items = tuple(
        ListItem(content=tuple(convert_blocks(child.children)) or None)
        for child in node.children
        if child.type == parser.LIST_ITEM
    )
    list_type = OrderedList if parser.is_ordered(node) else BulletList
    return list_type(content=items or None)


def _convert_rule(node: MarkdownNode) -> Rule:  # noqa: ARG001
    return Rule()


_BLOCK_HANDLERS: dict[str, Callable[[MarkdownNode], BlockNode | None]] = {
    parser.PARAGRAPH: _convert_paragraph,
    parser.HEADING: _convert_heading,
    parser.FENCE: _convert_code_block,
    parser.CODE_BLOCK: _convert_code_block,
    parser.BLOCKQUOTE: _convert_blockquote,
    parser.BULLET_LIST: _convert_list,
    parser.ORDERED_LIST: _convert_list,
    parser.THEMATIC_BREAK: _convert_rule,
}
