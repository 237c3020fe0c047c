"""Markdown parsing boundary.

Markdown is parsed by markdown-it-py (CommonMark preset plus GFM
strikethrough with one or two tildes) into a ``SyntaxTreeNode`` tree. Link
and image destinations are kept as written. The converter only relies on the
small surface described by ``MarkdownNode`` and the accessors below.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from markdown_it.tree import SyntaxTreeNode

# Block kinds
PARAGRAPH = "paragraph"
HEADING = "heading"
FENCE = "fence"
CODE_BLOCK = "code_block"
BLOCKQUOTE = "blockquote"
BULLET_LIST = "bullet_list"
ORDERED_LIST = "ordered_list"
LIST_ITEM = "list_item"
THEMATIC_BREAK = "hr"

# Inline kinds
TEXT = "text"
TEXT_SPECIAL = "text_special"
SOFTBREAK = "softbreak"
HARDBREAK = "hardbreak"
EMPHASIS = "em"
STRONG = "strong"
STRIKETHROUGH = "s"
CODE_INLINE = "code_inline"
LINK = "link"
IMAGE = "image"


class MarkdownNode(Protocol):
    """The part of ``SyntaxTreeNode`` the converter reads."""

    @property
    def type(self) -> str: ...

    @property
    def children(self) -> Sequence[MarkdownNode]: ...

    @property
    def tag(self) -> str: ...

    @property
    def info(self) -> str: ...

    @property
    def content(self) -> str: ...

    @property
    def markup(self) -> str: ...

    @property
    def attrs(self) -> Mapping[str, Any]: ...


class _SourceLinkParser(MarkdownIt):
    """Keeps link and image destinations as written instead of percent-encoding them."""

    def normalizeLink(self, url: str) -> str:
        return url


def _make_parser() -> MarkdownIt:
    """Build a CommonMark parser with GFM strikethrough (`~x~` and `~~x~~`) enabled."""
    return _SourceLinkParser(
        "commonmark",
        options_update={"linkify": False, "strikethrough_single_tilde": True},
    ).enable("strikethrough")


def parse(markdown: str) -> SyntaxTreeNode:
    """Parse markdown into the root node of a syntax tree."""
    return SyntaxTreeNode(_make_parser().parse(markdown))


def heading_level(node: MarkdownNode) -> int:
    return int(node.tag[1:])


def is_ordered(node: MarkdownNode) -> bool:
    return node.type == ORDERED_LIST


def fence_language(node: MarkdownNode) -> str:
    """Return the first word of a fence's info string, or "" when undeclared."""
    info = unescapeAll(node.info or "").strip()
    return info.split(maxsplit=1)[0] if info else ""


def code_body(node: MarkdownNode) -> str:
    return node.content or ""


def link_destination(node: MarkdownNode) -> str:
    return str(node.attrs.get("href", ""))


def image_destination(node: MarkdownNode) -> str:
    return str(node.attrs.get("src", ""))


def is_autolink(node: MarkdownNode) -> bool:
    """True for ``<https://...>`` style links, which carry no separate label."""
    return node.type == LINK and node.markup == "autolink"


def plain_text(node: MarkdownNode) -> str:
    """Concatenate the literal text below ``node`` (used for image alt text)."""
    if node.type in (TEXT, TEXT_SPECIAL, CODE_INLINE):
        return node.content or ""
    return "".join(plain_text(child) for child in node.children)
