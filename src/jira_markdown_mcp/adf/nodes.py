"""Pydantic models for Atlassian Document Format (ADF) nodes.

Only the subset produced by the markdown converter is modelled. Every model is
frozen and holds its children in tuples, so a built tree cannot be mutated.
Empty collections are stored as ``None`` so they drop out of the wire payload.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MarkType = Literal["strong", "em", "code", "strike", "link"]


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class LinkAttrs(_Node):
    href: str


class Mark(_Node):
    type: MarkType
    attrs: LinkAttrs | None = None


Marks = tuple[Mark, ...]

STRONG = Mark(type="strong")
EM = Mark(type="em")
CODE = Mark(type="code")
STRIKE = Mark(type="strike")


def link_mark(href: str) -> Mark:
    return Mark(type="link", attrs=LinkAttrs(href=href))


# ----------------------------------------------------------------------
# Inline nodes
# ----------------------------------------------------------------------


class Text(_Node):
    type: Literal["text"] = "text"
    text: str = Field(min_length=1)
    marks: Marks | None = None


class HardBreak(_Node):
    type: Literal["hardBreak"] = "hardBreak"


InlineNode = Annotated[Union[Text, HardBreak], Field(discriminator="type")]


# ----------------------------------------------------------------------
# Block nodes
# ----------------------------------------------------------------------


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    content: tuple[InlineNode, ...] | None = None


class HeadingAttrs(_Node):
    level: int = Field(ge=1, le=6)


class Heading(_Node):
    type: Literal["heading"] = "heading"
    attrs: HeadingAttrs
    content: tuple[InlineNode, ...] | None = None


class CodeBlockAttrs(_Node):
    language: str


class CodeBlock(_Node):
    type: Literal["codeBlock"] = "codeBlock"
    attrs: CodeBlockAttrs | None = None
    content: tuple[Text] | None = None


class Blockquote(_Node):
    type: Literal["blockquote"] = "blockquote"
    content: tuple[BlockNode, ...] | None = None


class ListItem(_Node):
    type: Literal["listItem"] = "listItem"
    content: tuple[BlockNode, ...] | None = None


class BulletList(_Node):
    type: Literal["bulletList"] = "bulletList"
    content: tuple[ListItem, ...] | None = None


class OrderedList(_Node):
    type: Literal["orderedList"] = "orderedList"
    content: tuple[ListItem, ...] | None = None


class Rule(_Node):
    type: Literal["rule"] = "rule"


BlockNode = Annotated[
    Union[Paragraph, Heading, CodeBlock, Blockquote, BulletList, OrderedList, ListItem, Rule],
    Field(discriminator="type"),
]


class Document(_Node):
    version: Literal[1] = 1
    type: Literal["doc"] = "doc"
    content: tuple[BlockNode, ...] = Field(min_length=1)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON payload Jira expects (absent fields omitted)."""
        return self.model_dump(mode="json", exclude_none=True)


for _model in (Blockquote, ListItem, BulletList, OrderedList, Document):
    _model.model_rebuild()
