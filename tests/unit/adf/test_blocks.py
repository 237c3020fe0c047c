"""Tests for the block dispatcher and the ADF node models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jira_markdown_mcp.adf.blocks import convert_block, convert_blocks
from jira_markdown_mcp.adf.nodes import (
    CodeBlock,
    Document,
    Heading,
    HeadingAttrs,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
    Text,
)
from jira_markdown_mcp.adf.parser import fence_language, heading_level, parse


def _blocks(markdown: str):
    return convert_blocks(parse(markdown).children)


class TestDispatch:
    def test_paragraph_without_inline_content_is_absent(self):
        html_block = parse("<div>\n</div>\n").children[0]
        assert convert_block(html_block) is None

    def test_absent_blocks_are_skipped_between_siblings(self):
        blocks = _blocks("before\n\n<!-- comment -->\n\nafter\n")
        assert [block.type for block in blocks] == ["paragraph", "paragraph"]

    def test_heading_level_taken_from_source(self):
        blocks = _blocks("###### six\n")
        assert blocks == [Heading(attrs=HeadingAttrs(level=6), content=(Text(text="six"),))]

    def test_ordered_flag_selects_list_variant(self):
        blocks = _blocks("3. x\n4. y\n")
        assert isinstance(blocks[0], OrderedList)
        assert all(isinstance(item, ListItem) for item in blocks[0].content)

    def test_empty_list_item_has_no_content(self):
        blocks = _blocks("- \n")
        assert blocks[0].content == (ListItem(),)

    def test_thematic_break(self):
        assert _blocks("***\n") == [Rule()]

    def test_indented_code_never_has_language(self):
        blocks = _blocks("    x = 1\n")
        assert blocks == [CodeBlock(content=(Text(text="x = 1\n"),))]

    def test_fence_with_tilde(self):
        blocks = _blocks("~~~ruby\nputs 1\n~~~\n")
        assert blocks[0].attrs.language == "ruby"

    def test_loose_list_items_become_paragraphs(self):
        blocks = _blocks("- a\n\n- b\n")
        assert [item.content[0] for item in blocks[0].content] == [
            Paragraph(content=(Text(text="a"),)),
            Paragraph(content=(Text(text="b"),)),
        ]


class TestParserAccessors:
    def test_heading_level(self):
        assert heading_level(parse("## two\n").children[0]) == 2

    @pytest.mark.parametrize(
        ("markdown", "expected"),
        [
            ("```\nx\n```\n", ""),
            ("```go\nx\n```\n", "go"),
            ("```  js   extra\nx\n```\n", "js"),
            ("```c\\+\\+\nx\n```\n", "c++"),
        ],
    )
    def test_fence_language(self, markdown, expected):
        assert fence_language(parse(markdown).children[0]) == expected


class TestNodeModels:
    def test_text_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            Text(text="")

    def test_heading_level_bounds(self):
        with pytest.raises(ValidationError):
            HeadingAttrs(level=7)

    def test_document_requires_content(self):
        with pytest.raises(ValidationError):
            Document(content=())

    def test_nodes_are_frozen(self):
        paragraph = Paragraph(content=(Text(text="a"),))
        with pytest.raises(ValidationError):
            paragraph.content = None

    def test_to_dict_omits_absent_fields(self):
        doc = Document(content=(CodeBlock(), Paragraph(content=(Text(text="a"),))))
        assert doc.to_dict() == {
            "version": 1,
            "type": "doc",
            "content": [
                {"type": "codeBlock"},
                {"type": "paragraph", "content": [{"type": "text", "text": "a"}]},
            ],
        }

    def test_document_validates_from_wire_format(self):
        payload = {
            "version": 1,
            "type": "doc",
            "content": [
                {
                    "type": "bulletList",
                    "content": [{"type": "listItem", "content": [{"type": "rule"}]}],
                }
            ],
        }
        assert Document.model_validate(payload).to_dict() == payload
