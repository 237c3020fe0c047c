"""Tests for ADF to plain text rendering."""

from __future__ import annotations

import pytest

from jira_markdown_mcp.adf import adf_to_text, convert, markdown_to_adf


@pytest.mark.parametrize("value", [None, {}, "", []])
def test_empty_values_render_empty(value):
    assert adf_to_text(value) == ""


def test_plain_paragraph():
    assert adf_to_text(markdown_to_adf("Hello world")) == "Hello world"


def test_accepts_document_model():
    assert adf_to_text(convert("Bug details here")) == "Bug details here"


def test_hard_break():
    assert adf_to_text(markdown_to_adf("first\nsecond")) == "first\nsecond"


def test_block_structure():
    markdown = (
        "Intro\n\n- a\n- b\n\n1. x\n2. y\n\n> quoted\n\n---\n\n```py\nprint(1)\n```\n"
    )
    assert adf_to_text(markdown_to_adf(markdown)) == (
        "Intro\n\n- a\n- b\n\n1. x\n2. y\n\n> quoted\n\n---\n\n```py\nprint(1)\n```"
    )


def test_nested_list_is_indented():
    assert adf_to_text(markdown_to_adf("- a\n  - b\n")) == "- a\n  - b"


def test_unknown_nodes_degrade_to_nested_text():
    adf = {
        "type": "doc",
        "content": [
            {"type": "panel", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "inside"}]}]},
            "garbage",
            {"type": "mention", "attrs": {"id": "123"}},
        ],
    }
    assert adf_to_text(adf) == "inside"


def test_malformed_content_is_ignored():
    assert adf_to_text({"type": "doc", "content": "oops"}) == ""
    assert adf_to_text({"type": "paragraph", "content": [{"type": "text", "text": None}]}) == ""


def test_code_block_without_trailing_newline():
    adf = {"type": "doc", "content": [{"type": "codeBlock", "content": [{"type": "text", "text": "x = 1"}]}]}
    assert adf_to_text(adf) == "```\nx = 1\n```"
