"""Tests for the bundled HTML parser."""
from __future__ import annotations

import pytest

from layouts.core import NodeType, ParseError
from layouts.html import TreeBuilder, parse


class TestParse:
    def test_nested_tags_and_text(self) -> None:
        tree = parse('<div class="a"><p>hi</p>tail</div>')

        assert len(tree) == 1
        div = tree[0]
        assert div.type is NodeType.TAG
        assert div.name == "div"
        assert div.attr("class") == "a"
        assert [n.name or n.value for n in div.content] == ["p", "tail"]
        assert div.content[0].content[0].value == "hi"

    def test_attribute_values_are_text_node_lists(self) -> None:
        node = parse('<block name="content" type="append"></block>')[0]

        assert list(node.attrs) == ["name", "type"]
        assert node.attrs["name"][0].type is NodeType.TEXT
        assert node.attrs["name"][0].value == "content"

    def test_valueless_attribute_is_empty_string(self) -> None:
        node = parse("<input disabled>")[0]

        assert node.attr("disabled") == ""

    def test_names_are_lowercased(self) -> None:
        node = parse('<BLOCK NAME="x"></BLOCK>')[0]

        assert node.name == "block"
        assert node.attr("name") == "x"

    def test_locations_carry_filename_line_and_column(self) -> None:
        tree = parse('<p>hi</p>\n  <block name="content"></block>', filename="layout.html")

        block = tree[2]
        assert block.location.filename == "layout.html"
        assert (block.location.line, block.location.col) == (2, 3)
        assert tree[0].location.col == 1

    def test_no_filename_by_default(self) -> None:
        assert parse("<p></p>")[0].location.filename is None

    def test_void_elements_take_no_content(self) -> None:
        tree = parse("<p>a<br>b<img src='x.png'/>c</p>")

        p = tree[0]
        assert [n.name or n.value for n in p.content] == ["a", "br", "b", "img", "c"]
        assert p.content[1].content is None
        assert p.content[3].content is None

    def test_empty_element_has_empty_content(self) -> None:
        assert parse("<sidebar></sidebar>")[0].content == []

    def test_self_closing_non_void_element(self) -> None:
        tree = parse('<extends src="layout.html"/><p></p>')

        assert [n.name for n in tree] == ["extends", "p"]
        assert tree[0].content is None

    def test_unclosed_elements_closed_at_end(self) -> None:
        tree = parse("<div><p>open")

        assert tree[0].content[0].content[0].value == "open"

    def test_stray_end_tag_ignored(self) -> None:
        tree = parse("<div>a</span>b</div>")

        assert [n.value for n in tree[0].content] == ["ab"]

    def test_entities_are_preserved(self) -> None:
        tree = parse("<p>a &amp; b &#8212; c</p>")

        assert tree[0].content[0].value == "a &amp; b &#8212; c"

    def test_comments_and_doctype(self) -> None:
        tree = parse("<!DOCTYPE html><!-- page start --><p></p>")

        assert tree[0].type is NodeType.DOCTYPE
        assert tree[0].value == "DOCTYPE html"
        assert tree[1].type is NodeType.COMMENT
        assert tree[1].value == " page start "

    def test_unknown_declaration_rejected(self) -> None:
        builder = TreeBuilder("page.html")

        with pytest.raises(ParseError, match="Unsupported declaration") as exc_info:
            builder.unknown_decl("if !IE")

        assert exc_info.value.location.filename == "page.html"
