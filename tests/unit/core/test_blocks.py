"""Tests for block collection and merging."""
from __future__ import annotations

import pytest

from layouts.core import (
    BlockType,
    Location,
    MissingBlockNameError,
    UnmatchedTemplateBlockError,
    collect_blocks,
    get_block_type,
    merge_content,
    merge_extends_and_layout,
    tag,
    text,
)


def _values(tree):
    return [n.value if n.name is None else n.name for n in tree]


class TestGetBlockType:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, BlockType.REPLACE),
            ("replace", BlockType.REPLACE),
            ("prepend", BlockType.PREPEND),
            ("APPEND", BlockType.APPEND),
            ("Prepend", BlockType.PREPEND),
            (" append ", BlockType.REPLACE),
            ("bogus", BlockType.REPLACE),
            ("", BlockType.REPLACE),
        ],
    )
    def test_type_attribute(self, raw, expected) -> None:
        attrs = {"name": "x"}
        if raw is not None:
            attrs["type"] = raw

        assert get_block_type(tag("block", attrs)) is expected


class TestCollectBlocks:
    def test_finds_blocks_nested_in_tags(self) -> None:
        head = tag("block", {"name": "head"})
        body = tag("block", {"name": "body"})
        tree = [tag("html", content=[tag("head", content=[head]), tag("body", content=[body])])]

        blocks = collect_blocks(tree)

        assert blocks == {"head": head, "body": body}

    def test_finds_blocks_nested_in_blocks(self) -> None:
        inner = tag("block", {"name": "inner"})
        outer = tag("block", {"name": "outer"}, content=[inner])

        assert collect_blocks([outer]) == {"outer": outer, "inner": inner}

    def test_duplicate_names_last_visited_wins(self) -> None:
        first = tag("block", {"name": "x"}, content=[text("first")])
        second = tag("block", {"name": "x"}, content=[text("second")])

        assert collect_blocks([first, second])["x"] is second

    def test_enclosing_block_is_visited_after_its_children(self) -> None:
        inner = tag("block", {"name": "x"}, content=[text("inner")])
        outer = tag("block", {"name": "x"}, content=[inner])

        assert collect_blocks([outer])["x"] is outer

    def test_empty_or_missing_tree(self) -> None:
        assert collect_blocks([]) == {}
        assert collect_blocks(None) == {}

    def test_block_without_name_raises(self) -> None:
        loc = Location("layout.html", 4, 2)
        tree = [tag("div", content=[tag("block", {"class": ""}, location=loc)])]

        with pytest.raises(MissingBlockNameError) as exc_info:
            collect_blocks(tree)

        assert exc_info.value.message == "'block' element is missing a 'name' attribute"
        assert exc_info.value.location == loc

    def test_does_not_mutate_tree(self) -> None:
        block = tag("block", {"name": "x"}, content=[text("a")])
        tree = [tag("div", content=[block])]

        collect_blocks(tree)

        assert tree[0].content == [block]
        assert _values(block.content) == ["a"]


class TestMergeContent:
    def test_replace(self) -> None:
        assert _values(merge_content([text("B")], [text("A")], BlockType.REPLACE)) == ["B"]

    def test_prepend(self) -> None:
        merged = merge_content([text("C2")], [text("C1")], BlockType.PREPEND)

        assert _values(merged) == ["C2", "C1"]

    def test_append(self) -> None:
        merged = merge_content([text("C2")], [text("C1")], BlockType.APPEND)

        assert _values(merged) == ["C1", "C2"]

    def test_missing_content_treated_as_empty(self) -> None:
        assert merge_content(None, [text("A")], BlockType.REPLACE) == []
        assert _values(merge_content(None, [text("A")], BlockType.APPEND)) == ["A"]
        assert _values(merge_content([text("B")], None, BlockType.PREPEND)) == ["B"]


class TestMergeExtendsAndLayout:
    def test_replace_by_default(self) -> None:
        block = tag("block", {"name": "x"}, content=[text("A")])
        layout = [tag("div", content=[block])]
        template = [tag("block", {"name": "x"}, content=[text("B")])]

        result = merge_extends_and_layout(layout, template)

        assert result is layout
        assert _values(block.content) == ["B"]

    def test_unmatched_layout_block_keeps_default(self) -> None:
        kept = tag("block", {"name": "footer"}, content=[text("footer")])
        replaced = tag("block", {"name": "body"}, content=[text("body")])
        layout = [replaced, kept]
        template = [tag("block", {"name": "body"}, content=[text("new")])]

        merge_extends_and_layout(layout, template)

        assert _values(kept.content) == ["footer"]
        assert _values(replaced.content) == ["new"]

    def test_prepend_and_append(self) -> None:
        head = tag("block", {"name": "head"}, content=[tag("style")])
        foot = tag("block", {"name": "foot"}, content=[text("2015")])
        template = [
            tag("block", {"name": "head", "type": "prepend"}, content=[tag("title")]),
            tag("block", {"name": "foot", "type": "append"}, content=[text("-2016")]),
        ]

        merge_extends_and_layout([head, foot], template)

        assert _values(head.content) == ["title", "style"]
        assert _values(foot.content) == ["2015", "-2016"]

    def test_stray_template_nodes_are_dropped(self) -> None:
        layout = [tag("block", {"name": "content"})]
        template = [
            tag("div", content=[text("some other content")]),
            tag("block", {"name": "content"}, content=[text("hello!")]),
            text("blah-blah"),
        ]

        result = merge_extends_and_layout(layout, template)

        assert len(result) == 1
        assert _values(result[0].content) == ["hello!"]

    def test_leftover_template_block_raises(self) -> None:
        loc = Location(None, 1, 28)
        layout = [tag("block", {"name": "content"})]
        template = [tag("block", {"name": "head"}, location=loc)]

        with pytest.raises(UnmatchedTemplateBlockError) as exc_info:
            merge_extends_and_layout(layout, template)

        assert exc_info.value.block_name == "head"
        assert exc_info.value.message == 'Block "head" doesn\'t exist in the layout template'
        assert exc_info.value.location == loc

    def test_template_block_without_name_raises(self) -> None:
        layout = [tag("block", {"name": "content"})]
        template = [tag("block", content=[text("hello!")])]

        with pytest.raises(MissingBlockNameError):
            merge_extends_and_layout(layout, template)
