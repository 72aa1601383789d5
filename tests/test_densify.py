"""Tests for gap filling."""

import pytest

from marcas import densify, parse
from marcas.nodes import Bold, Emoji, Link, Text
from marcas.span import Span


class TestDensify:
    """Sparse trees become total partitions."""

    def test_plain_text_root_unchanged(self) -> None:
        root = parse("hello")
        assert densify(root) is root
        assert root == Text(Span(0, 5), Span(0, 5), ())

    def test_empty_root_unchanged(self) -> None:
        root = parse("")
        assert densify(root) is root

    def test_childless_text_unchanged(self) -> None:
        leaf = Text(Span(1, 2), Span(0, 2), ())
        assert densify(leaf) is leaf

    def test_leaf_only_until_densified(self) -> None:
        root = parse("**a**")
        assert not root.is_leaf
        assert root.children[0].is_leaf
        assert not densify(root).children[0].is_leaf

    def test_gaps_around_children(self) -> None:
        root = densify(parse("1__2__3"))
        assert root.children == (
            Text(Span(0, 1), Span(0, 1), ()),
            root.children[1],
            Text(Span(6, 7), Span(6, 7), ()),
        )
        underline = root.children[1]
        assert underline.children == (Text(Span(3, 4), Span(3, 4), ()),)

    def test_adjacent_children_get_no_empty_gap(self) -> None:
        root = densify(parse("**a**__b__"))
        assert [child.tag for child in root.children] == ["bold", "underline"]

    def test_empty_delimiter_pair_has_no_leaf(self) -> None:
        root = densify(parse("****"))
        assert root.children == (Bold(Span(2, 2), Span(0, 4), ()),)

    def test_leaves_get_text_child(self) -> None:
        root = densify(parse("✨ https://a.com"))
        emoji, _, link = root.children
        assert isinstance(emoji, Emoji)
        assert emoji.children == (Text(Span(0, 1), Span(0, 1), ()),)
        assert isinstance(link, Link)
        assert link.children == (Text(Span(2, 15), Span(2, 15), ()),)

    def test_escape_leaves_kept_as_is(self) -> None:
        root = densify(parse("a\\*b"))
        assert root.children == (
            Text(Span(0, 1), Span(0, 1), ()),
            Text(Span(2, 3), Span(1, 3), ()),
            Text(Span(3, 4), Span(3, 4), ()),
        )

    def test_input_not_modified(self) -> None:
        sparse = parse("x **y** z")
        before = sparse.children
        densify(sparse)
        assert sparse.children == before

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "plain",
            "**bold** _it_ [#f00] red",
            "> quote **b**\nnext `code` [k: v] :x:",
            "```py\nprint(1)\n```",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = densify(parse(text))
        assert densify(once) == once
