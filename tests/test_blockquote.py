"""Tests for blockquote lines."""

from marcas import densify, parse
from marcas.nodes import BlockQuote
from marcas.span import Span
from marcas.text import outline

_QUOTE = ("blockquote", {"border_color": None})


def _children(source: str):  # type: ignore[no-untyped-def]
    return outline(source, densify(parse(source)))[2]


class TestBlockQuoteLines:
    """Opening and closing at line boundaries."""

    def test_single_line(self) -> None:
        text = "> hello world!"
        assert parse(text).children == (BlockQuote(Span(2, 14), Span(0, 14), ()),)
        assert _children(text) == [(*_QUOTE, [("text", {}, "hello world!")])]

    def test_requires_marker_at_line_start(self) -> None:
        assert parse("a > b").children == ()

    def test_requires_space_after_marker(self) -> None:
        assert parse(">no space").children == ()

    def test_indented_marker_is_not_a_quote(self) -> None:
        text = "\n> a blockquote!\n    > not a blockquote\n  "
        quotes = [child for child in parse(text).children if isinstance(child, BlockQuote)]
        assert quotes == [BlockQuote(Span(3, 16), Span(0, 17), ())]

    def test_separate_quotes(self) -> None:
        assert _children("> a\nb\n> c") == [
            (*_QUOTE, [("text", {}, "a")]),
            ("text", {}, "b"),
            (*_QUOTE, [("text", {}, "c")]),
        ]

    def test_outer_span_includes_trailing_newline(self) -> None:
        quote = parse("> a\nb").children[0]
        assert quote.inner_span == Span(2, 3)
        assert quote.outer_span == Span(0, 4)


class TestBlockQuoteContinuation:
    """Consecutive quoted lines form one blockquote."""

    def test_consecutive_lines_merge(self) -> None:
        text = "\n> hello world!\n> hello world 2!"
        root = parse(text)
        assert root.children == (BlockQuote(Span(3, 32), Span(0, 32), ()),)
        assert _children(text) == [(*_QUOTE, [("text", {}, "hello world!\n> hello world 2!")])]

    def test_crlf_lines_merge(self) -> None:
        text = "> a\r\n> b"
        assert parse(text).children == (BlockQuote(Span(2, 8), Span(0, 8), ()),)

    def test_delimiter_across_quoted_lines(self) -> None:
        assert _children("> **a\n> b**") == [
            (*_QUOTE, [("bold", {}, [("text", {}, "a\n> b")])]),
        ]


class TestBlockQuoteUnwinding:
    """Closing a quote discards markers opened inside it."""

    def test_unmatched_delimiter_inside_quote(self) -> None:
        assert _children("> **a\nb**") == [
            (*_QUOTE, [("text", {}, "**a")]),
            ("text", {}, "b**"),
        ]

    def test_delimiter_opened_before_quote_closes_around_it(self) -> None:
        root = parse("**a\n> b**")
        assert [child.tag for child in root.children] == ["bold"]
        assert root.children[0].children == ()

    def test_nested_constructs_become_children(self) -> None:
        quote = parse("> __u__ ``c``\n").children[0]
        assert [child.tag for child in quote.children] == ["underline", "code"]
