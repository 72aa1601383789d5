"""Tests for the marcas lexer."""

import pytest

from marcas.config import ParseConfig, parse_config_context
from marcas.lexer import Lexer, token_pattern, tokenize
from marcas.span import Span
from marcas.tokens import Token, TokenType


def _types(source: str) -> list[TokenType]:
    return [token.type for token in tokenize(source)]


class TestTokenKinds:
    """Each lexical kind is recognized."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("**", TokenType.BOLD),
            ("__", TokenType.UNDERLINE),
            ("_", TokenType.ITALIC),
            ("*", TokenType.ITALIC),
            ("//", TokenType.ITALIC),
            ("~~", TokenType.STRIKETHROUGH),
            ("||", TokenType.SPOILER),
            ("`", TokenType.CODE),
            ("``", TokenType.CODE),
            ("```", TokenType.CODEBLOCK),
            ("\\*", TokenType.ESCAPE),
            ("\\[", TokenType.ESCAPE),
            ("\n", TokenType.NEWLINE),
            ("\r\n", TokenType.NEWLINE),
            ("[#f00]", TokenType.COLOR),
            ("[#ff0011]", TokenType.COLOR),
            ("[#reset]", TokenType.COLOR),
            ("[name:", TokenType.CUSTOM_START),
            ("[@:", TokenType.CUSTOM_START),
            ("]", TokenType.CUSTOM_END),
            (":wave:", TokenType.EMOJI_NAME),
            ("§c", TokenType.EGG),
            ("§r", TokenType.EGG),
            ("https://example.com", TokenType.LINK),
            ("<https://example.com>", TokenType.LINK_CONTAINED),
            ("✨", TokenType.EMOJI),
        ],
    )
    def test_single_token(self, source: str, expected: TokenType) -> None:
        tokens = tokenize(source)
        assert len(tokens) == 1
        assert tokens[0].type is expected
        assert tokens[0].value == source
        assert tokens[0].span == Span(0, len(source))

    def test_plain_text_has_no_tokens(self) -> None:
        assert tokenize("just some words, nothing more.") == []

    def test_empty_source(self) -> None:
        assert tokenize("") == []

    @pytest.mark.parametrize("source", ["§k", "§G", "\\a", "[#ff00"])
    def test_not_a_token(self, source: str) -> None:
        assert tokenize(source) == []


class TestPriority:
    """Earlier alternatives win at the same position."""

    def test_longest_backtick_run_first(self) -> None:
        assert [t.value for t in tokenize("````")] == ["```", "`"]

    def test_bold_before_italic(self) -> None:
        assert _types("***") == [TokenType.BOLD, TokenType.ITALIC]

    def test_underline_before_italic(self) -> None:
        assert _types("___") == [TokenType.UNDERLINE, TokenType.ITALIC]

    def test_escape_consumes_delimiter(self) -> None:
        assert _types("\\**") == [TokenType.ESCAPE, TokenType.ITALIC]

    def test_color_before_custom(self) -> None:
        assert _types("[#abc]") == [TokenType.COLOR]

    def test_four_digit_color_leaves_only_bracket(self) -> None:
        assert _types("[#ff00]") == [TokenType.CUSTOM_END]

    def test_link_swallows_slashes(self) -> None:
        assert _types("https://a.com//x") == [TokenType.LINK]


class TestLinks:
    """URL recognition."""

    @pytest.mark.parametrize(
        ("source", "url"),
        [
            ("(https://example.com)", "https://example.com"),
            ("http://example.com/a?b=1&c=2.", "http://example.com/a?b=1&c=2."),
            ("https://example.com/päth", "https://example.com/päth"),
        ],
    )
    def test_link_value(self, source: str, url: str) -> None:
        links = [t for t in tokenize(source) if t.type is TokenType.LINK]
        assert [t.value for t in links] == [url]

    def test_host_without_dot_is_not_a_link(self) -> None:
        assert TokenType.LINK not in _types("https://localhost")


class TestEmoji:
    """Emoji sequences are single tokens."""

    @pytest.mark.parametrize(
        "emoji",
        [
            "🏳️‍🌈",  # ZWJ sequence
            "1️⃣",  # keycap
            "👋🏽",  # skin tone modifier
            "🇫🇷",  # flag
            "❤️",  # presentation selector
            "😀",
        ],
    )
    def test_sequence_is_one_token(self, emoji: str) -> None:
        tokens = tokenize(emoji)
        assert [(t.type, t.value) for t in tokens] == [(TokenType.EMOJI, emoji)]

    def test_bare_digit_is_not_emoji(self) -> None:
        assert tokenize("1 # *") == [Token(TokenType.ITALIC, Span(4, 5), "*")]


class TestEggsConfig:
    """The section-sign shorthand can be switched off."""

    def test_explicit_flag(self) -> None:
        assert Lexer("§c", eggs_enabled=False).tokenize() == []
        assert len(Lexer("§c", eggs_enabled=True).tokenize()) == 1

    def test_flag_read_from_context(self) -> None:
        with parse_config_context(ParseConfig(eggs_enabled=False)):
            assert tokenize("§c") == []
        assert _types("§c") == [TokenType.EGG]

    def test_patterns_cached_per_flag(self) -> None:
        assert token_pattern(True) is token_pattern(True)
        assert token_pattern(True) is not token_pattern(False)


class TestTokenOrdering:
    """Token spans are ordered and disjoint."""

    def test_spans_ordered(self) -> None:
        tokens = tokenize("**a** [#f00] `c` :x: > \n ~~")
        for before, after in zip(tokens, tokens[1:], strict=False):
            assert before.end <= after.start

    def test_value_matches_span(self) -> None:
        source = "hi __there__ [k: v]"
        for token in tokenize(source):
            assert token.span.slice(source) == token.value


class TestTokenRepr:
    """Compact token repr."""

    def test_repr(self) -> None:
        token = Token(TokenType.BOLD, Span(0, 2), "**")
        assert repr(token) == "Token(BOLD, '**', [0, 2))"

    def test_long_value_truncated(self) -> None:
        value = "https://example.com/a/long/path"
        token = Token(TokenType.LINK, Span(0, len(value)), value)
        assert "..." in repr(token)
