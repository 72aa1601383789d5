"""Single-pass tree builder producing typed entities.

Consumes the token list from Lexer and builds immutable entity nodes.

Architecture:
The parser keeps two pieces of per-parse state:
- a stack of unmatched opening markers
- a flat list of already-resolved entities

Each token either closes a marker (the new entity takes every resolved
entity inside its span as children), opens one, or emits a leaf directly.
The construct families live in mixins:
- `MarkerStackMixin`: marker lookup, unwinding, containment partition
- `ColorScopeMixin`: color directives, closed lazily by other constructs
- `LineMixin`: line boundaries and blockquotes
- `DelimiterMixin`: bold, italic, underline, strikethrough, spoiler
- `RawContentMixin`: code, code blocks, custom expressions

Thread Safety:
- Parser produces immutable entities (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the resulting tree across threads

"""

from __future__ import annotations

from marcas.errors import UnreachableTokenError
from marcas.lexer import Lexer
from marcas.nodes import Emoji, EmojiName, Entity, Link, Text
from marcas.parsing import (
    ColorScopeMixin,
    DelimiterMixin,
    LineMixin,
    MarkerStackMixin,
    RawContentMixin,
)
from marcas.parsing.markers import Marker
from marcas.span import Span
from marcas.tokens import Token, TokenType
from marcas.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    MarkerStackMixin,
    ColorScopeMixin,
    LineMixin,
    DelimiterMixin,
    RawContentMixin,
):
    """Tree builder for marcas markup.

    Usage:
            >>> root = Parser("**hi** there").parse()
            >>> root.children[0]
        Bold(inner_span=Span(start=2, end=4), outer_span=Span(start=0, end=6), children=())

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting tree is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_tokens",
        "_markers",
        "_entities",
    )

    def __init__(self, source: str, *, tokens: list[Token] | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text
            tokens: Pre-computed tokens for source (tokenized with the active
                ParseConfig when omitted)
        """
        self._source = source
        self._tokens: list[Token] = tokens if tokens is not None else Lexer(source).tokenize()
        self._markers: list[Marker] = []
        self._entities: list[Entity] = []

    def parse(self) -> Text:
        """Build the entity tree.

        Returns:
            Root Text entity spanning the whole source, whose children are
            the top-level entities (no gap-filling text; see densify())
        """
        length = len(self._source)
        tokens = self._tokens
        tokens_len = len(tokens)

        self._parse_line(Span.empty(0))

        pos = 0
        while pos < tokens_len:
            pos = self._dispatch(pos) + 1

        self._parse_line(Span.empty(length))
        self._resolve_color(Span(self._last_entity_end(), length))
        if self._entities:
            self._resolve_color(Span(0, length))

        for marker in self._markers:
            logger.debug("Discarding unmatched %s marker at %s", marker.kind.value, marker.span)
        self._markers.clear()

        root = Span(0, length)
        return Text(root, root, tuple(self._entities))

    def _dispatch(self, pos: int) -> int:
        """Handle the token at pos.

        Returns:
            Index of the last token consumed (pos, or a matched closing token)
        """
        token = self._tokens[pos]

        match token.type:
            case TokenType.NEWLINE:
                self._parse_line(token.span)
            case (
                TokenType.BOLD
                | TokenType.ITALIC
                | TokenType.UNDERLINE
                | TokenType.STRIKETHROUGH
                | TokenType.SPOILER
            ):
                self._parse_delimiter(token)
            case TokenType.CODE:
                return self._parse_code(pos)
            case TokenType.CODEBLOCK:
                return self._parse_codeblock(pos)
            case TokenType.CUSTOM_START:
                return self._parse_custom(pos)
            case TokenType.CUSTOM_END:
                # A bracket only matters when a custom expression consumes it
                pass
            case TokenType.COLOR | TokenType.EGG:
                self._open_color(token)
            case TokenType.LINK:
                self._entities.append(Link(token.span, token.span, ()))
            case TokenType.LINK_CONTAINED:
                self._entities.append(Link(Span(token.start + 1, token.end - 1), token.span, ()))
            case TokenType.EMOJI:
                self._entities.append(Emoji(token.span, token.span, ()))
            case TokenType.EMOJI_NAME:
                self._entities.append(
                    EmojiName(Span(token.start + 1, token.end - 1), token.span, ())
                )
            case TokenType.ESCAPE:
                self._entities.append(Text(Span(token.start + 1, token.end), token.span, ()))
            case _:
                raise UnreachableTokenError(token)

        return pos
