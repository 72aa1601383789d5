"""Raw-content constructs for the marcas tree builder.

Inline code, code blocks and custom expressions look ahead in the finished
token list for their closing token instead of pushing a marker. Everything
between the opening and closing token is raw content: it is never parsed
for markup, and the scan resumes after the closing token. Escapes are the
one exception and become Text children.

An opener with no closing token is left alone and ends up as plain text.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from collections.abc import Callable

from marcas.lexer.patterns import CODEBLOCK_LANG
from marcas.nodes import Code, CodeBlock, Custom, Text
from marcas.span import Span
from marcas.tokens import Token, TokenType
from marcas.utils.logger import get_logger

logger = get_logger(__name__)


class RawContentMixin:
    """Look-ahead matching for code, code blocks and custom expressions.

    Required Host Attributes:
        - _source: str
        - _tokens: list[Token]
        - _entities: list[Entity]

    Required Host Methods:
        - _last_entity_end() -> int
        - _resolve_color(span) -> bool

    """

    def _find_closing(self, pos: int, predicate: Callable[[Token], bool]) -> int:
        """Index of the first token after pos matching predicate, or -1."""
        tokens = self._tokens
        for idx in range(pos + 1, len(tokens)):
            if predicate(tokens[idx]):
                return idx
        return -1

    def _escape_leaves(self, pos: int, close: int) -> tuple[Text, ...]:
        """Text leaves for the escapes strictly between two token indices.

        Each leaf's inner span is the escaped character; its outer span
        includes the backslash.
        """
        return tuple(
            Text(Span(token.start + 1, token.end), token.span, ())
            for token in self._tokens[pos + 1 : close]
            if token.type is TokenType.ESCAPE
        )

    def _parse_code(self, pos: int) -> int:
        """Match inline code opened at pos.

        The closing run must have the same number of backticks.

        Returns:
            Index of the last token consumed
        """
        token = self._tokens[pos]
        close = self._find_closing(
            pos, lambda t: t.type is TokenType.CODE and t.value == token.value
        )
        if close < 0:
            logger.debug("No closing %r for code at %s", token.value, token.span)
            return pos

        end = self._tokens[close]
        self._entities.append(
            Code(
                Span(token.end, end.start),
                Span(token.start, end.end),
                self._escape_leaves(pos, close),
            )
        )
        return close

    def _parse_codeblock(self, pos: int) -> int:
        """Match a fenced code block opened at pos.

        A run of word characters ending the fence line is the language tag.
        It is kept out of the inner span.

        Returns:
            Index of the last token consumed
        """
        token = self._tokens[pos]
        close = self._find_closing(pos, lambda t: t.type is TokenType.CODEBLOCK)
        if close < 0:
            logger.debug("No closing fence for code block at %s", token.span)
            return pos

        end = self._tokens[close]
        lang_match = CODEBLOCK_LANG.match(self._source, token.end)
        if lang_match is not None:
            lang: str | None = lang_match.group().strip()
            inner_start = lang_match.end()
        else:
            lang = None
            inner_start = token.end

        self._resolve_color(Span(self._last_entity_end(), token.start))
        self._entities.append(
            CodeBlock(
                Span(inner_start, end.start),
                Span(token.start, end.end),
                self._escape_leaves(pos, close),
                lang=lang,
            )
        )
        return close

    def _parse_custom(self, pos: int) -> int:
        """Match a custom expression ``[kind: ...]`` opened at pos.

        Returns:
            Index of the last token consumed
        """
        token = self._tokens[pos]
        close = self._find_closing(pos, lambda t: t.type is TokenType.CUSTOM_END)
        if close < 0:
            logger.debug("No closing bracket for %r at %s", token.value, token.span)
            return pos

        end = self._tokens[close]
        self._resolve_color(Span(self._last_entity_end(), token.start))
        self._entities.append(
            Custom(
                Span(token.end, end.start),
                Span(token.start, end.end),
                self._escape_leaves(pos, close),
                kind=token.value[1:-1],
            )
        )
        return close
