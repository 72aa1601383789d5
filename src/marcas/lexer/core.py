"""Single-pass lexer for marcas markup.

Scans the source once, left to right, with the composite token pattern.
Text between matches is not tokenized: whatever no token claims is plain
text, and the densifier recovers it from the gaps later.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from marcas.config import get_parse_config
from marcas.errors import ParseError
from marcas.lexer.patterns import token_pattern
from marcas.span import Span
from marcas.tokens import Token, TokenType


class Lexer:
    """Tokenizer for marcas markup.

    Usage:
            >>> lexer = Lexer("**bold** :wave:")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(BOLD, '**', [0, 2))
        Token(BOLD, '**', [6, 8))
        Token(EMOJI_NAME, ':wave:', [9, 15))

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = ("_eggs_enabled", "_source")

    def __init__(self, source: str, *, eggs_enabled: bool | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            eggs_enabled: Recognize ``§`` color shorthand; defaults to the
                active ParseConfig
        """
        self._source = source
        if eggs_enabled is None:
            eggs_enabled = get_parse_config().eggs_enabled
        self._eggs_enabled = eggs_enabled

    def tokenize(self) -> list[Token]:
        """Tokenize the source.

        Returns:
            Tokens ordered by span start, non-overlapping

        Raises:
            ParseError: If the pattern matched an empty string (a defect in
                the pattern table)
        """
        tokens: list[Token] = []
        tokens_append = tokens.append

        for match in token_pattern(self._eggs_enabled).finditer(self._source):
            start, end = match.span()
            if start == end:
                msg = f"Empty token match for {match.lastgroup!r}"
                raise ParseError(msg, offset=start)
            tokens_append(Token(TokenType(match.lastgroup), Span(start, end), match.group()))

        return tokens


def tokenize(source: str) -> list[Token]:
    """Tokenize markup source with the active configuration.

    Args:
        source: Markup source text

    Returns:
        Tokens ordered by span start

    Example:
        >>> [t.type.name for t in tokenize("__hi__")]
        ['UNDERLINE', 'UNDERLINE']
    """
    return Lexer(source).tokenize()
