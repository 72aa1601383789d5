"""Exception classes for marcas.

Unmatched markup is never an error: it stays in the tree as plain text.
These exceptions signal defects in the lexer or parser and are not meant
to be caught by callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marcas.tokens import Token


class MarcasError(Exception):
    """Base exception for all marcas errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(MarcasError):
    """Internal error during markup parsing.

    Raised when the lexer or tree builder reaches a state the token table
    should make impossible.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            offset: Source index where the error occurred (optional)
        """
        self.message = message
        self.offset = offset

        location = f"at offset {offset}: " if offset is not None else ""
        super().__init__(f"{location}{message}")


class UnreachableTokenError(ParseError):
    """A token type reached the tree builder without a handler.

    The token enumeration is closed and every member is dispatched, so this
    indicates a TokenType added without a matching parser case.
    """

    def __init__(self, token: Token) -> None:
        """Initialize with the offending token.

        Args:
            token: Token that could not be dispatched
        """
        self.token = token
        super().__init__(f"Unreachable token type: {token.type.name}", offset=token.start)
