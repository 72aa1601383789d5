"""Token and TokenType definitions for the marcas lexer.

The lexer produces a list of Token objects that the parser consumes.
Each Token has a type, the matched source text, and its span.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from marcas.span import Span


class TokenType(Enum):
    """Token types produced by the lexer.

    Values are the names of the alternatives in the composite pattern.
    Member order is the pattern's declaration order: when two alternatives
    match at the same position, the earlier one wins.

    """

    ESCAPE = "escape"  # \* \_ \[ etc.

    # Symmetric delimiters
    BOLD = "bold"  # **
    UNDERLINE = "underline"  # __
    ITALIC = "italic"  # _ or * or //
    STRIKETHROUGH = "strikethrough"  # ~~

    # Raw content
    CODEBLOCK = "codeblock"  # ```
    CODE = "code"  # ` or ``

    SPOILER = "spoiler"  # ||

    # Leaves
    LINK = "link"  # https://example.com
    LINK_CONTAINED = "link_contained"  # <https://example.com>
    EMOJI = "emoji"  # a single emoji grapheme cluster

    # Color directive
    COLOR = "color"  # [#f00] [#ff0000] [#reset]

    # Custom expressions
    CUSTOM_START = "custom_start"  # [name: or [@:
    CUSTOM_END = "custom_end"  # ]

    EMOJI_NAME = "emoji_name"  # :sparkles:
    NEWLINE = "newline"  # \n or \r\n
    EGG = "egg"  # §0-§f, §r (legacy color shorthand)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        span: Location of the matched text in the source
        value: The matched source text

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    type: TokenType
    span: Span
    value: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.span})"

    @property
    def start(self) -> int:
        """Start offset (convenience accessor)."""
        return self.span.start

    @property
    def end(self) -> int:
        """End offset (convenience accessor)."""
        return self.span.end
