"""Pattern table for the marcas lexer.

Every lexical kind is one alternative of a single composite pattern. The
alternatives are named after their TokenType value so a match maps back to
its type through ``match.lastgroup``. Inner groups are all non-capturing,
which keeps ``lastgroup`` pointing at the alternative that matched.

Patterns use the third-party ``regex`` module: the standard ``re`` module
has no Unicode property classes (``\\p{Emoji}``, ``\\p{Hex_Digit}``, ...).

Thread Safety:
Compiled patterns are cached module-level objects, immutable after creation.

"""

from __future__ import annotations

from functools import cache

import regex

from marcas.tokens import TokenType

# =============================================================================
# Emoji
# =============================================================================
# Precomputed from the Unicode emoji sequence grammar (UTS #51). Treated as
# an opaque asset: one alternative per sequence shape.

_EMOJI_ELEMENT = r"(?:\p{Emoji_Modifier_Base}\p{Emoji_Modifier}|\p{Emoji}\uFE0F|\p{Emoji})"

EMOJI = "|".join(
    (
        # Tag sequence (subdivision flags)
        _EMOJI_ELEMENT + r"[\U000E0020-\U000E007E]+\U000E007F",
        # ZWJ sequence
        _EMOJI_ELEMENT + r"(?:\u200D" + _EMOJI_ELEMENT + r")+",
        # Flag (regional indicator pair)
        r"[\U0001F1E6-\U0001F1FF][\U0001F1E6-\U0001F1FF]",
        # Skin tone modifier sequence
        r"\p{Emoji_Modifier_Base}\p{Emoji_Modifier}",
        # Keycap sequence
        r"[0-9#*]\uFE0F\u20E3",
        # Emoji presentation selector
        r"\p{Emoji}\uFE0F",
        r"\p{Emoji_Presentation}",
        r"\p{Extended_Pictographic}",
    )
)

# =============================================================================
# Links
# =============================================================================
# A run of non-space characters that ends in ".<url-safe run>", so trailing
# punctuation such as ")" is left out of the link.

_URL_SAFE = r"[\p{Alphabetic}0-9/\\#?=+&%@!;:._~-]"
LINK = r"https?://\S+\." + _URL_SAFE + "+"

# =============================================================================
# Token table (declaration order is match priority)
# =============================================================================

TOKEN_PATTERNS: dict[TokenType, str] = {
    TokenType.ESCAPE: r"\\[\\*/_~`\[\]]",
    TokenType.BOLD: r"\*\*",
    TokenType.UNDERLINE: r"__",
    TokenType.ITALIC: r"(?:_|\*|//)",
    TokenType.STRIKETHROUGH: r"~~",
    TokenType.CODEBLOCK: r"```",
    TokenType.CODE: r"``?",
    TokenType.SPOILER: r"\|\|",
    TokenType.LINK: LINK,
    TokenType.LINK_CONTAINED: "<" + LINK + ">",
    TokenType.EMOJI: "(?:" + EMOJI + ")",
    TokenType.COLOR: r"\[#(?:\p{Hex_Digit}{3}|\p{Hex_Digit}{6}|reset)\]",
    TokenType.CUSTOM_START: r"\[(?:[^\r\n\u2028\u2029]|[\p{L}\p{N}\x21-\x2F_]+):",
    TokenType.CUSTOM_END: r"\]",
    TokenType.EMOJI_NAME: r":[0-9A-Za-z_]+:",
    TokenType.NEWLINE: r"\r?\n",
    TokenType.EGG: r"\u00A7[0-9a-fr]",
}

# Language tag after an opening code fence: word characters up to the newline
CODEBLOCK_LANG = regex.compile(r"[0-9A-Za-z_]*\r?\n")

# Opening of a blockquote line
BLOCKQUOTE_PREFIX = "> "


@cache
def token_pattern(eggs_enabled: bool = True) -> regex.Pattern[str]:
    """Compile the composite token pattern.

    Args:
        eggs_enabled: Include the legacy ``§`` color shorthand

    Returns:
        Compiled pattern whose named groups are TokenType values
    """
    parts = [
        f"(?P<{token_type.value}>{pattern})"
        for token_type, pattern in TOKEN_PATTERNS.items()
        if eggs_enabled or token_type is not TokenType.EGG
    ]
    return regex.compile("|".join(parts))


__all__ = [
    "BLOCKQUOTE_PREFIX",
    "CODEBLOCK_LANG",
    "EMOJI",
    "LINK",
    "TOKEN_PATTERNS",
    "token_pattern",
]
