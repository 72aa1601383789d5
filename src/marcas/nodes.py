"""Typed entity nodes for marcas.

All entities are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Every entity carries two spans into the source string:
- ``inner_span``: the meaningful content, without delimiter syntax
- ``outer_span``: the content plus its delimiters

Entity Hierarchy:
Entity (base)
├── Text           plain text, also the document root
├── Link           https://... or <https://...>
├── Bold           **text**
├── Italic         _text_, *text* or //text//
├── Spoiler        ||text||
├── Underline      __text__
├── Strikethrough  ~~text~~
├── Code           `code` or ``code``
├── Emoji          a single emoji grapheme cluster
├── EmojiName      :shortcode:
├── CodeBlock      ```lang\\ncode```
├── BlockQuote     > quoted line
├── Color          [#f00]text, [#reset]text or §ctext
└── Custom         [kind: content]

Thread Safety:
All entities are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar

from marcas.span import Span

# Fields shared by every entity; everything else is a variant parameter
_BASE_FIELDS = frozenset({"inner_span", "outer_span", "children"})


# =============================================================================
# Base Entity
# =============================================================================


@dataclass(frozen=True, slots=True)
class Entity:
    """Base class for all entities.

    Attributes:
        inner_span: Span of the content, excluding delimiter syntax
        outer_span: Span including delimiter syntax
        children: Nested entities, sorted by ``outer_span.start``

    """

    tag: ClassVar[str] = "entity"

    inner_span: Span
    outer_span: Span
    children: tuple[Entity, ...]

    @property
    def params(self) -> dict[str, Any]:
        """Variant-specific fields as a dict (empty for most entities)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in _BASE_FIELDS}

    @property
    def is_leaf(self) -> bool:
        """True if the entity has no children."""
        return not self.children


# =============================================================================
# Leaf-like Entities
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Entity):
    """Plain text.

    Produced for escapes (``\\*`` covers ``*``), by the densifier for the
    gaps between other entities, and as the root of every parse.

    """

    tag: ClassVar[str] = "text"


@dataclass(frozen=True, slots=True)
class Link(Entity):
    """Bare or bracketed link.

    Markup: https://example.com or <https://example.com>

    """

    tag: ClassVar[str] = "link"


@dataclass(frozen=True, slots=True)
class Emoji(Entity):
    """A single emoji grapheme cluster, including ZWJ and keycap sequences."""

    tag: ClassVar[str] = "emoji"


@dataclass(frozen=True, slots=True)
class EmojiName(Entity):
    """Emoji shortcode.

    Markup: :sparkles:

    """

    tag: ClassVar[str] = "emoji_name"


# =============================================================================
# Delimited Entities
# =============================================================================


@dataclass(frozen=True, slots=True)
class Bold(Entity):
    """Markup: **text**"""

    tag: ClassVar[str] = "bold"


@dataclass(frozen=True, slots=True)
class Italic(Entity):
    """Markup: _text_, *text* or //text// (each spelling closes only itself)"""

    tag: ClassVar[str] = "italic"


@dataclass(frozen=True, slots=True)
class Spoiler(Entity):
    """Markup: ||text||"""

    tag: ClassVar[str] = "spoiler"


@dataclass(frozen=True, slots=True)
class Underline(Entity):
    """Markup: __text__"""

    tag: ClassVar[str] = "underline"


@dataclass(frozen=True, slots=True)
class Strikethrough(Entity):
    """Markup: ~~text~~"""

    tag: ClassVar[str] = "strikethrough"


@dataclass(frozen=True, slots=True)
class BlockQuote(Entity):
    """Quoted line(s).

    Markup: a line starting with ``"> "``

    Attributes:
        border_color: Reserved; the parser never sets it

    """

    tag: ClassVar[str] = "blockquote"

    border_color: str | None = None


@dataclass(frozen=True, slots=True)
class Color(Entity):
    """Colored region.

    Markup: [#f00]text, [#ff0000]text, [#reset]text or §ctext

    A color has no closing token; it ends at the next structural boundary.

    Attributes:
        color: ``"reset"`` or ``"#"`` followed by 3 or 6 hex digits

    """

    tag: ClassVar[str] = "color"

    color: str


# =============================================================================
# Raw-content Entities
# =============================================================================
# Their content is never parsed for markup. Children are only the Text
# leaves produced by escapes inside them.


@dataclass(frozen=True, slots=True)
class Code(Entity):
    """Inline code.

    Markup: `code` or ``code`` (closing run must match the opening run)

    """

    tag: ClassVar[str] = "code"


@dataclass(frozen=True, slots=True)
class CodeBlock(Entity):
    """Fenced code block.

    Markup: ```lang\\ncode```

    Attributes:
        lang: Language tag on the opening fence line; ``""`` for a bare fence
            followed by a newline, None when no newline follows the fence

    """

    tag: ClassVar[str] = "codeblock"

    lang: str | None = None


@dataclass(frozen=True, slots=True)
class Custom(Entity):
    """Custom bracket expression.

    Markup: [kind: content] or [@: content]

    Attributes:
        kind: Label between the opening bracket and the colon

    """

    tag: ClassVar[str] = "custom"

    kind: str


# Registry of tags to entity classes
ENTITY_TYPES: dict[str, type[Entity]] = {
    cls.tag: cls
    for cls in (
        Text,
        Link,
        Bold,
        Italic,
        Spoiler,
        Underline,
        Strikethrough,
        Code,
        Emoji,
        EmojiName,
        CodeBlock,
        BlockQuote,
        Color,
        Custom,
    )
}


__all__ = [
    "ENTITY_TYPES",
    "BlockQuote",
    "Bold",
    "Code",
    "CodeBlock",
    "Color",
    "Custom",
    "Emoji",
    "EmojiName",
    "Entity",
    "Italic",
    "Link",
    "Spoiler",
    "Strikethrough",
    "Text",
    "Underline",
]
