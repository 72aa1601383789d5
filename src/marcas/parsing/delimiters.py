"""Symmetric delimiter matching for the marcas tree builder.

Bold, underline, italic, strikethrough and spoiler use the same token to
open and to close. A delimiter closes the open marker of its kind with the
identical literal, so ``_a*`` never becomes italic even though ``_`` and
``*`` are both italic spellings.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcas.nodes import Bold, Entity, Italic, Spoiler, Strikethrough, Underline
from marcas.parsing.markers import Marker, MarkerKind
from marcas.span import Span
from marcas.tokens import TokenType

if TYPE_CHECKING:
    from marcas.tokens import Token

DELIMITERS: dict[TokenType, tuple[MarkerKind, type[Entity]]] = {
    TokenType.BOLD: (MarkerKind.BOLD, Bold),
    TokenType.ITALIC: (MarkerKind.ITALIC, Italic),
    TokenType.UNDERLINE: (MarkerKind.UNDERLINE, Underline),
    TokenType.STRIKETHROUGH: (MarkerKind.STRIKETHROUGH, Strikethrough),
    TokenType.SPOILER: (MarkerKind.SPOILER, Spoiler),
}


class DelimiterMixin:
    """Open/close handling for symmetric delimiters.

    Required Host Attributes:
        - _markers: list[Marker]
        - _entities: list[Entity]

    Required Host Methods:
        - _find_marker(predicate) -> int
        - _take_children(outer, by_outer=False) -> tuple[Entity, ...]
        - _unwind(index) -> Marker
        - _resolve_color(span) -> bool

    """

    def _parse_delimiter(self, token: Token) -> None:
        """Close the matching open delimiter, or open a new one."""
        kind, entity_cls = DELIMITERS[token.type]
        literal = token.value

        index = self._find_marker(lambda m: m.kind is kind and m.data == literal)
        if index < 0:
            self._markers.append(Marker(kind, token.span, literal))
            return

        marker = self._markers[index]
        inner = Span(marker.span.end, token.start)
        outer = Span(marker.span.start, token.end)

        # Colors opened inside the pair end with it
        self._resolve_color(inner)
        children = self._take_children(outer)
        self._unwind(index)
        self._entities.append(entity_cls(inner, outer, children))
