"""Color scope resolution for the marcas tree builder.

A color directive has no closing token. It stays open on the marker stack
until some other construct finishes around it (a delimiter pair, a
blockquote line, a code block, a custom expression, or the end of input)
and then closes at that boundary.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from marcas.nodes import Color
from marcas.parsing.markers import Marker, MarkerKind
from marcas.span import Span
from marcas.tokens import TokenType

if TYPE_CHECKING:
    from marcas.tokens import Token

RESET = "reset"

# Legacy "§" shorthand: one character selects a fixed palette entry
EGG_COLORS: dict[str, str] = {
    "0": "#000",
    "1": "#00A",
    "2": "#0A0",
    "3": "#0AA",
    "4": "#A00",
    "5": "#A0A",
    "6": "#FA0",
    "7": "#AAA",
    "8": "#555",
    "9": "#55F",
    "a": "#5F5",
    "b": "#5FF",
    "c": "#F55",
    "d": "#F5F",
    "e": "#FF5",
    "f": "#FFF",
    "r": RESET,
}


class ColorScopeMixin:
    """Opening and lazy closing of color regions.

    Required Host Attributes:
        - _markers: list[Marker]
        - _entities: list[Entity]

    Required Host Methods (from MarkerStackMixin):
        - _find_marker(predicate) -> int
        - _take_children(outer, by_outer=False) -> tuple[Entity, ...]
        - _unwind(index) -> Marker

    """

    def _open_color(self, token: Token) -> None:
        """Push a color marker for a ``[#...]`` or ``§`` directive."""
        if token.type is TokenType.COLOR:
            color = token.value[1:-1]
            if color == "#" + RESET:
                color = RESET
        else:
            color = EGG_COLORS[token.value[1]]

        if color == RESET:
            self._resolve_color(token.span)

        self._markers.append(Marker(MarkerKind.COLOR, token.span, color))

    def _resolve_color(self, span: Span) -> bool:
        """Close the newest open color whose directive lies inside span.

        The color runs from its directive to ``span.end``. Resolution then
        recurses on the part of span left of the directive, so an earlier
        color closes where the later one starts: consecutive directives
        become sibling regions rather than nested ones.

        Args:
            span: Region a construct is finalizing

        Returns:
            True if a color marker was closed
        """
        index = self._find_marker(
            lambda m: m.kind is MarkerKind.COLOR and span.contains(m.span)
        )
        if index < 0:
            return False

        marker = self._markers[index]
        inner = Span(marker.span.end, span.end)
        outer = Span(marker.span.start, span.end)

        children = self._take_children(outer)
        self._unwind(index)

        self._resolve_color(Span(span.start, outer.start))

        self._entities.append(Color(inner, outer, children, color=marker.data))
        return True
