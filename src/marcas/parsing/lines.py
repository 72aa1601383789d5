"""Line boundaries and blockquotes for the marcas tree builder.

Every newline token, plus the start and the end of the input, is a line
boundary. A line that begins with ``"> "`` opens a blockquote; the quote
continues while following lines also begin with ``"> "`` and closes at the
first boundary whose next line does not. Blockquotes do not nest.

Thread Safety:
All methods use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from marcas.lexer.patterns import BLOCKQUOTE_PREFIX
from marcas.nodes import BlockQuote
from marcas.parsing.markers import Marker, MarkerKind
from marcas.span import Span


class LineMixin:
    """Blockquote line state.

    Required Host Attributes:
        - _source: str
        - _markers: list[Marker]
        - _entities: list[Entity]

    Required Host Methods:
        - _find_marker(predicate) -> int
        - _take_children(outer, by_outer=False) -> tuple[Entity, ...]
        - _unwind(index) -> Marker
        - _last_entity_end() -> int
        - _resolve_color(span) -> bool

    """

    def _parse_line(self, boundary: Span) -> None:
        """Handle a line boundary.

        Args:
            boundary: Span of the newline token, or an empty span at the
                start or end of the input
        """
        index = self._find_marker(lambda m: m.kind is MarkerKind.BLOCKQUOTE)
        next_line_quoted = self._source.startswith(BLOCKQUOTE_PREFIX, boundary.end)

        if index >= 0:
            if next_line_quoted:
                return

            marker = self._markers[index]
            inner = Span(marker.span.end, boundary.start)
            outer = Span(marker.span.start, boundary.end)

            self._resolve_color(inner)
            children = self._take_children(outer, by_outer=True)
            self._unwind(index)
            self._entities.append(BlockQuote(inner, outer, children))
        elif next_line_quoted:
            # Colors opened on earlier lines end where the quote begins
            self._resolve_color(Span(self._last_entity_end(), boundary.start))
            self._markers.append(
                Marker(
                    MarkerKind.BLOCKQUOTE,
                    Span(boundary.start, boundary.end + len(BLOCKQUOTE_PREFIX)),
                )
            )
