"""Open-marker stack for the marcas tree builder.

A Marker records an opening delimiter that has not been matched yet. Markers
live only on the parser's stack during a single parse; any marker still open
at the end of input is dropped and its delimiter stays plain text.

The stack is shared by every delimiter family (symmetric delimiters,
blockquote lines, colors). What they share is the containment partition:
closing a marker pulls every already-resolved entity inside the new span
out of the working list and makes it a child.

Thread Safety:
Markers are immutable. The stack is per-parser instance state.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from marcas.utils.logger import get_logger

if TYPE_CHECKING:
    from marcas.nodes import Entity
    from marcas.span import Span

logger = get_logger(__name__)


class MarkerKind(Enum):
    """Kinds of opening delimiters that wait on the stack."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    SPOILER = "spoiler"
    STRIKETHROUGH = "strikethrough"
    BLOCKQUOTE = "blockquote"
    COLOR = "color"


@dataclass(frozen=True, slots=True)
class Marker:
    """An unmatched opening delimiter.

    Attributes:
        kind: Delimiter family
        span: Location of the opening delimiter text
        data: Delimiter literal for symmetric delimiters (``_``, ``*`` and
            ``//`` all open italics but only close themselves), or the
            resolved color value for color markers

    """

    kind: MarkerKind
    span: Span
    data: str | None = None


def partition(
    entities: list[Entity], predicate: Callable[[Entity], bool]
) -> tuple[list[Entity], list[Entity]]:
    """Split entities into ``(matching, rest)``, preserving order."""
    matching: list[Entity] = []
    rest: list[Entity] = []
    for entity in entities:
        if predicate(entity):
            matching.append(entity)
        else:
            rest.append(entity)
    return matching, rest


class MarkerStackMixin:
    """Marker stack and resolved-entity list operations.

    Required Host Attributes:
        - _markers: list[Marker]
        - _entities: list[Entity]

    Required Host Methods: None

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _markers: list[Marker]
    # _entities: list[Entity]

    def _find_marker(self, predicate: Callable[[Marker], bool]) -> int:
        """Index of the most recently pushed marker matching predicate, or -1."""
        markers = self._markers
        for idx in range(len(markers) - 1, -1, -1):
            if predicate(markers[idx]):
                return idx
        return -1

    def _unwind(self, index: int) -> Marker:
        """Pop the marker at index and every marker pushed after it.

        Markers above the closed one can never match any more: their closing
        delimiter would cross the boundary that was just closed.

        Returns:
            The marker at index
        """
        marker = self._markers[index]
        for discarded in self._markers[index + 1 :]:
            logger.debug(
                "Discarding unmatched %s marker at %s", discarded.kind.value, discarded.span
            )
        del self._markers[index:]
        return marker

    def _take_children(self, outer: Span, *, by_outer: bool = False) -> tuple[Entity, ...]:
        """Move resolved entities contained in ``outer`` out of the working list.

        Args:
            outer: Outer span of the entity being closed
            by_outer: Test containment of each entity's outer span instead of
                its inner span

        Returns:
            The contained entities, in order, to become children
        """
        if by_outer:
            children, self._entities = partition(
                self._entities, lambda e: outer.contains(e.outer_span)
            )
        else:
            children, self._entities = partition(
                self._entities, lambda e: outer.contains(e.inner_span)
            )
        return tuple(children)

    def _last_entity_end(self) -> int:
        """End of the most recently resolved entity, or 0 if there is none."""
        if self._entities:
            return self._entities[-1].outer_span.end
        return 0
