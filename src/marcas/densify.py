"""Gap-filling pass over parsed entity trees.

The parser only emits entities for markup it recognized. densify() turns
that sparse tree into a total partition of the source: every stretch of an
entity's inner span not covered by a child becomes a Text leaf.

Kept separate from parsing so callers that want the sparse tree (editing,
diffing) can skip it.

Example:
    >>> from marcas import parse, densify
    >>> root = densify(parse("1__2__3"))
    >>> [child.tag for child in root.children]
    ['text', 'underline', 'text']

Thread Safety:
    Pure function; builds new entities and never mutates its input.

"""

from __future__ import annotations

import dataclasses

from marcas.nodes import Entity, Text
from marcas.span import Span


def densify(entity: Entity) -> Entity:
    """Fill every gap inside entity (recursively) with Text leaves.

    Gaps are measured within ``entity.inner_span``: before the first child,
    between consecutive children, and after the last child. A childless
    Text is already a maximal leaf and is returned unchanged. Idempotent.

    Args:
        entity: Root (or any subtree) of a parsed tree

    Returns:
        Structural copy of entity with text leaves interleaved
    """
    if entity.is_leaf and isinstance(entity, Text):
        return entity

    children: list[Entity] = []
    cursor = entity.inner_span.start

    for child in entity.children:
        if child.outer_span.start > cursor:
            gap = Span(cursor, child.outer_span.start)
            children.append(Text(gap, gap, ()))
        children.append(densify(child))
        cursor = child.outer_span.end

    if entity.inner_span.end > cursor:
        gap = Span(cursor, entity.inner_span.end)
        children.append(Text(gap, gap, ()))

    return dataclasses.replace(entity, children=tuple(children))
