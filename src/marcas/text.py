"""Extract text from marcas entity trees.

Entities hold spans, not strings. These helpers slice the original source
on demand, which is what a renderer needs to turn a tree back into text.

Example:
    >>> from marcas import densify, parse
    >>> from marcas.text import leaf_texts
    >>> source = "1__2**3**4__5"
    >>> leaf_texts(source, densify(parse(source)))
    ['1', '2', '3', '4', '5']
"""

from __future__ import annotations

from typing import Any

from marcas.nodes import Entity, Text

# (tag, params, text) for text leaves, (tag, params, [children...]) otherwise
type Outline = tuple[str, dict[str, Any], str | list[Outline]]


def _is_text_leaf(entity: Entity) -> bool:
    return isinstance(entity, Text) and entity.is_leaf


def leaf_texts(source: str, entity: Entity) -> list[str]:
    """Inner text of every text leaf under entity, left to right.

    Args:
        source: The string entity was parsed from
        entity: Any entity, usually a densified root

    Returns:
        Substrings of source, one per text leaf
    """
    if _is_text_leaf(entity):
        return [entity.inner_span.slice(source)]
    result: list[str] = []
    for child in entity.children:
        result.extend(leaf_texts(source, child))
    return result


def extract_text(source: str, entity: Entity) -> str:
    """Plain text of entity: its leaf texts joined, markup syntax dropped.

    Expects a densified tree; on a sparse tree only escaped characters and
    other explicit text leaves contribute.

    Example:
        >>> source = "**bold** and \\\\*stars\\\\*"
        >>> extract_text(source, densify(parse(source)))
        'bold and *stars*'
    """
    return "".join(leaf_texts(source, entity))


def outline(source: str, entity: Entity) -> Outline:
    """Nested ``(tag, params, content)`` view of a tree.

    Text leaves carry their inner text as content; every other entity
    carries the outlines of its children.

    Example:
        >>> source = "**hi**"
        >>> outline(source, densify(parse(source)))
        ('text', {}, [('bold', {}, [('text', {}, 'hi')])])
    """
    if _is_text_leaf(entity):
        return (entity.tag, entity.params, entity.inner_span.slice(source))
    return (entity.tag, entity.params, [outline(source, child) for child in entity.children])


__all__ = [
    "Outline",
    "extract_text",
    "leaf_texts",
    "outline",
]
