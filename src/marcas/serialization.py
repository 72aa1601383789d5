"""Entity tree serialization: JSON round-trip for marcas entities.

Converts entity trees to/from JSON-compatible dicts. Useful for:
- Shipping parsed trees to a renderer in another process or language
- Storing trees next to the source they were parsed from
- Debugging and inspection

Spans are written as ``[start, end]`` pairs. All output is deterministic
(sorted keys).

Example:
    from marcas import parse
    from marcas.serialization import to_json, from_json

    root = parse("**Hello** [#f00]World")
    json_str = to_json(root)
    restored = from_json(json_str)
    assert root == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from marcas.nodes import ENTITY_TYPES, Entity
from marcas.span import Span

_SPAN_FIELDS = {"inner_span", "outer_span"}


def to_dict(entity: Entity) -> dict[str, Any]:
    """Convert an entity tree to a JSON-compatible dict.

    Includes a ``_type`` discriminator (the entity tag) for deserialization.

    Args:
        entity: Any marcas entity.

    Returns:
        Dict with ``_type`` and all entity fields.

    """
    result: dict[str, Any] = {"_type": entity.tag}

    for f in fields(entity):
        value = getattr(entity, f.name)
        if isinstance(value, Span):
            result[f.name] = [value.start, value.end]
        elif f.name == "children":
            result[f.name] = [to_dict(child) for child in value]
        else:
            # Params: str or None
            result[f.name] = value

    return result


def from_dict(data: dict[str, Any]) -> Entity:
    """Reconstruct a typed entity tree from a dict.

    Args:
        data: Dict with ``_type`` and entity fields (as produced by to_dict).

    Returns:
        Typed entity (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a span is malformed.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized entity"
        raise ValueError(msg)

    entity_cls = ENTITY_TYPES.get(type_name)
    if entity_cls is None:
        msg = f"Unknown entity type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(entity_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name in _SPAN_FIELDS:
            kwargs[f.name] = _deserialize_span(raw)
        elif f.name == "children":
            kwargs[f.name] = tuple(from_dict(child) for child in raw)
        else:
            kwargs[f.name] = raw

    try:
        return entity_cls(**kwargs)
    except TypeError as e:
        msg = f"Invalid fields for {type_name!r}: {e}"
        raise ValueError(msg) from e


def _deserialize_span(value: Any) -> Span:
    """Deserialize a ``[start, end]`` pair."""
    if not isinstance(value, list | tuple) or len(value) != 2:
        msg = f"Expected [start, end] span, got {value!r}"
        raise ValueError(msg)
    return Span(value[0], value[1])


def to_json(entity: Entity, *, indent: int | None = None) -> str:
    """Serialize an entity tree to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        entity: Root of the tree to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(entity), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Entity:
    """Deserialize an entity tree from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Root entity.

    Raises:
        ValueError: If the JSON doesn't represent an entity.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
