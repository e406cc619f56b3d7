"""Serialization — JSON round-trip for briefdown documents.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Handing a parsed briefing to a front end that renders it itself
- Caching parsed briefings
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from briefdown import parse
    from briefdown.serialization import to_json, from_json

    doc = parse("### AAPL\\n- **Price:** $174.58")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any, TypeAlias

from briefdown.nodes import (
    Blank,
    Bold,
    Code,
    Divider,
    Document,
    Heading,
    List,
    Paragraph,
    Plain,
)

Node: TypeAlias = Document | Heading | Paragraph | List | Divider | Blank | Plain | Bold | Code

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Heading": Heading,
    "Paragraph": Paragraph,
    "List": List,
    "Divider": Divider,
    "Blank": Blank,
    "Plain": Plain,
    "Bold": Bold,
    "Code": Code,
}
_NODE_CLASSES = tuple(_NODE_TYPES.values())


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization. Tuples
    (document blocks, list items) become lists.

    Args:
        node: Any briefdown node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, _NODE_CLASSES):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_value(data[f.name])
    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict) and "_type" in value:
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
