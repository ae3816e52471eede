# viewplay/tree/codec.py
"""
Node tree encoding.

Trees become nested plain dicts (JSON-compatible) and decode back to equal
trees. Tuple values are tagged so that they survive JSON, which has no tuple
type.
"""

from __future__ import annotations
from typing import Any, Dict
import json

from viewplay.tree.nodes import (
    Node, Leaf, Modified, Composite, CompositeKind, Modifier, Channel,
)
from viewplay.tree.style import Color, Shape


FORMAT_VERSION = 1


# =============================================================================
# Values
# =============================================================================

def _encode_value(value: Any) -> Any:
    if isinstance(value, Color):
        return {"$color": list(value.to_tuple())}
    if isinstance(value, Shape):
        return {"$shape": value.name, "corner_radius": value.corner_radius}
    if isinstance(value, tuple):
        return {"$tuple": [_encode_value(v) for v in value]}
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    raise TypeError(f"Cannot encode value of type {type(value).__name__}")


def _decode_value(data: Any) -> Any:
    if isinstance(data, dict):
        if "$color" in data:
            return Color(*data["$color"])
        if "$shape" in data:
            return Shape(data["$shape"], data.get("corner_radius", 0.0))
        if "$tuple" in data:
            return tuple(_decode_value(v) for v in data["$tuple"])
        raise ValueError(f"Unrecognised value record: {sorted(data)}")
    if isinstance(data, list):
        raise ValueError("Lists must be encoded as $tuple records")
    return data


# =============================================================================
# Nodes
# =============================================================================

def _encode_kind(kind: CompositeKind) -> Dict[str, Any]:
    record: Dict[str, Any] = {"name": kind.name}
    if kind.arity is not None:
        record["arity"] = kind.arity
    if kind.axis is not None:
        record["axis"] = kind.axis
    if kind.branch is not None:
        record["branch"] = kind.branch
    return record


def encode(node: Node) -> Dict[str, Any]:
    """Encode a node tree as nested dicts."""
    if isinstance(node, Leaf):
        return {"type": "leaf", "kind": node.kind, "payload": _encode_value(node.payload)}
    if isinstance(node, Modified):
        return {
            "type": "modified",
            "modifier": {
                "channel": node.modifier.channel.value,
                "name": node.modifier.name,
                "value": _encode_value(node.modifier.value),
            },
            "base": encode(node.base),
        }
    if isinstance(node, Composite):
        return {
            "type": "composite",
            "kind": _encode_kind(node.kind),
            "children": [encode(c) for c in node.children],
        }
    raise TypeError(f"Cannot encode {type(node).__name__}")


def decode(data: Dict[str, Any]) -> Node:
    """
    Rebuild a node tree from `encode` output.

    Construction rules apply on the way back, so a record for a tuple with the
    wrong child count raises ArityError.
    """
    if not isinstance(data, dict) or "type" not in data:
        raise ValueError(f"Not a node record: {data!r}")
    node_type = data["type"]
    if node_type == "leaf":
        return Leaf(data["kind"], _decode_value(data["payload"]))
    if node_type == "modified":
        m = data["modifier"]
        modifier = Modifier(Channel(m["channel"]), m["name"], _decode_value(m.get("value")))
        return Modified(decode(data["base"]), modifier)
    if node_type == "composite":
        k = data["kind"]
        kind = CompositeKind(k["name"], k.get("arity"), k.get("axis"), k.get("branch"))
        return Composite(kind, tuple(decode(c) for c in data["children"]))
    raise ValueError(f"Unknown node type: {node_type!r}")


def dumps(node: Node, indent: int = None) -> str:
    return json.dumps({"version": FORMAT_VERSION, "root": encode(node)}, indent=indent)


def loads(text: str) -> Node:
    document = json.loads(text)
    version = document.get("version")
    if version != FORMAT_VERSION:
        raise ValueError(f"Unsupported format version: {version!r}")
    return decode(document["root"])
