"""
View Tree

Immutable node values, modifiers and their encoding.

Components:
- style: Color and Shape payloads, ResolvedStyle
- nodes: Leaf / Modified / Composite variants and tree utilities
- modifiers: apply, apply_if, apply_either and named modifier builders
- codec: nested-dict and JSON encoding

Example usage:

    from viewplay.tree import vstack, text, modifiers as m

    root = vstack(text("Hello"), text("World")).apply(m.font("large"))
    child = m.apply_if(text("Hi"), is_selected, m.blur(2))
"""

from viewplay.tree.style import Color, Shape, ResolvedStyle, EMPTY_STYLE
from viewplay.tree.nodes import (
    Node, Leaf, Modified, Composite, CompositeKind, Modifier, Channel,
    MAX_TUPLE_ARITY, Path,
    leaf, composite, wrap,
    text, color, shape, vstack, hstack, zstack, group, tuple_of,
    walk, depth, node_count, node_at, replace_at, append_child, remove_child,
)
from viewplay.tree import modifiers
from viewplay.tree.codec import encode, decode, dumps, loads

__all__ = [
    # Style
    "Color", "Shape", "ResolvedStyle", "EMPTY_STYLE",
    # Nodes
    "Node", "Leaf", "Modified", "Composite", "CompositeKind", "Modifier", "Channel",
    "MAX_TUPLE_ARITY", "Path",
    "leaf", "composite", "wrap",
    "text", "color", "shape", "vstack", "hstack", "zstack", "group", "tuple_of",
    "walk", "depth", "node_count", "node_at", "replace_at", "append_child", "remove_child",
    # Modifiers
    "modifiers",
    # Codec
    "encode", "decode", "dumps", "loads",
]
