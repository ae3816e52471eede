# viewplay/tree/modifiers.py
"""
Modifier Engine

Applying a modifier never touches the node it is given: the result is a new
Modified node one level deeper that shares the original as its base.

Conditional application comes in two flavours:
- apply_if: one persistent node whose modifier is switched on or off
- apply_either: two distinct branches, each with its own identity
"""

from __future__ import annotations
from typing import Any, Tuple, Union

from viewplay.tree.nodes import (
    Node, Modifier, Channel, CompositeKind, Composite, wrap,
)
from viewplay.tree.style import Color


def apply(node: Node, modifier: Modifier) -> Node:
    return wrap(node, modifier)


def apply_if(node: Node, condition: bool, modifier: Modifier) -> Node:
    """
    Apply `modifier` when `condition` holds, otherwise its inert form.

    Both outcomes have the same shape, so flipping the condition is seen by
    the diff engine as an update of one node rather than a swap of two.
    Either way the result is one level deeper than `node`.
    """
    if condition:
        return wrap(node, modifier)
    return wrap(node, modifier.inert())


def apply_either(node: Node, condition: bool, when_true: Modifier, when_false: Modifier) -> Node:
    """
    Branch between two modifiers the way an if/else over two views would.

    Each branch is wrapped in conditional content tagged with the branch taken,
    so the true and false results never compare as the same node and a switch
    between them is always a Replace.
    """
    chosen = when_true if condition else when_false
    return Composite(CompositeKind.conditional(condition), (wrap(node, chosen),))


def chain(node: Node, *modifiers: Modifier) -> Node:
    """Apply modifiers in order; the first one ends up innermost."""
    for modifier in modifiers:
        node = wrap(node, modifier)
    return node


# =============================================================================
# Modifier Builders
# =============================================================================

def direct(name: str, value: Any) -> Modifier:
    return Modifier(Channel.DIRECT, name, value)


def environment(name: str, value: Any) -> Modifier:
    return Modifier(Channel.ENVIRONMENT, name, value)


def inert(modifier: Modifier) -> Modifier:
    return modifier.inert()


# Direct: folded with nested modifiers of the same name

def blur(radius: float) -> Modifier:
    return direct("blur", float(radius))


def opacity(value: float) -> Modifier:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"opacity must be within 0..1, got {value}")
    return direct("opacity", float(value))


def padding(amount: float) -> Modifier:
    return direct("padding", float(amount))


def offset(x: float = 0.0, y: float = 0.0) -> Modifier:
    return direct("offset", (float(x), float(y)))


def scale(factor: float) -> Modifier:
    return direct("scale", float(factor))


def background(value: Union[Color, str, Tuple[float, ...]]) -> Modifier:
    return direct("background", Color.coerce(value))


# Environment: inherited by descendants until overridden

def font(name: str) -> Modifier:
    return environment("font", name)


def foreground_color(value: Union[Color, str, Tuple[float, ...]]) -> Modifier:
    return environment("foreground_color", Color.coerce(value))


def tint(value: Union[Color, str, Tuple[float, ...]]) -> Modifier:
    return environment("tint", Color.coerce(value))


def line_limit(lines: int) -> Modifier:
    return environment("line_limit", int(lines))
