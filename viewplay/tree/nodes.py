# viewplay/tree/nodes.py
"""
Node Model - immutable view tree values.

Node variants (closed set):
- Leaf: text, color or shape with an immutable payload
- Modified: exactly one base node wrapped by a Modifier
- Composite: ordered children grouped as a stack, tuple, group or conditional

Design:
- Nodes are frozen dataclasses; children are tuples
- Every edit returns a new tree that shares untouched subtrees
- Equality is structural, never by reference
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Sequence, Tuple, Union

from viewplay.core.errors import ArityError
from viewplay.tree.style import Color, Shape


MAX_TUPLE_ARITY = 10
MIN_TUPLE_ARITY = 2

LEAF_KINDS = ("text", "color", "shape")
STACK_AXES = ("vertical", "horizontal", "depth")
COMPOSITE_NAMES = ("stack", "tuple", "group", "conditional")

Path = Tuple[int, ...]


# =============================================================================
# Modifier
# =============================================================================

class Channel(Enum):
    DIRECT = "direct"
    ENVIRONMENT = "environment"


@dataclass(frozen=True)
class Modifier:
    """
    A named modifier on one of two channels.

    DIRECT values fold together with other DIRECT modifiers of the same name.
    ENVIRONMENT values flow down to descendants until overridden.
    A value of None makes the modifier inert: it wraps but changes nothing.
    """
    channel: Channel
    name: str
    value: Any = None

    def __post_init__(self):
        if not isinstance(self.channel, Channel):
            object.__setattr__(self, "channel", Channel(self.channel))
        if not self.name:
            raise ValueError("Modifier name must be non-empty")
        if isinstance(self.value, list):
            object.__setattr__(self, "value", tuple(self.value))
        try:
            hash(self.value)
        except TypeError:
            raise TypeError(f"Modifier value for {self.name!r} must be immutable, got {type(self.value).__name__}")

    @property
    def is_direct(self) -> bool:
        return self.channel is Channel.DIRECT

    @property
    def is_inert(self) -> bool:
        return self.value is None

    def inert(self) -> Modifier:
        """Same channel and name, no effect."""
        return Modifier(self.channel, self.name, None)

    def __str__(self) -> str:
        return f"{self.channel.value}.{self.name}({self.value!r})"


# =============================================================================
# Composite Kind
# =============================================================================

@dataclass(frozen=True)
class CompositeKind:
    """Kind of a composite: stack (with axis), tuple (with arity), group, conditional (with branch)."""
    name: str
    arity: Optional[int] = None
    axis: Optional[str] = None
    branch: Optional[bool] = None

    def __post_init__(self):
        if self.name not in COMPOSITE_NAMES:
            raise ValueError(f"Unknown composite kind: {self.name!r}")
        if self.name == "stack" and self.axis not in STACK_AXES:
            raise ValueError(f"Unknown stack axis: {self.axis!r}")

    @staticmethod
    def stack(axis: str = "vertical") -> CompositeKind:
        return CompositeKind("stack", axis=axis)

    @staticmethod
    def tuple_of(n: int) -> CompositeKind:
        return CompositeKind("tuple", arity=n)

    @staticmethod
    def group() -> CompositeKind:
        return CompositeKind("group")

    @staticmethod
    def conditional(branch: bool) -> CompositeKind:
        return CompositeKind("conditional", branch=bool(branch))

    @property
    def label(self) -> str:
        if self.name == "tuple":
            return f"tupleOf({self.arity})"
        if self.name == "stack":
            return f"stack({self.axis})"
        if self.name == "conditional":
            return f"conditional({str(self.branch).lower()})"
        return self.name


# =============================================================================
# Nodes
# =============================================================================

class Node(ABC):
    """
    Capability shared by all node variants.

    Callers use `children`, `shape_key()` and `apply()` and never need the
    concrete variant.
    """

    children: Tuple[Node, ...]

    @abstractmethod
    def shape_key(self) -> tuple:
        """Structural identity: equal keys mean two nodes are comparable."""

    def apply(self, modifier: Modifier) -> Node:
        return wrap(self, modifier)


@dataclass(frozen=True)
class Leaf(Node):
    kind: str
    payload: Any

    def __post_init__(self):
        if self.kind not in LEAF_KINDS:
            raise ValueError(f"Unknown leaf kind: {self.kind!r}")
        object.__setattr__(self, "payload", _coerce_payload(self.kind, self.payload))

    @property
    def children(self) -> Tuple[Node, ...]:
        return ()

    def shape_key(self) -> tuple:
        return ("leaf", self.kind)


@dataclass(frozen=True)
class Modified(Node):
    base: Node
    modifier: Modifier

    def __post_init__(self):
        if not isinstance(self.base, Node):
            raise TypeError(f"Modified base must be a Node, got {type(self.base).__name__}")
        if not isinstance(self.modifier, Modifier):
            raise TypeError(f"Expected a Modifier, got {type(self.modifier).__name__}")

    @property
    def children(self) -> Tuple[Node, ...]:
        return (self.base,)

    def shape_key(self) -> tuple:
        return ("modified", self.base.shape_key())


@dataclass(frozen=True)
class Composite(Node):
    kind: CompositeKind
    children: Tuple[Node, ...] = field(default=())

    def __post_init__(self):
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, Node):
                raise TypeError(f"Composite children must be Nodes, got {type(child).__name__}")
        object.__setattr__(self, "children", children)
        _check_arity(self.kind, len(children))

    def shape_key(self) -> tuple:
        return ("composite", self.kind, len(self.children))

    def with_children(self, children: Sequence[Node]) -> Composite:
        return Composite(self.kind, tuple(children))


def _check_arity(kind: CompositeKind, count: int):
    if kind.name == "tuple":
        n = kind.arity
        if n is None or n > MAX_TUPLE_ARITY or n < MIN_TUPLE_ARITY:
            raise ArityError(
                kind.label, n, count,
                f"{kind.label} is outside the supported arity range "
                f"{MIN_TUPLE_ARITY}..{MAX_TUPLE_ARITY}",
            )
        if count != n:
            raise ArityError(kind.label, n, count)
    elif kind.name == "conditional":
        if count != 1:
            raise ArityError(kind.label, 1, count)


def _coerce_payload(kind: str, payload: Any) -> Any:
    if kind == "text":
        if not isinstance(payload, str):
            raise ValueError(f"text payload must be a string, got {type(payload).__name__}")
        return payload
    if kind == "color":
        return Color.coerce(payload)
    if isinstance(payload, Shape):
        return payload
    if isinstance(payload, str):
        return Shape(payload)
    raise ValueError(f"shape payload must be a Shape or shape name, got {payload!r}")


# =============================================================================
# Construction
# =============================================================================

def leaf(kind: str, payload: Any) -> Node:
    return Leaf(kind, payload)


def composite(kind: CompositeKind, children: Sequence[Node]) -> Node:
    """Build a composite; raises ArityError when a tuple or conditional has the wrong child count."""
    return Composite(kind, tuple(children))


def wrap(base: Node, modifier: Modifier) -> Node:
    return Modified(base, modifier)


def text(content: str) -> Node:
    return Leaf("text", content)


def color(value: Union[Color, str, Tuple[float, ...]]) -> Node:
    return Leaf("color", value)


def shape(name: str = "rectangle", corner_radius: float = 0.0) -> Node:
    return Leaf("shape", Shape(name, corner_radius))


def vstack(*children: Node) -> Node:
    return Composite(CompositeKind.stack("vertical"), children)


def hstack(*children: Node) -> Node:
    return Composite(CompositeKind.stack("horizontal"), children)


def zstack(*children: Node) -> Node:
    return Composite(CompositeKind.stack("depth"), children)


def group(*children: Node) -> Node:
    return Composite(CompositeKind.group(), children)


def tuple_of(*children: Node) -> Node:
    return Composite(CompositeKind.tuple_of(len(children)), children)


# =============================================================================
# Tree Utilities
# =============================================================================

def walk(node: Node, path: Path = ()) -> Iterator[Tuple[Path, Node]]:
    """Pre-order (path, node) pairs."""
    yield path, node
    for i, child in enumerate(node.children):
        yield from walk(child, path + (i,))


def depth(node: Node) -> int:
    """Number of levels; a lone leaf has depth 1."""
    return 1 + max((depth(c) for c in node.children), default=0)


def node_count(node: Node) -> int:
    return 1 + sum(node_count(c) for c in node.children)


def node_at(root: Node, path: Path) -> Node:
    node = root
    for index in path:
        children = node.children
        if not 0 <= index < len(children):
            raise IndexError(f"No child {index} at {node.shape_key()[0]} node on path {path}")
        node = children[index]
    return node


def replace_at(root: Node, path: Path, new: Node) -> Node:
    """
    Return a tree with the node at `path` swapped for `new`.

    Only the nodes along the path are rebuilt; every other subtree is shared
    with `root`.
    """
    if not path:
        return new
    index, rest = path[0], path[1:]
    children = root.children
    if not 0 <= index < len(children):
        raise IndexError(f"No child {index} on path {path}")
    replaced = replace_at(children[index], rest, new)
    if isinstance(root, Modified):
        return Modified(replaced, root.modifier)
    return Composite(root.kind, children[:index] + (replaced,) + children[index + 1:])


def append_child(root: Node, path: Path, child: Node) -> Node:
    """Append `child` to the composite at `path`; tuples keep their arity and so reject it."""
    target = node_at(root, path)
    if not isinstance(target, Composite):
        raise TypeError(f"Node at {path} is not a composite")
    return replace_at(root, path, target.with_children(target.children + (child,)))


def remove_child(root: Node, path: Path, index: int) -> Node:
    target = node_at(root, path)
    if not isinstance(target, Composite):
        raise TypeError(f"Node at {path} is not a composite")
    children = target.children[:index] + target.children[index + 1:]
    return replace_at(root, path, target.with_children(children))
