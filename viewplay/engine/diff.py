# viewplay/engine/diff.py
"""
Diff Engine

Compares two resolved trees position by position and produces an ordered
change list (pre-order, paths in the current tree):

- Reuse: same shape, same resolved style
- Update: same shape, different style or leaf payload
- Replace: different shape; the whole subtree is new

Shape comparison is purely structural (see Node.shape_key); node identity
never plays a part.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Sequence, Tuple

from viewplay.core.config import PlaygroundConfig, DEFAULT_CONFIG
from viewplay.engine.environment import resolve
from viewplay.tree.nodes import Node, Leaf, Modified, Path, replace_at
from viewplay.tree.style import ResolvedStyle


# =============================================================================
# Changes
# =============================================================================

@dataclass(frozen=True)
class Reuse:
    path: Path
    kind: ClassVar[str] = "reuse"


@dataclass(frozen=True)
class Update:
    path: Path
    new_style: ResolvedStyle
    payload: Optional[Any] = None  # Set when a leaf's payload changed
    kind: ClassVar[str] = "update"


@dataclass(frozen=True)
class Replace:
    path: Path
    new_subtree: Node
    kind: ClassVar[str] = "replace"


Change = (Reuse, Update, Replace)


def comparable(a: Node, b: Node) -> bool:
    return a.shape_key() == b.shape_key()


def summarize(changes: Sequence) -> Counter:
    """Count changes by kind."""
    return Counter(c.kind for c in changes)


# =============================================================================
# Diff
# =============================================================================

class _Side:
    """One tree and its resolved styles; realigned sides carry a tree with some wrappers peeled off."""

    __slots__ = ('root', 'styles', 'config')

    def __init__(self, root: Node, config: PlaygroundConfig):
        self.root = root
        self.config = config
        self.styles = resolve(root, config)

    def without_wrappers(self, path: Path, inner: Node) -> _Side:
        """Styles as if the wrappers above `inner` at `path` were not there."""
        return _Side(replace_at(self.root, path, inner), self.config)


def diff(previous: Node, current: Node, config: PlaygroundConfig = None) -> List:
    """
    Ordered change list turning `previous` into `current`.

    When a position is replaced only because wrappers were added or removed
    around otherwise comparable content, comparison continues with that
    content so it can still be reported as reused.
    """
    config = config or DEFAULT_CONFIG
    changes: List = []
    _compare(
        previous, (), _Side(previous, config),
        current, (), (), _Side(current, config),
        config, changes,
    )
    return changes


def _compare(
    prev: Node, prev_path: Path, prev_side: _Side,
    cur: Node, cur_path: Path, cur_style_path: Path, cur_side: _Side,
    config: PlaygroundConfig, changes: List,
    emit_self: bool = True,
):
    if comparable(prev, cur):
        if emit_self:
            old_style = prev_side.styles[prev_path]
            new_style = cur_side.styles[cur_style_path]
            payload_changed = isinstance(cur, Leaf) and prev.payload != cur.payload
            if old_style != new_style or payload_changed:
                changes.append(Update(cur_path, new_style, cur.payload if payload_changed else None))
            elif config.emit_reuse:
                changes.append(Reuse(cur_path))
        for i, (p, c) in enumerate(zip(prev.children, cur.children)):
            _compare(
                p, prev_path + (i,), prev_side,
                c, cur_path + (i,), cur_style_path + (i,), cur_side,
                config, changes,
            )
        return

    changes.append(Replace(cur_path, cur))

    # Wrappers added around the old content
    inner, levels = _strip_until_comparable(cur, prev)
    if inner is not None and levels:
        realigned = cur_side.without_wrappers(cur_style_path, inner)
        _compare(
            prev, prev_path, prev_side,
            inner, cur_path + (0,) * levels, cur_style_path, realigned,
            config, changes,
        )
        return

    # Wrappers removed from around the new content
    inner, levels = _strip_until_comparable(prev, cur)
    if inner is not None and levels:
        realigned = prev_side.without_wrappers(prev_path, inner)
        _compare(
            inner, prev_path, realigned,
            cur, cur_path, cur_style_path, cur_side,
            config, changes, emit_self=False,
        )


def _strip_until_comparable(node: Node, target: Node) -> Tuple[Optional[Node], int]:
    """Peel Modified wrappers off `node` until it matches `target`'s shape."""
    levels = 0
    while isinstance(node, Modified):
        node = node.base
        levels += 1
        if comparable(node, target):
            return node, levels
    return None, 0
