# viewplay/engine/environment.py
"""
Environment Resolver

Walks a tree top-down and computes the effective style at every position.

Two independent channels:
- environment: a name -> value context; the nearest modifier wins
- direct: per-name value stacks, folded by the configured combinator
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence, Tuple
import numpy as np

from viewplay.core.config import PlaygroundConfig, DEFAULT_CONFIG
from viewplay.tree.nodes import Node, Modified, Modifier, Path, node_at
from viewplay.tree.style import ResolvedStyle


# =============================================================================
# Combinators
# =============================================================================

def _sum(values: Sequence[Any]) -> float:
    return float(np.sum(np.asarray(values, dtype=np.float64)))


def _product(values: Sequence[Any]) -> float:
    return float(np.prod(np.asarray(values, dtype=np.float64)))


def _vector_sum(values: Sequence[Any]) -> Tuple[float, ...]:
    stacked = np.asarray(values, dtype=np.float64)
    if stacked.ndim != 2:
        raise ValueError(f"vector_sum needs equal-length vectors, got {values!r}")
    return tuple(float(v) for v in stacked.sum(axis=0))


COMBINATORS: Dict[str, Callable[[Sequence[Any]], Any]] = {
    "sum": _sum,
    "product": _product,
    "vector_sum": _vector_sum,
    "latest": lambda values: values[-1],
    "first": lambda values: values[0],
    "max": lambda values: max(values),
}


def fold(name: str, values: Sequence[Any], config: PlaygroundConfig = DEFAULT_CONFIG) -> Any:
    """Fold outer-to-inner direct values for `name`."""
    return COMBINATORS[config.combinator_for(name)](values)


# =============================================================================
# Resolution
# =============================================================================

def resolve(root: Node, config: PlaygroundConfig = None) -> Dict[Path, ResolvedStyle]:
    """
    Resolve the style at every node position.

    Keys are paths from the root. The style recorded for a Modified node
    already includes its own modifier.
    """
    config = config or DEFAULT_CONFIG
    styles: Dict[Path, ResolvedStyle] = {}
    _visit(root, (), {}, {}, config, styles)
    return styles


def _visit(
    node: Node,
    path: Path,
    env: Dict[str, Any],
    stacks: Dict[str, Tuple[Any, ...]],
    config: PlaygroundConfig,
    styles: Dict[Path, ResolvedStyle],
):
    if isinstance(node, Modified) and not node.modifier.is_inert:
        m = node.modifier
        if m.is_direct:
            stacks = dict(stacks)
            stacks[m.name] = stacks.get(m.name, ()) + (m.value,)
        else:
            env = dict(env)
            env[m.name] = m.value

    folded = {name: fold(name, values, config) for name, values in stacks.items()}
    styles[path] = ResolvedStyle.build(env, folded)

    for i, child in enumerate(node.children):
        _visit(child, path + (i,), env, stacks, config, styles)


def resolve_leaves(root: Node, config: PlaygroundConfig = None) -> Dict[Path, ResolvedStyle]:
    """Resolved styles for leaf positions only."""
    styles = resolve(root, config)
    return {path: style for path, style in styles.items() if not node_at(root, path).children}


def style_at(root: Node, path: Path, config: PlaygroundConfig = None) -> ResolvedStyle:
    return resolve(root, config)[tuple(path)]


def trace(root: Node, path: Path) -> List[Tuple[Path, Modifier]]:
    """
    Modifiers that affect the node at `path`, outer to inner.

    Inert modifiers are skipped since they contribute nothing.
    """
    found: List[Tuple[Path, Modifier]] = []
    node = root
    for depth_index in range(len(path) + 1):
        here = tuple(path[:depth_index])
        if isinstance(node, Modified) and not node.modifier.is_inert:
            found.append((here, node.modifier))
        if depth_index < len(path):
            node = node.children[path[depth_index]]
    return found
