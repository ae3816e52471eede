"""
viewplay - a playground for declarative view composition.

Build immutable view trees, wrap them in modifiers, resolve how environment
and direct modifiers reach each node, and see what a diff between two
versions reuses, updates or replaces.

Components:
- core: errors, configuration, signal hub
- tree: node model, modifiers, codec
- engine: environment resolver, diff engine
- playground: step runner, interactive session, text reports

Example usage:

    from viewplay import vstack, text, modifiers as m, run, format_run

    root = vstack(text("Title"), text("Body")).apply(m.font("large"))
    result = run(root, [
        lambda n: n.apply(m.blur(5)),
        lambda n: m.apply_if(n, True, m.opacity(0.5)),
    ])
    print(format_run(result))
"""

from viewplay.core import (
    PlaygroundError, ArityError, StepError,
    PlaygroundConfig, DEFAULT_CONFIG, SignalBridge, RunSignal, RunEvent,
)
from viewplay.tree import (
    Node, Leaf, Modified, Composite, CompositeKind, Modifier, Channel,
    Color, Shape, ResolvedStyle,
    leaf, composite, wrap,
    text, color, shape, vstack, hstack, zstack, group, tuple_of,
    walk, depth, node_count, node_at, replace_at, append_child, remove_child,
    modifiers, encode, decode, dumps, loads,
)
from viewplay.engine import resolve, diff, summarize, Reuse, Update, Replace
from viewplay.playground import (
    run, step, Step, StepResult, RunResult, Playground,
    format_tree, format_changes, format_run,
)

__version__ = "0.1.0"

__all__ = [
    "PlaygroundError", "ArityError", "StepError",
    "PlaygroundConfig", "DEFAULT_CONFIG", "SignalBridge", "RunSignal", "RunEvent",
    "Node", "Leaf", "Modified", "Composite", "CompositeKind", "Modifier", "Channel",
    "Color", "Shape", "ResolvedStyle",
    "leaf", "composite", "wrap",
    "text", "color", "shape", "vstack", "hstack", "zstack", "group", "tuple_of",
    "walk", "depth", "node_count", "node_at", "replace_at", "append_child", "remove_child",
    "modifiers", "encode", "decode", "dumps", "loads",
    "resolve", "diff", "summarize", "Reuse", "Update", "Replace",
    "run", "step", "Step", "StepResult", "RunResult", "Playground",
    "format_tree", "format_changes", "format_run",
]
