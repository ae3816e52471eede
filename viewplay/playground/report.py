# viewplay/playground/report.py
"""
Text rendering of trees, styles and change lists for console front-ends.
"""

from __future__ import annotations
from typing import Any, Dict, List, Sequence

from viewplay.engine.diff import Reuse, Update, Replace, summarize
from viewplay.playground.runner import RunResult
from viewplay.tree.nodes import Node, Leaf, Modified, Composite, Path, walk
from viewplay.tree.style import Color, Shape, ResolvedStyle


def format_path(path: Path) -> str:
    return "/" + "/".join(str(i) for i in path)


def _format_value(value: Any) -> str:
    if isinstance(value, Color):
        return value.to_hex()
    if isinstance(value, Shape):
        if value.corner_radius:
            return f"{value.name}(r={value.corner_radius:g})"
        return value.name
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, tuple):
        return "(" + ", ".join(_format_value(v) for v in value) + ")"
    return repr(value)


def format_style(style: ResolvedStyle) -> str:
    if style.is_empty():
        return "{}"
    parts = [f"{k}={_format_value(v)}" for k, v in style.environment]
    parts += [f"{k}+={_format_value(v)}" for k, v in style.direct]
    return "{" + ", ".join(parts) + "}"


def describe(node: Node) -> str:
    """One-line label for a node, without its children."""
    if isinstance(node, Leaf):
        return f"{node.kind} {_format_value(node.payload)}"
    if isinstance(node, Modified):
        m = node.modifier
        value = "inert" if m.is_inert else _format_value(m.value)
        return f".{m.name}({value}) [{m.channel.value}]"
    if isinstance(node, Composite):
        return f"{node.kind.label} [{len(node.children)}]"
    return type(node).__name__


def format_tree(node: Node, styles: Dict[Path, ResolvedStyle] = None, indent: str = "  ") -> str:
    """Indented outline of a tree; leaf styles are appended when `styles` is given."""
    lines: List[str] = []
    for path, n in walk(node):
        line = indent * len(path) + describe(n)
        if styles is not None and not n.children:
            line += "  " + format_style(styles[path])
        lines.append(line)
    return "\n".join(lines)


def format_changes(changes: Sequence) -> str:
    lines: List[str] = []
    for change in changes:
        where = format_path(change.path)
        if isinstance(change, Update):
            detail = format_style(change.new_style)
            if change.payload is not None:
                detail += f" payload={_format_value(change.payload)}"
            lines.append(f"update  {where}  {detail}")
        elif isinstance(change, Replace):
            lines.append(f"replace {where}  -> {describe(change.new_subtree)}")
        elif isinstance(change, Reuse):
            lines.append(f"reuse   {where}")
    return "\n".join(lines)


def format_run(result: RunResult) -> str:
    blocks: List[str] = []
    for r in result.results:
        counts = summarize(r.changes)
        header = (f"#{r.index} {r.label}: {counts.get('replace', 0)} replace, "
                  f"{counts.get('update', 0)} update, {counts.get('reuse', 0)} reuse")
        blocks.append(header + "\n" + format_changes(r.changes))
    if result.error is not None:
        blocks.append(f"halted: {result.error}")
    return "\n\n".join(blocks)
