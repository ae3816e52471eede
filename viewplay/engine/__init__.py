"""
Resolution and diffing over view trees.

- environment: top-down style resolution (environment + direct channels)
- diff: structural comparison producing Reuse / Update / Replace records
"""

from viewplay.engine.environment import (
    resolve, resolve_leaves, style_at, trace, fold, COMBINATORS,
)
from viewplay.engine.diff import (
    diff, comparable, summarize, Reuse, Update, Replace, Change,
)

__all__ = [
    "resolve", "resolve_leaves", "style_at", "trace", "fold", "COMBINATORS",
    "diff", "comparable", "summarize", "Reuse", "Update", "Replace", "Change",
]
