# viewplay/core/errors.py
"""
Playground errors.

Only two failure kinds exist at the system level:
- ArityError: a composite was built with the wrong number of children
- StepError: a transformation step of a run failed
"""

from __future__ import annotations
from typing import Optional


class PlaygroundError(Exception):
    """Base class for playground failures."""


class ArityError(PlaygroundError, ValueError):
    """Composite child count does not match its kind, or exceeds the tuple ceiling."""

    def __init__(self, kind: str, expected: Optional[int], actual: int, message: str = None):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"{kind} expects {expected} children, got {actual}"
        super().__init__(message)


class StepError(PlaygroundError):
    """A transformation step raised or produced something that is not a Node."""

    def __init__(self, index: int, message: str):
        self.index = index
        super().__init__(f"step {index} failed: {message}")
