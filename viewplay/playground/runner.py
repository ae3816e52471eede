# viewplay/playground/runner.py
"""
Playground Runner

Feeds a chain of user edits through the tree model: each step turns the
previous node into the next one, both are resolved and diffed, and the result
is recorded. A failing step ends the run but everything computed before it is
kept and returned.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple, Union
import logging

from viewplay.core.config import PlaygroundConfig, DEFAULT_CONFIG
from viewplay.core.errors import StepError
from viewplay.core.signal import SignalBridge, RunSignal
from viewplay.engine.diff import diff, summarize
from viewplay.tree.nodes import Node

logger = logging.getLogger(__name__)

Transform = Callable[[Node], Node]


# =============================================================================
# Steps and Results
# =============================================================================

@dataclass(frozen=True)
class Step:
    """A labelled transformation."""
    label: str
    transform: Transform

    def __call__(self, node: Node) -> Node:
        return self.transform(node)


def step(label: str) -> Callable[[Transform], Step]:
    """Decorator turning a function into a labelled Step."""
    def decorator(func: Transform) -> Step:
        return Step(label, func)
    return decorator


def _label_of(item: Union[Step, Transform], index: int) -> str:
    if isinstance(item, Step):
        return item.label
    name = getattr(item, "__name__", "")
    return name if name and name != "<lambda>" else f"step {index}"


@dataclass(frozen=True)
class StepResult:
    index: int
    label: str
    node: Node
    changes: Tuple = ()

    @property
    def counts(self):
        return summarize(self.changes)


@dataclass(frozen=True)
class RunResult:
    initial: Node
    results: Tuple[StepResult, ...] = ()
    error: Optional[StepError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def final(self) -> Node:
        """Last node successfully produced (the initial node if none were)."""
        return self.results[-1].node if self.results else self.initial

    def raise_for_error(self):
        if self.error is not None:
            raise self.error

    def __len__(self) -> int:
        return len(self.results)


# =============================================================================
# Run
# =============================================================================

def _apply_step(item: Union[Step, Transform], index: int, previous: Node) -> Node:
    try:
        node = item(previous)
    except Exception as e:
        raise StepError(index, f"{type(e).__name__}: {e}") from e
    if not isinstance(node, Node):
        raise StepError(index, f"returned {type(node).__name__}, expected a Node")
    return node


def _advance(
    item: Union[Step, Transform], index: int, label: str, previous: Node, config: PlaygroundConfig,
) -> StepResult:
    """Apply one step and diff its output; any failure comes out as StepError."""
    node = _apply_step(item, index, previous)
    try:
        changes = tuple(diff(previous, node, config))
    except Exception as e:
        raise StepError(index, f"{type(e).__name__}: {e}") from e
    return StepResult(index, label, node, changes)


def run(
    initial: Node,
    steps: Iterable[Union[Step, Transform]],
    config: PlaygroundConfig = None,
    bridge: SignalBridge = None,
) -> RunResult:
    """
    Apply `steps` in order starting from `initial`.

    Returns every StepResult produced. If a step fails the run stops there
    and the StepError is attached to the returned RunResult instead of being
    raised.
    """
    config = config or DEFAULT_CONFIG
    previous = initial
    results: List[StepResult] = []
    error: Optional[StepError] = None

    if bridge:
        bridge.begin_run()

    for index, item in enumerate(steps):
        label = _label_of(item, index)
        try:
            result = _advance(item, index, label, previous, config)
        except StepError as e:
            logger.warning(f"Run halted at step {index} ({label}): {e}")
            error = e
            if bridge:
                bridge.emit(RunSignal.STEP_FAILED, e)
            break

        logger.debug(f"Step {index} ({label}): {dict(result.counts)}")
        results.append(result)
        if bridge:
            bridge.emit(RunSignal.STEP_APPLIED, result)
        previous = result.node

    run_result = RunResult(initial, tuple(results), error)
    if bridge:
        bridge.emit(RunSignal.RUN_FINISHED, run_result)
    return run_result


# =============================================================================
# Interactive Session
# =============================================================================

@dataclass
class Playground:
    """
    Interactive session keeping the edit history of one tree.

    Unlike run(), apply() raises StepError straight away; the session state is
    left untouched when it does.
    """
    initial: Node
    config: PlaygroundConfig = field(default_factory=lambda: DEFAULT_CONFIG)
    bridge: Optional[SignalBridge] = None
    history: List[StepResult] = field(default_factory=list)

    @property
    def current(self) -> Node:
        return self.history[-1].node if self.history else self.initial

    def apply(self, item: Union[Step, Transform]) -> StepResult:
        index = len(self.history)
        label = _label_of(item, index)
        try:
            result = _advance(item, index, label, self.current, self.config)
        except StepError as e:
            logger.warning(f"Step {index} ({label}) rejected: {e}")
            if self.bridge:
                self.bridge.emit(RunSignal.STEP_FAILED, e)
            raise

        self.history.append(result)
        if self.bridge:
            self.bridge.emit(RunSignal.STEP_APPLIED, result)
        return result

    def run(self, steps: Iterable[Union[Step, Transform]]) -> RunResult:
        """Run steps from the current node; successful results join the history."""
        offset = len(self.history)
        outcome = run(self.current, steps, self.config, self.bridge)
        for r in outcome.results:
            self.history.append(StepResult(r.index + offset, r.label, r.node, r.changes))
        return outcome

    def rewind(self, count: int = 1) -> Node:
        """Drop the last `count` steps and return the node that is current afterwards."""
        if count < 0 or count > len(self.history):
            raise ValueError(f"Cannot rewind {count} steps, history has {len(self.history)}")
        if count:
            del self.history[-count:]
        if self.bridge:
            self.bridge.emit(RunSignal.REWOUND, self.current)
        return self.current
