"""Step runner, interactive session and text reports."""

from viewplay.playground.runner import (
    run, step, Step, StepResult, RunResult, Playground,
)
from viewplay.playground.report import (
    format_path, describe, format_tree, format_changes, format_run,
)

__all__ = [
    "run", "step", "Step", "StepResult", "RunResult", "Playground",
    "format_path", "describe", "format_tree", "format_changes", "format_run",
]
