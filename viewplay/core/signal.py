# viewplay/core/signal.py
"""
Run Signals

Observer hub for playground runs. Handlers subscribe to a RunSignal and are
called with a RunEvent carrying the payload and the number of the run that
produced it:

    STEP_APPLIED  -> StepResult
    STEP_FAILED   -> StepError
    RUN_FINISHED  -> RunResult
    REWOUND       -> Node (the session's current node afterwards)

Each call to run() opens a new run on the bridge, so handlers can tell apart
events from successive runs sharing one bridge.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List
import logging

logger = logging.getLogger(__name__)


class RunSignal(Enum):
    STEP_APPLIED = "step_applied"
    STEP_FAILED = "step_failed"
    RUN_FINISHED = "run_finished"
    REWOUND = "rewound"


@dataclass(frozen=True)
class RunEvent:
    signal: RunSignal
    payload: Any
    run: int  # 0 until the first run() on the bridge


Handler = Callable[[RunEvent], None]


@dataclass
class Connection:
    signal: RunSignal
    handler: Handler
    bridge: SignalBridge

    def disconnect(self):
        self.bridge.disconnect(self)


class SignalBridge:
    """Routes run events to connected handlers."""

    def __init__(self):
        self._connections: Dict[RunSignal, List[Connection]] = {s: [] for s in RunSignal}
        self.run = 0

    def connect(self, signal: RunSignal, handler: Handler) -> Connection:
        conn = Connection(RunSignal(signal), handler, self)
        self._connections[conn.signal].append(conn)
        return conn

    def disconnect(self, conn: Connection):
        connections = self._connections[conn.signal]
        if conn in connections:
            connections.remove(conn)

    def begin_run(self) -> int:
        self.run += 1
        return self.run

    def emit(self, signal: RunSignal, payload: Any):
        event = RunEvent(signal, payload, self.run)
        # Handlers may disconnect while we iterate
        for conn in list(self._connections[signal]):
            try:
                conn.handler(event)
            except Exception as e:
                logger.error(f"Signal handler error [{signal.value}]: {e}")


class SignalDebugger:
    """Logs run events at DEBUG level."""

    def __init__(self, bridge: SignalBridge):
        self.bridge = bridge
        self._connections: List[Connection] = []

    def watch(self, *signals: RunSignal):
        for signal in signals:
            self._connections.append(self.bridge.connect(signal, self._log))

    def watch_all(self):
        self.watch(*RunSignal)

    def _log(self, event: RunEvent):
        logger.debug(f"SIGNAL: {event.signal.value}[run {event.run}]({event.payload!r})")

    def detach(self):
        for conn in self._connections:
            conn.disconnect()
        self._connections.clear()
