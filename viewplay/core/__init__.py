"""Core services: errors, configuration and the signal hub."""

from viewplay.core.errors import PlaygroundError, ArityError, StepError
from viewplay.core.config import PlaygroundConfig, DEFAULT_CONFIG
from viewplay.core.signal import SignalBridge, SignalDebugger, Connection, RunSignal, RunEvent

__all__ = [
    "PlaygroundError", "ArityError", "StepError",
    "PlaygroundConfig", "DEFAULT_CONFIG",
    "SignalBridge", "SignalDebugger", "Connection", "RunSignal", "RunEvent",
]
