# viewplay/core/config.py
"""
Playground configuration.

Combinators decide how nested Direct modifiers of the same name fold together.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Dict
import logging
import os


# Combinator keys understood by the environment resolver
COMBINATOR_KEYS = ("sum", "product", "vector_sum", "latest", "first", "max")


def _default_combinators() -> Dict[str, str]:
    return {
        "blur": "sum",
        "padding": "sum",
        "opacity": "product",
        "scale": "product",
        "offset": "vector_sum",
        "shadow": "max",
        "background": "latest",
    }


@dataclass(frozen=True)
class PlaygroundConfig:
    combinators: Dict[str, str] = field(default_factory=_default_combinators)
    default_combinator: str = "latest"
    emit_reuse: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        for name, key in self.combinators.items():
            if key not in COMBINATOR_KEYS:
                raise ValueError(f"Unknown combinator {key!r} for {name!r}")
        if self.default_combinator not in COMBINATOR_KEYS:
            raise ValueError(f"Unknown default combinator: {self.default_combinator!r}")

    def combinator_for(self, name: str) -> str:
        return self.combinators.get(name, self.default_combinator)

    def with_combinator(self, name: str, key: str) -> PlaygroundConfig:
        """Return a new config with one combinator registered or replaced."""
        combinators = dict(self.combinators)
        combinators[name] = key
        return replace(self, combinators=combinators)

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING

    @staticmethod
    def from_env(environ=None) -> PlaygroundConfig:
        """Build a config from VIEWPLAY_* environment variables."""
        env = os.environ if environ is None else environ
        emit_reuse = env.get("VIEWPLAY_EMIT_REUSE", "1").strip().lower() not in ("0", "false", "no", "off")
        return PlaygroundConfig(
            emit_reuse=emit_reuse,
            log_level=env.get("VIEWPLAY_LOG_LEVEL", "WARNING"),
        )


DEFAULT_CONFIG = PlaygroundConfig()
