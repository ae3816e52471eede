"""
Style Values

Immutable payload and style types shared by the node tree and the resolver.

Design principles:
- Everything is frozen and hashable (nodes compare by value)
- No string parsing after construction (colors are stored as floats)
- ResolvedStyle keeps the environment and direct channels apart
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Optional, Any, Dict, Union
import numpy as np


# =============================================================================
# Color
# =============================================================================

@dataclass(frozen=True)
class Color:
    """RGBA color with 0-1 range components."""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __post_init__(self):
        clipped = np.clip(np.array([self.r, self.g, self.b, self.a], dtype=np.float64), 0.0, 1.0)
        # Rounded so that hex and float spellings of one color compare equal
        for name, value in zip(("r", "g", "b", "a"), clipped):
            object.__setattr__(self, name, round(float(value), 6))

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=np.float32)

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, alpha)

    def to_hex(self) -> str:
        channels = np.rint(np.array(self.to_tuple()) * 255).astype(int)
        return "#" + "".join(f"{c:02x}" for c in channels)

    @staticmethod
    def from_hex(hex_str: str) -> Color:
        """Parse #RGB, #RGBA, #RRGGBB or #RRGGBBAA."""
        h = hex_str.lstrip('#')
        if len(h) in (3, 4):
            values = [int(c, 16) / 15 for c in h]
        elif len(h) in (6, 8):
            values = [int(h[i:i + 2], 16) / 255 for i in range(0, len(h), 2)]
        else:
            raise ValueError(f"Invalid hex color: {hex_str}")
        return Color(*values)

    @staticmethod
    def coerce(value: Union[Color, str, Tuple[float, ...]]) -> Color:
        """Accept a Color, a hex string, a named color or an RGB(A) tuple."""
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            if value in NAMED_COLORS:
                return NAMED_COLORS[value]
            return Color.from_hex(value)
        if isinstance(value, (tuple, list)) and len(value) in (3, 4):
            return Color(*(float(v) for v in value))
        raise ValueError(f"Cannot interpret {value!r} as a color")


NAMED_COLORS: Dict[str, Color] = {
    "clear": Color(0.0, 0.0, 0.0, 0.0),
    "black": Color(0.0, 0.0, 0.0),
    "white": Color(1.0, 1.0, 1.0),
    "red": Color(1.0, 0.23, 0.19),
    "green": Color(0.2, 0.78, 0.35),
    "blue": Color(0.0, 0.48, 1.0),
    "yellow": Color(1.0, 0.8, 0.0),
    "orange": Color(1.0, 0.58, 0.0),
    "gray": Color(0.56, 0.56, 0.58),
}


# =============================================================================
# Shape
# =============================================================================

SHAPE_NAMES = ("rectangle", "rounded_rectangle", "circle", "capsule", "ellipse")


@dataclass(frozen=True)
class Shape:
    """Shape descriptor for shape leaves."""
    name: str = "rectangle"
    corner_radius: float = 0.0

    def __post_init__(self):
        if self.name not in SHAPE_NAMES:
            raise ValueError(f"Unknown shape: {self.name!r}")
        if self.corner_radius < 0:
            raise ValueError("corner_radius must be >= 0")
        object.__setattr__(self, "corner_radius", float(self.corner_radius))


# =============================================================================
# Resolved Style
# =============================================================================

StyleItems = Tuple[Tuple[str, Any], ...]


@dataclass(frozen=True)
class ResolvedStyle:
    """
    Effective style at one node position.

    environment: inherited values, nearest ancestor wins
    direct: folded values of Direct modifiers on the path
    Both are stored as name-sorted item tuples so the style is hashable.
    """
    environment: StyleItems = ()
    direct: StyleItems = ()

    @staticmethod
    def build(environment: Dict[str, Any], direct: Dict[str, Any]) -> ResolvedStyle:
        return ResolvedStyle(
            environment=tuple(sorted(environment.items())),
            direct=tuple(sorted(direct.items())),
        )

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        """Look a name up, direct channel first."""
        for key, value in self.direct:
            if key == name:
                return value
        return self.get_environment(name, default)

    def get_environment(self, name: str, default: Optional[Any] = None) -> Any:
        for key, value in self.environment:
            if key == name:
                return value
        return default

    def get_direct(self, name: str, default: Optional[Any] = None) -> Any:
        for key, value in self.direct:
            if key == name:
                return value
        return default

    def as_dict(self) -> Dict[str, Any]:
        """Flatten both channels; direct values shadow environment values."""
        merged = dict(self.environment)
        merged.update(self.direct)
        return merged

    def is_empty(self) -> bool:
        return not self.environment and not self.direct


EMPTY_STYLE = ResolvedStyle()
