"""RGBA colours packed as 32-bit ARGB."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BaseColor(IntEnum):
    """Named 24-bit RGB colours."""

    RED = 0xFF0000
    GREEN = 0x00FF00
    BLUE = 0x0000FF
    WHITE = 0xFFFFFF
    BLACK = 0x000000
    YELLOW = 0xFFFF00
    CYAN = 0x00FFFF
    MAGENTA = 0xFF00FF


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel colour; opaque black by default."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range: {value}")

    @classmethod
    def from_argb(cls, value: int) -> Color:
        """Unpack a 32-bit ARGB value; the alpha comes from the top byte."""
        return cls(
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
            (value >> 24) & 0xFF,
        )

    def to_argb(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    @classmethod
    def lerp(cls, start: Color, end: Color, t: float) -> Color:
        """Blend linearly from ``start`` to ``end``; ``t`` is clamped to [0, 1]."""
        t = min(max(t, 0.0), 1.0)

        def mix(s: int, e: int) -> int:
            return int(s + (e - s) * t)

        return cls(
            mix(start.r, end.r),
            mix(start.g, end.g),
            mix(start.b, end.b),
            mix(start.a, end.a),
        )