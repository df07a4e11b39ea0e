# procshade/color.py
from __future__ import annotations

import math
from dataclasses import dataclass

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def clamp_channel(value: float) -> int:
    """Clamps into [0, 255] and truncates toward zero. NaN maps to 0."""
    if math.isnan(value):
        return CHANNEL_MIN
    return int(min(max(value, CHANNEL_MIN), CHANNEL_MAX))


def clamp_unit(t: float) -> float:
    if math.isnan(t):
        return 0.0
    return min(max(t, 0.0), 1.0)


@dataclass(frozen=True, slots=True)
class Color:
    """8-bit RGB color. Arithmetic results are always clamped to range."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError(f"Color channel must be int, got {channel!r}")
            if not CHANNEL_MIN <= channel <= CHANNEL_MAX:
                raise ValueError(f"Color channel out of range: {channel}")

    @staticmethod
    def black() -> Color:
        return Color(0, 0, 0)

    @staticmethod
    def white() -> Color:
        return Color(255, 255, 255)

    @staticmethod
    def from_hex(value: int) -> Color:
        return Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_hex(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __mul__(self, scalar: float) -> Color:
        return Color(
            clamp_channel(self.r * scalar),
            clamp_channel(self.g * scalar),
            clamp_channel(self.b * scalar),
        )

    __rmul__ = __mul__

    def lerp(self, other: Color, t: float) -> Color:
        t = clamp_unit(t)
        return Color(
            clamp_channel(self.r + (other.r - self.r) * t),
            clamp_channel(self.g + (other.g - self.g) * t),
            clamp_channel(self.b + (other.b - self.b) * t),
        )
