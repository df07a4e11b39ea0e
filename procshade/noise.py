# procshade/noise.py
"""Hashed-lattice value noise, usable as the NoiseSource for Uniforms."""

import math
from dataclasses import dataclass

_PRIME_X = 501125321
_PRIME_Y = 1136930381
_PRIME_Z = 1720413743
_MASK32 = 0xFFFFFFFF


def _fade(t: float) -> float:
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _hash(seed: int, *coords: int) -> int:
    h = seed & _MASK32
    for prime, c in zip((_PRIME_X, _PRIME_Y, _PRIME_Z), coords):
        h ^= (c * prime) & _MASK32
    h = (h * h * h * 0x27D4EB2D) & _MASK32
    h ^= h >> 15
    return h


def _lattice(seed: int, *coords: int) -> float:
    """Lattice value in [-1, 1]."""
    return _hash(seed, *coords) / (_MASK32 / 2.0) - 1.0


@dataclass(frozen=True, slots=True)
class ValueNoise:
    """
    Smooth value noise in [-1, 1].

    Coordinates are multiplied by frequency before the lattice lookup.
    Non-finite coordinates sample as 0.
    """

    seed: int = 1337
    frequency: float = 0.01

    def sample_2d(self, x: float, y: float) -> float:
        x *= self.frequency
        y *= self.frequency
        if not (math.isfinite(x) and math.isfinite(y)):
            return 0.0

        x0 = math.floor(x)
        y0 = math.floor(y)
        tx = _fade(x - x0)
        ty = _fade(y - y0)

        s = self.seed
        top = _lerp(_lattice(s, x0, y0), _lattice(s, x0 + 1, y0), tx)
        bottom = _lerp(
            _lattice(s, x0, y0 + 1), _lattice(s, x0 + 1, y0 + 1), tx
        )
        return _lerp(top, bottom, ty)

    def sample_3d(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency
        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
            return 0.0

        x0 = math.floor(x)
        y0 = math.floor(y)
        z0 = math.floor(z)
        tx = _fade(x - x0)
        ty = _fade(y - y0)
        tz = _fade(z - z0)

        s = self.seed
        planes = []
        for zi in (z0, z0 + 1):
            top = _lerp(_lattice(s, x0, y0, zi), _lattice(s, x0 + 1, y0, zi), tx)
            bottom = _lerp(
                _lattice(s, x0, y0 + 1, zi), _lattice(s, x0 + 1, y0 + 1, zi), tx
            )
            planes.append(_lerp(top, bottom, ty))

        return _lerp(planes[0], planes[1], tz)
