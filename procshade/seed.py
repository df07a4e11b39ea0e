# procshade/seed.py
"""
Seed derivation for the pseudo-random patterns.

Seeds are unsigned 64-bit integers taken from float values by truncation
toward zero. Negative and NaN inputs saturate to 0, values past the top of
the range saturate to 2**64 - 1.
"""

import math

import numpy as np

U64_MAX = 2**64 - 1


def saturate_u64(value: float) -> int:
    value = float(value)
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= U64_MAX:
        return U64_MAX
    return int(value)


def tint_seed(time: float) -> int:
    """Seed shared by every fragment shaded at the same whole second."""
    return saturate_u64(time)


def monochrome_seed(time: float, x: float, y: float) -> int:
    # Single precision product, then |.| truncated
    with np.errstate(over="ignore", invalid="ignore"):
        product = np.float32(time) * np.float32(y) * np.float32(x)
    return saturate_u64(abs(float(product)))
