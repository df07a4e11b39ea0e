# procshade/fragment.py
from dataclasses import dataclass

from procshade.types import Vector3


@dataclass(frozen=True, slots=True)
class Fragment:
    """
    A rasterized sample handed over by the rasterizer.

    vertex_position is the interpolated surface-local position used as noise
    input. intensity is the lighting factor; it is not clamped here.
    """

    vertex_position: Vector3
    depth: float = 0.0
    intensity: float = 1.0
