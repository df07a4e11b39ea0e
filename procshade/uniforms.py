# procshade/uniforms.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class NoiseSource(Protocol):
    """Deterministic coordinate -> scalar oracle."""

    def sample_2d(self, x: float, y: float) -> float: ...

    def sample_3d(self, x: float, y: float, z: float) -> float: ...


def _identity4() -> np.ndarray:
    return np.eye(4, dtype=np.float64)


@dataclass(frozen=True, slots=True, eq=False)
class Uniforms:
    """
    Per-frame, read-only state shared by every vertex and fragment call.

    The owning frame loop publishes a new instance between frames instead of
    mutating this one.
    """

    noise: NoiseSource
    time: float = 0.0
    model_matrix: np.ndarray = field(default_factory=_identity4)
    view_matrix: np.ndarray = field(default_factory=_identity4)
    projection_matrix: np.ndarray = field(default_factory=_identity4)
    viewport_matrix: np.ndarray = field(default_factory=_identity4)

    def __post_init__(self):
        for name in (
            "model_matrix",
            "view_matrix",
            "projection_matrix",
            "viewport_matrix",
        ):
            mat = np.array(getattr(self, name), dtype=np.float64)
            if mat.shape != (4, 4):
                raise ValueError(f"{name} must be 4x4, got {mat.shape}")
            mat.setflags(write=False)
            object.__setattr__(self, name, mat)
