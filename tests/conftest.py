from dataclasses import dataclass, field

import numpy as np
import pytest

from procshade.fragment import Fragment
from procshade.types import Vector3
from procshade.uniforms import Uniforms


@dataclass(frozen=True)
class ConstantNoise:
    """Returns the same value for every coordinate."""

    value: float

    def sample_2d(self, x, y):
        return self.value

    def sample_3d(self, x, y, z):
        return self.value


@dataclass
class RecordingNoise:
    """Records every lookup and answers with a fixed value."""

    value: float = 0.0
    calls_2d: list = field(default_factory=list)
    calls_3d: list = field(default_factory=list)

    def sample_2d(self, x, y):
        self.calls_2d.append((x, y))
        return self.value

    def sample_3d(self, x, y, z):
        self.calls_3d.append((x, y, z))
        return self.value


def make_uniforms(noise=None, time=0.0, **matrices):
    return Uniforms(noise=noise or ConstantNoise(0.0), time=time, **matrices)


def make_fragment(x=0.25, y=-0.5, depth=0.0, intensity=1.0):
    return Fragment(
        vertex_position=Vector3(x, y, depth), depth=depth, intensity=intensity
    )


@pytest.fixture
def recording_noise():
    return RecordingNoise()


@pytest.fixture
def identity_uniforms():
    """Uniforms where every matrix is the identity."""
    return make_uniforms()


@pytest.fixture
def fragment():
    return make_fragment()


@pytest.fixture
def scaled_model():
    """Non-uniform scale plus a translation."""
    m = np.diag([2.0, 4.0, 0.5, 1.0])
    m[:3, 3] = (1.0, 2.0, 3.0)
    return m
