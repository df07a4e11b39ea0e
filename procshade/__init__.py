# procshade/__init__.py
from procshade.color import Color
from procshade.fragment import Fragment
from procshade.noise import ValueNoise
from procshade.settings import (
    DEFAULT_SETTINGS,
    PatternKind,
    ShadingSettings,
)
from procshade.shading import (
    resolve_pattern,
    shade_fragment,
    shade_fragments,
    transform_vertices,
)
from procshade.types import Vector2, Vector3
from procshade.uniforms import NoiseSource, Uniforms
from procshade.vertex import Vertex, transform_vertex

__all__ = [
    "Color",
    "Fragment",
    "Vertex",
    "Vector2",
    "Vector3",
    "Uniforms",
    "NoiseSource",
    "ValueNoise",
    "PatternKind",
    "ShadingSettings",
    "DEFAULT_SETTINGS",
    "transform_vertex",
    "transform_vertices",
    "shade_fragment",
    "shade_fragments",
    "resolve_pattern",
]
