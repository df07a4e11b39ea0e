# procshade/vertex.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

import numpy as np

from procshade.color import Color
from procshade.math import normal_matrix, perspective_divide, to_homogeneous
from procshade.types import Vector2, Vector3
from procshade.uniforms import Uniforms


@dataclass(frozen=True, slots=True)
class Vertex:
    """
    A mesh vertex.

    position, normal, tex_coords and color are inputs in model space.
    transformed_position (screen space) and transformed_normal (world space)
    are filled in by transform_vertex.
    """

    position: Vector3
    normal: Vector3
    tex_coords: Vector2 = field(default_factory=Vector2.zero)
    color: Color = field(default_factory=Color.black)
    transformed_position: Vector3 = field(default_factory=Vector3.zero)
    transformed_normal: Vector3 = field(default_factory=Vector3.zero)

    @staticmethod
    def new(
        position: Vector3,
        normal: Vector3,
        tex_coords: Optional[Vector2] = None,
    ) -> Vertex:
        """Vertex whose derived fields start as copies of the inputs."""
        return Vertex(
            position=position,
            normal=normal,
            tex_coords=Vector2.zero() if tex_coords is None else tex_coords,
            transformed_position=position,
            transformed_normal=normal,
        )


def transform_vertex(vertex: Vertex, uniforms: Uniforms) -> Vertex:
    point = to_homogeneous(vertex.position)

    clip = (
        uniforms.projection_matrix
        @ uniforms.view_matrix
        @ uniforms.model_matrix
        @ point
    )
    ndc = perspective_divide(clip)
    with np.errstate(invalid="ignore"):
        screen = uniforms.viewport_matrix @ ndc

    n_mat = normal_matrix(uniforms.model_matrix)
    transformed_normal = n_mat @ vertex.normal.to_array()

    return replace(
        vertex,
        transformed_position=Vector3.from_array(screen),
        transformed_normal=Vector3.from_array(transformed_normal),
    )
