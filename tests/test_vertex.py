import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from procshade.color import Color
from procshade.math import (
    create_model_matrix,
    create_perspective_projection,
    create_view_matrix,
    create_viewport_matrix,
)
from procshade.shading import transform_vertices
from procshade.types import Quaternion, Vector2, Vector3
from procshade.vertex import Vertex, transform_vertex
from tests.conftest import make_uniforms


def _vertex():
    return Vertex(
        position=Vector3(1.0, 2.0, 3.0),
        normal=Vector3(0.0, 1.0, 1.0),
        tex_coords=Vector2(0.5, 0.25),
        color=Color(10, 20, 30),
    )


def test_identity_uniforms_keep_position(identity_uniforms):
    out = transform_vertex(_vertex(), identity_uniforms)
    assert out.transformed_position == Vector3(1.0, 2.0, 3.0)
    assert out.transformed_normal == Vector3(0.0, 1.0, 1.0)


def test_input_fields_untouched(scaled_model):
    v = _vertex()
    out = transform_vertex(v, make_uniforms(model_matrix=scaled_model))

    assert out.position == v.position
    assert out.normal == v.normal
    assert out.tex_coords == v.tex_coords
    assert out.color == v.color
    assert v.transformed_position == Vector3.zero()


def test_normal_uses_inverse_transpose(scaled_model):
    v = _vertex()
    out = transform_vertex(v, make_uniforms(model_matrix=scaled_model))

    expected = np.linalg.inv(scaled_model[:3, :3]).T @ v.normal.to_array()
    np.testing.assert_allclose(tuple(out.transformed_normal), expected)


def test_normal_not_renormalized(scaled_model):
    out = transform_vertex(_vertex(), make_uniforms(model_matrix=scaled_model))
    length = math.hypot(*out.transformed_normal)
    assert length == pytest.approx(math.hypot(0.25, 2.0))


def test_singular_model_keeps_normal():
    model = np.diag([0.0, 1.0, 1.0, 1.0])
    v = _vertex()
    out = transform_vertex(v, make_uniforms(model_matrix=model))

    assert out.transformed_normal == v.normal
    assert out.transformed_position == Vector3(0.0, 2.0, 3.0)


def test_projection_divides_by_w():
    # w ends up as 2 for every point
    projection = np.eye(4) * 2.0
    projection[3, 3] = 2.0
    v = Vertex(position=Vector3(4.0, 8.0, 12.0), normal=Vector3(0.0, 0.0, 1.0))
    out = transform_vertex(v, make_uniforms(projection_matrix=projection))
    assert out.transformed_position == Vector3(4.0, 8.0, 12.0)


def test_zero_w_does_not_raise():
    projection = np.eye(4)
    projection[3, 3] = 0.0
    v = Vertex(position=Vector3(1.0, 0.0, 0.0), normal=Vector3(0.0, 0.0, 1.0))

    out = transform_vertex(v, make_uniforms(projection_matrix=projection))

    assert not any(math.isfinite(c) for c in out.transformed_position)


def test_full_pipeline_centers_point_in_front_of_camera():
    uniforms = make_uniforms(
        model_matrix=create_model_matrix(Vector3.zero(), 1.0, Vector3.zero()),
        view_matrix=create_view_matrix(Vector3(0.0, 0.0, 5.0), Quaternion.identity()),
        projection_matrix=create_perspective_projection(60.0, 4 / 3, 0.1, 100.0),
        viewport_matrix=create_viewport_matrix(800, 600),
    )
    v = Vertex.new(Vector3.zero(), Vector3(0.0, 0.0, 1.0))

    out = transform_vertex(v, uniforms)

    assert out.transformed_position.x == pytest.approx(400.0)
    assert out.transformed_position.y == pytest.approx(300.0)
    assert 0.0 < out.transformed_position.z < 1.0


def test_batch_matches_single_calls(scaled_model):
    uniforms = make_uniforms(model_matrix=scaled_model)
    vertices = [
        Vertex.new(Vector3(float(i), -float(i), 0.5 * i), Vector3(1.0, 0.0, 0.0))
        for i in range(8)
    ]

    expected = [transform_vertex(v, uniforms) for v in vertices]

    assert transform_vertices(vertices, uniforms) == expected
    with ThreadPoolExecutor(max_workers=4) as pool:
        assert transform_vertices(vertices, uniforms, executor=pool) == expected


def test_uniforms_reject_bad_shape():
    with pytest.raises(ValueError):
        make_uniforms(model_matrix=np.eye(3))


def test_uniform_matrices_are_read_only(identity_uniforms):
    with pytest.raises(ValueError):
        identity_uniforms.model_matrix[0, 0] = 5.0
