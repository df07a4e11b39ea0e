import math

import numpy as np
import pytest

from procshade.math import (
    create_model_matrix,
    create_perspective_projection,
    create_view_matrix,
    create_viewport_matrix,
    normal_matrix,
    perspective_divide,
    quaternion_to_matrix,
)
from procshade.types import Quaternion, Vector3


def test_perspective_divide():
    ndc = perspective_divide(np.array([4.0, 8.0, 12.0, 2.0]))
    np.testing.assert_allclose(ndc, [2.0, 4.0, 6.0, 1.0])


def test_perspective_divide_zero_w_propagates_non_finite():
    ndc = perspective_divide(np.array([1.0, -1.0, 0.0, 0.0]))

    assert ndc[0] == math.inf
    assert ndc[1] == -math.inf
    assert math.isnan(ndc[2])
    assert ndc[3] == 1.0


def test_normal_matrix_is_inverse_transpose(scaled_model):
    expected = np.linalg.inv(scaled_model[:3, :3]).T
    np.testing.assert_allclose(normal_matrix(scaled_model), expected)


def test_normal_matrix_singular_falls_back_to_identity():
    model = np.diag([1.0, 0.0, 1.0, 1.0])
    np.testing.assert_array_equal(normal_matrix(model), np.eye(3))


def test_normal_matrix_ignores_translation():
    model = create_model_matrix(Vector3(5.0, -3.0, 9.0), 1.0, Vector3.zero())
    np.testing.assert_allclose(normal_matrix(model), np.eye(3), atol=1e-12)


def test_quaternion_identity_matrix():
    np.testing.assert_allclose(quaternion_to_matrix(Quaternion.identity()), np.eye(4))


def test_model_matrix_rotates_about_z():
    model = create_model_matrix(
        Vector3.zero(), 1.0, Vector3(0.0, 0.0, math.pi / 2)
    )
    rotated = model @ np.array([1.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(rotated, [0.0, 1.0, 0.0, 1.0], atol=1e-12)


def test_model_matrix_scale_then_translate():
    model = create_model_matrix(
        Vector3(1.0, 2.0, 3.0), Vector3(2.0, 3.0, 4.0), Vector3.zero()
    )
    p = model @ np.array([1.0, 1.0, 1.0, 1.0])
    np.testing.assert_allclose(p, [3.0, 5.0, 7.0, 1.0])


def test_view_matrix_moves_camera_to_origin():
    view = create_view_matrix(Vector3(0.0, 0.0, 5.0), Quaternion.identity())
    p = view @ np.array([0.0, 0.0, 5.0, 1.0])
    np.testing.assert_allclose(p, [0.0, 0.0, 0.0, 1.0])


def test_perspective_projection_sets_w_to_negative_z():
    proj = create_perspective_projection(90.0, 1.0, 0.1, 100.0)
    clip = proj @ np.array([0.0, 0.0, -10.0, 1.0])
    assert clip[3] == pytest.approx(10.0)


def test_viewport_maps_ndc_corners():
    vp = create_viewport_matrix(800, 600)
    np.testing.assert_allclose(vp @ [-1.0, 1.0, -1.0, 1.0], [0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(vp @ [1.0, -1.0, 1.0, 1.0], [800.0, 600.0, 1.0, 1.0])
