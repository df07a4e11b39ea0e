# procshade/math.py
import logging
import math
from typing import Union

import numpy as np

from procshade.types import Quaternion, Vector3

logger = logging.getLogger(__name__)

IDENTITY3 = np.eye(3, dtype=np.float64)


def to_homogeneous(v: Vector3) -> np.ndarray:
    return np.array([v.x, v.y, v.z, 1.0], dtype=np.float64)


def perspective_divide(clip: np.ndarray) -> np.ndarray:
    """
    Projects a clip-space point into normalized device coordinates.

    Returns (x/w, y/w, z/w, 1). A zero w is not an error: the division
    follows IEEE-754 and the result carries inf/nan components, which the
    rasterizer is expected to cull.
    """
    clip = np.asarray(clip, dtype=np.float64)
    w = clip[3]
    if w == 0.0:
        logger.debug("Zero w in perspective divide for clip=%s", clip)

    with np.errstate(divide="ignore", invalid="ignore"):
        xyz = clip[:3] / w

    return np.array([xyz[0], xyz[1], xyz[2], 1.0], dtype=np.float64)


def upper_3x3(mat: np.ndarray) -> np.ndarray:
    return np.asarray(mat, dtype=np.float64)[:3, :3]


def normal_matrix(model: np.ndarray) -> np.ndarray:
    """
    Inverse-transpose of the model matrix's linear part.

    A singular 3x3 yields the identity instead of raising.
    """
    m3 = upper_3x3(model).T

    det = np.linalg.det(m3)
    if det == 0.0 or not math.isfinite(det):
        logger.debug("Singular normal matrix (det=%s), using identity", det)
        return IDENTITY3.copy()

    try:
        return np.linalg.inv(m3)
    except np.linalg.LinAlgError:
        logger.debug("Normal matrix inversion failed, using identity")
        return IDENTITY3.copy()


def quaternion_to_matrix(q: Union[Quaternion, np.ndarray, list]) -> np.ndarray:
    """
    Converts a single quaternion into a 4x4 Rotation Matrix.
    q: Quaternion object (x,y,z,w) or array-like [x,y,z,w].
    """
    if isinstance(q, Quaternion):
        x, y, z, w = q.normalized()
    else:
        x, y, z, w = q[0], q[1], q[2], q[3]

    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z

    return np.array(
        [
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0],
            [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0],
            [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def create_model_matrix(
    translation: Vector3,
    scale: Union[float, Vector3],
    rotation: Vector3,
) -> np.ndarray:
    """
    Builds T * R * S. rotation holds Euler angles (radians) about X, Y, Z.
    """
    if not isinstance(scale, Vector3):
        scale = Vector3.splat(float(scale))

    q = Quaternion.from_euler(rotation.x, rotation.y, rotation.z)
    mat = quaternion_to_matrix(q)

    # Scale is diagonal, so it only multiplies the columns of R
    mat[:3, 0] *= scale.x
    mat[:3, 1] *= scale.y
    mat[:3, 2] *= scale.z

    mat[:3, 3] = (translation.x, translation.y, translation.z)
    return mat


def create_view_matrix(
    pos: Union[Vector3, np.ndarray], rot: Union[Quaternion, np.ndarray]
) -> np.ndarray:
    """
    Constructs a View Matrix (World -> Camera Space) from a position and rotation.
    This effectively applies the inverse of the Camera's Model Matrix.
    """
    r = quaternion_to_matrix(rot)[:3, :3]
    p = np.array([float(pos[0]), float(pos[1]), float(pos[2])])

    # view = [R^T, -R^T * p]
    view = np.eye(4, dtype=np.float64)
    view[:3, :3] = r.T
    view[:3, 3] = -(r.T @ p)
    return view


def create_perspective_projection(
    fov_deg: float, aspect: float, near: float, far: float
) -> np.ndarray:
    """
    Creates a standard OpenGL Perspective Projection Matrix.
    fov_deg: Field of View in Degrees (Vertical)
    aspect: Width / Height
    near: Distance to near plane
    far: Distance to far plane
    """
    tan_half_fov = math.tan(math.radians(fov_deg) / 2.0)

    # Avoid division by zero
    if tan_half_fov == 0:
        tan_half_fov = 0.001
    if near == far:
        far += 0.001
    if aspect == 0:
        aspect = 1.0

    mat = np.zeros((4, 4), dtype=np.float64)

    mat[0, 0] = 1.0 / (aspect * tan_half_fov)
    mat[1, 1] = 1.0 / tan_half_fov

    # Remap Z (Depth)
    mat[2, 2] = (far + near) / (near - far)
    mat[2, 3] = (2.0 * far * near) / (near - far)

    # w = -z
    mat[3, 2] = -1.0

    return mat


def create_viewport_matrix(width: float, height: float) -> np.ndarray:
    """
    Maps NDC [-1, 1] to pixel coordinates with y pointing down.
    Depth is remapped from [-1, 1] to [0, 1].
    """
    half_w = width / 2.0
    half_h = height / 2.0

    return np.array(
        [
            [half_w, 0.0, 0.0, half_w],
            [0.0, -half_h, 0.0, half_h],
            [0.0, 0.0, 0.5, 0.5],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
