"""Matrix and vector helpers for a right-handed OpenGL-style scene.

Matrices are 4x4 ``numpy`` arrays in ordinary mathematical layout. Points are
column vectors, so a point ``p`` is transformed as ``matrix @ p``. Before
handing a matrix to OpenGL, upload it transposed or in column-major order.
"""

from __future__ import annotations

import math

import numpy as np


def _vec3(values) -> np.ndarray:
    vector = np.asarray(values, dtype=np.float64).reshape(-1)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _mat4(values) -> np.ndarray:
    matrix = np.asarray(values, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    return matrix


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    array = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(array))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return array / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [-1, 1].

    ``fovy`` is the vertical field of view in radians.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    half = math.tan(fovy / 2.0)
    if half == 0:
        raise ValueError("field of view must not be zero")
    result = np.zeros((4, 4), dtype=np.float64)
    result[0, 0] = 1.0 / (aspect * half)
    result[1, 1] = 1.0 / half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = normalize(_vec3(center) - eye)
    side = normalize(np.cross(forward, _vec3(up)))
    true_up = np.cross(side, forward)
    result = np.identity(4, dtype=np.float64)
    result[0, :3] = side
    result[1, :3] = true_up
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye)
    result[1, 3] = -np.dot(true_up, eye)
    result[2, 3] = np.dot(forward, eye)
    return result


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed (on the right) by a translation by ``offset``."""
    translation = np.identity(4, dtype=np.float64)
    translation[:3, 3] = _vec3(offset)
    return _mat4(matrix) @ translation


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed (on the right) by a per-axis scale."""
    scaling = np.identity(4, dtype=np.float64)
    scaling[:3, :3] = np.diag(_vec3(factors))
    return _mat4(matrix) @ scaling


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    rotation = np.identity(4, dtype=np.float64)
    rotation[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return _mat4(matrix) @ rotation


def normal_matrix(model) -> np.ndarray:
    """The 3x3 inverse-transpose of the upper-left part of ``model``."""
    upper = _mat4(model)[:3, :3]
    try:
        inverse = np.linalg.inv(upper)
    except np.linalg.LinAlgError as exc:
        raise ValueError("model matrix is singular") from exc
    return inverse.T