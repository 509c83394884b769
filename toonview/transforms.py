"""Matrix and vector helpers for a right-handed, OpenGL-style camera setup.

Matrices are 4x4 (or 3x3) numpy arrays in mathematical layout: ``m[row, col]``,
applied to column vectors as ``m @ v``.
"""

from __future__ import annotations

import math

import numpy as np

_MODEL_OFFSET = (0.0, -0.25, 0.0)


def _vec3(values) -> np.ndarray:
    return np.asarray(values, dtype=float).reshape(3)


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    v = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection with a [-1, 1] clip depth range; ``fovy`` in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def look_at(eye, center, up) -> np.ndarray:
    """View matrix placing the camera at ``eye`` looking towards ``center``."""
    eye = _vec3(eye)
    forward = normalize(_vec3(center) - eye)
    side = normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    m = np.identity(4)
    m[0, :3] = side
    m[1, :3] = upward
    m[2, :3] = -forward
    m[0, 3] = -float(side @ eye)
    m[1, 3] = -float(upward @ eye)
    m[2, 3] = float(forward @ eye)
    return m


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Post-multiply ``matrix`` by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    r = np.identity(4)
    r[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return np.asarray(matrix, dtype=float) @ r


def scale(matrix, factors) -> np.ndarray:
    """Post-multiply ``matrix`` by a scaling; ``factors`` is a scalar or a 3-vector."""
    f = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
    s = np.identity(4)
    s[0, 0], s[1, 1], s[2, 2] = f
    return np.asarray(matrix, dtype=float) @ s


def translate(matrix, offset) -> np.ndarray:
    """Post-multiply ``matrix`` by a translation by ``offset``."""
    t = np.identity(4)
    t[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ t


def normal_matrix(model) -> np.ndarray:
    """Inverse transpose of the upper-left 3x3 block of ``model``."""
    upper = np.asarray(model, dtype=float)[:3, :3]
    return np.linalg.inv(upper).T


def model_matrix(pitch: float, yaw: float, scale_factor: float) -> np.ndarray:
    """Model transform: pitch about x, yaw about y (degrees), uniform scale, then a small drop."""
    m = np.identity(4)
    m = rotate(m, math.radians(pitch), (1.0, 0.0, 0.0))
    m = rotate(m, math.radians(yaw), (0.0, 1.0, 0.0))
    m = scale(m, scale_factor)
    return translate(m, _MODEL_OFFSET)