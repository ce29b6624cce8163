"""4x4 transform helpers and transform decomposition.

Matrices are numpy arrays in mathematical layout (``M @ v`` transforms a
column vector); quaternions are arrays ``(w, x, y, z)``.
"""

from __future__ import annotations

import math

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _vec(values, size: int) -> np.ndarray:
    return np.asarray(values, dtype=float)[:size]


def translate(matrix, offset) -> np.ndarray:
    t = np.identity(4)
    t[:3, 3] = _vec(offset, 3)
    return np.asarray(matrix, dtype=float) @ t


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Post-multiply by a rotation of ``angle`` radians about ``axis``."""
    a = _vec(axis, 3)
    a = a / np.linalg.norm(a)
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]])
    r = np.identity(4)
    r[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return np.asarray(matrix, dtype=float) @ r


def scale(matrix, factors) -> np.ndarray:
    s = np.identity(4)
    s[0, 0], s[1, 1], s[2, 2] = _vec(factors, 3)
    return np.asarray(matrix, dtype=float) @ s


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with depth in [-1, 1]."""
    with np.errstate(divide="ignore", invalid="ignore"):
        tan_half = np.float64(math.tan(fovy / 2.0))
        m = np.zeros((4, 4))
        m[0, 0] = np.float64(1.0) / (np.float64(aspect) * tan_half)
        m[1, 1] = np.float64(1.0) / tan_half
        m[2, 2] = -np.float64(far + near) / np.float64(far - near)
        m[3, 2] = -1.0
        m[2, 3] = -np.float64(2.0 * far * near) / np.float64(far - near)
    return m


def ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    """Right-handed orthographic projection with depth in [-1, 1]."""
    with np.errstate(divide="ignore", invalid="ignore"):
        l, r, b, t, n, f = (np.float64(v) for v in (left, right, bottom, top, near, far))
        m = np.identity(4)
        m[0, 0] = 2.0 / (r - l)
        m[1, 1] = 2.0 / (t - b)
        m[2, 2] = -2.0 / (f - n)
        m[0, 3] = -(r + l) / (r - l)
        m[1, 3] = -(t + b) / (t - b)
        m[2, 3] = -(f + n) / (f - n)
    return m


def quat_from_euler(euler) -> np.ndarray:
    """Quaternion for Euler angles (pitch, yaw, roll) in radians."""
    half = _vec(euler, 3) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array(
        [
            cx * cy * cz + sx * sy * sz,
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
        ]
    )


def _quat_to_mat3(q) -> np.ndarray:
    w, x, y, z = _vec(q, 4)
    return np.array(
        [
            [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
        ]
    )


def quat_to_mat4(q) -> np.ndarray:
    m = np.identity(4)
    m[:3, :3] = _quat_to_mat3(q)
    return m


def quat_rotate(q, v) -> np.ndarray:
    return _quat_to_mat3(q) @ _vec(v, 3)


def decompose_transform(transform) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a transform into (translation, euler rotation, scale).

    Raises ValueError when the homogeneous component is zero.
    """
    m = np.array(transform, dtype=float)
    if abs(m[3, 3]) < _EPSILON:
        raise ValueError("transform cannot be decomposed: w component is zero")

    if any(abs(m[3, i]) >= _EPSILON for i in range(3)):
        m[3, :3] = 0.0
        m[3, 3] = 1.0

    translation = m[:3, 3].copy()
    m[:3, 3] = 0.0

    columns = [m[:3, i].copy() for i in range(3)]
    scale_out = np.array([np.linalg.norm(c) for c in columns])
    with np.errstate(divide="ignore", invalid="ignore"):
        rows = [c / n for c, n in zip(columns, scale_out)]

    rotation = np.zeros(3)
    rotation[1] = math.asin(float(np.clip(-rows[0][2], -1.0, 1.0)))
    if math.cos(rotation[1]) != 0:
        rotation[0] = math.atan2(rows[1][2], rows[2][2])
        rotation[2] = math.atan2(rows[0][1], rows[0][0])
    else:
        rotation[0] = math.atan2(-rows[2][0], rows[1][1])
        rotation[2] = 0.0

    return translation, rotation, scale_out