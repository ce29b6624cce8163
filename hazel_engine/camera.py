"""Base camera and a 2D orthographic camera."""

from __future__ import annotations

import math

import numpy as np

from hazel_engine.transforms import ortho, rotate, translate


class Camera:
    """A camera that is defined only by its projection matrix."""

    def __init__(self, projection=None) -> None:
        if projection is None:
            self._projection = np.identity(4)
        else:
            self._projection = np.array(projection, dtype=float)

    @property
    def projection(self) -> np.ndarray:
        return self._projection


class OrthographicCamera:
    """A 2D camera with a position and a rotation about the z axis, in degrees."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection_matrix = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view_matrix = np.identity(4)
        self._view_projection_matrix = self._projection_matrix @ self._view_matrix
        self._position = np.zeros(3)
        self._rotation = 0.0

    def set_projection(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection_matrix = ortho(left, right, bottom, top, -1.0, 1.0)
        self._view_projection_matrix = self._projection_matrix @ self._view_matrix

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = np.array(value, dtype=float)[:3]
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        self._rotation = float(degrees)
        self._recalculate_view_matrix()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection_matrix

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view_matrix

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection_matrix

    def _recalculate_view_matrix(self) -> None:
        transform = rotate(
            translate(np.identity(4), self._position),
            math.radians(self._rotation),
            (0.0, 0.0, 1.0),
        )
        self._view_matrix = np.linalg.inv(transform)
        self._view_projection_matrix = self._projection_matrix @ self._view_matrix