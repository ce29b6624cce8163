"""Orbiting editor camera driven by mouse panning, rotating and zooming."""

from __future__ import annotations

import math

import numpy as np

from hazel_engine.camera import Camera
from hazel_engine.transforms import (
    perspective,
    quat_from_euler,
    quat_rotate,
    quat_to_mat4,
    translate,
)

_MOUSE_SENSITIVITY = 0.003
_SCROLL_SENSITIVITY = 0.1


class EditorCamera(Camera):
    """A perspective camera orbiting a focal point at a given distance."""

    def __init__(
        self,
        fov: float = 45.0,
        aspect_ratio: float = 1.778,
        near_clip: float = 0.1,
        far_clip: float = 1000.0,
    ) -> None:
        super().__init__(perspective(math.radians(fov), aspect_ratio, near_clip, far_clip))
        self.fov = float(fov)
        self.aspect_ratio = float(aspect_ratio)
        self.near_clip = float(near_clip)
        self.far_clip = float(far_clip)

        self._view_matrix = np.identity(4)
        self._position = np.zeros(3)
        self._focal_point = np.zeros(3)
        self._initial_mouse_position = np.zeros(2)

        self.distance = 10.0
        self._pitch = 0.0
        self._yaw = 0.0

        self.viewport_width = 1280.0
        self.viewport_height = 720.0

        self.update_view()

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def focal_point(self) -> np.ndarray:
        return self._focal_point.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view_matrix

    def set_viewport_size(self, width: float, height: float) -> None:
        self.viewport_width = float(width)
        self.viewport_height = float(height)
        self.aspect_ratio = self.viewport_width / self.viewport_height
        self._projection = perspective(
            math.radians(self.fov), self.aspect_ratio, self.near_clip, self.far_clip
        )

    def view_projection(self) -> np.ndarray:
        return self._projection @ self._view_matrix

    def orientation(self) -> np.ndarray:
        return quat_from_euler((-self._pitch, -self._yaw, 0.0))

    def up_direction(self) -> np.ndarray:
        return quat_rotate(self.orientation(), (0.0, 1.0, 0.0))

    def right_direction(self) -> np.ndarray:
        return quat_rotate(self.orientation(), (1.0, 0.0, 0.0))

    def forward_direction(self) -> np.ndarray:
        return quat_rotate(self.orientation(), (0.0, 0.0, -1.0))

    def pan_speed(self) -> tuple[float, float]:
        x = min(self.viewport_width / 1000.0, 2.4)
        x_factor = 0.0366 * (x * x) - 0.1778 * x + 0.3021
        y = min(self.viewport_height / 1000.0, 2.4)
        y_factor = 0.0366 * (y * y) - 0.1778 * y + 0.3021
        return x_factor, y_factor

    def rotation_speed(self) -> float:
        return 0.8

    def zoom_speed(self) -> float:
        distance = max(self.distance * 0.2, 0.0)
        return min(distance * distance, 100.0)

    def mouse_pan(self, delta) -> None:
        dx, dy = (float(v) for v in delta[:2])
        x_speed, y_speed = self.pan_speed()
        self._focal_point = self._focal_point - self.right_direction() * dx * x_speed * self.distance
        self._focal_point = self._focal_point + self.up_direction() * dy * y_speed * self.distance

    def mouse_rotate(self, delta) -> None:
        dx, dy = (float(v) for v in delta[:2])
        yaw_sign = -1.0 if self.up_direction()[1] < 0 else 1.0
        self._yaw += yaw_sign * dx * self.rotation_speed()
        self._pitch += dy * self.rotation_speed()

    def mouse_zoom(self, delta: float) -> None:
        self.distance -= float(delta) * self.zoom_speed()
        if self.distance < 1.0:
            self._focal_point = self._focal_point + self.forward_direction()
            self.distance = 1.0

    def on_mouse_move(
        self,
        x: float,
        y: float,
        pan: bool = False,
        rotate: bool = False,
        zoom: bool = False,
    ) -> None:
        """Apply one frame of mouse navigation while the navigation modifier is held.

        ``pan``, ``rotate`` and ``zoom`` say which buttons (middle, left, right)
        are pressed; the first one set wins.
        """
        mouse = np.array([float(x), float(y)])
        delta = (mouse - self._initial_mouse_position) * _MOUSE_SENSITIVITY
        self._initial_mouse_position = mouse

        if pan:
            self.mouse_pan(delta)
        elif rotate:
            self.mouse_rotate(delta)
        elif zoom:
            self.mouse_zoom(delta[1])

        self.update_view()

    def on_mouse_scroll(self, y_offset: float) -> bool:
        self.mouse_zoom(float(y_offset) * _SCROLL_SENSITIVITY)
        self.update_view()
        return False

    def update_view(self) -> None:
        self._position = self._focal_point - self.forward_direction() * self.distance
        transform = translate(np.identity(4), self._position) @ quat_to_mat4(self.orientation())
        self._view_matrix = np.linalg.inv(transform)