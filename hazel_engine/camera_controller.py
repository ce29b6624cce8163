"""Keyboard and mouse control of a 2D orthographic camera."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from hazel_engine.camera import OrthographicCamera
from hazel_engine.codes import Key


class OrthographicCameraController:
    """Moves with WASD, rotates with Q/E and zooms with the scroll wheel."""

    def __init__(self, aspect_ratio: float, rotation: bool = False) -> None:
        self._aspect_ratio = float(aspect_ratio)
        self._zoom_level = 1.0
        self._camera = OrthographicCamera(*self._bounds())
        self._rotation_enabled = bool(rotation)
        self._camera_position = np.zeros(3)
        self._camera_rotation = 0.0  # degrees, anti-clockwise
        self._translation_speed = 5.0
        self._rotation_speed = 180.0

    @property
    def camera(self) -> OrthographicCamera:
        return self._camera

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def zoom_level(self) -> float:
        return self._zoom_level

    @zoom_level.setter
    def zoom_level(self, level: float) -> None:
        self._zoom_level = float(level)

    @property
    def camera_position(self) -> np.ndarray:
        return self._camera_position.copy()

    @property
    def camera_rotation(self) -> float:
        return self._camera_rotation

    @property
    def translation_speed(self) -> float:
        return self._translation_speed

    def _bounds(self) -> tuple[float, float, float, float]:
        z = self._zoom_level
        return -self._aspect_ratio * z, self._aspect_ratio * z, -z, z

    def on_update(self, ts, is_key_pressed: Callable[[Key], bool]) -> None:
        dt = float(ts)
        angle = math.radians(self._camera_rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        step = self._translation_speed * dt

        if is_key_pressed(Key.A):
            self._camera_position[0] -= cos_a * step
            self._camera_position[1] -= sin_a * step
        elif is_key_pressed(Key.D):
            self._camera_position[0] += cos_a * step
            self._camera_position[1] += sin_a * step

        if is_key_pressed(Key.W):
            self._camera_position[0] += -sin_a * step
            self._camera_position[1] += cos_a * step
        elif is_key_pressed(Key.S):
            self._camera_position[0] -= -sin_a * step
            self._camera_position[1] -= cos_a * step

        if self._rotation_enabled:
            if is_key_pressed(Key.Q):
                self._camera_rotation += self._rotation_speed * dt
            if is_key_pressed(Key.E):
                self._camera_rotation -= self._rotation_speed * dt

            if self._camera_rotation > 180.0:
                self._camera_rotation -= 360.0
            elif self._camera_rotation <= -180.0:
                self._camera_rotation += 360.0

            self._camera.rotation = self._camera_rotation

        self._camera.position = self._camera_position
        self._translation_speed = self._zoom_level

    def on_resize(self, width: float, height: float) -> None:
        self._aspect_ratio = float(width) / float(height)
        self._camera.set_projection(*self._bounds())

    def on_mouse_scrolled(self, y_offset: float) -> bool:
        self._zoom_level -= float(y_offset) * 0.25
        self._zoom_level = max(self._zoom_level, 0.25)
        self._camera.set_projection(*self._bounds())
        return False

    def on_window_resized(self, width: int, height: int) -> bool:
        self.on_resize(float(width), float(height))
        return False