"""Batched 2D renderer for quads, circles and lines.

Geometry is gathered into vertex batches on the CPU and handed to a
``RendererAPI`` backend when a batch is flushed.  The default backend
records every command it receives, which makes it usable headless.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from typing import Any, NamedTuple

import numpy as np

from hazel_engine.camera import Camera, OrthographicCamera
from hazel_engine.editor_camera import EditorCamera
from hazel_engine.shader import Shader
from hazel_engine.transforms import rotate, scale, translate

_QUAD_VERTEX_POSITIONS = np.array(
    [
        [-0.5, -0.5, 0.0, 1.0],
        [0.5, -0.5, 0.0, 1.0],
        [0.5, 0.5, 0.0, 1.0],
        [-0.5, 0.5, 0.0, 1.0],
    ]
)
_TEXTURE_COORDS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_QUAD_INDEX_PATTERN = np.array([0, 1, 2, 2, 3, 0], dtype=np.uint32)
_WHITE = (1.0, 1.0, 1.0, 1.0)


def _tuple(values, size: int) -> tuple[float, ...]:
    return tuple(float(v) for v in np.asarray(values, dtype=float).ravel()[:size])


def _position3(position) -> np.ndarray:
    p = np.zeros(3)
    values = np.asarray(position, dtype=float).ravel()[:3]
    p[: len(values)] = values
    return p


class _QuadVertex(NamedTuple):
    position: tuple[float, float, float]
    color: tuple[float, float, float, float]
    tex_coord: tuple[float, float]
    tex_index: float
    tiling_factor: float
    entity_id: int


class _CircleVertex(NamedTuple):
    world_position: tuple[float, float, float]
    local_position: tuple[float, float, float]
    color: tuple[float, float, float, float]
    thickness: float
    fade: float
    entity_id: int


class _LineVertex(NamedTuple):
    position: tuple[float, float, float]
    color: tuple[float, float, float, float]
    entity_id: int


class RendererAPI:
    """A backend that records the draw commands sent to it."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.line_width = 1.0
        self.clear_color = (0.0, 0.0, 0.0, 1.0)
        self.viewport = (0, 0, 0, 0)

    def init(self) -> None:
        self.calls.append(("init",))

    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        self.viewport = (x, y, width, height)
        self.calls.append(("viewport", self.viewport))

    def set_clear_color(self, color) -> None:
        self.clear_color = _tuple(color, 4)
        self.calls.append(("clear_color", self.clear_color))

    def clear(self) -> None:
        self.calls.append(("clear",))

    def draw_indexed(self, batch, index_count: int = 0) -> None:
        self.calls.append(("indexed", batch, index_count))

    def draw_lines(self, batch, vertex_count: int) -> None:
        self.calls.append(("lines", batch, vertex_count))

    def set_line_width(self, width: float) -> None:
        self.line_width = float(width)
        self.calls.append(("line_width", self.line_width))


class Texture:
    """A 2D texture identified by its renderer id."""

    _ids = itertools.count(1)

    def __init__(self, width: int, height: int, data: bytes | None = None, path: str | None = None) -> None:
        self.width = int(width)
        self.height = int(height)
        self.path = path
        self.data = data
        self.renderer_id = next(self._ids)
        self.bound_slot: int | None = None

    @property
    def is_loaded(self) -> bool:
        return self.data is not None

    def set_data(self, data: bytes) -> None:
        self.data = bytes(data)

    def bind(self, slot: int = 0) -> None:
        self.bound_slot = slot

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Texture):
            return NotImplemented
        return self.renderer_id == other.renderer_id

    def __hash__(self) -> int:
        return hash(self.renderer_id)

    def __repr__(self) -> str:
        return f"Texture(id={self.renderer_id}, {self.width}x{self.height})"


@dataclass
class Statistics:
    draw_calls: int = 0
    quad_count: int = 0

    def total_vertex_count(self) -> int:
        return self.quad_count * 4

    def total_index_count(self) -> int:
        return self.quad_count * 6


class Renderer2D:
    """Collects 2D primitives into batches and submits them to a backend."""

    MAX_QUADS = 20000
    MAX_VERTICES = MAX_QUADS * 4
    MAX_INDICES = MAX_QUADS * 6
    MAX_TEXTURE_SLOTS = 32

    def __init__(self, api: RendererAPI | None = None) -> None:
        self.api = api if api is not None else RendererAPI()
        self.api.init()

        self.quad_indices = (
            np.arange(self.MAX_QUADS, dtype=np.uint32)[:, None] * 4 + _QUAD_INDEX_PATTERN
        ).ravel()

        self.white_texture = Texture(1, 1)
        self.white_texture.set_data(b"\xff\xff\xff\xff")

        self.quad_shader = Shader("Renderer2D_Quad")
        self.circle_shader = Shader("Renderer2D_Circle")
        self.line_shader = Shader("Renderer2D_Line")

        self.view_projection = np.identity(4)
        self._line_width = 2.0
        self._stats = Statistics()

        self._quad_vertices: list[_QuadVertex] = []
        self._circle_vertices: list[_CircleVertex] = []
        self._line_vertices: list[_LineVertex] = []
        self._quad_index_count = 0
        self._circle_index_count = 0
        self._line_vertex_count = 0
        self._texture_slots: list[Texture] = [self.white_texture]
        self._start_batch()

    # Scene ---------------------------------------------------------------

    def begin_scene(self, camera, transform=None) -> None:
        """Start a scene seen through ``camera``.

        A plain camera needs its world ``transform``; orthographic and editor
        cameras carry their own view.
        """
        if transform is not None:
            self.view_projection = camera.projection @ np.linalg.inv(np.asarray(transform, dtype=float))
        elif isinstance(camera, OrthographicCamera):
            self.view_projection = np.array(camera.view_projection_matrix)
        elif isinstance(camera, EditorCamera):
            self.view_projection = camera.view_projection()
        elif isinstance(camera, Camera):
            raise TypeError("a camera without its own view needs a transform")
        else:
            raise TypeError(f"unsupported camera: {camera!r}")
        self._start_batch()

    def end_scene(self) -> None:
        self.flush()

    def _start_batch(self) -> None:
        self._quad_index_count = 0
        self._quad_vertices = []
        self._circle_index_count = 0
        self._circle_vertices = []
        self._line_vertex_count = 0
        self._line_vertices = []
        self._texture_slots = [self.white_texture]

    def _next_batch(self) -> None:
        self.flush()
        self._start_batch()

    def flush(self) -> None:
        if self._quad_index_count:
            for slot, texture in enumerate(self._texture_slots):
                texture.bind(slot)
            self.quad_shader.bind()
            self.api.draw_indexed(tuple(self._quad_vertices), self._quad_index_count)
            self._stats.draw_calls += 1

        if self._circle_index_count:
            self.circle_shader.bind()
            self.api.draw_indexed(tuple(self._circle_vertices), self._circle_index_count)
            self._stats.draw_calls += 1

        if self._line_vertex_count:
            self.line_shader.bind()
            self.api.set_line_width(self._line_width)
            self.api.draw_lines(tuple(self._line_vertices), self._line_vertex_count)
            self._stats.draw_calls += 1

    # Quads ---------------------------------------------------------------

    def _emit_quad(self, transform, color, tex_index: float, tiling_factor: float, entity_id: int) -> None:
        m = np.asarray(transform, dtype=float)
        color_t = _tuple(color, 4)
        for corner, tex_coord in zip(_QUAD_VERTEX_POSITIONS, _TEXTURE_COORDS):
            self._quad_vertices.append(
                _QuadVertex(
                    _tuple(m @ corner, 3),
                    color_t,
                    tex_coord,
                    float(tex_index),
                    float(tiling_factor),
                    int(entity_id),
                )
            )
        self._quad_index_count += 6
        self._stats.quad_count += 1

    def draw_quad(self, transform, color, entity_id: int = -1) -> None:
        if self._quad_index_count >= self.MAX_INDICES:
            self._next_batch()
        self._emit_quad(transform, color, 0.0, 1.0, entity_id)

    def draw_textured_quad(
        self,
        transform,
        texture: Texture,
        tiling_factor: float = 1.0,
        tint_color=_WHITE,
        entity_id: int = -1,
    ) -> None:
        if self._quad_index_count >= self.MAX_INDICES:
            self._next_batch()

        texture_index = 0.0
        for slot, candidate in enumerate(self._texture_slots[1:], start=1):
            if candidate == texture:
                texture_index = float(slot)
                break

        if texture_index == 0.0:
            if len(self._texture_slots) >= self.MAX_TEXTURE_SLOTS:
                self._next_batch()
            texture_index = float(len(self._texture_slots))
            self._texture_slots.append(texture)

        self._emit_quad(transform, tint_color, texture_index, tiling_factor, entity_id)

    def draw_quad_at(self, position, size, color) -> None:
        sx, sy = _tuple(size, 2)
        transform = translate(np.identity(4), _position3(position)) @ scale(np.identity(4), (sx, sy, 1.0))
        self.draw_quad(transform, color)

    def draw_rotated_quad(self, position, size, rotation: float, color) -> None:
        """Draw a quad rotated by ``rotation`` degrees about the z axis."""
        sx, sy = _tuple(size, 2)
        transform = (
            translate(np.identity(4), _position3(position))
            @ rotate(np.identity(4), np.radians(float(rotation)), (0.0, 0.0, 1.0))
            @ scale(np.identity(4), (sx, sy, 1.0))
        )
        self.draw_quad(transform, color)

    # Circles and lines -----------------------------------------------------

    def draw_circle(
        self,
        transform,
        color,
        thickness: float = 1.0,
        fade: float = 0.005,
        entity_id: int = -1,
    ) -> None:
        m = np.asarray(transform, dtype=float)
        color_t = _tuple(color, 4)
        for corner in _QUAD_VERTEX_POSITIONS:
            self._circle_vertices.append(
                _CircleVertex(
                    _tuple(m @ corner, 3),
                    _tuple(corner * 2.0, 3),
                    color_t,
                    float(thickness),
                    float(fade),
                    int(entity_id),
                )
            )
        self._circle_index_count += 6
        self._stats.quad_count += 1

    def draw_line(self, p0, p1, color, entity_id: int = -1) -> None:
        color_t = _tuple(color, 4)
        self._line_vertices.append(_LineVertex(_tuple(p0, 3), color_t, int(entity_id)))
        self._line_vertices.append(_LineVertex(_tuple(p1, 3), color_t, int(entity_id)))
        self._line_vertex_count += 2

    def _draw_outline(self, corners, color) -> None:
        for start, end in zip(corners, corners[1:] + corners[:1]):
            self.draw_line(start, end, color)

    def draw_rect(self, position, size, color, entity_id: int = -1) -> None:
        x, y, z = _position3(position)
        hw, hh = (v * 0.5 for v in _tuple(size, 2))
        corners = [
            (x - hw, y - hh, z),
            (x + hw, y - hh, z),
            (x + hw, y + hh, z),
            (x - hw, y + hh, z),
        ]
        self._draw_outline(corners, color)

    def draw_rect_transform(self, transform, color, entity_id: int = -1) -> None:
        m = np.asarray(transform, dtype=float)
        corners = [_tuple(m @ corner, 3) for corner in _QUAD_VERTEX_POSITIONS]
        self._draw_outline(corners, color)

    def draw_sprite(self, transform, sprite, entity_id: int) -> None:
        """Draw a sprite component: textured when it has a texture, flat otherwise."""
        if getattr(sprite, "texture", None):
            self.draw_textured_quad(transform, sprite.texture, sprite.tiling_factor, sprite.color, entity_id)
        else:
            self.draw_quad(transform, sprite.color, entity_id)

    # Settings and statistics ---------------------------------------------

    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, width: float) -> None:
        self._line_width = float(width)

    @property
    def quad_vertices(self) -> tuple[_QuadVertex, ...]:
        return tuple(self._quad_vertices)

    @property
    def circle_vertices(self) -> tuple[_CircleVertex, ...]:
        return tuple(self._circle_vertices)

    @property
    def line_vertices(self) -> tuple[_LineVertex, ...]:
        return tuple(self._line_vertices)

    @property
    def texture_slots(self) -> tuple[Texture, ...]:
        return tuple(self._texture_slots)

    def reset_stats(self) -> None:
        self._stats = Statistics()

    def stats(self) -> Statistics:
        return replace(self._stats)