from types import SimpleNamespace

import numpy as np
import pytest

from hazel_engine.camera import Camera, OrthographicCamera
from hazel_engine.renderer2d import Renderer2D, RendererAPI, Statistics, Texture

RED = (1.0, 0.0, 0.0, 1.0)


@pytest.fixture
def renderer():
    r = Renderer2D()
    r.begin_scene(OrthographicCamera(-1.0, 1.0, -1.0, 1.0))
    return r


def _calls(api, kind):
    return [c for c in api.calls if c[0] == kind]


def test_identity_quad_uses_unit_positions_and_white_texture(renderer):
    renderer.draw_quad(np.identity(4), RED, 7)
    vertices = renderer.quad_vertices
    assert [v.position for v in vertices] == [
        (-0.5, -0.5, 0.0),
        (0.5, -0.5, 0.0),
        (0.5, 0.5, 0.0),
        (-0.5, 0.5, 0.0),
    ]
    assert [v.tex_coord for v in vertices] == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    assert all(v.tex_index == 0.0 and v.entity_id == 7 and v.color == RED for v in vertices)


def test_end_scene_submits_indexed_draw(renderer):
    renderer.draw_quad(np.identity(4), RED)
    renderer.draw_quad(np.identity(4), RED)
    renderer.end_scene()
    indexed = _calls(renderer.api, "indexed")
    assert len(indexed) == 1
    assert indexed[0][2] == 12
    assert len(indexed[0][1]) == 8
    assert renderer.quad_shader.bound
    stats = renderer.stats()
    assert stats.draw_calls == 1
    assert stats.quad_count == 2
    assert stats.total_vertex_count() == 8
    assert stats.total_index_count() == 12


def test_flush_with_empty_batch_draws_nothing(renderer):
    renderer.end_scene()
    assert _calls(renderer.api, "indexed") == []
    assert _calls(renderer.api, "lines") == []
    assert renderer.stats().draw_calls == 0


def test_quad_overflow_starts_new_batch(renderer):
    for _ in range(Renderer2D.MAX_QUADS + 1):
        renderer.draw_quad(np.identity(4), RED)
    renderer.end_scene()
    counts = [c[2] for c in _calls(renderer.api, "indexed")]
    assert counts == [Renderer2D.MAX_INDICES, 6]


def test_textures_share_slots(renderer):
    first, second = Texture(4, 4), Texture(4, 4)
    renderer.draw_textured_quad(np.identity(4), first)
    renderer.draw_textured_quad(np.identity(4), first)
    renderer.draw_textured_quad(np.identity(4), second)
    indices = [v.tex_index for v in renderer.quad_vertices[::4]]
    assert indices == [1.0, 1.0, 2.0]
    assert renderer.texture_slots == (renderer.white_texture, first, second)
    renderer.end_scene()
    assert first.bound_slot == 1 and second.bound_slot == 2
    assert renderer.white_texture.bound_slot == 0


def test_texture_slot_overflow_flushes(renderer):
    textures = [Texture(1, 1) for _ in range(Renderer2D.MAX_TEXTURE_SLOTS)]
    for texture in textures:
        renderer.draw_textured_quad(np.identity(4), texture)
    assert len(_calls(renderer.api, "indexed")) == 1
    assert renderer.texture_slots == (renderer.white_texture, textures[-1])
    assert renderer.quad_vertices[0].tex_index == 1.0


def test_texture_equality_by_identity():
    a, b = Texture(2, 2), Texture(2, 2)
    assert a == a
    assert not (a == b)
    assert a.renderer_id != b.renderer_id


def test_circle_vertices(renderer):
    renderer.draw_circle(np.identity(4), RED, 0.5, 0.01, 3)
    vertices = renderer.circle_vertices
    assert [v.local_position for v in vertices] == [
        (-1.0, -1.0, 0.0),
        (1.0, -1.0, 0.0),
        (1.0, 1.0, 0.0),
        (-1.0, 1.0, 0.0),
    ]
    assert vertices[0].world_position == (-0.5, -0.5, 0.0)
    assert all(v.thickness == 0.5 and v.fade == 0.01 and v.entity_id == 3 for v in vertices)
    assert renderer.stats().quad_count == 1
    renderer.end_scene()
    assert _calls(renderer.api, "indexed")[0][2] == 6
    assert renderer.circle_shader.bound


def test_rect_draws_four_lines_with_line_width(renderer):
    renderer.draw_rect((0.0, 0.0, 0.0), (1.0, 1.0), RED, 5)
    lines = renderer.line_vertices
    assert len(lines) == 8
    assert lines[0].position == lines[7].position == (-0.5, -0.5, 0.0)
    renderer.end_scene()
    assert renderer.api.line_width == 2.0
    assert _calls(renderer.api, "lines")[0][2] == 8


def test_rect_transform_matches_rect(renderer):
    renderer.draw_rect((0.0, 0.0, 0.0), (1.0, 1.0), RED)
    by_position = [v.position for v in renderer.line_vertices]
    renderer.begin_scene(OrthographicCamera(-1.0, 1.0, -1.0, 1.0))
    renderer.draw_rect_transform(np.identity(4), RED)
    assert [v.position for v in renderer.line_vertices] == by_position


def test_draw_line(renderer):
    renderer.line_width = 4.0
    renderer.draw_line((0, 0, 0), (1, 2, 3), RED, 9)
    assert [v.position for v in renderer.line_vertices] == [(0.0, 0.0, 0.0), (1.0, 2.0, 3.0)]
    renderer.end_scene()
    assert renderer.api.line_width == 4.0


def test_sprite_with_and_without_texture(renderer):
    plain = SimpleNamespace(color=RED, texture=None, tiling_factor=1.0)
    textured = SimpleNamespace(color=RED, texture=Texture(1, 1), tiling_factor=3.0)
    renderer.draw_sprite(np.identity(4), plain, 1)
    renderer.draw_sprite(np.identity(4), textured, 2)
    vertices = renderer.quad_vertices
    assert vertices[0].tex_index == 0.0 and vertices[0].entity_id == 1
    assert vertices[4].tex_index == 1.0 and vertices[4].tiling_factor == 3.0
    assert vertices[4].entity_id == 2


def test_quad_at_and_rotated(renderer):
    renderer.draw_quad_at((1.0, 2.0), (2.0, 2.0), RED)
    assert renderer.quad_vertices[0].position == (0.0, 1.0, 0.0)
    renderer.draw_rotated_quad((0.0, 0.0), (1.0, 1.0), 90.0, RED)
    assert np.allclose(renderer.quad_vertices[4].position, (0.5, -0.5, 0.0))


def test_begin_scene_cameras():
    r = Renderer2D()
    ortho_camera = OrthographicCamera(-2.0, 2.0, -1.0, 1.0)
    r.begin_scene(ortho_camera)
    assert np.allclose(r.view_projection, ortho_camera.view_projection_matrix)
    plain = Camera(ortho_camera.projection_matrix)
    r.begin_scene(plain, np.identity(4))
    assert np.allclose(r.view_projection, plain.projection)
    with pytest.raises(TypeError):
        r.begin_scene(plain)


def test_begin_scene_discards_pending_batch(renderer):
    renderer.draw_quad(np.identity(4), RED)
    renderer.begin_scene(OrthographicCamera(-1.0, 1.0, -1.0, 1.0))
    assert renderer.quad_vertices == ()
    renderer.end_scene()
    assert _calls(renderer.api, "indexed") == []


def test_reset_stats(renderer):
    renderer.draw_quad(np.identity(4), RED)
    renderer.end_scene()
    renderer.reset_stats()
    assert renderer.stats() == Statistics()


def test_quad_indices_pattern():
    r = Renderer2D()
    assert list(r.quad_indices[:12]) == [0, 1, 2, 2, 3, 0, 4, 5, 6, 6, 7, 4]
    assert len(r.quad_indices) == Renderer2D.MAX_INDICES


def test_api_records_commands():
    api = RendererAPI()
    api.set_viewport(0, 0, 800, 600)
    api.set_line_width(3.0)
    assert api.viewport == (0, 0, 800, 600)
    assert api.calls[-1] == ("line_width", 3.0)