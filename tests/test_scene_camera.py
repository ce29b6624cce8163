import math

import numpy as np
import pytest

from hazel_engine.scene_camera import ProjectionType, SceneCamera
from hazel_engine.transforms import perspective


def test_defaults():
    cam = SceneCamera()
    assert cam.projection_type is ProjectionType.ORTHOGRAPHIC
    assert cam.orthographic_size == pytest.approx(10.0)
    assert cam.orthographic_near_clip == pytest.approx(-1.0)
    assert cam.orthographic_far_clip == pytest.approx(1.0)
    assert cam.perspective_vertical_fov == pytest.approx(math.radians(45.0))


def test_projection_type_values_match_serialized_integers():
    assert ProjectionType(0) is ProjectionType.PERSPECTIVE
    assert ProjectionType(1) is ProjectionType.ORTHOGRAPHIC


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
def test_viewport_size_must_be_positive(width, height):
    with pytest.raises(ValueError):
        SceneCamera().set_viewport_size(width, height)


def test_orthographic_projection_maps_edges_to_clip_space():
    cam = SceneCamera()
    cam.set_orthographic(2.0, -1.0, 1.0)
    cam.set_viewport_size(1, 1)
    assert np.allclose(cam.projection @ np.array([1.0, 1.0, 0.0, 1.0]), [1.0, 1.0, 0.0, 1.0])
    assert np.allclose(cam.projection @ np.array([-1.0, -1.0, 0.0, 1.0]), [-1.0, -1.0, 0.0, 1.0])


def test_wider_viewport_widens_orthographic_view():
    cam = SceneCamera()
    cam.set_viewport_size(100, 100)
    square = cam.projection.copy()
    cam.set_viewport_size(200, 100)
    assert cam.aspect_ratio == pytest.approx(2.0)
    assert cam.projection[0, 0] == pytest.approx(square[0, 0] / 2.0)
    assert cam.projection[1, 1] == pytest.approx(square[1, 1])


def test_set_perspective_uses_aspect_ratio():
    cam = SceneCamera()
    cam.set_viewport_size(1600, 900)
    cam.set_perspective(0.8, 0.1, 500.0)
    assert cam.projection_type is ProjectionType.PERSPECTIVE
    assert np.allclose(cam.projection, perspective(0.8, 1600 / 900, 0.1, 500.0))


def test_property_setters_recalculate():
    cam = SceneCamera()
    cam.set_viewport_size(4, 3)
    before = cam.projection.copy()
    cam.orthographic_size = 20.0
    assert cam.orthographic_size == pytest.approx(20.0)
    assert cam.projection[1, 1] == pytest.approx(before[1, 1] / 2.0)

    cam.projection_type = ProjectionType.PERSPECTIVE
    cam.perspective_far_clip = 50.0
    assert np.allclose(
        cam.projection,
        perspective(cam.perspective_vertical_fov, 4 / 3, cam.perspective_near_clip, 50.0),
    )


def test_copy_is_independent():
    cam = SceneCamera()
    cam.set_viewport_size(16, 9)
    dup = cam.copy()
    cam.set_orthographic(3.0, -2.0, 2.0)
    assert dup.orthographic_size == pytest.approx(10.0)
    assert not np.allclose(dup.projection, cam.projection)