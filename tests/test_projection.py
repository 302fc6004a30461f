"""Tests for the perspective projection."""

import math

import pytest

from wireframe_fps.camera import Camera
from wireframe_fps.math_utils import Vec3
from wireframe_fps.projection import OFFSCREEN, project


def test_point_ahead_of_camera_projects_to_centre() -> None:
    cam = Camera(position=Vec3(0, 0, -1), fov=90.0, aspect_ratio=16 / 9)
    x, y = cam.project_vertex(Vec3(0, 0, 1))
    assert (x, y) == pytest.approx((0.0, 0.0))


def test_point_behind_camera_is_offscreen() -> None:
    cam = Camera(position=Vec3(0, 0, -1), fov=90.0, aspect_ratio=16 / 9)
    assert cam.project_vertex(Vec3(0, 0, -2)) == OFFSCREEN


def test_point_on_camera_plane_is_offscreen() -> None:
    assert project(Vec3(1, 1, 0), 90.0, 1.0) == OFFSCREEN
    assert project(Vec3(1, 1, -0.5), 90.0, 1.0) == OFFSCREEN


def test_doubling_depth_halves_coordinates() -> None:
    x1, y1 = project(Vec3(1.0, 0.5, 2.0), 70.0, 0.75)
    x2, y2 = project(Vec3(1.0, 0.5, 4.0), 70.0, 0.75)
    assert math.isfinite(x1) and math.isfinite(y1)
    assert x2 == pytest.approx(x1 / 2)
    assert y2 == pytest.approx(y1 / 2)


def test_edge_of_field_of_view_maps_to_unit() -> None:
    """At 90 degrees a point at 45 degrees off-axis hits the viewport edge."""
    x, y = project(Vec3(1.0, 1.0, 1.0), 90.0, 1.0)
    assert x == pytest.approx(1.0)
    assert y == pytest.approx(1.0)


def test_aspect_ratio_only_scales_x() -> None:
    x, y = project(Vec3(1.0, 1.0, 1.0), 90.0, 0.5)
    assert x == pytest.approx(0.5)
    assert y == pytest.approx(1.0)
