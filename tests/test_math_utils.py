"""Tests for the Vec3 / Vec2 value types."""

import math

import pytest

from wireframe_fps.math_utils import Vec2, Vec3


def test_vec3_arithmetic() -> None:
    a = Vec3(1, 2, 3)
    b = Vec3(4, 5, 6)
    assert a + b == Vec3(5, 7, 9)
    assert b - a == Vec3(3, 3, 3)
    assert a * 2 == Vec3(2, 4, 6)
    assert 2 * a == Vec3(2, 4, 6)
    assert -a == Vec3(-1, -2, -3)
    assert a.dot(b) == 32.0


def test_vec3_cross_follows_right_hand_rule() -> None:
    x = Vec3(1, 0, 0)
    y = Vec3(0, 1, 0)
    assert x.cross(y) == Vec3(0, 0, 1)
    assert y.cross(x) == Vec3(0, 0, -1)


def test_vec3_length_and_normalize() -> None:
    v = Vec3(3, 4, 12)
    assert v.length() == 13.0
    assert v.normalize().length() == pytest.approx(1.0)


def test_normalize_zero_vector_is_zero() -> None:
    """Zero length is a degenerate input, not an error."""
    assert Vec3(0, 0, 0).normalize() == Vec3(0, 0, 0)
    assert Vec2(0, 0).normalize() == Vec2(0, 0)


def test_vec3_is_immutable() -> None:
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5


def test_vec3_iteration_and_indexing() -> None:
    v = Vec3(1, 2, 3)
    assert list(v) == [1.0, 2.0, 3.0]
    assert v[2] == 3.0
    with pytest.raises(IndexError):
        v[3]


def test_vec2_algebra() -> None:
    a = Vec2(3, 4)
    assert a.length() == 5.0
    assert a + Vec2(1, 1) == Vec2(4, 5)
    assert a - Vec2(1, 1) == Vec2(2, 3)
    assert a * 0.5 == Vec2(1.5, 2.0)
    assert a.normalize().length() == pytest.approx(1.0)
    assert math.isclose(a.normalize().x, 0.6)
