"""Tests for applying intents to the camera and application state."""

import pytest

from wireframe_fps.actions import (
    AppState, ChangeDrawMode, ChangeRenderMode, ChangeViewportSize, Direction, Look,
    Marker, Move, NoAction, Quit, RenderMode, apply,
)
from wireframe_fps.camera import Camera
from wireframe_fps.math_utils import Vec2, Vec3


def test_move_left_at_zero_yaw() -> None:
    cam = Camera(move_speed=0.1)
    moved = apply(cam, Move(Direction.LEFT))
    assert moved.position.x == -0.1
    assert moved.position.y == cam.position.y
    assert moved.position.z == cam.position.z


def test_apply_does_not_mutate_input() -> None:
    cam = Camera()
    apply(cam, Move(Direction.FORWARD))
    apply(cam, Look(Direction.UP))
    assert cam == Camera()


def test_move_forward_follows_yaw() -> None:
    cam = Camera(yaw=90.0, move_speed=0.5)
    moved = apply(cam, Move(Direction.FORWARD))
    assert list(moved.position) == pytest.approx([0.5, 0.0, -1.0])
    back = apply(moved, Move(Direction.BACKWARD))
    assert list(back.position) == pytest.approx(list(cam.position))


def test_move_forward_stays_level_when_pitched() -> None:
    cam = Camera(pitch=60.0)
    moved = apply(cam, Move(Direction.FORWARD))
    assert moved.position.y == cam.position.y


def test_move_up_and_down_are_vertical() -> None:
    cam = Camera(yaw=33.0, pitch=-20.0)
    up = apply(cam, Move(Direction.UP))
    assert up.position == Vec3(0, 0.1, -1)
    down = apply(up, Move(Direction.DOWN))
    assert down.position.y == pytest.approx(0.0)


def test_look_left_and_right_change_yaw() -> None:
    cam = Camera()
    assert apply(cam, Look(Direction.LEFT)).yaw == -5.0
    assert apply(cam, Look(Direction.RIGHT)).yaw == 5.0


def test_yaw_is_unbounded() -> None:
    cam = Camera()
    for _ in range(100):
        cam = apply(cam, Look(Direction.RIGHT))
    assert cam.yaw == 500.0


@pytest.mark.parametrize("direction,limit", [(Direction.UP, 89.0), (Direction.DOWN, -89.0)])
def test_pitch_stays_clamped_after_many_looks(direction, limit) -> None:
    cam = Camera()
    for _ in range(200):
        cam = apply(cam, Look(direction))
        assert -89.0 <= cam.pitch <= 89.0
    assert cam.pitch == limit


def test_look_forward_is_noop() -> None:
    cam = Camera(yaw=12.0, pitch=3.0)
    assert apply(cam, Look(Direction.FORWARD)) == cam


def test_viewport_change_updates_aspect_ratio() -> None:
    cam = apply(Camera(), ChangeViewportSize(100, 40))
    assert cam.aspect_ratio == pytest.approx(40 / 100 * 2.25)


def test_non_camera_actions_leave_camera_equal() -> None:
    cam = Camera(yaw=7.0)
    for action in (Quit(), NoAction(), ChangeDrawMode(Marker.DOT),
                   ChangeRenderMode(RenderMode.RAYCAST)):
        assert apply(cam, action) == cam


def test_app_state_defaults() -> None:
    state = AppState()
    assert state.draw_mode is Marker.BRAILLE
    assert state.render_mode is RenderMode.VERTEX
    assert state.viewport == Vec2(10, 10)
    assert not state.should_quit


def test_app_state_quit() -> None:
    state = AppState()
    state.process_action(Quit())
    assert state.should_quit


def test_app_state_mode_changes() -> None:
    state = AppState()
    state.process_action(ChangeDrawMode(Marker.HALF_BLOCK))
    state.process_action(ChangeRenderMode(RenderMode.RAYCAST))
    assert state.draw_mode is Marker.HALF_BLOCK
    assert state.render_mode is RenderMode.RAYCAST


def test_app_state_viewport_change() -> None:
    state = AppState()
    state.process_action(ChangeViewportSize(120, 30))
    assert state.viewport == Vec2(120, 30)
    assert state.camera.aspect_ratio == pytest.approx(30 / 120 * 2.25)


def test_app_state_moves_camera() -> None:
    state = AppState()
    state.process_action(Move(Direction.RIGHT))
    assert state.camera.position.x == pytest.approx(0.1)


def test_app_state_no_action_changes_nothing() -> None:
    state = AppState()
    before = state.camera
    state.process_action(NoAction())
    assert state.camera is before
    assert not state.should_quit
