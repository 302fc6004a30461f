"""Tests for frame rendering and the demo frame loop against a fake screen."""

import pytest

from wireframe_fps.actions import (
    AppState, ChangeRenderMode, Direction, Look, Marker, Move, Quit, RenderMode,
)
from wireframe_fps.config import RenderConfig
from wireframe_fps.demo import DemoApp
from wireframe_fps.math_utils import Vec2
from wireframe_fps.renderer import Renderer
from wireframe_fps.scene import Scene


@pytest.fixture
def config():
    return RenderConfig(use_color=False)


def test_vertex_frame_writes_below_hud(screen, config) -> None:
    renderer = Renderer()
    written = renderer.render(screen, AppState(), Scene.default(), config)
    assert written > 0
    assert len(screen.writes) == written
    assert all(1 <= y < 24 and 0 <= x < 79 for y, x, _, _ in screen.writes)


@pytest.mark.parametrize("marker", list(Marker))
def test_every_marker_renders(screen, config, marker) -> None:
    state = AppState(draw_mode=marker)
    assert Renderer().render(screen, state, Scene.default(), config) > 0


def test_raycast_frame_writes_shaded_cells(screen, config) -> None:
    state = AppState(render_mode=RenderMode.RAYCAST)
    written = Renderer().render(screen, state, Scene.from_names(['cube']), config)
    assert written > 0
    assert all(text.strip() for _, _, text, _ in screen.writes)


def test_tiny_screen_renders_nothing(make_screen, config) -> None:
    screen = make_screen(rows=1, columns=1)
    assert Renderer().render(screen, AppState(), Scene.default(), config) == 0


def test_demo_step_quits_at_frame_boundary(screen, config) -> None:
    app = DemoApp(screen, config)
    assert app.step(Move(Direction.FORWARD))
    assert screen.refreshed == 1
    assert not app.step(Quit())
    assert screen.refreshed == 1


def test_demo_tracks_screen_aspect(screen, config) -> None:
    app = DemoApp(screen, config)
    # HUD row and last column are not part of the picture
    assert app.state.viewport == Vec2(79, 23)
    assert app.state.camera.aspect_ratio == pytest.approx(23 / 79 * 2.25)


def test_demo_hud_shows_camera(screen, config) -> None:
    app = DemoApp(screen, config)
    app.step(Look(Direction.RIGHT))
    hud = [text for y, _, text, _ in screen.writes if y == 0]
    assert hud and 'yaw: 5.0' in hud[0]


def test_demo_run_consumes_keys_until_quit(make_screen, config) -> None:
    screen = make_screen(keys=[ord('w'), -1, ord('d'), ord('Q')])
    app = DemoApp(screen, config)
    app.run()
    assert app.state.should_quit
    assert app.state.camera.position.x == pytest.approx(0.1)
    assert app.state.camera.position.z == pytest.approx(-0.9)
    assert screen.timeouts == [config.poll_timeout_ms] * 4


def test_demo_switches_render_mode(screen, config) -> None:
    app = DemoApp(screen, config)
    app.step(ChangeRenderMode(RenderMode.RAYCAST))
    assert app.state.render_mode is RenderMode.RAYCAST
    assert screen.writes
