"""Tests for color parsing and the curses color cascade (curses calls faked)."""

import pytest

from wireframe_fps import color
from wireframe_fps.config import RenderConfig


@pytest.fixture
def fake_curses(monkeypatch: pytest.MonkeyPatch):
    calls = {'init_color': [], 'init_pair': []}
    monkeypatch.setattr(color.curses, 'has_colors', lambda: True)
    monkeypatch.setattr(color.curses, 'start_color', lambda: None)
    monkeypatch.setattr(color.curses, 'COLORS', 256, raising=False)
    monkeypatch.setattr(color.curses, 'init_color',
                        lambda *args: calls['init_color'].append(args))
    monkeypatch.setattr(color.curses, 'init_pair',
                        lambda *args: calls['init_pair'].append(args))
    return calls


def test_parse_hex_color() -> None:
    assert color.parse_hex_color('#0000AA') == (0, 0, 170)
    assert color.parse_hex_color('ffffff') == (255, 255, 255)
    assert color.parse_hex_color('#12345') is None
    assert color.parse_hex_color('zzzzzz') is None


def test_truecolor_redefines_slots_past_ansi_palette(monkeypatch, fake_curses) -> None:
    monkeypatch.setattr(color.curses, 'can_change_color', lambda: True)
    config = RenderConfig(use_color=True, line_color='#FFFFFF', bg_color='#000000')
    assert color.init_colors(config) == (color.LINE_PAIR_ID, color.BG_PAIR_ID)
    slots = [args[0] for args in fake_curses['init_color']]
    assert slots == [16, 17]
    assert all(not 232 <= slot <= 255 for slot in slots)
    assert fake_curses['init_pair'][0] == (color.LINE_PAIR_ID, 16, 17)


def test_xterm256_uses_nearest_index(monkeypatch, fake_curses) -> None:
    monkeypatch.setattr(color.curses, 'can_change_color', lambda: False)
    config = RenderConfig(use_color=True, line_color='#FFFFFF', bg_color='#000000')
    color.init_colors(config)
    assert fake_curses['init_color'] == []
    assert fake_curses['init_pair'][0] == (color.LINE_PAIR_ID, 231, 16)


def test_color_disabled_returns_default_pairs() -> None:
    assert color.init_colors(RenderConfig(use_color=False)) == (0, 0)
