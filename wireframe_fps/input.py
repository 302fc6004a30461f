#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/input.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

import curses
import logging

from .actions import (
    ChangeDrawMode, ChangeRenderMode, ChangeViewportSize, Direction, Look,
    Marker, Move, NoAction, Quit, RenderMode,
)
from .renderer import Renderer

logger = logging.getLogger(__name__)

CHAR_ACTIONS = {
    'Q': Quit(),
    'q': Quit(),
    'w': Move(Direction.FORWARD),
    's': Move(Direction.BACKWARD),
    'a': Move(Direction.LEFT),
    'd': Move(Direction.RIGHT),
    ' ': Move(Direction.UP),
    'k': Move(Direction.UP),
    'j': Move(Direction.DOWN),
}

KEY_ACTIONS = {
    curses.KEY_UP: Look(Direction.UP),
    curses.KEY_DOWN: Look(Direction.DOWN),
    curses.KEY_LEFT: Look(Direction.LEFT),
    curses.KEY_RIGHT: Look(Direction.RIGHT),
    curses.KEY_F1: ChangeDrawMode(Marker.BRAILLE),
    curses.KEY_F2: ChangeDrawMode(Marker.DOT),
    curses.KEY_F3: ChangeDrawMode(Marker.HALF_BLOCK),
    curses.KEY_F4: ChangeDrawMode(Marker.BLOCK),
    curses.KEY_F5: ChangeDrawMode(Marker.BAR),
    curses.KEY_F6: ChangeDrawMode(Marker.ASCII),
    curses.KEY_F8: ChangeRenderMode(RenderMode.VERTEX),
    curses.KEY_F9: ChangeRenderMode(RenderMode.RAYCAST),
}


def key_to_action(key: int, screen_size=None):
    """
    Resolve one curses key code into an intent.

    screen_size is the (rows, columns) pair reported by getmaxyx(); it is
    only consulted for KEY_RESIZE.
    """
    if key == -1:
        return NoAction()
    if key == curses.KEY_RESIZE:
        if screen_size is None:
            return NoAction()
        rows, columns = screen_size
        return ChangeViewportSize(columns, rows)
    if key in KEY_ACTIONS:
        return KEY_ACTIONS[key]
    if 0 <= key < 256 and chr(key) in CHAR_ACTIONS:
        return CHAR_ACTIONS[chr(key)]

    logger.debug("Unmapped key code %d", key)
    return NoAction()


def poll_action(stdscr, timeout_ms: int):
    """Wait at most timeout_ms for a key and resolve it."""
    stdscr.timeout(timeout_ms)
    try:
        key = stdscr.getch()
    except curses.error:
        key = -1
    columns, rows = Renderer.frame_size(stdscr)
    return key_to_action(key, (rows, columns))
