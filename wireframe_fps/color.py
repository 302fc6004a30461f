#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/color.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 9
# LOG_REF: 2026-10-19
#

import curses
import logging

logger = logging.getLogger(__name__)

LINE_PAIR_ID = 1
BG_PAIR_ID = 2
TRUECOLOR_BASE_SLOT = 16

# Each axis of the xterm 6x6x6 cube (indices 16-231)
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # black
    (128, 0, 0),     # red
    (0, 128, 0),     # green
    (128, 128, 0),   # yellow
    (0, 0, 128),     # blue
    (128, 0, 128),   # magenta
    (0, 128, 128),   # cyan
    (192, 192, 192), # white
]


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        return (int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16))
    except ValueError:
        return None


def _distance(a, b):
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2


def rgb_to_xterm256(rgb):
    """Nearest xterm-256 index, searching the color cube and the gray ramp."""
    steps = [min(range(6), key=lambda i: abs(c - _CUBE_VALUES[i])) for c in rgb]
    cube_idx = 16 + steps[0] * 36 + steps[1] * 6 + steps[2]
    cube_rgb = tuple(_CUBE_VALUES[i] for i in steps)

    gray_step = max(0, min(23, (sum(rgb) // 3 - 8 + 5) // 10))
    gray_v = 8 + gray_step * 10

    if _distance(rgb, (gray_v, gray_v, gray_v)) < _distance(rgb, cube_rgb):
        return 232 + gray_step
    return cube_idx


def rgb_to_ansi8(rgb):
    """Nearest basic ANSI color index (0-7)."""
    return min(range(8), key=lambda i: _distance(rgb, _ANSI8[i]))


def init_colors(config):
    """
    Set up the line and background color pairs.

    Color mode cascade:
      1. True color: can_change_color(): init_color() with exact RGB
      2. xterm-256 : nearest xterm-256 index
      3. 8-color   : basic ANSI palette approximation
      4. Mono      : no color
    Returns (line_pair, bg_pair); 0 means "terminal default".
    """
    if not config.use_color:
        return 0, 0

    line_rgb = parse_hex_color(config.line_color) or (255, 255, 255)
    bg_rgb = parse_hex_color(config.bg_color) or (0, 0, 0)

    try:
        if not curses.has_colors():
            return 0, 0
        curses.start_color()

        num_colors = getattr(curses, 'COLORS', 8)
        try:
            can_redefine = curses.can_change_color()
        except curses.error:
            can_redefine = False

        if can_redefine and num_colors >= 256:
            # Slots just past ANSI 0-15 so the basic palette stays intact
            line_slot, bg_slot = TRUECOLOR_BASE_SLOT, TRUECOLOR_BASE_SLOT + 1
            for slot, (r, g, b) in ((line_slot, line_rgb), (bg_slot, bg_rgb)):
                curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
            mode = 'truecolor'
        elif num_colors >= 256:
            line_slot, bg_slot = rgb_to_xterm256(line_rgb), rgb_to_xterm256(bg_rgb)
            mode = 'xterm-256'
        elif num_colors >= 8:
            line_slot, bg_slot = rgb_to_ansi8(line_rgb), rgb_to_ansi8(bg_rgb)
            mode = 'ansi-8'
        else:
            return 0, 0

        curses.init_pair(LINE_PAIR_ID, line_slot, bg_slot)
        # HUD text: white on the background, or black when the background is white
        curses.init_pair(BG_PAIR_ID, 7 if bg_slot != 7 else 0, bg_slot)
        logger.info("Color mode %s: line %s, background %s", mode, line_rgb, bg_rgb)
        return LINE_PAIR_ID, BG_PAIR_ID

    except curses.error as e:
        logger.warning("Color initialization failed, using monochrome: %s", e)
        return 0, 0
