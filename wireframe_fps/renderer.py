#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/renderer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 9
# LOG_REF: 2026-10-19
#

import curses

from .actions import AppState, RenderMode
from .canvas import Canvas
from .config import RenderConfig
from .pipeline import wireframe_segments
from .raycast import raycast_cells
from .scene import Scene


class Renderer:
    """
    Draws one frame of the scene to a curses screen.

    render(stdscr, state, scene, config) fills every row below the HUD line.
    The render mode is dispatched once per frame: VERTEX runs the wireframe
    pipeline onto a Canvas, RAYCAST shades one ray per character cell.
    """

    def __init__(self):
        self.line_pair = 0
        self.bg_pair = 0

    def init_colors(self, config: RenderConfig):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        from .color import init_colors
        self.line_pair, self.bg_pair = init_colors(config)

    @staticmethod
    def frame_size(stdscr):
        """(columns, rows) available for the picture: HUD row and last column excluded."""
        th, tw = stdscr.getmaxyx()
        return tw - 1, th - 1

    def frame_cells(self, state: AppState, scene: Scene, columns: int, rows: int):
        """Yield (column, row, char) for the current render mode."""
        if state.render_mode is RenderMode.VERTEX:
            canvas = Canvas(columns, rows, state.draw_mode)
            for segment in wireframe_segments(state.camera, scene.world_edges()):
                canvas.draw_segment(*segment)
            return canvas.cells()
        elif state.render_mode is RenderMode.RAYCAST:
            return raycast_cells(state.camera, scene, columns, rows)
        raise ValueError(f"unknown render mode {state.render_mode!r}")

    def render(self, stdscr, state: AppState, scene: Scene, config: RenderConfig) -> int:
        """
        Render one frame and output to curses screen.

        Returns the number of cells written. Does NOT call stdscr.refresh();
        the caller should do that after optional HUD / overlay drawing.
        """
        columns, rows = self.frame_size(stdscr)
        stdscr.erase()
        if columns <= 0 or rows <= 0:
            return 0

        use_color = config.use_color and self.line_pair
        if use_color and self.bg_pair:
            try:
                stdscr.bkgd(' ', curses.color_pair(self.bg_pair))
            except curses.error:
                pass
        attr = curses.color_pair(self.line_pair) if use_color else 0

        written = 0
        for col, row, char in self.frame_cells(state, scene, columns, rows):
            try:
                stdscr.addstr(row + 1, col, char, attr)
                written += 1
            except curses.error:
                pass
        return written
