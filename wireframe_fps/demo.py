#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

import curses
import logging
import time

from .actions import AppState, ChangeViewportSize, NoAction
from .config import RenderConfig
from .input import poll_action
from .renderer import Renderer
from .scene import Scene

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Interactive frame loop: poll one intent, update state, render, HUD.

    The only blocking point is the bounded key poll, so the picture is
    redrawn at least every poll_timeout_ms even without input.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config

        # ── Curses setup ────────────────────────────────────────────────
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)

        # ── Renderer + curses color init ────────────────────────────────
        renderer = Renderer()
        renderer.init_colors(config)
        self.renderer = renderer

        # ── Scene and state ─────────────────────────────────────────────
        self.scene = Scene.from_names(config.shapes)
        self.state = AppState(camera=config.make_camera(),
                              draw_mode=config.draw_marker,
                              render_mode=config.render_mode,
                              cell_aspect=config.cell_aspect)

        # Aspect ratio follows the picture area from the first frame on
        columns, rows = Renderer.frame_size(stdscr)
        self.state.process_action(ChangeViewportSize(columns, rows))
        logger.info("Started with %d shape(s), %s", len(self.scene.objects), self.state.camera)

        self.frame_ms = 0.0

    def hud_text(self) -> str:
        cam = self.state.camera
        pos = cam.position
        return (f" pos: ({pos.x:.2f}, {pos.y:.2f}, {pos.z:.2f})"
                f" | yaw: {cam.yaw:.1f} | pitch: {cam.pitch:.1f}"
                f" | {self.state.render_mode.value}/{self.state.draw_mode.value}"
                f" | {self.frame_ms:.1f}ms ")

    def draw_hud(self):
        th, tw = self.stdscr.getmaxyx()
        if tw <= 1 or th <= 0:
            return
        attr = curses.A_BOLD
        if self.config.use_color and self.renderer.bg_pair:
            attr |= curses.color_pair(self.renderer.bg_pair)
        try:
            self.stdscr.addstr(0, 0, self.hud_text()[:tw - 1].ljust(tw - 1), attr)
        except curses.error:
            pass

    def step(self, action) -> bool:
        """Run one frame for an already-resolved intent. False once quitting."""
        self.state.process_action(action)
        if self.state.should_quit:
            return False

        start_time = time.time()
        self.renderer.render(self.stdscr, self.state, self.scene, self.config)
        self.frame_ms = (time.time() - start_time) * 1000

        if self.config.show_hud:
            self.draw_hud()
        self.stdscr.refresh()
        return True

    def run(self):
        action = NoAction()
        while self.step(action):
            action = poll_action(self.stdscr, self.config.poll_timeout_ms)
        logger.info("Quit requested")


def main(stdscr, config: RenderConfig):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config)
    app.run()
