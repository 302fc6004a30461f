#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass, field
from typing import List

from .actions import Marker, RenderMode
from .camera import Camera, DEFAULT_CELL_ASPECT
from .math_utils import Vec3


@dataclass
class RenderConfig:
    """Configuration for the camera, the render pipeline and the frame loop."""
    fov: float = 90.0
    near_plane: float = 0.1
    far_plane: float = 100.0
    move_speed: float = 0.1
    rotate_speed: float = 5.0
    cell_aspect: float = DEFAULT_CELL_ASPECT
    poll_timeout_ms: int = 500
    draw_marker: Marker = Marker.BRAILLE
    render_mode: RenderMode = RenderMode.VERTEX
    use_color: bool = True
    line_color: str = "#FFFFFF"
    bg_color: str = "#0000AA"
    show_hud: bool = True
    shapes: List[str] = field(
        default_factory=lambda: ['cube', 'pyramid', 'prism', 'tesseract'])

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError for settings the pipeline cannot work with."""
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"fov must be between 0 and 180 degrees, got {self.fov}")
        if self.near_plane <= 0.0:
            raise ValueError(f"near plane must be positive, got {self.near_plane}")
        if self.far_plane <= self.near_plane:
            raise ValueError(
                f"far plane ({self.far_plane}) must lie beyond the near plane "
                f"({self.near_plane})")
        if self.move_speed <= 0.0 or self.rotate_speed <= 0.0:
            raise ValueError("move and rotate speeds must be positive")
        if self.cell_aspect <= 0.0:
            raise ValueError(f"cell aspect must be positive, got {self.cell_aspect}")
        if self.poll_timeout_ms <= 0:
            raise ValueError(
                f"poll timeout must be a positive number of milliseconds, "
                f"got {self.poll_timeout_ms}")

    def make_camera(self) -> Camera:
        """Initial camera: one unit behind the origin, looking down +z."""
        return Camera(position=Vec3(0.0, 0.0, -1.0), fov=self.fov,
                      near_plane=self.near_plane, far_plane=self.far_plane,
                      move_speed=self.move_speed, rotate_speed=self.rotate_speed)

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Accurate color detection requires curses initialization,
        # so this is a pre-init guess.
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console font often lacks braille
        marker = Marker.BRAILLE if supports_utf8 and not is_linux_console else Marker.ASCII
        return cls(use_color=not is_dumb, draw_marker=marker)
