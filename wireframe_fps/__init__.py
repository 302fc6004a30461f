#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/__init__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 10
# LOG_REF: 2026-10-19
#

import logging

from .math_utils import Vec3, Vec2
from .camera import Camera
from .projection import project, OFFSCREEN
from .clipping import clip_near, clip_far, clip_viewport
from .raycast import ray_intersects_aabb, ray_aabb_distance, raycast_cells
from .actions import (
    AppState, Direction, Marker, RenderMode, apply,
    Quit, Move, Look, ChangeDrawMode, ChangeRenderMode, ChangeViewportSize, NoAction,
)
from .shapes import Shape, cube, pyramid, prism, tesseract
from .scene import Scene
from .pipeline import wireframe_segments
from .config import RenderConfig
from .canvas import Canvas
from .renderer import Renderer

# Curses owns the terminal; records only go where cli.configure_logging sends them
logging.getLogger(__name__).addHandler(logging.NullHandler())
