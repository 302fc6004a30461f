#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/actions.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6
# LOG_REF: 2026-10-19
#

import logging
from dataclasses import dataclass, field
from enum import Enum

from .camera import Camera, DEFAULT_CELL_ASPECT
from .math_utils import Vec2, Vec3

logger = logging.getLogger(__name__)


class Direction(Enum):
    FORWARD = 'forward'
    BACKWARD = 'backward'
    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'


class RenderMode(Enum):
    VERTEX = 'vertex'
    RAYCAST = 'raycast'


class Marker(Enum):
    """How lit sub-pixels are turned into terminal characters."""
    BRAILLE = 'braille'
    DOT = 'dot'
    HALF_BLOCK = 'halfblock'
    BLOCK = 'block'
    BAR = 'bar'
    ASCII = 'ascii'


# ── Intents ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Look:
    direction: Direction


@dataclass(frozen=True)
class ChangeDrawMode:
    marker: Marker


@dataclass(frozen=True)
class ChangeRenderMode:
    mode: RenderMode


@dataclass(frozen=True)
class ChangeViewportSize:
    width: int
    height: int


@dataclass(frozen=True)
class NoAction:
    pass


def apply(camera: Camera, action, cell_aspect: float = DEFAULT_CELL_ASPECT) -> Camera:
    """
    Camera after applying one intent. The input camera is left untouched;
    intents that do not concern the camera return an equal copy.
    """
    if isinstance(action, Move):
        step = camera.move_speed
        pos = camera.position
        d = action.direction
        if d is Direction.FORWARD:
            pos = pos + camera.forward_movement_vector() * step
        elif d is Direction.BACKWARD:
            pos = pos - camera.forward_movement_vector() * step
        elif d is Direction.LEFT:
            pos = pos - camera.right_vector() * step
        elif d is Direction.RIGHT:
            pos = pos + camera.right_vector() * step
        elif d is Direction.UP:
            pos = Vec3(pos.x, pos.y + step, pos.z)
        elif d is Direction.DOWN:
            pos = Vec3(pos.x, pos.y - step, pos.z)
        return camera.copy(position=pos)

    if isinstance(action, Look):
        d = action.direction
        if d is Direction.UP:
            return camera.copy(pitch=camera.pitch + camera.rotate_speed)
        if d is Direction.DOWN:
            return camera.copy(pitch=camera.pitch - camera.rotate_speed)
        if d is Direction.LEFT:
            return camera.copy(yaw=camera.yaw - camera.rotate_speed)
        if d is Direction.RIGHT:
            return camera.copy(yaw=camera.yaw + camera.rotate_speed)
        # Forward/backward carry no look meaning
        return camera.copy()

    if isinstance(action, ChangeViewportSize):
        return camera.with_viewport(action.width, action.height, cell_aspect)

    return camera.copy()


@dataclass
class AppState:
    """Everything the frame loop mutates between frames."""
    camera: Camera = field(default_factory=Camera)
    draw_mode: Marker = Marker.BRAILLE
    render_mode: RenderMode = RenderMode.VERTEX
    viewport: Vec2 = field(default_factory=lambda: Vec2(10.0, 10.0))
    cell_aspect: float = DEFAULT_CELL_ASPECT
    should_quit: bool = False

    def process_action(self, action):
        """Apply one resolved intent to the whole application state."""
        if isinstance(action, NoAction):
            return
        logger.debug("Applying %s", action)

        if isinstance(action, Quit):
            self.should_quit = True
        elif isinstance(action, ChangeDrawMode):
            self.draw_mode = action.marker
        elif isinstance(action, ChangeRenderMode):
            self.render_mode = action.mode
        elif isinstance(action, ChangeViewportSize):
            self.viewport = Vec2(action.width, action.height)
            logger.debug("Viewport resized to %dx%d", action.width, action.height)

        self.camera = apply(self.camera, action, self.cell_aspect)
