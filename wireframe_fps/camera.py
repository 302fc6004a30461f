#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/camera.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 2
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vec3
from .projection import project

PITCH_LIMIT = 89.0
DEFAULT_CELL_ASPECT = 2.25


def clamp_pitch(pitch: float) -> float:
    return max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))


class Camera:
    """
    First-person camera state.

    Angles are stored in degrees. Yaw is unbounded; pitch is clamped to
    [-89, 89] whenever it is assigned so the view basis never degenerates
    at the poles.

    Camera space has the camera at the origin looking down +z, with +x to
    the right and +y up.
    """
    __slots__ = ('position', 'yaw', '_pitch', 'fov', 'aspect_ratio',
                 'near_plane', 'far_plane', 'move_speed', 'rotate_speed')

    def __init__(self, position: Vec3 = None, yaw: float = 0.0, pitch: float = 0.0,
                 fov: float = 90.0, aspect_ratio: float = 9.0 / 16.0,
                 near_plane: float = 0.1, far_plane: float = 100.0,
                 move_speed: float = 0.1, rotate_speed: float = 5.0):
        self.position = position if position is not None else Vec3(0.0, 0.0, -1.0)
        self.yaw = float(yaw)
        self.pitch = pitch
        self.fov = float(fov)                   # Field of view (degrees)
        self.aspect_ratio = float(aspect_ratio)
        self.near_plane = float(near_plane)
        self.far_plane = float(far_plane)
        self.move_speed = float(move_speed)     # World units per move intent
        self.rotate_speed = float(rotate_speed) # Degrees per look intent

    @property
    def pitch(self) -> float:
        return self._pitch

    @pitch.setter
    def pitch(self, value: float):
        self._pitch = clamp_pitch(float(value))

    def __repr__(self):
        return (f"Camera(position={self.position!r}, yaw={self.yaw:.1f}, "
                f"pitch={self.pitch:.1f}, fov={self.fov:.1f})")

    def __eq__(self, other):
        if not isinstance(other, Camera):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.__slots__)

    def copy(self, **changes) -> 'Camera':
        """Return a new camera with the given attributes replaced."""
        values = {
            'position': self.position,
            'yaw': self.yaw,
            'pitch': self.pitch,
            'fov': self.fov,
            'aspect_ratio': self.aspect_ratio,
            'near_plane': self.near_plane,
            'far_plane': self.far_plane,
            'move_speed': self.move_speed,
            'rotate_speed': self.rotate_speed,
        }
        values.update(changes)
        return Camera(**values)

    # ── Basis vectors ───────────────────────────────────────────────────
    def forward_view_vector(self) -> Vec3:
        """Unit view direction including pitch."""
        yaw_rad = math.radians(self.yaw)
        pitch_rad = math.radians(self.pitch)
        return Vec3(
            math.cos(pitch_rad) * math.sin(yaw_rad),
            math.sin(pitch_rad),
            math.cos(pitch_rad) * math.cos(yaw_rad),
        )

    def right_vector(self) -> Vec3:
        """Level right vector; ignores pitch so strafing stays horizontal."""
        yaw_rad = math.radians(self.yaw)
        return Vec3(math.cos(yaw_rad), 0.0, -math.sin(yaw_rad))

    def forward_movement_vector(self) -> Vec3:
        """Level forward vector; walking never climbs or sinks with pitch."""
        yaw_rad = math.radians(self.yaw)
        return Vec3(math.sin(yaw_rad), 0.0, math.cos(yaw_rad))

    def up_vector(self) -> Vec3:
        return self.forward_view_vector().cross(self.right_vector()).normalize()

    # ── Transforms ──────────────────────────────────────────────────────
    def world_to_view(self, point: Vec3) -> Vec3:
        """
        Transform a world-space point into camera space.

        Translate by -position, undo yaw about the vertical axis, then undo
        pitch about the camera's horizontal axis. The order matters: the two
        rotations do not commute.
        """
        p = point - self.position

        yaw_rad = math.radians(self.yaw)
        cy, sy = math.cos(yaw_rad), math.sin(yaw_rad)
        x = p.x * cy - p.z * sy
        z = p.x * sy + p.z * cy
        y = p.y

        pitch_rad = math.radians(self.pitch)
        cp, sp = math.cos(pitch_rad), math.sin(pitch_rad)
        return Vec3(x, y * cp - z * sp, y * sp + z * cp)

    def camera_to_world(self, direction: Vec3) -> Vec3:
        """Rotate a camera-local direction into world space."""
        forward = self.forward_view_vector().normalize()
        right = self.right_vector().normalize()
        up = forward.cross(right).normalize()
        return right * direction.x + up * direction.y + forward * direction.z

    def cast_ray(self, u: float, v: float) -> Vec3:
        """World-space unit ray direction through device coordinates (u, v)."""
        scale = math.tan(math.radians(self.fov) / 2.0)
        local = Vec3(u * scale * self.aspect_ratio, v * scale, 1.0).normalize()
        return self.camera_to_world(local)

    def project_vertex(self, point: Vec3):
        """World-space point straight to device coordinates."""
        return project(self.world_to_view(point), self.fov, self.aspect_ratio)

    def with_viewport(self, width: float, height: float,
                      cell_aspect: float = DEFAULT_CELL_ASPECT) -> 'Camera':
        """
        Camera whose aspect ratio matches a width x height character grid.
        Terminal cells are roughly cell_aspect times taller than wide.
        """
        if width <= 0 or height <= 0:
            return self.copy()
        return self.copy(aspect_ratio=height / width * cell_aspect)
