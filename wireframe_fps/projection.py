#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/projection.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 3
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vec3

# Returned for points at or behind the camera plane. Lies outside the
# [-1, 1] viewport so the viewport clip throws such segments away.
OFFSCREEN = (10.0, 10.0)


def project(view_point: Vec3, fov: float, aspect_ratio: float):
    """
    Pinhole perspective divide of a camera-space point.

    Returns normalized device coordinates (x, y), roughly [-1, 1] for points
    inside the field of view, or OFFSCREEN when view_point.z <= 0.
    """
    if view_point.z <= 0.0:
        return OFFSCREEN

    scale = math.tan(math.radians(fov) / 2.0)
    x = (view_point.x / (scale * view_point.z)) * aspect_ratio
    y = view_point.y / (scale * view_point.z)
    return (x, y)
