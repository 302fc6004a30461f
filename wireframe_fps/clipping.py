#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/clipping.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3


def _point_at_depth(a: Vec3, b: Vec3, depth: float) -> Vec3:
    t = (depth - a.z) / (b.z - a.z)
    # z is pinned rather than interpolated so it equals depth exactly
    return Vec3(a.x + t * (b.x - a.x), a.y + t * (b.y - a.y), depth)


def clip_near(a: Vec3, b: Vec3, near_z: float):
    """
    Clip a camera-space segment against the plane z = near_z.

    Returns None when both endpoints are at or behind the plane, the
    untouched pair when both are in front, otherwise the pair with the
    behind endpoint moved onto the plane. Must run before projection.
    """
    if a.z <= near_z and b.z <= near_z:
        return None
    if a.z > near_z and b.z > near_z:
        return (a, b)

    hit = _point_at_depth(a, b, near_z)
    if a.z > near_z:
        return (a, hit)
    return (hit, b)


def clip_far(a: Vec3, b: Vec3, far_z: float):
    """Mirror of clip_near for the far plane z = far_z."""
    if a.z >= far_z and b.z >= far_z:
        return None
    if a.z < far_z and b.z < far_z:
        return (a, b)

    hit = _point_at_depth(a, b, far_z)
    if a.z < far_z:
        return (a, hit)
    return (hit, b)


def clip_viewport(x1: float, y1: float, x2: float, y2: float,
                  xmin: float = -1.0, xmax: float = 1.0,
                  ymin: float = -1.0, ymax: float = 1.0):
    """
    Liang-Barsky clip of a device-space segment to [xmin,xmax] x [ymin,ymax].

    Returns (x1, y1, x2, y2) of the visible part or None.
    """
    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0
    # (axis, value) of the boundary that last moved t0 / t1
    enter = leave = None

    for p, q, boundary in ((-dx, x1 - xmin, (0, xmin)), (dx, xmax - x1, (0, xmax)),
                           (-dy, y1 - ymin, (1, ymin)), (dy, ymax - y1, (1, ymax))):
        if p == 0.0:
            # Parallel to this boundary: keep only if on the inside
            if q < 0.0:
                return None
            continue
        r = q / p
        if p < 0.0:
            if r > t1:
                return None
            if r > t0:
                t0 = r
                enter = boundary
        else:
            if r < t0:
                return None
            if r < t1:
                t1 = r
                leave = boundary

    if t0 >= t1:
        return None

    start = [x1, y1]
    end = [x2, y2]
    if enter is not None:
        start = [x1 + t0 * dx, y1 + t0 * dy]
        start[enter[0]] = enter[1]
    if leave is not None:
        end = [x1 + t1 * dx, y1 + t1 * dy]
        end[leave[0]] = leave[1]
    return (start[0], start[1], end[0], end[1])
