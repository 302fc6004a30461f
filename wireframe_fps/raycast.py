#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/raycast.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 5
# LOG_REF: 2026-10-19
#

import math

from .math_utils import Vec3

# Nearest hits get the densest character
SHADE_RAMP = " .:-=+*#%@"


def _reciprocal(d: float) -> float:
    # 1/0 is a signed infinity for the slab test, as IEEE division gives it
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


def _slab(o: float, d: float, lo: float, hi: float):
    inv = _reciprocal(d)
    t1 = (lo - o) * inv
    t2 = (hi - o) * inv
    # 0 * inf: parallel ray starting on a face, which counts as inside the slab
    if math.isnan(t1) or math.isnan(t2):
        return -math.inf, math.inf
    if t1 > t2:
        t1, t2 = t2, t1
    return t1, t2


def ray_aabb_distance(origin: Vec3, direction: Vec3, box_min: Vec3, box_max: Vec3):
    """
    Slab-method ray/box test.

    Returns the distance along direction at which the ray enters the box
    (0.0 when the origin is inside it) or None when the ray misses or the
    box lies entirely behind the origin.
    """
    tmin, tmax = _slab(origin.x, direction.x, box_min.x, box_max.x)
    ty_min, ty_max = _slab(origin.y, direction.y, box_min.y, box_max.y)

    # x and y intervals already disjoint
    if tmin > ty_max or ty_min > tmax:
        return None
    tmin = max(tmin, ty_min)
    tmax = min(tmax, ty_max)

    tz_min, tz_max = _slab(origin.z, direction.z, box_min.z, box_max.z)
    tmin = max(tmin, tz_min)
    tmax = min(tmax, tz_max)

    if not tmin <= tmax or tmax < 0.0:
        return None
    return max(tmin, 0.0)


def ray_intersects_aabb(origin: Vec3, direction: Vec3, box_min: Vec3, box_max: Vec3) -> bool:
    return ray_aabb_distance(origin, direction, box_min, box_max) is not None


def shade_for_distance(distance: float, far_plane: float) -> str:
    """Density character for a hit; nearer hits are denser."""
    if far_plane <= 0:
        return SHADE_RAMP[-1]
    closeness = 1.0 - min(max(distance / far_plane, 0.0), 1.0)
    idx = 1 + int(closeness * (len(SHADE_RAMP) - 2) + 0.5)
    return SHADE_RAMP[min(idx, len(SHADE_RAMP) - 1)]


def raycast_cells(camera, scene, columns: int, rows: int):
    """
    Ray-mode render path: one ray per character cell.

    Yields (column, row, char) for every cell whose ray hits the bounding box
    of a scene object in front of the camera. Cells with no hit are skipped.
    """
    if columns <= 0 or rows <= 0:
        return
    boxes = list(scene.world_bounds())
    if not boxes:
        return

    origin = camera.position
    for row in range(rows):
        v = 1.0 - 2.0 * (row + 0.5) / rows
        for col in range(columns):
            u = 2.0 * (col + 0.5) / columns - 1.0
            direction = camera.cast_ray(u, v)

            nearest = None
            for lo, hi in boxes:
                dist = ray_aabb_distance(origin, direction, lo, hi)
                if dist is not None and (nearest is None or dist < nearest):
                    nearest = dist

            if nearest is not None and nearest <= camera.far_plane:
                yield col, row, shade_for_distance(nearest, camera.far_plane)
