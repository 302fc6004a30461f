#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/pipeline.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7
# LOG_REF: 2026-10-19
#

from .clipping import clip_far, clip_near, clip_viewport
from .projection import project

FULL_VIEWPORT = (-1.0, 1.0, -1.0, 1.0)


def wireframe_segments(camera, edges, viewport=FULL_VIEWPORT):
    """
    Lazily yield the visible part of every world-space edge as
    (x1, y1, x2, y2) in device coordinates.

    Per edge: camera transform -> near clip -> far clip -> projection ->
    viewport clip. Edges that vanish at any stage are dropped silently.
    """
    xmin, xmax, ymin, ymax = viewport
    fov = camera.fov
    aspect = camera.aspect_ratio
    near = camera.near_plane
    far = camera.far_plane

    for a, b in edges:
        clipped = clip_near(camera.world_to_view(a), camera.world_to_view(b), near)
        if clipped is None:
            continue
        clipped = clip_far(clipped[0], clipped[1], far)
        if clipped is None:
            continue

        x1, y1 = project(clipped[0], fov, aspect)
        x2, y2 = project(clipped[1], fov, aspect)

        segment = clip_viewport(x1, y1, x2, y2, xmin, xmax, ymin, ymax)
        if segment is not None:
            yield segment
