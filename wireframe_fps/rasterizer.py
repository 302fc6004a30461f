#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/rasterizer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 9
# LOG_REF: 2026-10-19
#


def draw_line_dda(canvas, p1, p2):
    """
    Draws a line between two sub-pixel positions using the DDA algorithm.
    p1, p2 are (x, y) pairs; the canvas discards pixels outside its bounds.
    """
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]

    dx = x2 - x1
    dy = y2 - y1
    step = max(abs(dx), abs(dy))
    if step < 1.0:
        # Shorter than one sub-pixel: a single dot
        canvas.set_pixel(int(round(x1)), int(round(y1)))
        return

    x_inc = dx / step
    y_inc = dy / step
    cx, cy = x1, y1
    for _ in range(int(step) + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc
