#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/canvas.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 9
# LOG_REF: 2026-10-19
#

from .actions import Marker
from .rasterizer import draw_line_dda

# Sub-pixels per character cell (columns, rows) for each marker
CELL_RESOLUTION = {
    Marker.BRAILLE: (2, 4),
    Marker.ASCII: (2, 4),
    Marker.HALF_BLOCK: (1, 2),
    Marker.DOT: (1, 1),
    Marker.BLOCK: (1, 1),
    Marker.BAR: (1, 1),
}

SINGLE_CHARS = {
    Marker.DOT: '\u2022',    # •
    Marker.BLOCK: '\u2588',  # █
    Marker.BAR: '\u2584',    # ▄
}


class Canvas:
    """
    Bitmask grid of lit sub-pixels, one mask per terminal cell.

    Segments arrive in normalized device coordinates: x in [-1, 1] runs left
    to right and y in [-1, 1] runs bottom to top.
    """
    __slots__ = ['columns', 'rows', 'marker', 'sx', 'sy', 'w', 'h', 'grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, columns: int, rows: int, marker: Marker = Marker.BRAILLE):
        self.columns, self.rows = columns, rows
        self.marker = marker
        self.sx, self.sy = CELL_RESOLUTION[marker]
        self.w, self.h = columns * self.sx, rows * self.sy
        self.grid = [[0] * columns for _ in range(rows)]

    def set_pixel(self, x: int, y: int):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x // self.sx, y // self.sy
        # Bits run down each sub-column, left column first
        self.grid[cy][cx] |= 1 << ((y % self.sy) + (x % self.sx) * self.sy)

    def to_pixel(self, x: float, y: float):
        """Device coordinates to (possibly fractional) sub-pixel coordinates."""
        px = (x + 1.0) * 0.5 * (self.w - 1)
        py = (1.0 - y) * 0.5 * (self.h - 1)
        return px, py

    def draw_segment(self, x1: float, y1: float, x2: float, y2: float):
        draw_line_dda(self, self.to_pixel(x1, y1), self.to_pixel(x2, y2))

    def cell_char(self, mask: int) -> str:
        if not mask:
            return ' '
        if self.marker is Marker.BRAILLE:
            return render_cell_braille(mask)
        if self.marker is Marker.ASCII:
            return render_cell_ascii(mask)
        if self.marker is Marker.HALF_BLOCK:
            return render_cell_half_block(mask)
        return SINGLE_CHARS[self.marker]

    def cells(self):
        """Yield (column, row, char) for every cell with a lit sub-pixel."""
        for row, masks in enumerate(self.grid):
            for col, mask in enumerate(masks):
                if mask:
                    yield col, row, self.cell_char(mask)


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)


def render_cell_half_block(mask: int) -> str:
    """Renders a 1x2 cell mask: bit 0 is the upper half, bit 1 the lower."""
    upper, lower = mask & 1, mask & 2
    if upper and lower:
        return '\u2588'  # █
    if upper:
        return '\u2580'  # ▀
    if lower:
        return '\u2584'  # ▄
    return ' '
