#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/shapes.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 8
# LOG_REF: 2026-10-19
#

import itertools

from .math_utils import Vec3


class Shape:
    """
    Read-only wireframe: vertex positions plus edges as index pairs.

    Every edge index must address an existing vertex; a bad index is a
    construction error rather than something the renderer has to survive.
    """
    __slots__ = ('name', 'vertices', 'edges')

    def __init__(self, name: str, vertices, edges):
        verts = tuple(v if isinstance(v, Vec3) else Vec3(*v) for v in vertices)
        pairs = tuple((int(i), int(j)) for i, j in edges)
        count = len(verts)
        for i, j in pairs:
            if not (0 <= i < count and 0 <= j < count):
                raise ValueError(
                    f"shape '{name}': edge ({i}, {j}) references a missing vertex "
                    f"(have {count})")
        self.name = name
        self.vertices = verts
        self.edges = pairs

    def __repr__(self):
        return f"Shape({self.name!r}, V:{len(self.vertices)}, E:{len(self.edges)})"

    def segments(self, offset: Vec3 = None):
        """Yield (a, b) endpoint pairs, optionally translated by offset."""
        for i, j in self.edges:
            a, b = self.vertices[i], self.vertices[j]
            if offset is not None:
                a, b = a + offset, b + offset
            yield a, b

    def bounds(self):
        """Axis-aligned bounding box as (min, max) corners."""
        if not self.vertices:
            zero = Vec3(0, 0, 0)
            return zero, zero
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        zs = [v.z for v in self.vertices]
        return Vec3(min(xs), min(ys), min(zs)), Vec3(max(xs), max(ys), max(zs))


def cube(size: float = 1.0) -> Shape:
    """Axis-aligned cube centred on the origin."""
    h = size / 2.0
    vertices = [
        (-h, -h, -h), ( h, -h, -h), ( h,  h, -h), (-h,  h, -h),
        (-h, -h,  h), ( h, -h,  h), ( h,  h,  h), (-h,  h,  h),
    ]
    edges = [
        (0, 1), (1, 2), (2, 3), (3, 0),  # near face
        (4, 5), (5, 6), (6, 7), (7, 4),  # far face
        (0, 4), (1, 5), (2, 6), (3, 7),  # connecting edges
    ]
    return Shape('cube', vertices, edges)


def pyramid(size: float = 1.0, height: float = 1.0) -> Shape:
    """Square-based pyramid standing on y = -height/2."""
    h = size / 2.0
    base_y = -height / 2.0
    vertices = [
        (-h, base_y, -h), ( h, base_y, -h), ( h, base_y,  h), (-h, base_y,  h),
        (0.0, height / 2.0, 0.0),
    ]
    edges = [
        (0, 1), (1, 2), (2, 3), (3, 0),
        (0, 4), (1, 4), (2, 4), (3, 4),
    ]
    return Shape('pyramid', vertices, edges)


def prism(size: float = 1.0, length: float = 1.0) -> Shape:
    """Triangular prism with its triangle faces at z = -length/2 and +length/2."""
    h = size / 2.0
    d = length / 2.0
    triangle = [(-h, -h), (h, -h), (0.0, h)]
    vertices = [(x, y, -d) for x, y in triangle] + [(x, y, d) for x, y in triangle]
    edges = [
        (0, 1), (1, 2), (2, 0),
        (3, 4), (4, 5), (5, 3),
        (0, 3), (1, 4), (2, 5),
    ]
    return Shape('prism', vertices, edges)


def tesseract(size: float = 1.0, w_distance: float = 3.0) -> Shape:
    """
    4D hypercube projected into 3D.

    Each corner (x, y, z, w) is scaled by w_distance / (w_distance - w), so the
    w = +h cube appears larger than the w = -h cube and the two are joined by
    eight connecting edges. Edges link corners differing in one coordinate.
    """
    h = size / 2.0
    if w_distance <= h:
        raise ValueError(
            f"tesseract: w_distance ({w_distance}) must exceed half the size ({h})")

    corners = list(itertools.product((-h, h), repeat=4))
    vertices = []
    for x, y, z, w in corners:
        k = w_distance / (w_distance - w)
        vertices.append((x * k, y * k, z * k))

    edges = []
    for i, j in itertools.combinations(range(len(corners)), 2):
        differing = sum(1 for a, b in zip(corners[i], corners[j]) if a != b)
        if differing == 1:
            edges.append((i, j))
    return Shape('tesseract', vertices, edges)


SHAPES = {
    'cube': cube,
    'pyramid': pyramid,
    'prism': prism,
    'tesseract': tesseract,
}


def make_shape(name: str) -> Shape:
    """Build a registered shape by name."""
    try:
        factory = SHAPES[name]
    except KeyError:
        raise ValueError(
            f"unknown shape '{name}' (choose from {', '.join(SHAPES)})") from None
    return factory()
