#
# PROJECT: wireframe-fps-cli
# MODULE: wireframe_fps/scene.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 8
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3
from .shapes import Shape, make_shape


class Scene:
    """
    Container for renderable objects.

    Each entry is a (Shape, offset) pair representing a shape instance
    placed at a world-space offset. Multiple instances may share the same
    Shape object.
    """

    # Spacing along x between shapes laid out by from_names()
    SPACING = 1.75

    def __init__(self):
        self.objects = []  # list of (Shape, Vec3)

    def add(self, shape: Shape, translation=(0.0, 0.0, 0.0)):
        """Add a shape instance at the given world position.

        Args:
            shape: Shape to render.
            translation: Vec3 or (x, y, z) world offset.
        """
        if isinstance(translation, Vec3):
            pos = translation
        elif isinstance(translation, (list, tuple)) and len(translation) >= 3:
            pos = Vec3(translation[0], translation[1], translation[2])
        else:
            pos = Vec3(0.0, 0.0, 0.0)
        self.objects.append((shape, pos))

    def clear(self):
        """Remove all objects from the scene."""
        self.objects.clear()

    def world_edges(self):
        """Yield every edge of every instance as world-space (a, b)."""
        for shape, offset in self.objects:
            yield from shape.segments(offset)

    def world_bounds(self):
        """Yield the translated bounding box (min, max) of every instance."""
        for shape, offset in self.objects:
            lo, hi = shape.bounds()
            yield lo + offset, hi + offset

    @classmethod
    def from_names(cls, names, depth: float = 2.0) -> 'Scene':
        """Lay out the named shapes in a row centred on x = 0 at z = depth."""
        scene = cls()
        names = list(names)
        start = -(len(names) - 1) * cls.SPACING / 2.0
        for i, name in enumerate(names):
            scene.add(make_shape(name), (start + i * cls.SPACING, 0.0, depth))
        return scene

    @classmethod
    def default(cls) -> 'Scene':
        return cls.from_names(['cube', 'pyramid', 'prism', 'tesseract'])
