"""
2D geometry helpers on top of shapely.

Panels are composed as "rectangle minus cutouts". Cutouts that open onto an
edge are made slightly longer than their nominal depth so the boolean
subtraction never leaves a zero-width sliver on the boundary.
"""

from typing import Iterable, List, Tuple, Union

from shapely import affinity
from shapely.geometry import MultiPolygon, Point, Polygon, box
from shapely.ops import unary_union

# Overshoot for edge-opening cutouts
EPS = 0.01
CIRCLE_RESOLUTION = 32  # segments per quarter circle

Shape = Union[Polygon, MultiPolygon]


class GeometryEngine:
    @staticmethod
    def rect(x: float, y: float, width: float, height: float) -> Polygon:
        """Axis aligned rectangle from its lower-left corner."""
        return box(x, y, x + width, y + height)

    @staticmethod
    def centered_rect(cx: float, cy: float, width: float, height: float) -> Polygon:
        return box(cx - width / 2, cy - height / 2, cx + width / 2, cy + height / 2)

    @staticmethod
    def circle(cx: float, cy: float, diameter: float) -> Polygon:
        return Point(cx, cy).buffer(diameter / 2, quad_segs=CIRCLE_RESOLUTION)

    @staticmethod
    def slot_from_top(cx: float, top: float, width: float, depth: float) -> Polygon:
        """Slot of `width` opening on the upper edge at y = top."""
        return box(cx - width / 2, top - depth, cx + width / 2, top + EPS)

    @staticmethod
    def slot_from_bottom(cx: float, bottom: float, width: float, depth: float) -> Polygon:
        """Slot of `width` opening on the lower edge at y = bottom."""
        return box(cx - width / 2, bottom - EPS, cx + width / 2, bottom + depth)

    @staticmethod
    def subtract(base: Shape, cutouts: Iterable[Shape]) -> Shape:
        cutouts = [c for c in cutouts if c is not None and not c.is_empty]
        if not cutouts:
            return base
        return base.difference(unary_union(cutouts))

    @staticmethod
    def union(shapes: List[Shape]) -> Shape:
        return unary_union(shapes)

    @staticmethod
    def place(shape: Shape, dx: float = 0.0, dy: float = 0.0, angle: float = 0.0) -> Shape:
        """Rotate about the origin by `angle` degrees, then translate."""
        if angle:
            shape = affinity.rotate(shape, angle, origin=(0, 0))
        return affinity.translate(shape, dx, dy)

    @staticmethod
    def flip_vertical(shape: Shape, height: float) -> Shape:
        """Mirror a shape spanning 0..height upside down in place."""
        mirrored = affinity.scale(shape, xfact=1.0, yfact=-1.0, origin=(0, 0))
        return affinity.translate(mirrored, 0, height)


def bounds_intersect(a: Tuple[float, float, float, float], b: Tuple[float, float, float, float]) -> bool:
    """Strict overlap of two (minx, miny, maxx, maxy) boxes; touching edges do not count."""
    return not (a[2] <= b[0] or a[0] >= b[2] or a[3] <= b[1] or a[1] >= b[3])


def polygons(shape: Shape) -> List[Polygon]:
    """The polygon parts of a shape."""
    if isinstance(shape, Polygon):
        return [shape]
    return list(shape.geoms)
