"""Immutable geometry primitives shared by the layout stages."""

import math
from typing import Iterable, NamedTuple


class Point(NamedTuple):
    """A point (or vector) on the site plane, z kept for the renderer."""
    x: float
    y: float
    z: float = 0.0


class BoundingBox(NamedTuple):
    """Axis-aligned 2D box given by its min and max corners."""
    min: Point
    max: Point

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def center(self) -> Point:
        return Point((self.min.x + self.max.x) / 2, (self.min.y + self.max.y) / 2)

    def contains(self, point: Point) -> bool:
        """Check if a point lies inside the box, edges included."""
        return (self.min.x <= point.x <= self.max.x and
                self.min.y <= point.y <= self.max.y)


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(p: Point, factor: float) -> Point:
    return Point(p.x * factor, p.y * factor, p.z * factor)


def length(p: Point) -> float:
    return math.sqrt(p.x * p.x + p.y * p.y + p.z * p.z)


def distance(a: Point, b: Point) -> float:
    return length(subtract(a, b))


def distance_squared(a: Point, b: Point) -> float:
    d = subtract(a, b)
    return d.x * d.x + d.y * d.y + d.z * d.z


def midpoint(a: Point, b: Point) -> Point:
    return scale(add(a, b), 0.5)


def rotate_z(p: Point, angle: float) -> Point:
    """Rotate a vector counter-clockwise about the z axis."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(p.x * cos_a - p.y * sin_a, p.x * sin_a + p.y * cos_a, p.z)


def bounding_box(points: Iterable[Point]) -> BoundingBox:
    """
    Compute the 2D bounding box over the x/y extrema of some points.

    Raises:
        ValueError: If no points are given
    """
    points = list(points)
    if not points:
        raise ValueError("Cannot compute a bounding box of zero points")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return BoundingBox(Point(min(xs), min(ys)), Point(max(xs), max(ys)))
