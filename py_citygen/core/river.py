"""
River path generation.

The river is described by three control points: a point on one border
edge, a random interior point and a point on another (possibly the same)
border edge. The control points are smoothed into a polyline with a
Catmull-Rom curve.
"""

import math
from typing import List, Sequence, Tuple

import structlog

from .geometry import Point, distance_squared
from .site import CityOptions
from ..utils.random import RandomSource

logger = structlog.get_logger()

# Border edges in draw order
EDGE_LEFT = 0    # x = -half_dim
EDGE_RIGHT = 1   # x = +half_dim
EDGE_BOTTOM = 2  # y = -half_dim
EDGE_TOP = 3     # y = +half_dim


def generate_border_points(options: CityOptions, prng: RandomSource,
                           n: int) -> Tuple[Point, ...]:
    """
    Pick ``n`` random points on the site border.

    Each point draws an edge with ``rand_int(0, 3)`` and then its position
    along that edge with ``rand_float_spread(base_dim)``.

    Args:
        options: City options
        prng: Random source
        n: Number of points

    Returns:
        Tuple of ``n`` border points
    """
    if n < 0:
        raise ValueError(f"Cannot generate {n} border points")

    half_dim = options.half_dim
    points = []

    for _ in range(n):
        edge = prng.rand_int(0, 3)
        along = prng.rand_float_spread(options.base_dim)

        if edge == EDGE_LEFT:
            points.append(Point(-half_dim, along))
        elif edge == EDGE_RIGHT:
            points.append(Point(half_dim, along))
        elif edge == EDGE_BOTTOM:
            points.append(Point(along, -half_dim))
        else:
            points.append(Point(along, half_dim))

    return tuple(points)


def generate_river_control_points(options: CityOptions,
                                  prng: RandomSource) -> Tuple[Point, Point, Point]:
    """
    Control points of the river: border, interior, border.

    Returns:
        Tuple of exactly three points
    """
    options.validate_layout()

    start, end = generate_border_points(options, prng, 2)
    x = prng.rand_float_spread(options.base_dim)
    y = prng.rand_float_spread(options.base_dim)

    control_points = (start, Point(x, y), end)
    logger.info("River control points generated",
                start=tuple(start), interior=(x, y), end=tuple(end))
    return control_points


class CatmullRomCurve:
    """
    Catmull-Rom spline through a sequence of control points.

    Supports the uniform (``"catmullrom"``), ``"centripetal"`` and
    ``"chordal"`` parameterisations. The open curve passes through every
    control point; the missing neighbours of the end points are mirrored
    from the first and last pieces.
    """

    CURVE_TYPES = ("centripetal", "chordal", "catmullrom")

    def __init__(self, points: Sequence[Point], curve_type: str = "centripetal",
                 tension: float = 0.5):
        if len(points) < 2:
            raise ValueError("A Catmull-Rom curve needs at least 2 points")
        if curve_type not in self.CURVE_TYPES:
            raise ValueError(f"Unknown curve type: {curve_type}")

        self.points = tuple(Point(*p) for p in points)
        self.curve_type = curve_type
        self.tension = tension

    def get_point(self, t: float) -> Point:
        """Point at parameter ``t`` in [0, 1] along the whole curve."""
        points = self.points
        n = len(points)

        p = (n - 1) * t
        int_point = int(math.floor(p))
        weight = p - int_point

        if int_point >= n - 1:
            int_point = n - 2
            weight = 1.0

        p1 = points[int_point]
        p2 = points[int_point + 1]

        if int_point > 0:
            p0 = points[int_point - 1]
        else:
            p0 = _mirror(points[0], points[1])

        if int_point + 2 < n:
            p3 = points[int_point + 2]
        else:
            p3 = _mirror(points[n - 1], points[n - 2])

        if self.curve_type == "catmullrom":
            coefficients = [
                _uniform_coefficients(p0[k], p1[k], p2[k], p3[k], self.tension)
                for k in range(3)
            ]
        else:
            power = 0.5 if self.curve_type == "chordal" else 0.25
            dt0 = distance_squared(p0, p1) ** power
            dt1 = distance_squared(p1, p2) ** power
            dt2 = distance_squared(p2, p3) ** power

            # Repeated control points
            if dt1 < 1e-4:
                dt1 = 1.0
            if dt0 < 1e-4:
                dt0 = dt1
            if dt2 < 1e-4:
                dt2 = dt1

            coefficients = [
                _nonuniform_coefficients(p0[k], p1[k], p2[k], p3[k], dt0, dt1, dt2)
                for k in range(3)
            ]

        return Point(*(_evaluate(c, weight) for c in coefficients))

    def get_points(self, divisions: int = 5) -> List[Point]:
        """Sample ``divisions + 1`` evenly parameterised points."""
        if divisions < 1:
            raise ValueError(f"divisions must be at least 1, got {divisions}")
        return [self.get_point(d / divisions) for d in range(divisions + 1)]


def _mirror(anchor: Point, other: Point) -> Point:
    """Reflect ``other`` through ``anchor``."""
    return Point(2 * anchor.x - other.x, 2 * anchor.y - other.y, 2 * anchor.z - other.z)


def _cubic_coefficients(x0, x1, t0, t1):
    """Hermite cubic from end values and tangents."""
    return (
        x0,
        t0,
        -3 * x0 + 3 * x1 - 2 * t0 - t1,
        2 * x0 - 2 * x1 + t0 + t1,
    )


def _uniform_coefficients(x0, x1, x2, x3, tension):
    return _cubic_coefficients(x1, x2, tension * (x2 - x0), tension * (x3 - x1))


def _nonuniform_coefficients(x0, x1, x2, x3, dt0, dt1, dt2):
    t1 = (x1 - x0) / dt0 - (x2 - x0) / (dt0 + dt1) + (x2 - x1) / dt1
    t2 = (x2 - x1) / dt1 - (x3 - x1) / (dt1 + dt2) + (x3 - x2) / dt2

    # rescale tangents for parametrization in [0,1]
    t1 *= dt1
    t2 *= dt1

    return _cubic_coefficients(x1, x2, t1, t2)


def _evaluate(coefficients, t: float) -> float:
    c0, c1, c2, c3 = coefficients
    t2 = t * t
    t3 = t2 * t
    return c0 + c1 * t + c2 * t2 + c3 * t3


def sample_river(control_points: Sequence[Point], divisions: int) -> Tuple[Point, ...]:
    """
    Tessellate the river into a polyline.

    Args:
        control_points: Output of :func:`generate_river_control_points`
        divisions: Number of pieces in the polyline

    Returns:
        ``divisions + 1`` points from the first to the last control point
    """
    curve = CatmullRomCurve(control_points)
    return tuple(curve.get_points(divisions))
