"""
Concentric ring roads.

Rings are laid out from the site edge inwards: the outermost ring sits at
half the site dimension and every following ring is one ``ring_step``
closer to the centre, so radii are strictly positive and strictly
decreasing.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

import structlog

from .geometry import Point
from .site import CityOptions

if TYPE_CHECKING:
    from .divisions import Division, Segment

logger = structlog.get_logger()


@dataclass(frozen=True)
class Ring:
    """A ring road and the division/segment data attached to it."""
    id: int
    radius: float
    divisions: Tuple["Division", ...] = ()
    segments: Tuple["Segment", ...] = ()


def generate_rings(options: CityOptions) -> Tuple[Ring, ...]:
    """
    Generate the ring sequence for a site.

    Args:
        options: City options; ``num_rings`` must be positive

    Returns:
        Tuple of rings ordered outermost first
    """
    options.validate_layout()

    delta = options.ring_step
    radius = options.half_dim
    rings = []

    for i in range(options.num_rings):
        rings.append(Ring(id=i, radius=radius))
        radius -= delta

    logger.info("Rings generated", count=len(rings), outer_radius=rings[0].radius,
                step=delta)
    return tuple(rings)


def ring_outline(ring: Ring, segments: int = 32) -> Tuple[Point, ...]:
    """
    Sample a ring as a closed polyline around the origin.

    The first and last points coincide so the outline can be drawn as a
    plain line strip.

    Args:
        ring: Ring to sample
        segments: Number of straight pieces in the outline

    Returns:
        ``segments + 1`` points on the circle
    """
    if segments < 3:
        raise ValueError(f"A ring outline needs at least 3 segments, got {segments}")

    points = []
    for k in range(segments + 1):
        theta = 2 * math.pi * (k % segments) / segments
        points.append(Point(ring.radius * math.cos(theta), ring.radius * math.sin(theta)))
    return tuple(points)


def ring_band(ring: Ring, ring_width: float) -> Tuple[float, float]:
    """Inner and outer radius of the road band drawn for a ring."""
    half_width = ring_width / 2
    return max(ring.radius - half_width, 0.0), ring.radius + half_width


def find_ring(rings, ring_id: int) -> Optional[Ring]:
    """Look a ring up by id rather than by position."""
    for ring in rings:
        if ring.id == ring_id:
            return ring
    return None
