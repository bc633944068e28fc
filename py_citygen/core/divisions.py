"""
Radial division streets.

Each of ``num_divisions`` angular slots draws how many rings its spoke
crosses. A spoke of depth ``d`` contributes one short division between ring
``j`` and ring ``j + 1`` for every ``j < d``; a depth of 0 leaves the slot
open. Divisions always carry the id of the ring they belong to and are
grouped onto rings by that id.

Once all slots are placed, every ring gets auxiliary segment bounding boxes
spanning each pair of cyclically adjacent divisions.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Sequence, Tuple

import structlog

from .geometry import BoundingBox, Point, bounding_box, midpoint, rotate_z, scale
from .rings import Ring
from .site import CityOptions
from ..utils.random import RandomSource

logger = structlog.get_logger()


@dataclass(frozen=True)
class Division:
    """A spoke piece between two adjacent ring boundaries."""
    ring_id: int
    slot: int
    point_a: Point  # outer end
    point_b: Point  # inner end
    angle: float


@dataclass(frozen=True)
class Segment:
    """Bounding box over two neighbouring divisions of one ring."""
    bounding_box: BoundingBox


@dataclass(frozen=True)
class DivisionPanel:
    """Rotated street rectangle drawn over a division."""
    center: Point
    width: float
    height: float
    rotation: float


def generate_divisions(rings: Sequence[Ring], options: CityOptions,
                       prng: RandomSource) -> Tuple[Ring, ...]:
    """
    Place division spokes and derive per-ring segments.

    Draws one ``rand_int(0, num_rings)`` per slot. The input rings are not
    modified; new rings carrying the divisions and segments are returned.

    Args:
        rings: Rings from :func:`~py_citygen.core.rings.generate_rings`
        options: City options
        prng: Random source

    Returns:
        Tuple of rings in the same order as ``rings``
    """
    options.validate_layout()

    by_ring: Dict[int, List[Division]] = {ring.id: list(ring.divisions) for ring in rings}

    if options.num_divisions == 0:
        logger.info("No division slots configured")
    else:
        theta = options.division_angle
        pos = Point(0.0, options.half_dim, 0.0)

        for i in range(options.num_divisions):
            spoke_depth = prng.rand_int(0, options.num_rings)

            for j in range(spoke_depth):
                if j not in by_ring:
                    logger.warning("Spoke reaches a missing ring", slot=i, ring_id=j)
                    continue

                point_a = scale(pos, 1 - (j / options.num_rings))
                point_b = scale(pos, 1 - ((j + 1) / options.num_rings))
                by_ring[j].append(Division(
                    ring_id=j,
                    slot=i,
                    point_a=point_a,
                    point_b=point_b,
                    angle=theta * i,
                ))

            pos = rotate_z(pos, theta)

    result = []
    for ring in rings:
        divisions = tuple(by_ring[ring.id])
        result.append(replace(ring, divisions=divisions, segments=build_segments(divisions)))

    logger.info("Divisions generated",
                divisions=sum(len(r.divisions) for r in result),
                segments=sum(len(r.segments) for r in result))
    return tuple(result)


def build_segments(divisions: Sequence[Division]) -> Tuple[Segment, ...]:
    """
    Pair every division with its cyclic successor and box the pair.

    A ring with no divisions has no segments; a single division pairs with
    itself.
    """
    segments = []
    count = len(divisions)

    for k in range(count):
        division_a = divisions[k]
        division_b = divisions[(k + 1) % count]
        bbox = bounding_box([division_a.point_a, division_a.point_b,
                             division_b.point_a, division_b.point_b])
        segments.append(Segment(bounding_box=bbox))

    return tuple(segments)


def division_panel(division: Division, options: CityOptions) -> DivisionPanel:
    """
    Street panel for a division, as handed to the renderer.

    The panel is as tall as an eighth of the site plus the street width,
    less one unit.
    """
    epsilon = 1
    width = options.effective_division_width
    height = (options.base_dim / (2 * 4)) + width - epsilon

    return DivisionPanel(
        center=midpoint(division.point_a, division.point_b),
        width=width,
        height=height,
        rotation=division.angle,
    )
