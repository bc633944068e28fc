"""
Buildable cell lattice.

A regular lattice is scanned over the site and a candidate is kept only if
it stays clear of every ring road, every division street and the site
border. The exclusion tests are evaluated with NumPy over the whole lattice
at once; random colour flags are then drawn for the accepted cells in scan
order (x outer, y inner), so the result does not depend on how the tests
are vectorised.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import structlog

from .geometry import Point, length
from .rings import Ring
from .site import CityOptions
from ..utils.random import RandomSource

logger = structlog.get_logger()


@dataclass(frozen=True)
class Cell:
    """An accepted building plot."""
    position: Point
    density: float  # 1 at the centre, 0 at a corner
    color_flag: int


def lattice_coordinates(options: CityOptions) -> np.ndarray:
    """Lattice values covering [-half_dim, half_dim) in ``cell_dim`` steps."""
    options.validate_layout()
    return np.arange(-options.half_dim, options.half_dim, options.cell_dim, dtype=np.float64)


def exclusion_mask(xs: np.ndarray, ys: np.ndarray, rings: Sequence[Ring],
                   options: CityOptions) -> np.ndarray:
    """
    Flag candidates that must not become cells.

    A candidate is rejected when it lies within the ring tolerance of any
    ring radius, when the triangle-inequality slack
    ``|p - a| + |p - b| - |a - b|`` against any division is below the
    division tolerance, or when it is closer than the border margin to
    either site edge.

    Args:
        xs: Candidate x coordinates
        ys: Candidate y coordinates, same shape as ``xs``
        rings: Rings with their divisions
        options: City options

    Returns:
        Boolean array, True where the candidate is rejected
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    rejected = np.zeros(xs.shape, dtype=bool)

    dist = np.hypot(xs, ys)
    ring_tolerance = options.effective_ring_tolerance

    for ring in rings:
        rejected |= np.abs(dist - ring.radius) < ring_tolerance

        for division in ring.divisions:
            a, b = division.point_a, division.point_b
            span = np.hypot(a.x - b.x, a.y - b.y)
            pos_distance = np.hypot(xs - a.x, ys - a.y) + np.hypot(xs - b.x, ys - b.y)
            rejected |= (pos_distance - span) < options.division_tolerance

    half_dim = options.half_dim
    rejected |= (half_dim - np.abs(xs)) < options.border_margin
    rejected |= (half_dim - np.abs(ys)) < options.border_margin

    return rejected


def cell_density(position: Point, options: CityOptions) -> float:
    """Density score of a position, falling linearly to 0 at the corners."""
    return 1 - (length(position) / options.base_diagonal)


def generate_cells(rings: Sequence[Ring], options: CityOptions,
                   prng: RandomSource) -> Tuple[Cell, ...]:
    """
    Scan the lattice and keep the candidates clear of streets and border.

    Args:
        rings: Rings with divisions already placed
        options: City options
        prng: Random source, one ``rand_int(0, 1)`` per accepted cell

    Returns:
        Tuple of accepted cells in scan order
    """
    coords = lattice_coordinates(options)
    grid_x, grid_y = np.meshgrid(coords, coords, indexing="ij")
    xs = grid_x.ravel()
    ys = grid_y.ravel()

    accepted = ~exclusion_mask(xs, ys, rings, options)

    cells = []
    for x, y in zip(xs[accepted], ys[accepted]):
        position = Point(float(x), float(y), 0.0)
        cells.append(Cell(
            position=position,
            density=cell_density(position, options),
            color_flag=prng.rand_int(0, 1),
        ))

    logger.info("Cells generated",
                candidates=len(xs),
                accepted=len(cells),
                rejected=int(len(xs) - len(cells)))
    return tuple(cells)
