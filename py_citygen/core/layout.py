"""
City layout pipeline.

Runs the layout stages in their required order and bundles the results:

1. generate_rings() - Concentric ring radii
2. generate_divisions() - Radial division spokes and ring segments
3. generate_cells() - Buildable cells clear of streets and border
4. generate_river() - River control points and sampled polyline

Every stage is a pure function of the options, the previous stage's output
and the shared random source. Stages draw from the source in the order
divisions, cells, river, so one seed reproduces the whole layout.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Sequence, Tuple

import structlog

from .cells import Cell, generate_cells
from .divisions import Division, generate_divisions
from .geometry import Point
from .rings import Ring, find_ring, generate_rings
from .river import generate_river_control_points, sample_river
from .site import CityOptions, ConfigurationError
from ..utils.random import RandomSource, create_prng

logger = structlog.get_logger()


@dataclass(frozen=True)
class LayoutResult:
    """Everything the rendering and building collaborators consume."""
    options: CityOptions
    seed: Optional[str]
    rings: Tuple[Ring, ...]
    cells: Tuple[Cell, ...]
    river_control_points: Tuple[Point, ...]
    river_path: Tuple[Point, ...]

    @property
    def divisions(self) -> Tuple[Division, ...]:
        """All divisions, outermost ring first."""
        return tuple(d for ring in self.rings for d in ring.divisions)

    def ring(self, ring_id: int) -> Ring:
        ring = find_ring(self.rings, ring_id)
        if ring is None:
            raise KeyError(f"No ring with id {ring_id}")
        return ring

    def summary(self) -> Dict[str, int]:
        """Element counts for logging and reports."""
        return {
            "rings": len(self.rings),
            "divisions": len(self.divisions),
            "segments": sum(len(ring.segments) for ring in self.rings),
            "cells": len(self.cells),
            "river_points": len(self.river_path),
        }


class ShapeGrammar(Protocol):
    """Building generator driven one cell at a time."""

    def set_state(self, cell: Cell) -> None:
        ...

    def render(self) -> None:
        ...


class CityLayoutGenerator:
    """Runs the layout stages against one random source."""

    def __init__(self, options: Optional[CityOptions] = None,
                 prng: Optional[RandomSource] = None, seed: Optional[str] = None):
        """
        Initialize the generator.

        Args:
            options: City options, defaults to ``CityOptions()``
            prng: Random source to draw from; takes precedence over ``seed``
            seed: Seed for a fresh Alea PRNG when no ``prng`` is given
        """
        self.options = (options or CityOptions()).validate_layout()

        if prng is None:
            prng = create_prng(seed)
            seed = prng.seed
        self.prng = prng
        self.seed = seed

    def generate_rings(self) -> Tuple[Ring, ...]:
        return generate_rings(self.options)

    def generate_divisions(self, rings: Sequence[Ring]) -> Tuple[Ring, ...]:
        return generate_divisions(rings, self.options, self.prng)

    def generate_cells(self, rings: Sequence[Ring]) -> Tuple[Cell, ...]:
        return generate_cells(rings, self.options, self.prng)

    def generate_river(self) -> Tuple[Tuple[Point, ...], Tuple[Point, ...]]:
        """Control points and the sampled river polyline."""
        control_points = generate_river_control_points(self.options, self.prng)
        return control_points, sample_river(control_points, self.options.river_points)

    def generate(self) -> LayoutResult:
        """Run every stage and return the finished layout."""
        logger.info("Starting city layout generation", seed=self.seed,
                    base_dim=self.options.base_dim, num_rings=self.options.num_rings,
                    num_divisions=self.options.num_divisions)

        rings = self.generate_rings()
        rings = self.generate_divisions(rings)
        cells = self.generate_cells(rings)
        control_points, river_path = self.generate_river()

        result = LayoutResult(
            options=self.options,
            seed=self.seed,
            rings=rings,
            cells=cells,
            river_control_points=control_points,
            river_path=river_path,
        )

        logger.info("City layout generation completed", seed=self.seed, **result.summary())
        return result


def generate_layout(options: Optional[CityOptions] = None,
                    seed: Optional[str] = None) -> LayoutResult:
    """
    Generate a complete city layout.

    Args:
        options: City options, defaults to ``CityOptions()``
        seed: Seed string; a random one is chosen when omitted

    Returns:
        LayoutResult with rings, cells and river

    Raises:
        ConfigurationError: If the options cannot describe a city grid
    """
    try:
        generator = CityLayoutGenerator(options, seed=seed)
    except ConfigurationError as e:
        logger.error("City layout generation failed", seed=seed, error=str(e))
        raise
    return generator.generate()


def select_building_cells(cells: Sequence[Cell]) -> Tuple[Cell, ...]:
    """Cells that receive a building: every second cell in scan order."""
    return tuple(cells[1::2])


def dispatch_buildings(cells: Sequence[Cell], grammar: ShapeGrammar) -> int:
    """
    Hand the selected cells to a shape grammar one by one.

    Returns:
        Number of cells forwarded
    """
    selected = select_building_cells(cells)
    for cell in selected:
        grammar.set_state(cell)
        grammar.render()

    logger.info("Buildings dispatched", cells=len(cells), forwarded=len(selected))
    return len(selected)
