#!/usr/bin/env python3
"""
Generate a city layout and print what it contains.

This runs the full layout pipeline:
1. Ring roads
2. Division spokes and ring segments
3. Buildable cell lattice
4. River control points and sampled path

Usage:
    python generate_city.py [--seed SEED] [--rings N] [--divisions N] [--cell-dim D]

Defaults come from CITYGEN_* environment variables (see py_citygen/config.py).
"""

import argparse
import sys

from py_citygen.config import settings
from py_citygen.core.layout import generate_layout, select_building_cells
from py_citygen.core.site import ConfigurationError
from py_citygen.log_config import configure_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a procedural city layout")
    parser.add_argument("--seed", default=settings.default_seed, help="Random seed")
    parser.add_argument("--size", type=float, default=settings.base_dim, help="Site side length")
    parser.add_argument("--rings", type=int, default=settings.num_rings, help="Number of ring roads")
    parser.add_argument("--divisions", type=int, default=settings.num_divisions,
                        help="Number of division slots")
    parser.add_argument("--cell-dim", type=float, default=settings.cell_dim, help="Cell lattice step")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(settings.log_level, settings.log_format)

    options = settings.city_options().model_copy(update={
        "base_dim": args.size,
        "num_rings": args.rings,
        "num_divisions": args.divisions,
        "cell_dim": args.cell_dim,
    })

    try:
        layout = generate_layout(options, seed=args.seed)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    print(f"\nCity layout for seed {layout.seed!r}")
    print(f"  Site: {options.base_dim} x {options.base_dim}")

    for ring in layout.rings:
        print(f"  Ring {ring.id}: radius {ring.radius:.2f}, "
              f"{len(ring.divisions)} divisions, {len(ring.segments)} segments")

    cells = layout.cells
    if cells:
        densities = [cell.density for cell in cells]
        colored = sum(cell.color_flag for cell in cells)
        print(f"  Cells: {len(cells)} (density {min(densities):.3f} - {max(densities):.3f}, "
              f"{colored} with color flag set)")
        print(f"  Building plots: {len(select_building_cells(cells))}")
    else:
        print("  Cells: none")

    start, interior, end = layout.river_control_points
    print(f"  River: ({start.x:.1f}, {start.y:.1f}) -> ({interior.x:.1f}, {interior.y:.1f}) "
          f"-> ({end.x:.1f}, {end.y:.1f}), {len(layout.river_path)} sampled points")
    return 0


if __name__ == "__main__":
    sys.exit(main())
