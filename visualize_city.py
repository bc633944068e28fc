#!/usr/bin/env python3
"""
Render a generated city layout to a PNG preview.

Draws the site base, ring road bands and outlines, division street panels,
the sampled river and the buildable cells coloured by density.

Usage:
    python visualize_city.py [seed] [output.png]
"""

import sys

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle, Wedge
from matplotlib.transforms import Affine2D

from py_citygen.config import settings
from py_citygen.core.divisions import division_panel
from py_citygen.core.layout import LayoutResult, generate_layout
from py_citygen.core.rings import ring_band, ring_outline
from py_citygen.log_config import configure_logging

BASE_COLOR = "#015938"
STREET_COLOR = "#031923"
RIVER_COLOR = "#3a7bd5"


def draw_layout(layout: LayoutResult, ax) -> None:
    """Draw every layout element on a matplotlib axis."""
    options = layout.options
    half_dim = options.half_dim

    ax.add_patch(Rectangle((-half_dim, -half_dim), options.base_dim, options.base_dim,
                           color=BASE_COLOR, zorder=0))

    for ring in layout.rings:
        inner, outer = ring_band(ring, options.ring_width)
        ax.add_patch(Wedge((0, 0), outer, 0, 360, width=outer - inner,
                           color=STREET_COLOR, zorder=1))
        outline = np.array([(p.x, p.y) for p in ring_outline(ring, options.ring_points)])
        ax.plot(outline[:, 0], outline[:, 1], color=STREET_COLOR, linewidth=0.5, zorder=2)

    for division in layout.divisions:
        panel = division_panel(division, options)
        rect = Rectangle((-panel.width / 2, -panel.height / 2), panel.width, panel.height,
                         color=STREET_COLOR, zorder=2)
        rect.set_transform(
            Affine2D().rotate(panel.rotation).translate(panel.center.x, panel.center.y)
            + ax.transData
        )
        ax.add_patch(rect)

    river = np.array([(p.x, p.y) for p in layout.river_path])
    ax.plot(river[:, 0], river[:, 1], color=RIVER_COLOR, linewidth=2, zorder=3)

    if layout.cells:
        xs = [cell.position.x for cell in layout.cells]
        ys = [cell.position.y for cell in layout.cells]
        density = [cell.density for cell in layout.cells]
        markers = ["s" if cell.color_flag else "o" for cell in layout.cells]
        for marker in ("s", "o"):
            idx = [i for i, m in enumerate(markers) if m == marker]
            if not idx:
                continue
            ax.scatter([xs[i] for i in idx], [ys[i] for i in idx], c=[density[i] for i in idx],
                       cmap="YlOrRd", vmin=0, vmax=1, marker=marker,
                       s=options.cell_dim * 2, zorder=4)

    ax.set_xlim(-half_dim, half_dim)
    ax.set_ylim(-half_dim, half_dim)
    ax.set_aspect("equal")
    ax.set_title(f"City layout (seed {layout.seed})")


def visualize_city(seed: str, output: str) -> str:
    layout = generate_layout(settings.city_options(), seed=seed)

    fig, ax = plt.subplots(figsize=(8, 8))
    draw_layout(layout, ax)
    fig.savefig(output, dpi=150, bbox_inches="tight")
    plt.close(fig)

    print(f"Saved city preview to {output}")
    return output


if __name__ == "__main__":
    configure_logging(settings.log_level, settings.log_format)
    seed = sys.argv[1] if len(sys.argv) > 1 else settings.default_seed
    output = sys.argv[2] if len(sys.argv) > 2 else f"city_{seed}.png"
    visualize_city(seed, output)
