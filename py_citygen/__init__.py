"""Procedural city layout generation: ring roads, divisions, cells and a river."""

__version__ = "0.1.0"
