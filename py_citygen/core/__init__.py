"""
Core city layout functionality.
"""

from .alea_prng import AleaPRNG
from .site import CityOptions, ConfigurationError
from .geometry import Point, BoundingBox
from .rings import Ring, generate_rings, ring_outline, ring_band
from .divisions import Division, Segment, DivisionPanel, generate_divisions, build_segments, division_panel
from .cells import Cell, generate_cells
from .river import CatmullRomCurve, generate_border_points, generate_river_control_points, sample_river
from .layout import (LayoutResult, CityLayoutGenerator, generate_layout,
                     select_building_cells, dispatch_buildings)

__all__ = ['AleaPRNG', 'CityOptions', 'ConfigurationError', 'Point', 'BoundingBox',
           'Ring', 'generate_rings', 'ring_outline', 'ring_band',
           'Division', 'Segment', 'DivisionPanel', 'generate_divisions', 'build_segments', 'division_panel',
           'Cell', 'generate_cells',
           'CatmullRomCurve', 'generate_border_points', 'generate_river_control_points', 'sample_river',
           'LayoutResult', 'CityLayoutGenerator', 'generate_layout',
           'select_building_cells', 'dispatch_buildings']
