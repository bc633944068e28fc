"""Tests for the buildable cell lattice."""

import math

import numpy as np
import pytest
from py_citygen.core.alea_prng import AleaPRNG
from py_citygen.core.cells import (
    generate_cells, lattice_coordinates, exclusion_mask, cell_density
)
from py_citygen.core.divisions import Division, generate_divisions
from py_citygen.core.geometry import Point
from py_citygen.core.rings import Ring, generate_rings
from py_citygen.core.site import CityOptions, ConfigurationError

EPS = 1e-9


@pytest.fixture
def options():
    return CityOptions(base_dim=200, num_rings=4, num_divisions=12, cell_dim=7)


@pytest.fixture
def city_rings(options):
    rings = generate_rings(options)
    return generate_divisions(rings, options, AleaPRNG("cells"))


class TestLattice:
    """Test lattice coordinates."""

    def test_reference_lattice(self, options):
        """Test the 200 unit site with 7 unit cells."""
        coords = lattice_coordinates(options)

        assert coords[0] == -100
        assert coords[-1] == 96
        assert len(coords) == 29
        np.testing.assert_allclose(np.diff(coords), 7)

    def test_bad_cell_dim(self):
        with pytest.raises(ConfigurationError):
            lattice_coordinates(CityOptions(cell_dim=0))


class TestExclusionMask:
    """Test the individual rejection rules."""

    def test_first_candidate_on_border(self, options):
        """Test that (-100, -100) is always rejected by the border margin."""
        mask = exclusion_mask(np.array([-100.0]), np.array([-100.0]), (), options)

        assert mask[0]

    def test_border_margin(self, options):
        xs = np.array([96.0, 94.0, 0.0])
        ys = np.array([0.0, 0.0, -96.0])
        mask = exclusion_mask(xs, ys, (), options)

        assert mask.tolist() == [True, False, True]

    def test_ring_band(self, options):
        """Test rejection within cell_dim of a ring radius."""
        rings = (Ring(id=0, radius=50),)
        xs = np.array([50.0, 44.0, 40.0, 0.0, 57.0])
        ys = np.zeros(5)
        mask = exclusion_mask(xs, ys, rings, options)

        assert mask.tolist() == [True, True, False, False, False]

    def test_custom_ring_tolerance(self):
        options = CityOptions(ring_tolerance=2)
        rings = (Ring(id=0, radius=50),)
        mask = exclusion_mask(np.array([47.0, 49.0]), np.zeros(2), rings, options)

        assert mask.tolist() == [False, True]

    def test_division_slack(self, options):
        """Test rejection of candidates on a division segment."""
        division = Division(0, 0, Point(0, 100), Point(0, 75), 0.0)
        rings = (Ring(id=0, radius=1000, divisions=(division,)),)
        xs = np.array([0.0, 10.0, 0.0])
        ys = np.array([80.0, 80.0, 60.0])
        mask = exclusion_mask(xs, ys, rings, options)

        assert mask.tolist() == [True, False, False]

    def test_clear_centre(self, options):
        mask = exclusion_mask(np.array([0.0]), np.array([0.0]), (), options)

        assert not mask[0]


class TestDensity:
    """Test the density score."""

    def test_centre_and_corner(self, options):
        assert cell_density(Point(0, 0), options) == 1
        assert cell_density(Point(100, 100), options) == pytest.approx(0, abs=EPS)

    def test_decreasing_with_distance(self, options):
        d1 = cell_density(Point(10, 0), options)
        d2 = cell_density(Point(0, 20), options)

        assert d1 > d2


class TestGenerateCells:
    """Test the complete lattice scan."""

    def test_cells_clear_of_streets(self, options, city_rings):
        """Test every accepted cell against every exclusion rule."""
        cells = generate_cells(city_rings, options, AleaPRNG("scan"))

        assert len(cells) > 0
        for cell in cells:
            p = cell.position
            dist = math.hypot(p.x, p.y)

            for ring in city_rings:
                assert abs(dist - ring.radius) >= options.cell_dim - EPS

                for d in ring.divisions:
                    slack = (math.hypot(p.x - d.point_a.x, p.y - d.point_a.y) +
                             math.hypot(p.x - d.point_b.x, p.y - d.point_b.y) -
                             math.hypot(d.point_a.x - d.point_b.x, d.point_a.y - d.point_b.y))
                    assert slack >= 1 - EPS

            assert 100 - abs(p.x) >= 5
            assert 100 - abs(p.y) >= 5

    def test_attributes(self, options, city_rings):
        cells = generate_cells(city_rings, options, AleaPRNG("attrs"))

        assert {cell.color_flag for cell in cells} <= {0, 1}
        for cell in cells:
            assert 0 <= cell.density <= 1
            assert cell.position.z == 0
            assert cell.density == pytest.approx(
                1 - math.hypot(cell.position.x, cell.position.y) / options.base_diagonal)

    def test_density_monotonic(self, options, city_rings):
        """Test that nearer cells never score lower than farther ones."""
        cells = generate_cells(city_rings, options, AleaPRNG("monotonic"))
        ordered = sorted(cells, key=lambda c: math.hypot(c.position.x, c.position.y))

        for near, far in zip(ordered, ordered[1:]):
            assert near.density >= far.density

    def test_scan_order(self, options, city_rings):
        """Test x-outer, y-inner ordering."""
        cells = generate_cells(city_rings, options, AleaPRNG("order"))
        keys = [(c.position.x, c.position.y) for c in cells]

        assert keys == sorted(keys)

    def test_one_draw_per_cell(self, options, city_rings):
        prng = AleaPRNG("draws")
        cells = generate_cells(city_rings, options, prng)

        assert prng.call_count == len(cells)

    def test_reproducible(self, options, city_rings):
        assert (generate_cells(city_rings, options, AleaPRNG("same")) ==
                generate_cells(city_rings, options, AleaPRNG("same")))

    def test_no_streets_keeps_interior(self):
        """Test that only the border margin applies without rings."""
        options = CityOptions(base_dim=100, cell_dim=10)
        cells = generate_cells((), options, AleaPRNG("open"))

        # lattice -50..40; margin removes -50 on each axis
        assert len(cells) == 9 * 9
