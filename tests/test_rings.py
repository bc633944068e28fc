"""Tests for ring road layout."""

import math

import pytest
from py_citygen.core.rings import Ring, generate_rings, ring_outline, ring_band, find_ring
from py_citygen.core.site import CityOptions, ConfigurationError


class TestGenerateRings:
    """Test ring radius sequence."""

    def test_reference_radii(self):
        """Test the 200 unit site with 4 rings."""
        rings = generate_rings(CityOptions(base_dim=200, num_rings=4))

        assert [ring.radius for ring in rings] == [100, 75, 50, 25]
        assert [ring.id for ring in rings] == [0, 1, 2, 3]

    @pytest.mark.parametrize("base_dim,num_rings", [(200, 1), (200, 7), (150, 3), (333, 11)])
    def test_strictly_decreasing(self, base_dim, num_rings):
        """Test count, first radius and constant step."""
        options = CityOptions(base_dim=base_dim, num_rings=num_rings)
        rings = generate_rings(options)

        assert len(rings) == num_rings
        assert rings[0].radius == base_dim / 2
        assert all(ring.radius > 0 for ring in rings)

        for outer, inner in zip(rings, rings[1:]):
            assert outer.radius > inner.radius
            assert outer.radius - inner.radius == pytest.approx((base_dim / 2) / num_rings)

    def test_no_divisions_yet(self):
        rings = generate_rings(CityOptions())

        assert all(ring.divisions == () and ring.segments == () for ring in rings)

    def test_zero_rings_rejected(self):
        with pytest.raises(ConfigurationError):
            generate_rings(CityOptions(num_rings=0))

    def test_deterministic(self):
        assert generate_rings(CityOptions()) == generate_rings(CityOptions())


class TestRingOutline:
    """Test ring outline sampling."""

    def test_closed_circle(self):
        """Test that the outline is closed and lies on the circle."""
        ring = Ring(id=0, radius=50)
        points = ring_outline(ring, 32)

        assert len(points) == 33
        assert points[0] == points[-1]
        for p in points:
            assert math.hypot(p.x, p.y) == pytest.approx(50)
            assert p.z == 0

    def test_too_few_segments(self):
        with pytest.raises(ValueError):
            ring_outline(Ring(id=0, radius=10), 2)


class TestRingBand:
    """Test road band radii."""

    def test_band(self):
        assert ring_band(Ring(id=0, radius=100), 4) == (98, 102)

    def test_band_clamped(self):
        """Test that the inner radius never goes negative."""
        inner, outer = ring_band(Ring(id=3, radius=1), 4)

        assert inner == 0
        assert outer == 3


def test_find_ring():
    rings = generate_rings(CityOptions(num_rings=3))

    assert find_ring(rings, 2).radius == pytest.approx(100 / 3)
    assert find_ring(rings, 5) is None
