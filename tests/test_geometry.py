"""Tests for geometry primitives."""

import math

import pytest
from py_citygen.core.geometry import (
    Point, BoundingBox, add, subtract, scale, length, distance,
    midpoint, rotate_z, bounding_box
)


class TestPointCombinators:
    """Test that point operations return new values."""

    def test_add_subtract(self):
        a = Point(1, 2, 3)
        b = Point(4, 5, 6)

        assert add(a, b) == Point(5, 7, 9)
        assert subtract(b, a) == Point(3, 3, 3)
        assert a == Point(1, 2, 3)

    def test_scale(self):
        assert scale(Point(0, 100), 0.75) == Point(0, 75, 0)

    def test_length_and_distance(self):
        assert length(Point(3, 4)) == 5
        assert distance(Point(1, 1), Point(4, 5)) == 5

    def test_midpoint(self):
        assert midpoint(Point(0, 100), Point(0, 50)) == Point(0, 75, 0)

    def test_rotate_quarter_turn(self):
        """Test counter-clockwise rotation about z."""
        rotated = rotate_z(Point(0, 100), math.pi / 2)

        assert rotated.x == pytest.approx(-100)
        assert rotated.y == pytest.approx(0, abs=1e-9)

    def test_rotate_preserves_length(self):
        p = Point(30, -40)

        assert length(rotate_z(p, 1.234)) == pytest.approx(50)


class TestBoundingBox:
    """Test bounding box derivation."""

    def test_extrema(self):
        bbox = bounding_box([Point(1, 5), Point(-3, 2), Point(4, -1)])

        assert bbox.min == Point(-3, -1)
        assert bbox.max == Point(4, 5)
        assert bbox.width == 7
        assert bbox.height == 6

    def test_center_and_contains(self):
        bbox = BoundingBox(Point(0, 0), Point(10, 4))

        assert bbox.center == Point(5, 2)
        assert bbox.contains(Point(10, 4))
        assert not bbox.contains(Point(11, 0))

    def test_single_point(self):
        """Test that one point gives a degenerate box."""
        bbox = bounding_box([Point(2, 3)])

        assert bbox.width == 0
        assert bbox.height == 0

    def test_empty(self):
        with pytest.raises(ValueError):
            bounding_box([])