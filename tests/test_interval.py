"""Tests for intervals and bounding boxes."""

import math

import pytest

from yapcurve.geom import point
from yapcurve.interval import BoundingBox, Interval, as_interval, unit_interval


class TestInterval:

    def test_construction(self):
        i = Interval(-1.0, 2.0)
        assert i.width == 3.0
        assert i.midpoint == 0.5
        assert Interval.singleton(4.0) == Interval(4.0, 4.0)
        assert Interval.hull([3.0, -1.0, 2.0]) == Interval(-1.0, 3.0)
        with pytest.raises(ValueError):
            Interval(1.0, 0.0)
        with pytest.raises(ValueError):
            Interval.hull([])

    def test_contains(self):
        i = Interval(0.0, 1.0)
        assert i.contains(0.0) and i.contains(1.0) and i.contains(0.5)
        assert not i.contains(1.0 + 1e-9)
        assert i.contains(1.0 + 1e-9, tol=1e-6)

    def test_arithmetic(self):
        a = Interval(1.0, 2.0)
        b = Interval(-3.0, 4.0)
        assert a + b == Interval(-2.0, 6.0)
        assert a - b == Interval(-3.0, 5.0)
        assert -a == Interval(-2.0, -1.0)
        assert a * b == Interval(-6.0, 8.0)
        assert a * -2.0 == Interval(-4.0, -2.0)
        assert 2.0 * a == Interval(2.0, 4.0)
        assert a + 1.0 == Interval(2.0, 3.0)
        assert b / a == Interval(-3.0, 4.0)

    def test_division_by_zero_interval(self):
        with pytest.raises(ZeroDivisionError):
            Interval(1.0, 2.0) / Interval(-1.0, 1.0)

    def test_abs_bounds(self):
        assert Interval(-3.0, 2.0).abs_max() == 3.0
        assert Interval(-3.0, 2.0).abs_min() == 0.0
        assert Interval(-3.0, -2.0).abs_min() == 2.0
        assert Interval(1.0, 5.0).abs_min() == 1.0

    def test_helpers(self):
        assert unit_interval() == Interval(0.0, 1.0)
        assert as_interval((0, 0.5)) == Interval(0.0, 0.5)
        i = Interval(0.2, 0.3)
        assert as_interval(i) is i


class TestBoundingBox:

    def test_from_points(self):
        box = BoundingBox.from_points([point(1, 2, 3), point(-1, 5, 0)])
        assert box.x == Interval(-1, 1)
        assert box.y == Interval(2, 5)
        assert box.z == Interval(0, 3)
        assert box.as_bbox() == [point(-1, 2, 0), point(1, 5, 3)]
        assert box.contains(point(0, 3, 1))
        assert not box.contains(point(0, 6, 1))
        with pytest.raises(ValueError):
            BoundingBox.from_points([])

    def test_magnitudes(self):
        box = BoundingBox(Interval(3.0, 4.0), Interval(-1.0, 1.0), Interval(0.0, 0.0))
        assert box.min_magnitude() == 3.0
        assert box.max_magnitude() == pytest.approx(math.sqrt(17.0))
        around_origin = BoundingBox.from_points([point(-1, -1, -1), point(1, 1, 1)])
        assert around_origin.min_magnitude() == 0.0

    def test_magnitude_bounds_hold(self):
        box = BoundingBox(Interval(-2.0, 1.0), Interval(0.5, 3.0), Interval(-1.0, -0.25))
        for x in (-2.0, 0.0, 1.0):
            for y in (0.5, 1.7, 3.0):
                for z in (-1.0, -0.25):
                    m = math.hypot(x, y, z)
                    assert box.min_magnitude() <= m <= box.max_magnitude()

    def test_box_arithmetic(self):
        a = BoundingBox.singleton(point(1, 2, 3))
        b = BoundingBox.from_points([point(0, 0, 0), point(1, 1, 1)])
        s = a + b
        assert s.x == Interval(1, 2) and s.y == Interval(2, 3) and s.z == Interval(3, 4)
        d = a - b
        assert d.x == Interval(0, 1)
        assert (b * 2.0).z == Interval(0, 2)
        assert (b * Interval(-1.0, 1.0)).x == Interval(-1.0, 1.0)
        assert (a / Interval(1.0, 2.0)).z == Interval(1.5, 3.0)
        assert a.union(b).x == Interval(0, 1)
