"""Tests for the elliptical arc primitive."""

import pytest
from math import cos, pi, sin, sqrt

from curvegen import SEEDS, rng_for, rand_arc, vnear

from yapcurve import curves
from yapcurve.ellipse import (EllipticalArc, arc_hull_length, circular_arc,
                              cos_range, elliptical_arc, isellipticalarc)
from yapcurve.errors import CurveError
from yapcurve.geom import dist, point, scale3, sub
from yapcurve.interval import Interval
from yapcurve.units import degrees, length


class TestEllipseConstruction:
    """Test elliptical arc construction and validation."""

    def test_basic_arc(self):
        """Test basic arc creation."""
        a = elliptical_arc([1, 2, 3], 2.0, 1.0, 0.0, pi/2)
        assert isellipticalarc(a)
        assert curves.iscurve(a)
        assert a.center == [1.0, 2.0, 3.0, 1.0]
        assert a.x_direction == [1.0, 0.0, 0.0, 1.0]
        assert a.y_direction == [0.0, 1.0, 0.0, 1.0]
        assert a.start_angle == 0.0
        assert a.end_angle == pi/2
        assert a.swept_angle == pi/2
        assert a.space == 'global'

    def test_quantities(self):
        """Radii may be lengths, angles may be given in degrees."""
        a = elliptical_arc((0, 0), length(2.0), length(1.0), degrees(90), degrees(-180))
        assert a.x_radius == 2.0
        assert a.start_angle == pytest.approx(pi/2)
        assert a.swept_angle == pytest.approx(-pi)
        with pytest.raises(ValueError):
            elliptical_arc((0, 0), degrees(2.0), 1.0, 0.0, pi)
        with pytest.raises(ValueError):
            elliptical_arc((0, 0), 2.0, 1.0, length(1.0), pi)

    def test_rotated_axes(self):
        """x_direction is normalized and y_direction inferred in the XY plane"""
        a = elliptical_arc((0, 0), 2.0, 1.0, 0.0, pi, x_direction=(1, 1, 0))
        assert a.x_direction == pytest.approx([sqrt(0.5), sqrt(0.5), 0.0, 1.0])
        assert a.y_direction == pytest.approx([-sqrt(0.5), sqrt(0.5), 0.0, 1.0])

    def test_invalid(self):
        with pytest.raises(CurveError):
            EllipticalArc((0, 0), (1, 0, 0), (1, 1, 0), 1.0, 1.0, 0.0, pi)
        with pytest.raises(CurveError):
            EllipticalArc((0, 0), (0, 0, 0), (0, 1, 0), 1.0, 1.0, 0.0, pi)
        with pytest.raises(CurveError):
            elliptical_arc((0, 0), -1.0, 1.0, 0.0, pi)
        with pytest.raises(CurveError):
            elliptical_arc((0, 0), 1.0, 1.0, 0.0, pi, x_direction=(0, 0, 1))

    def test_circular_arc(self):
        c = circular_arc((1, 2), 2.0, 0.0, pi/2)
        assert c.x_radius == c.y_radius == 2.0


class TestEllipseSampling:
    """Test point evaluation."""

    def test_cardinal_points(self):
        e = elliptical_arc((0, 0), 3.0, 1.0, 0.0, 2*pi)
        assert curves.point_on(e, 0.0) == [3.0, 0.0, 0.0, 1.0]
        assert curves.point_on(e, 0.25) == pytest.approx([0.0, 1.0, 0.0, 1.0], abs=1e-12)
        assert curves.point_on(e, 0.5) == pytest.approx([-3.0, 0.0, 0.0, 1.0], abs=1e-12)
        assert curves.point_on(e, 0.75) == pytest.approx([0.0, -1.0, 0.0, 1.0], abs=1e-12)

    def test_circle_points(self):
        c = circular_arc((1, 2), 2.0, 0.0, pi/2)
        assert curves.start_point(c) == [3.0, 2.0, 0.0, 1.0]
        assert curves.end_point(c) == pytest.approx([1.0, 4.0, 0.0, 1.0], abs=1e-12)
        for t in (0.1, 0.3, 0.5, 0.9):
            assert dist(curves.point_on(c, t), point(1, 2)) == pytest.approx(2.0)

    def test_midpoint(self):
        c = circular_arc((0, 0), 1.0, pi/4, -pi)
        assert curves.midpoint(c) == curves.point_on(c, 0.5)
        assert curves.midpoint(c) == pytest.approx([cos(-pi/4), sin(-pi/4), 0.0, 1.0])

    def test_tangent_direction_follows_sweep(self):
        ccw = circular_arc((0, 0), 1.0, 0.0, pi/2)
        cw = circular_arc((0, 0), 1.0, 0.0, -pi/2)
        assert curves.start_derivative(ccw) == pytest.approx([0.0, pi/2, 0.0, 1.0])
        assert curves.start_derivative(cw) == pytest.approx([0.0, -pi/2, 0.0, 1.0])

    @pytest.mark.parametrize('seed', SEEDS)
    def test_derivatives_match_finite_differences(self, seed):
        a = rand_arc(rng_for(seed))
        h = 1e-6
        for t in (0.1, 0.5, 0.8):
            for order in (1, 2):
                lo = curves.derivative(a, t - h, order - 1)
                hi = curves.derivative(a, t + h, order - 1)
                fd = scale3(sub(hi, lo), 0.5/h)
                vnear(curves.derivative(a, t, order), fd, 1e-4)


class TestEllipseReverseSplit:

    @pytest.mark.parametrize('seed', SEEDS)
    def test_reverse(self, seed):
        a = rand_arc(rng_for(seed))
        r = curves.reverse(a)
        assert curves.reverse(r) == a
        assert curves.start_point(r) == curves.end_point(a)
        assert curves.end_point(r) == curves.start_point(a)
        for t in (0.0, 0.2, 0.5, 0.7, 1.0):
            vnear(curves.point_on(r, t), curves.point_on(a, 1.0 - t), 1e-9)

    @pytest.mark.parametrize('seed', SEEDS)
    def test_split(self, seed):
        rng = rng_for(seed)
        a = rand_arc(rng)
        t0 = rng.uniform(0.05, 0.95)
        left, right = curves.split_at(a, t0)
        assert isellipticalarc(left) and isellipticalarc(right)
        assert curves.start_point(left) == curves.start_point(a)
        assert curves.end_point(left) == curves.start_point(right)
        assert curves.end_point(right) == curves.end_point(a)
        for u in (0.0, 0.3, 0.5, 1.0):
            vnear(curves.point_on(left, u), curves.point_on(a, u*t0), 1e-9)
            vnear(curves.point_on(right, u), curves.point_on(a, t0 + u*(1.0 - t0)), 1e-9)


class TestEllipseBounds:

    def test_cos_range(self):
        assert cos_range(0.0, pi) == Interval(-1.0, 1.0)
        assert cos_range(0.1, 0.2) == Interval(cos(0.2), cos(0.1))
        assert cos_range(-0.5, 0.5) == Interval(cos(0.5), 1.0)
        assert cos_range(0.0, 7.0) == Interval(-1.0, 1.0)
        assert cos_range(3.0, 3.5) == Interval(-1.0, max(cos(3.0), cos(3.5)))

    def test_full_circle_bounding_box(self):
        c = circular_arc((1, 1), 2.0, 0.3, 2*pi)
        box = curves.bounding_box(c)
        assert box.x.lo == pytest.approx(-1.0) and box.x.hi == pytest.approx(3.0)
        assert box.y.lo == pytest.approx(-1.0) and box.y.hi == pytest.approx(3.0)
        assert box.z == Interval(0.0, 0.0)

    def test_quarter_arc_bounding_box_is_tight(self):
        c = circular_arc((0, 0), 1.0, 0.0, pi/2)
        box = curves.bounding_box(c)
        assert box.x.lo == pytest.approx(0.0, abs=1e-12)
        assert box.x.hi == pytest.approx(1.0)
        assert box.y.lo == pytest.approx(0.0, abs=1e-12)
        assert box.y.hi == pytest.approx(1.0)

    @pytest.mark.parametrize('seed', SEEDS)
    def test_boxes_contain_samples(self, seed):
        rng = rng_for(seed)
        a = rand_arc(rng)
        lo = rng.uniform(0.0, 0.9)
        hi = rng.uniform(lo, 1.0)
        box0 = curves.bounding_box(a)
        box1 = curves.first_derivative_bounding_box(a, (lo, hi))
        box2 = curves.second_derivative_bounding_box(a, (lo, hi))
        for i in range(11):
            t = lo + (hi - lo)*i/10
            assert box0.contains(curves.point_on(a, t), 1e-9)
            assert box1.contains(curves.first_derivative(a, t), 1e-9)
            assert box2.contains(curves.second_derivative(a, t), 1e-9)

    def test_hull_length(self):
        c = circular_arc((0, 0), 1.0, 0.0, pi/2)
        # tangent triangle through (1, 1)
        assert arc_hull_length(c, 0.0, 1.0) == pytest.approx(2.0)
        assert arc_hull_length(c, 0.0, 0.5) >= pi/4
        half = circular_arc((0, 0), 1.0, 0.0, pi)
        assert arc_hull_length(half, 0.0, 1.0) is None
        assert arc_hull_length(half, 0.0, 0.5) == pytest.approx(2.0)
