"""Tests for the closed-form reference lengths."""

import pytest
from math import pi

import mpmath

from curvegen import SEEDS, rand_curve, rng_for

from yapcurve import curves
from yapcurve.analytic import elliptical_arc_length, quadratic_spline_length
from yapcurve.ellipse import circular_arc, elliptical_arc
from yapcurve.geom import mag
from yapcurve.splines import CubicSpline, QuadraticSpline


def test_straight_quadratic():
    assert quadratic_spline_length(QuadraticSpline((0, 1), (2.5, 1), (5, 1))) == pytest.approx(5.0, rel=1e-15)
    # uneven speed, same length
    assert quadratic_spline_length(QuadraticSpline((0, 0), (1, 0), (5, 0))) == pytest.approx(5.0, rel=1e-15)


def test_backtracking_quadratic():
    """out to x=4/3 and back to x=1"""
    q = QuadraticSpline((0, 0), (2, 0), (1, 0))
    assert quadratic_spline_length(q) == pytest.approx(5.0/3.0, rel=1e-14)


def test_coincident_quadratic():
    assert quadratic_spline_length(QuadraticSpline((1, 1), (1, 1), (1, 1))) == 0.0


@pytest.mark.parametrize('seed', SEEDS)
def test_quadratic_matches_quadrature(seed):
    q = rand_curve(rng_for(seed), 'quadratic')
    numeric = mpmath.quad(lambda t: mag(curves.first_derivative(q, float(t))), [0, 0.5, 1])
    assert quadratic_spline_length(q) == pytest.approx(float(numeric), rel=1e-9)


def test_quadratic_only():
    with pytest.raises(ValueError):
        quadratic_spline_length(CubicSpline((0, 0), (1, 1), (2, 1), (3, 0)))


def test_circle():
    assert elliptical_arc_length(circular_arc((0, 0), 2.0, 0.3, pi/2)) == pytest.approx(pi)
    assert elliptical_arc_length(circular_arc((5, 5), 1.0, 1.0, -2*pi)) == pytest.approx(2*pi)


def test_full_ellipse_perimeter():
    e = elliptical_arc((0, 0), 2.0, 1.0, 0.0, 2*pi)
    assert elliptical_arc_length(e) == pytest.approx(9.688448220547675, rel=1e-9)


def test_quarter_ellipse_is_complete_integral():
    """b*E(m) with m = 1 - (a/b)^2"""
    e = elliptical_arc((0, 0), 1.0, 2.0, 0.0, pi/2)
    assert elliptical_arc_length(e) == pytest.approx(2*float(mpmath.ellipe(0.75)), rel=1e-12)


def test_flat_ellipse_over_several_turns():
    """a collapsed ellipse traces its long axis twice per turn"""
    flat = elliptical_arc((0, 0), 2.0, 0.0, 0.0, 2*pi)
    assert elliptical_arc_length(flat) == pytest.approx(8.0)
    twice = elliptical_arc((0, 0), 2.0, 0.0, 0.3, 4*pi)
    assert elliptical_arc_length(twice) == pytest.approx(16.0)


def test_radius_order_does_not_matter():
    """a quarter of an ellipse is the same length whichever radius is longer"""
    wide = elliptical_arc((0, 0), 3.0, 1.0, 0.0, pi/2)
    tall = elliptical_arc((0, 0), 1.0, 3.0, 0.0, pi/2)
    assert elliptical_arc_length(wide) == pytest.approx(elliptical_arc_length(tall), rel=1e-12)


@pytest.mark.parametrize('seed', SEEDS)
def test_arc_matches_quadrature(seed):
    rng = rng_for(seed)
    a = elliptical_arc((0, 0), rng.uniform(0.5, 5.0), rng.uniform(0.5, 5.0),
                       rng.uniform(-2*pi, 2*pi), rng.uniform(-3*pi, 3*pi))
    numeric = mpmath.quad(lambda t: mag(curves.first_derivative(a, float(t))),
                          [i/32 for i in range(33)])
    assert elliptical_arc_length(a) == pytest.approx(float(numeric), rel=1e-8)


def test_degenerate_arc():
    assert elliptical_arc_length(elliptical_arc((0, 0), 0.0, 0.0, 0.0, pi)) == 0.0
    assert elliptical_arc_length(elliptical_arc((0, 0), 2.0, 0.0, 0.0, pi)) == pytest.approx(4.0)
    with pytest.raises(ValueError):
        elliptical_arc_length(QuadraticSpline((0, 0), (1, 1), (2, 0)))
