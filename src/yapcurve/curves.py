## generic curve operations for yapCurve
## Copyright (c) 2025 Richard W. DeVaul
## Copyright (c) 2025 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Generic curve operations.

Functions that operate on any curve family, determining the nature of
their argument and dispatching to the family implementation, in the
manner of ``yapcad.geom.sample()`` and friends.  The curve families are
the Bezier-family splines of :mod:`yapcurve.splines` and the elliptical
arcs of :mod:`yapcurve.ellipse`.
"""

from math import ceil, sqrt

from yapcurve import ellipse, splines
from yapcurve.ellipse import isellipticalarc
from yapcurve.geom import deepcopy
from yapcurve.interval import Interval
from yapcurve.splines import isspline
from yapcurve.units import as_length


def iscurve(x) -> bool:
    """is ``x`` any supported curve"""
    return isspline(x) or isellipticalarc(x)


def _bad(fname, x):
    return ValueError('inappropriate type for {}(): {!r}'.format(fname, x))


## evaluation
## ----------

def point_on(x, t):
    """
    Return the point on curve ``x`` at parameter ``t``.  ``t`` outside
    [0, 1] extrapolates.  ``t=0`` and ``t=1`` give the start and end
    point exactly.
    """
    if isspline(x):
        return splines.spline_point(x, t)
    elif isellipticalarc(x):
        return ellipse.arc_point(x, t)
    else:
        raise _bad('point_on', x)


def derivative(x, t, order=1):
    """Return the ``order``-th derivative vector of curve ``x`` at ``t``."""
    if not isinstance(order, int) or order < 0:
        raise ValueError('bad derivative order: {}'.format(order))
    if isspline(x):
        return splines.spline_derivative(x, t, order)
    elif isellipticalarc(x):
        return ellipse.arc_derivative(x, t, order)
    else:
        raise _bad('derivative', x)


def first_derivative(x, t):
    return derivative(x, t, 1)


def second_derivative(x, t):
    return derivative(x, t, 2)


def start_point(x):
    return point_on(x, 0.0)


def end_point(x):
    return point_on(x, 1.0)


def start_derivative(x):
    return first_derivative(x, 0.0)


def end_derivative(x):
    return first_derivative(x, 1.0)


def midpoint(x):
    """point at ``t=0.5``; for arcs, the point halfway along the swept angle"""
    if isellipticalarc(x):
        return ellipse.arc_midpoint(x)
    return point_on(x, 0.5)


def control_points(x):
    """copy of the control points of a spline"""
    if isspline(x):
        return [deepcopy(p) for p in x.points]
    raise _bad('control_points', x)


## derived curves
## --------------

def reverse(x):
    """curve traversing ``x`` in the opposite direction"""
    if isspline(x):
        return splines.spline_reverse(x)
    elif isellipticalarc(x):
        return ellipse.arc_reverse(x)
    else:
        raise _bad('reverse', x)


def split_at(x, t):
    """
    Split curve ``x`` at parameter ``t``, returning ``(left, right)``
    where ``left`` covers ``[0, t]`` and ``right`` covers ``[t, 1]`` of
    the original, each re-parameterized over [0, 1].
    """
    if isspline(x):
        return splines.spline_split(x, t)
    elif isellipticalarc(x):
        return ellipse.arc_split(x, t)
    else:
        raise _bad('split_at', x)


def bisect(x):
    return split_at(x, 0.5)


## bounds
## ------

def bounding_box(x):
    """conservative :class:`~yapcurve.interval.BoundingBox` of the curve"""
    if isspline(x):
        return splines.spline_bounding_box(x)
    elif isellipticalarc(x):
        return ellipse.arc_bounding_box(x)
    else:
        raise _bad('bounding_box', x)


def _derivative_box(fname, x, interval, order):
    if isspline(x):
        return splines.spline_derivative_box(x, interval, order)
    elif isellipticalarc(x):
        return ellipse.arc_derivative_box(x, interval, order)
    else:
        raise _bad(fname, x)


def first_derivative_bounding_box(x, interval=(0.0, 1.0)):
    """box containing ``first_derivative(x, t)`` for every ``t`` in ``interval``"""
    return _derivative_box('first_derivative_bounding_box', x, interval, 1)


def second_derivative_bounding_box(x, interval=(0.0, 1.0)):
    """box containing ``second_derivative(x, t)`` for every ``t`` in ``interval``"""
    return _derivative_box('second_derivative_bounding_box', x, interval, 2)


def first_derivative_magnitude_bounds(x, interval=(0.0, 1.0)):
    """:class:`~yapcurve.interval.Interval` containing the speed
    ``mag(first_derivative(x, t))`` for every ``t`` in ``interval``"""
    box = _derivative_box('first_derivative_magnitude_bounds', x, interval, 1)
    return Interval(box.min_magnitude(), box.max_magnitude())


def hull_length(x, a, b):
    """An upper bound on the length of ``x`` over ``[a, b]`` from the
    sub-curve's control hull, or ``None`` if the family provides none."""
    if isspline(x):
        return splines.spline_hull_length(x, a, b)
    elif isellipticalarc(x):
        return ellipse.arc_hull_length(x, a, b)
    else:
        raise _bad('hull_length', x)


## polyline approximation
## ----------------------

def segments(x, n):
    """``n+1`` points at evenly spaced parameter values, ends included exactly"""
    if not isinstance(n, int) or n < 1:
        raise ValueError('segment count must be a positive integer, got {}'.format(n))
    return [point_on(x, i/n) for i in range(n+1)]


def num_approximation_segments(x, max_error):
    """Number of equal parameter steps after which a polyline through
    the curve deviates from it by at most ``max_error``.

    A chord over a parameter step ``h`` deviates by at most ``M*h*h/8``
    where ``M`` bounds the second derivative magnitude.
    """
    tol = as_length(max_error, 'max_error')
    if tol <= 0.0:
        raise ValueError('max_error must be positive, got {}'.format(tol))
    m = second_derivative_bounding_box(x).max_magnitude()
    return max(1, int(ceil(sqrt(m/(8.0*tol)))))


def approximate(x, max_error):
    """polyline approximation of ``x`` within ``max_error``"""
    return segments(x, num_approximation_segments(x, max_error))


__all__ = [
    'iscurve',
    'point_on',
    'derivative',
    'first_derivative',
    'second_derivative',
    'start_point',
    'end_point',
    'start_derivative',
    'end_derivative',
    'midpoint',
    'control_points',
    'reverse',
    'split_at',
    'bisect',
    'bounding_box',
    'first_derivative_bounding_box',
    'second_derivative_bounding_box',
    'first_derivative_magnitude_bounds',
    'hull_length',
    'segments',
    'num_approximation_segments',
    'approximate',
]
