## adaptive arc length parameterization for yapCurve
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

"""Adaptive arc length parameterization.

:func:`arc_length_parameterization` builds a table of
``(t, cumulative length)`` rows for a nondegenerate curve such that the
final length is within ``max_error`` of the true arc length.

Algorithm
=========

[0, 1] is subdivided with an explicit stack.  For a sub-interval
``[a, b]`` of width ``w`` the length is bracketed by

* lower bound: ``max(smin*w, chord)``, where ``[smin, smax]`` bounds the
  speed (:func:`~yapcurve.curves.first_derivative_magnitude_bounds`) and
  ``chord`` is the straight-line distance between the end points;
* upper bound: ``min(smax*w, hull)``, where ``hull`` is the
  control polygon length of the restricted sub-curve (Bezier families)
  or the tangent-triangle length (elliptical arcs turning by less than a
  half turn).

An interval is accepted once ``upper - lower <= max_error*w``.  The
widths of the accepted intervals sum to one, so the accumulated error
can't exceed ``max_error``.  It must also satisfy
``(smax - smin)*w <= max_error``: inside an accepted interval the table
is interpolated linearly, and this keeps the resulting position error of
:func:`point_along` within ``max_error`` as well.

The accepted length is a Gauss-Legendre quadrature of the speed over
the interval, clamped into ``[lower, upper]``; the clamp is what carries
the error guarantee, the quadrature only makes the estimate better than
the midpoint of the bracket.

Intervals at ``max_depth`` are accepted regardless.  When that happens
the parameterization reports ``converged == False``, ``achieved_error``
holds the error bound actually obtained, and a warning is logged.
"""

from __future__ import annotations

import logging
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from yapcurve import curves
from yapcurve.degeneracy import (NondegenerateCurve, nondegenerate,
                                 tangent_direction)
from yapcurve.geom import dist, mag
from yapcurve.units import as_length, as_parameter

logger = logging.getLogger(__name__)

## recursion depth cap for the subdivision
DEFAULT_MAX_DEPTH = 24

## Gauss-Legendre order used for accepted intervals
QUADRATURE_POINTS = 5


def _gauss_legendre(n):
    nodes, weights = np.polynomial.legendre.leggauss(n)
    return tuple(zip((0.5*(1.0 + float(x)) for x in nodes),
                     (0.5*float(w) for w in weights)))


_RULES = {}


def _rule(n):
    # nodes mapped onto [0, 1]
    if n not in _RULES:
        _RULES[n] = _gauss_legendre(n)
    return _RULES[n]


@dataclass(frozen=True)
class ArcLengthParameterization:
    """Monotonic table mapping curve parameter to cumulative arc length.

    ``parameter_values`` starts at exactly 0.0 and ends at exactly 1.0;
    both columns are strictly increasing (except for the pathological
    case of a curve whose computed length underflows to zero, which is
    stored as the two rows ``(0, 0)`` and ``(1, 0)``).
    """

    parameter_values: Tuple[float, ...]
    lengths: Tuple[float, ...]
    max_error: float
    achieved_error: float
    depth: int
    capped_intervals: int = 0

    @property
    def length(self) -> float:
        return self.lengths[-1]

    @property
    def converged(self) -> bool:
        return self.capped_intervals == 0

    def __len__(self):
        return len(self.parameter_values)


def _length_bounds(curve, a, b):
    w = b - a
    speed = curves.first_derivative_magnitude_bounds(curve, (a, b))
    chord = dist(curves.point_on(curve, a), curves.point_on(curve, b))
    lower = max(speed.lo*w, chord)
    upper = speed.hi*w
    hull = curves.hull_length(curve, a, b)
    if hull is not None:
        upper = min(upper, hull)
    if upper < lower:
        # only reachable through rounding when the bracket is tight
        upper = lower = 0.5*(lower + upper)
    spread = speed.width*w
    return lower, upper, spread


def _quadrature(curve, a, b, rule):
    w = b - a
    return w*sum(wt*mag(curves.first_derivative(curve, a + w*x)) for x, wt in rule)


def arc_length_parameterization(nd, max_error, *, max_depth=DEFAULT_MAX_DEPTH,
                                quadrature_points=None):
    """Build the :class:`ArcLengthParameterization` of a nondegenerate curve.

    Parameters
    ----------
    nd : NondegenerateCurve
        Result of a successful :func:`~yapcurve.degeneracy.nondegenerate`.
    max_error : float or length Quantity
        Bound on the absolute difference between the computed and the
        true arc length.
    max_depth : int, optional
        Subdivision depth at which intervals are accepted regardless of
        their error bracket.
    quadrature_points : int, optional
        Gauss-Legendre order, default ``QUADRATURE_POINTS``.
    """
    if not isinstance(nd, NondegenerateCurve):
        raise ValueError('arc length parameterization needs a NondegenerateCurve, '
                         'got {!r}'.format(nd))
    tol = as_length(max_error, 'max_error')
    if tol <= 0.0:
        raise ValueError('max_error must be positive, got {}'.format(tol))
    if not isinstance(max_depth, int) or max_depth < 0:
        raise ValueError('bad max_depth: {}'.format(max_depth))
    rule = _rule(quadrature_points or QUADRATURE_POINTS)
    curve = nd.curve

    ts = [0.0]
    ls = [0.0]
    total = 0.0
    achieved = 0.0
    deepest = 0
    capped = 0

    stack = [(0.0, 1.0, 0)]
    while stack:
        a, b, depth = stack.pop()
        lower, upper, spread = _length_bounds(curve, a, b)
        gap = upper - lower
        if gap > tol*(b - a) or spread > tol:
            if depth < max_depth:
                m = 0.5*(a + b)
                stack.append((m, b, depth+1))
                stack.append((a, m, depth+1))
                continue
            capped += 1
        deepest = max(deepest, depth)
        estimate = min(max(_quadrature(curve, a, b, rule), lower), upper)
        achieved += gap
        if estimate > 0.0:
            total += estimate
            ts.append(b)
            ls.append(total)

    if ts[-1] != 1.0:
        if len(ts) > 1:
            ts[-1] = 1.0
        else:
            ts.append(1.0)
            ls.append(total)

    if capped:
        logger.warning('arc length tolerance %g not reached at depth %d: '
                       '%d intervals capped, achieved error bound %g',
                       tol, max_depth, capped, achieved)
    logger.debug('arc length %g from %d intervals (depth %d, error bound %g)',
                 total, len(ts) - 1, deepest, achieved)
    return ArcLengthParameterization(tuple(ts), tuple(ls), tol, achieved,
                                     deepest, capped)


def arc_length_to_parameter_value(param, s):
    """Parameter value at which the cumulative arc length equals ``s``.

    ``s <= 0`` gives exactly 0.0 and ``s >= length`` gives exactly 1.0;
    in between the table is interpolated linearly, so the result is
    monotonic in ``s``.  A table whose total length rounded to zero has
    no interior; there ``s == 0`` gives 0.0 and any ``s > 0`` gives 1.0.
    """
    s = as_length(s)
    ls = param.lengths
    ts = param.parameter_values
    if s >= ls[-1] > 0.0:
        return 1.0
    if s <= 0.0:
        return 0.0
    if s >= ls[-1]:
        return 1.0
    i = bisect_right(ls, s)
    s0, s1 = ls[i-1], ls[i]
    t0, t1 = ts[i-1], ts[i]
    t = t0 + (s - s0)/(s1 - s0)*(t1 - t0)
    return min(max(t, t0), t1)


def parameter_value_to_arc_length(param, t):
    """Cumulative arc length at parameter value ``t`` (clamped to [0, 1])."""
    t = as_parameter(t)
    ls = param.lengths
    ts = param.parameter_values
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return ls[-1]
    i = bisect_left(ts, t)
    t0, t1 = ts[i-1], ts[i]
    s0, s1 = ls[i-1], ls[i]
    s = s0 + (t - t0)/(t1 - t0)*(s1 - s0)
    return min(max(s, s0), s1)


@dataclass(frozen=True)
class ParameterizedCurve:
    """A nondegenerate curve together with its arc length parameterization."""

    nondegenerate_curve: NondegenerateCurve
    parameterization: ArcLengthParameterization

    @property
    def curve(self):
        return self.nondegenerate_curve.curve

    @property
    def length(self) -> float:
        return self.parameterization.length


def arc_length_parameterized(nd, max_error, **kwargs):
    """Pair ``nd`` with a freshly built parameterization."""
    return ParameterizedCurve(nd, arc_length_parameterization(nd, max_error, **kwargs))


def arc_length(pc):
    return pc.parameterization.length


def point_along(pc, s):
    """Point at arc length ``s`` from the start.

    ``s == 0`` yields the start point and ``s == arc_length(pc)`` the end
    point, both exactly.
    """
    return curves.point_on(pc.curve, arc_length_to_parameter_value(pc.parameterization, s))


def tangent_direction_along(pc, s):
    t = arc_length_to_parameter_value(pc.parameterization, s)
    return tangent_direction(pc.nondegenerate_curve, t)


def sample_along(pc, s):
    """``(point, unit tangent)`` at arc length ``s``"""
    t = arc_length_to_parameter_value(pc.parameterization, s)
    return curves.point_on(pc.curve, t), tangent_direction(pc.nondegenerate_curve, t)


def midpoint(pc):
    """point halfway along the curve by arc length"""
    return point_along(pc, 0.5*arc_length(pc))


def points_along(pc, n):
    """``n+1`` points evenly spaced by arc length, ends included exactly"""
    if not isinstance(n, int) or n < 1:
        raise ValueError('point count must be a positive integer, got {}'.format(n))
    total = arc_length(pc)
    return [point_along(pc, total*i/n) for i in range(n+1)]


## degenerate-curve policy
## -----------------------

def curve_length(curve, max_error, **kwargs):
    """Arc length of any curve; degenerate curves have length 0."""
    result = nondegenerate(curve)
    if not result:
        return 0.0
    return arc_length_parameterization(result.value, max_error, **kwargs).length


def point_along_or_start(curve, s, max_error, **kwargs):
    """:func:`point_along` for any curve; a degenerate curve is the single
    point it collapses to, at every arc length."""
    result = nondegenerate(curve)
    if not result:
        return list(result.error.point)
    return point_along(arc_length_parameterized(result.value, max_error, **kwargs), s)


__all__ = [
    'DEFAULT_MAX_DEPTH',
    'QUADRATURE_POINTS',
    'ArcLengthParameterization',
    'ParameterizedCurve',
    'arc_length_parameterization',
    'arc_length_parameterized',
    'arc_length_to_parameter_value',
    'parameter_value_to_arc_length',
    'arc_length',
    'point_along',
    'tangent_direction_along',
    'sample_along',
    'midpoint',
    'points_along',
    'curve_length',
    'point_along_or_start',
]
