## Bezier-family spline curves for yapCurve
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

"""Bezier-family spline curves.

Five immutable families share one set of algorithms from
:mod:`yapcurve.bezier`:

* :class:`QuadraticSpline` and :class:`CubicSpline`, polynomial curves
  with three and four control points;
* :class:`RationalQuadraticSpline` and :class:`RationalCubicSpline`,
  with one strictly positive weight per control point;
* :class:`Spline`, a Bezier curve of arbitrary degree, rational when
  ``weights`` is given.

All curves are parameterized over ``0 <= t <= 1``.  Evaluation at
exactly ``t=0`` and ``t=1`` returns the first and last control point
exactly.  Each curve carries a ``space`` tag naming the coordinate
system its control points are expressed in (see :mod:`yapcurve.frames`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from yapcurve import bezier
from yapcurve.errors import CurveError
from yapcurve.geom import (GLOBAL, add, fpoint, homo, isgoodnum, lerp, scale3,
                           weighted)
from yapcurve.interval import as_interval
from yapcurve.units import as_parameter


def _weights(weights, count):
    if len(weights) != count:
        raise CurveError('expected {} weights, got {}'.format(count, len(weights)))
    result = []
    for w in weights:
        if not isgoodnum(w) or w <= 0:
            raise CurveError('spline weights must be positive numbers, got {}'.format(w))
        result.append(float(w))
    return tuple(result)


@dataclass(frozen=True)
class QuadraticSpline:
    """Quadratic Bezier curve with control points ``p1``, ``p2``, ``p3``."""

    p1: list
    p2: list
    p3: list
    space: str = GLOBAL

    degree: ClassVar[int] = 2

    def __post_init__(self):
        for name in ('p1', 'p2', 'p3'):
            object.__setattr__(self, name, fpoint(getattr(self, name)))

    @property
    def points(self) -> Tuple[list, ...]:
        return (self.p1, self.p2, self.p3)

    @property
    def weights(self):
        return None


@dataclass(frozen=True)
class CubicSpline:
    """Cubic Bezier curve with control points ``p1`` .. ``p4``."""

    p1: list
    p2: list
    p3: list
    p4: list
    space: str = GLOBAL

    degree: ClassVar[int] = 3

    def __post_init__(self):
        for name in ('p1', 'p2', 'p3', 'p4'):
            object.__setattr__(self, name, fpoint(getattr(self, name)))

    @property
    def points(self) -> Tuple[list, ...]:
        return (self.p1, self.p2, self.p3, self.p4)

    @property
    def weights(self):
        return None


@dataclass(frozen=True)
class RationalQuadraticSpline:
    """Rational quadratic Bezier curve: three control points and three
    positive weights."""

    points: Tuple[list, ...]
    weights: Tuple[float, ...]
    space: str = GLOBAL

    degree: ClassVar[int] = 2

    def __post_init__(self):
        if len(self.points) != 3:
            raise CurveError('rational quadratic spline needs 3 control points')
        object.__setattr__(self, 'points', tuple(fpoint(p) for p in self.points))
        object.__setattr__(self, 'weights', _weights(self.weights, 3))


@dataclass(frozen=True)
class RationalCubicSpline:
    """Rational cubic Bezier curve: four control points and four positive
    weights."""

    points: Tuple[list, ...]
    weights: Tuple[float, ...]
    space: str = GLOBAL

    degree: ClassVar[int] = 3

    def __post_init__(self):
        if len(self.points) != 4:
            raise CurveError('rational cubic spline needs 4 control points')
        object.__setattr__(self, 'points', tuple(fpoint(p) for p in self.points))
        object.__setattr__(self, 'weights', _weights(self.weights, 4))


@dataclass(frozen=True)
class Spline:
    """Bezier curve of arbitrary degree, optionally rational."""

    points: Tuple[list, ...]
    weights: Optional[Tuple[float, ...]] = None
    space: str = GLOBAL

    def __post_init__(self):
        if len(self.points) < 1:
            raise CurveError('spline needs at least one control point')
        object.__setattr__(self, 'points', tuple(fpoint(p) for p in self.points))
        if self.weights is not None:
            object.__setattr__(self, 'weights', _weights(self.weights, len(self.points)))

    @property
    def degree(self) -> int:
        return len(self.points) - 1


SPLINE_TYPES = (QuadraticSpline, CubicSpline, RationalQuadraticSpline,
                RationalCubicSpline, Spline)


def isspline(x) -> bool:
    """is ``x`` one of the Bezier-family curves"""
    return isinstance(x, SPLINE_TYPES)


def isrational(s) -> bool:
    return s.weights is not None


def with_controls(s, points, weights=None, space=None):
    """new curve of the same family as ``s`` with replaced control data"""
    space = s.space if space is None else space
    if isinstance(s, QuadraticSpline):
        return QuadraticSpline(*points, space=space)
    if isinstance(s, CubicSpline):
        return CubicSpline(*points, space=space)
    if isinstance(s, RationalQuadraticSpline):
        return RationalQuadraticSpline(tuple(points), tuple(weights), space=space)
    if isinstance(s, RationalCubicSpline):
        return RationalCubicSpline(tuple(points), tuple(weights), space=space)
    return Spline(tuple(points), None if weights is None else tuple(weights), space=space)


def homogeneous_points(s):
    return [weighted(p, w) for p, w in zip(s.points, s.weights)]


## evaluation
## ----------

def spline_point(s, t):
    t = as_parameter(t)
    if t == 0.0:
        return list(s.points[0])
    if t == 1.0:
        return list(s.points[-1])
    if isrational(s):
        return homo(bezier.decasteljau4(homogeneous_points(s), t))
    return bezier.decasteljau(s.points, t)


def spline_derivative(s, t, order):
    """``order``-th derivative vector at ``t``"""
    t = as_parameter(t)
    if order == 0:
        return spline_point(s, t)
    if isrational(s):
        hders = bezier.homogeneous_derivatives(homogeneous_points(s), t, order)
        return bezier.rational_derivatives(hders)[order]
    return bezier.derivative(s.points, t, order)


def spline_reverse(s):
    pts = list(reversed(s.points))
    wts = None if s.weights is None else list(reversed(s.weights))
    return with_controls(s, pts, wts)


def spline_split(s, t):
    t = as_parameter(t)
    if isrational(s):
        left, right = bezier.split4(homogeneous_points(s), t)
        lpts = [homo(q) for q in left]
        rpts = [homo(q) for q in right]
        # keep the outer end points exact
        lpts[0] = s.points[0]
        rpts[-1] = s.points[-1]
        return (with_controls(s, lpts, [q[3] for q in left]),
                with_controls(s, rpts, [q[3] for q in right]))
    left, right = bezier.split(s.points, t)
    return with_controls(s, left), with_controls(s, right)


def spline_sub_points(s, a, b):
    """control points of the restriction of ``s`` to ``[a, b]``"""
    if isrational(s):
        return [homo(q) for q in bezier.restrict4(homogeneous_points(s), a, b)]
    return bezier.restrict(s.points, a, b)


## bounds
## ------

def spline_bounding_box(s):
    return bezier.hull_box(list(s.points))


def spline_derivative_box(s, interval, order):
    ivl = as_interval(interval)
    if isrational(s):
        d1, d2 = bezier.rational_derivative_boxes(homogeneous_points(s), ivl.lo, ivl.hi)
        return d1 if order == 1 else d2
    return bezier.derivative_box(s.points, ivl.lo, ivl.hi, order)


def spline_hull_length(s, a, b):
    """control polygon length of the sub-curve over ``[a, b]``"""
    return bezier.polygon_length(spline_sub_points(s, a, b))


## constructors
## ------------

def cubic_from_endpoints(start, start_derivative, end, end_derivative, space=GLOBAL):
    """cubic spline with the given end points and end derivatives (Hermite form)"""
    start = fpoint(start)
    end = fpoint(end)
    return CubicSpline(start,
                       add(start, scale3(start_derivative, 1.0/3.0)),
                       add(end, scale3(end_derivative, -1.0/3.0)),
                       end, space=space)


def cubic_from_quadratic(q):
    """exact degree elevation of a quadratic spline"""
    return CubicSpline(q.p1,
                       lerp(q.p1, q.p2, 2.0/3.0),
                       lerp(q.p3, q.p2, 2.0/3.0),
                       q.p3, space=q.space)


__all__ = [
    'QuadraticSpline',
    'CubicSpline',
    'RationalQuadraticSpline',
    'RationalCubicSpline',
    'Spline',
    'SPLINE_TYPES',
    'isspline',
    'isrational',
    'with_controls',
    'cubic_from_endpoints',
    'cubic_from_quadratic',
]
