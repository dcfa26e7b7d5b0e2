## nondegeneracy checks for yapCurve curves
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

"""Nondegeneracy checks.

Arc length parameterization needs a curve that actually moves.
:func:`nondegenerate` inspects a curve algebraically (exact zero tests on
control point differences, radii and angles, never sampling) and returns
either ``Ok(NondegenerateCurve)`` or ``Err(Degenerate)``.  Callers branch
on the result explicitly::

    result = nondegenerate(curve)
    if result:
        param = arc_length_parameterized(result.value, max_error=0.01)
    else:
        # treat the curve as the single point result.error.point
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from yapcurve import curves
from yapcurve.ellipse import isellipticalarc
from yapcurve.errors import DegenerateCurveError
from yapcurve.geom import iszero, scale3, sub, unit
from yapcurve.splines import isspline
from yapcurve.units import as_parameter


class DegeneracyKind(Enum):
    COINCIDENT_POINTS = 'all control points coincide'
    COLLAPSED_AXIS = 'elliptical arc has exactly one zero radius'


@dataclass(frozen=True)
class Degenerate:
    """Why a curve is degenerate, and the point it collapses to."""

    kind: DegeneracyKind
    point: list
    curve: Any


@dataclass(frozen=True)
class Ok:
    value: Any

    ok = True

    def __bool__(self) -> bool:
        return True

    def unwrap(self):
        return self.value


@dataclass(frozen=True)
class Err:
    error: Degenerate

    ok = False

    def __bool__(self) -> bool:
        return False

    def unwrap(self):
        raise DegenerateCurveError(self.error)


@dataclass(frozen=True)
class NondegenerateCurve:
    """A curve known not to collapse to a point.

    ``witness`` is a nonzero vector found by the check: a control point
    difference for splines, the start derivative for arcs.  Build these
    with :func:`nondegenerate`.
    """

    curve: Any
    witness: list

    @property
    def space(self) -> str:
        return self.curve.space


def nondegenerate(curve):
    """Check ``curve``; return ``Ok(NondegenerateCurve)`` or ``Err(Degenerate)``."""
    if isspline(curve):
        pts = curve.points
        for i in range(len(pts)-1):
            d = sub(pts[i+1], pts[i])
            if not iszero(d):
                return Ok(NondegenerateCurve(curve, d))
        return Err(Degenerate(DegeneracyKind.COINCIDENT_POINTS,
                              curves.start_point(curve), curve))
    elif isellipticalarc(curve):
        start = curves.start_point(curve)
        rx, ry = curve.x_radius, curve.y_radius
        if curve.swept_angle == 0.0 or (rx == 0.0 and ry == 0.0):
            return Err(Degenerate(DegeneracyKind.COINCIDENT_POINTS, start, curve))
        if rx == 0.0 or ry == 0.0:
            return Err(Degenerate(DegeneracyKind.COLLAPSED_AXIS, start, curve))
        return Ok(NondegenerateCurve(curve, curves.start_derivative(curve)))
    else:
        raise ValueError('inappropriate type for nondegenerate(): {!r}'.format(curve))


def _max_order(curve):
    if isspline(curve):
        return max(1, curve.degree)
    return 2


def tangent_direction(nd, t):
    """Unit tangent of a nondegenerate curve at ``t``.

    Where the speed vanishes at an isolated parameter value the tangent
    is the limit of the direction of motion: the lowest-order nonzero
    derivative, approached from the right for ``t < 1`` and from the left
    at ``t = 1``.
    """
    t = as_parameter(t)
    curve = nd.curve
    for order in range(1, _max_order(curve)+1):
        d = curves.derivative(curve, t, order)
        if not iszero(d):
            if t >= 1.0 and order % 2 == 0:
                d = scale3(d, -1.0)
            return unit(d)
    raise ValueError('no nonzero derivative at t={} for {!r}'.format(t, curve))


def sample(nd, t):
    """``(point, unit tangent)`` at ``t``"""
    return curves.point_on(nd.curve, t), tangent_direction(nd, t)


__all__ = [
    'DegeneracyKind',
    'Degenerate',
    'Ok',
    'Err',
    'NondegenerateCurve',
    'nondegenerate',
    'tangent_direction',
    'sample',
]
