## elliptical and circular arcs for yapCurve
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

"""Elliptical arcs.

An :class:`EllipticalArc` is described by its center, a pair of
orthonormal axis directions, the two radii and a start and end angle
(radians).  The curve parameter ``t`` maps linearly onto the angle,
``theta(t) = (1-t)*start_angle + t*end_angle``, and

    P(t) = center + x_radius*cos(theta)*x_direction
                  + y_radius*sin(theta)*y_direction

Circular arcs are elliptical arcs with equal radii, see
:func:`circular_arc`.  Storing the end angle rather than the swept
angle makes :func:`arc_reverse` an exact involution.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, ceil, cos, hypot, pi, sin

from yapcurve.errors import CurveError
from yapcurve.geom import (GLOBAL, add, cross, dot, epsilon, fpoint, iszero,
                           mag, scale3, unit, vect)
from yapcurve.interval import BoundingBox, Interval, as_interval
from yapcurve.units import as_angle, as_length, as_parameter


def _axis(v, name):
    d = [float(c) for c in vect(v)[:3]] + [1.0]
    m = mag(d)
    if m == 0.0:
        raise CurveError('elliptical arc {} must be nonzero'.format(name))
    # axes that are already unit length are kept bit for bit
    if abs(m - 1.0) > 1e-12:
        d = unit(d)
    return d


@dataclass(frozen=True)
class EllipticalArc:
    """Elliptical arc; see the module documentation for the parameterization."""

    center: list
    x_direction: list
    y_direction: list
    x_radius: float
    y_radius: float
    start_angle: float
    end_angle: float
    space: str = GLOBAL

    def __post_init__(self):
        object.__setattr__(self, 'center', fpoint(self.center))
        xd = _axis(self.x_direction, 'x_direction')
        yd = _axis(self.y_direction, 'y_direction')
        if abs(dot(xd, yd)) > epsilon:
            raise CurveError('elliptical arc axes must be orthogonal')
        object.__setattr__(self, 'x_direction', xd)
        object.__setattr__(self, 'y_direction', yd)
        for name in ('x_radius', 'y_radius'):
            r = as_length(getattr(self, name), name)
            if r < 0.0:
                raise CurveError('{} must be non-negative, got {}'.format(name, r))
            object.__setattr__(self, name, r)
        for name in ('start_angle', 'end_angle'):
            object.__setattr__(self, name, as_angle(getattr(self, name), name))

    @property
    def swept_angle(self) -> float:
        return self.end_angle - self.start_angle


def elliptical_arc(center, x_radius, y_radius, start_angle, swept_angle, *,
                   x_direction=None, y_direction=None, space=GLOBAL):
    """Construct an elliptical arc from a start angle and a swept angle.

    Parameters
    ----------
    center : point
        Center of the ellipse.
    x_radius, y_radius : float or length Quantity
        Radii along ``x_direction`` and ``y_direction``.
    start_angle, swept_angle : float (radians) or angle Quantity
        Angular extent; a negative swept angle runs clockwise.
    x_direction : vector, optional
        Defaults to the global X axis.
    y_direction : vector, optional
        Defaults to ``x_direction`` rotated a quarter turn in the XY plane.

    Returns
    -------
    EllipticalArc
    """
    xd = vect(1, 0, 0) if x_direction is None else vect(x_direction)
    if y_direction is None:
        yd = cross(vect(0, 0, 1), xd)
        if iszero(yd):
            raise CurveError('cannot infer y_direction for an x_direction along Z')
    else:
        yd = vect(y_direction)
    start = as_angle(start_angle, 'start_angle')
    swept = as_angle(swept_angle, 'swept_angle')
    return EllipticalArc(center, xd, yd, x_radius, y_radius,
                         start, start + swept, space=space)


def circular_arc(center, radius, start_angle, swept_angle, **kwargs):
    """circular arc, an elliptical arc with equal radii"""
    return elliptical_arc(center, radius, radius, start_angle, swept_angle, **kwargs)


def isellipticalarc(x) -> bool:
    return isinstance(x, EllipticalArc)


## evaluation
## ----------

def arc_angle(a, t):
    t = as_parameter(t)
    return (1.0 - t)*a.start_angle + t*a.end_angle


## trig coefficients of the order-n derivative, per quarter turn:
## d^n/dtheta^n (cos, sin) applied to (x_radius, y_radius)
_PHASES = (
    (lambda c, s: (c, s)),
    (lambda c, s: (-s, c)),
    (lambda c, s: (-c, -s)),
    (lambda c, s: (s, -c)),
)


def _offset(a, theta, order):
    cx, sy = _PHASES[order % 4](cos(theta), sin(theta))
    return add(scale3(a.x_direction, a.x_radius*cx),
               scale3(a.y_direction, a.y_radius*sy))


def arc_point(a, t):
    return add(a.center, _offset(a, arc_angle(a, t), 0))


def arc_derivative(a, t, order):
    """``order``-th derivative with respect to the curve parameter ``t``"""
    if order == 0:
        return arc_point(a, t)
    return scale3(_offset(a, arc_angle(a, t), order), a.swept_angle**order)


def arc_midpoint(a):
    return arc_point(a, 0.5)


def arc_reverse(a):
    return EllipticalArc(a.center, a.x_direction, a.y_direction,
                         a.x_radius, a.y_radius, a.end_angle, a.start_angle,
                         space=a.space)


def arc_split(a, t):
    theta = arc_angle(a, t)
    left = EllipticalArc(a.center, a.x_direction, a.y_direction,
                         a.x_radius, a.y_radius, a.start_angle, theta, space=a.space)
    right = EllipticalArc(a.center, a.x_direction, a.y_direction,
                          a.x_radius, a.y_radius, theta, a.end_angle, space=a.space)
    return left, right


## bounds
## ------

def cos_range(lo, hi):
    """Interval of ``cos(theta)`` for ``lo <= theta <= hi``"""
    if hi - lo >= 2.0*pi:
        return Interval(-1.0, 1.0)
    vals = [cos(lo), cos(hi)]
    k = ceil(lo/pi)
    while k*pi <= hi:
        vals.append(1.0 if k % 2 == 0 else -1.0)
        k += 1
    return Interval(max(-1.0, min(vals)), min(1.0, max(vals)))


def _coefficients(a, axis, order):
    # (alpha, beta) are the values at theta = 0 and theta = pi/2
    ax = a.x_radius*a.x_direction[axis]
    by = a.y_radius*a.y_direction[axis]
    phase = _PHASES[order % 4]
    f0, g0 = phase(1.0, 0.0)
    f1, g1 = phase(0.0, 1.0)
    return ax*f0 + by*g0, ax*f1 + by*g1


def arc_derivative_box(a, interval, order):
    """box containing the ``order``-th derivative (``order=0`` bounds the
    curve itself) for every parameter value in ``interval``"""
    ivl = as_interval(interval)
    th0 = arc_angle(a, ivl.lo)
    th1 = arc_angle(a, ivl.hi)
    lo, hi = min(th0, th1), max(th0, th1)
    factor = a.swept_angle**order
    comps = []
    for axis in range(3):
        # alpha*cos(theta) + beta*sin(theta) == r*cos(theta - phi)
        alpha, beta = _coefficients(a, axis, order)
        r = hypot(alpha, beta)
        if r == 0.0:
            comp = Interval.singleton(0.0)
        else:
            phi = atan2(beta, alpha)
            comp = cos_range(lo - phi, hi - phi)*(r*factor)
        if order == 0:
            comp = comp + a.center[axis]
        comps.append(comp)
    return BoundingBox(*comps)


def arc_bounding_box(a):
    return arc_derivative_box(a, (0.0, 1.0), 0)


def arc_hull_length(a, ta, tb):
    """Length of the tangent triangle over ``[ta, tb]``.

    An elliptical arc turning by less than a half turn lies inside the
    triangle formed by its chord and its two end tangents, and as a
    convex curve its length is at most the sum of the two tangent legs.
    Returns ``None`` when no such triangle exists.
    """
    th0 = arc_angle(a, ta)
    th1 = arc_angle(a, tb)
    lo, hi = min(th0, th1), max(th0, th1)
    if not 0.0 < hi - lo < pi or a.x_radius == 0.0 or a.y_radius == 0.0:
        return None
    rx, ry = a.x_radius, a.y_radius
    ax, ay = rx*cos(lo), ry*sin(lo)
    bx, by = rx*cos(hi), ry*sin(hi)
    dax, day = -rx*sin(lo), ry*cos(lo)
    dbx, dby = -rx*sin(hi), ry*cos(hi)
    det = dbx*day - dax*dby
    if det == 0.0:
        return None
    ex, ey = bx - ax, by - ay
    s = (dbx*ey - dby*ex)/det
    u = (dax*ey - day*ex)/det
    if s < 0.0 or u > 0.0:
        return None
    vx, vy = ax + s*dax, ay + s*day
    return hypot(vx - ax, vy - ay) + hypot(bx - vx, by - vy)


__all__ = [
    'EllipticalArc',
    'elliptical_arc',
    'circular_arc',
    'isellipticalarc',
    'cos_range',
]
