## coordinate frames, sketch planes and projection for yapCurve
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

"""Coordinate spaces.

Every curve carries a ``space`` tag, the name of the coordinate system
its coordinates are expressed in (``'global'`` by default).  Curves move
between spaces only through explicit conversions:

* ``relative_to(curve, frame)`` re-expresses a curve given in
  ``frame.parent`` in the frame's local coordinates (tag ``frame.name``);
* ``place_in(curve, frame)`` is the inverse.

Both check the tag and raise :class:`~yapcurve.errors.SpaceMismatchError`
when it doesn't match, so curves from different frames can't be mixed
by accident.  Frames are rigid, so lengths and all curve families are
preserved.
"""

from __future__ import annotations

from dataclasses import dataclass

from yapcurve.ellipse import EllipticalArc, isellipticalarc
from yapcurve.errors import CurveError, SpaceMismatchError
from yapcurve.geom import (GLOBAL, add, cross, dot, epsilon, fpoint,
                           point, scale3, sub, unit, vect)
from yapcurve.splines import isspline, with_controls


def _orthonormal(x_axis, y_axis):
    try:
        xa = unit(vect(x_axis))
        ya = unit(vect(y_axis))
    except ValueError as e:
        raise CurveError('frame axes must be nonzero: {}'.format(e))
    if abs(dot(xa, ya)) > epsilon:
        raise CurveError('frame axes must be orthogonal')
    return xa, ya


@dataclass(frozen=True)
class Frame:
    """Right-handed orthonormal frame named ``name`` inside space ``parent``."""

    origin: list
    x_axis: list
    y_axis: list
    name: str
    parent: str = GLOBAL

    def __post_init__(self):
        if self.name == self.parent:
            raise CurveError('frame name must differ from its parent space')
        object.__setattr__(self, 'origin', fpoint(self.origin))
        xa, ya = _orthonormal(self.x_axis, self.y_axis)
        object.__setattr__(self, 'x_axis', xa)
        object.__setattr__(self, 'y_axis', ya)

    @property
    def z_axis(self) -> list:
        return cross(self.x_axis, self.y_axis)

    def to_local(self, p):
        d = sub(p, self.origin)
        return point(dot(d, self.x_axis), dot(d, self.y_axis), dot(d, self.z_axis))

    def to_parent(self, p):
        return add(self.origin, self.vector_to_parent(p))

    def vector_to_local(self, v):
        return [dot(v, self.x_axis), dot(v, self.y_axis), dot(v, self.z_axis), 1.0]

    def vector_to_parent(self, v):
        return add(add(scale3(self.x_axis, v[0]), scale3(self.y_axis, v[1])),
                   scale3(self.z_axis, v[2]))


def frame(origin, x_axis=(1, 0, 0), y_axis=(0, 1, 0), *, name, parent=GLOBAL):
    return Frame(origin, x_axis, y_axis, name, parent)


def _map_curve(curve, point_map, vector_map, space):
    if isspline(curve):
        return with_controls(curve, [point_map(p) for p in curve.points],
                             curve.weights, space=space)
    elif isellipticalarc(curve):
        return EllipticalArc(point_map(curve.center),
                             vector_map(curve.x_direction),
                             vector_map(curve.y_direction),
                             curve.x_radius, curve.y_radius,
                             curve.start_angle, curve.end_angle, space=space)
    raise ValueError('inappropriate type for frame conversion: {!r}'.format(curve))


def relative_to(curve, fr):
    """express ``curve`` (in ``fr.parent``) in the local coordinates of ``fr``"""
    if curve.space != fr.parent:
        raise SpaceMismatchError(fr.parent, curve.space)
    return _map_curve(curve, fr.to_local, fr.vector_to_local, fr.name)


def place_in(curve, fr):
    """express ``curve`` (in ``fr``'s local space) in ``fr.parent``"""
    if curve.space != fr.name:
        raise SpaceMismatchError(fr.name, curve.space)
    return _map_curve(curve, fr.to_parent, fr.vector_to_parent, fr.parent)


@dataclass(frozen=True)
class SketchPlane:
    """Plane with an origin and two in-plane axes, living in ``space``.

    Points projected *into* the plane get 2D coordinates in a space
    named ``name``.
    """

    origin: list
    x_axis: list
    y_axis: list
    name: str
    space: str = GLOBAL

    def __post_init__(self):
        object.__setattr__(self, 'origin', fpoint(self.origin))
        xa, ya = _orthonormal(self.x_axis, self.y_axis)
        object.__setattr__(self, 'x_axis', xa)
        object.__setattr__(self, 'y_axis', ya)

    @property
    def normal(self) -> list:
        return cross(self.x_axis, self.y_axis)


def project_point(p, plane):
    """orthogonal projection of ``p`` onto ``plane``, in the plane's space"""
    n = plane.normal
    return sub(p, scale3(n, dot(sub(p, plane.origin), n)))


def _require_spline(curve, fname):
    if not isspline(curve):
        raise ValueError('{}() supports Bezier-family curves only, got {!r}'.format(fname, curve))
    return curve


def project_onto(curve, plane):
    """Orthogonal projection of a Bezier-family curve onto ``plane``.

    Projection is affine, so projecting the control points (weights
    unchanged) projects the curve exactly.
    """
    _require_spline(curve, 'project_onto')
    if curve.space != plane.space:
        raise SpaceMismatchError(plane.space, curve.space)
    return with_controls(curve, [project_point(p, plane) for p in curve.points],
                         curve.weights)


def project_into(curve, plane):
    """Project a Bezier-family curve into 2D sketch coordinates of ``plane``."""
    _require_spline(curve, 'project_into')
    if curve.space != plane.space:
        raise SpaceMismatchError(plane.space, curve.space)

    def to_plane(p):
        d = sub(p, plane.origin)
        return point(dot(d, plane.x_axis), dot(d, plane.y_axis))

    return with_controls(curve, [to_plane(p) for p in curve.points], curve.weights,
                         space=plane.name)


__all__ = [
    'Frame',
    'frame',
    'relative_to',
    'place_in',
    'SketchPlane',
    'project_point',
    'project_onto',
    'project_into',
]
