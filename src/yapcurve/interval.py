## intervals and bounding boxes for conservative derivative bounds
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

"""Intervals and axis-aligned bounding boxes.

These are transient values used to bound curve derivatives over a
parameter sub-range.  Interval arithmetic here is conservative in the
ordinary sense (every operation returns an interval containing every
possible result) but is not outward-rounded; the adaptive integrator
only needs bounds that are correct to floating-point rounding.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import hypot
from typing import Iterable, Sequence

from yapcurve.geom import point


@dataclass(frozen=True)
class Interval:
    """Closed scalar interval ``[lo, hi]`` with ``lo <= hi``."""

    lo: float
    hi: float

    def __post_init__(self):
        if not self.lo <= self.hi:
            raise ValueError('bad interval bounds: [{}, {}]'.format(self.lo, self.hi))

    @classmethod
    def singleton(cls, x: float) -> 'Interval':
        return cls(x, x)

    @classmethod
    def hull(cls, values: Iterable[float]) -> 'Interval':
        vals = list(values)
        if not vals:
            raise ValueError('cannot form the hull of no values')
        return cls(min(vals), max(vals))

    @property
    def width(self) -> float:
        return self.hi - self.lo

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.lo + self.hi)

    def contains(self, x: float, tol: float = 0.0) -> bool:
        return self.lo - tol <= x <= self.hi + tol

    def union(self, other: 'Interval') -> 'Interval':
        return Interval(min(self.lo, other.lo), max(self.hi, other.hi))

    def abs_max(self) -> float:
        return max(abs(self.lo), abs(self.hi))

    def abs_min(self) -> float:
        if self.lo <= 0.0 <= self.hi:
            return 0.0
        return min(abs(self.lo), abs(self.hi))

    def __add__(self, other):
        if isinstance(other, Interval):
            return Interval(self.lo + other.lo, self.hi + other.hi)
        return Interval(self.lo + other, self.hi + other)

    __radd__ = __add__

    def __neg__(self):
        return Interval(-self.hi, -self.lo)

    def __sub__(self, other):
        if isinstance(other, Interval):
            return Interval(self.lo - other.hi, self.hi - other.lo)
        return Interval(self.lo - other, self.hi - other)

    def __mul__(self, other):
        if isinstance(other, Interval):
            products = (self.lo * other.lo, self.lo * other.hi,
                        self.hi * other.lo, self.hi * other.hi)
            return Interval(min(products), max(products))
        if other >= 0:
            return Interval(self.lo * other, self.hi * other)
        return Interval(self.hi * other, self.lo * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Interval):
            if other.lo <= 0.0 <= other.hi:
                raise ZeroDivisionError('interval division by an interval containing zero')
            return self * Interval(1.0 / other.hi, 1.0 / other.lo)
        return self * (1.0 / other)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box, one :class:`Interval` per coordinate axis."""

    x: Interval
    y: Interval
    z: Interval

    @classmethod
    def from_points(cls, points: Sequence[Sequence[float]]) -> 'BoundingBox':
        if not points:
            raise ValueError('cannot bound an empty point list')
        return cls(Interval.hull(p[0] for p in points),
                   Interval.hull(p[1] for p in points),
                   Interval.hull(p[2] for p in points))

    @classmethod
    def singleton(cls, p: Sequence[float]) -> 'BoundingBox':
        return cls(Interval.singleton(p[0]),
                   Interval.singleton(p[1]),
                   Interval.singleton(p[2]))

    @property
    def intervals(self):
        return (self.x, self.y, self.z)

    def min_point(self) -> list:
        return point(self.x.lo, self.y.lo, self.z.lo)

    def max_point(self) -> list:
        return point(self.x.hi, self.y.hi, self.z.hi)

    def as_bbox(self) -> list:
        """Return the yapCAD ``[min_point, max_point]`` representation."""
        return [self.min_point(), self.max_point()]

    def contains(self, p: Sequence[float], tol: float = 0.0) -> bool:
        return (self.x.contains(p[0], tol) and self.y.contains(p[1], tol)
                and self.z.contains(p[2], tol))

    def union(self, other: 'BoundingBox') -> 'BoundingBox':
        return BoundingBox(self.x.union(other.x), self.y.union(other.y),
                           self.z.union(other.z))

    def max_magnitude(self) -> float:
        """Upper bound on ``mag(v)`` for every vector ``v`` in the box."""
        return hypot(*(i.abs_max() for i in self.intervals))

    def min_magnitude(self) -> float:
        """Lower bound on ``mag(v)``: the distance from the origin to the box."""
        return hypot(*(i.abs_min() for i in self.intervals))

    def __add__(self, other: 'BoundingBox') -> 'BoundingBox':
        return BoundingBox(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'BoundingBox') -> 'BoundingBox':
        return BoundingBox(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other) -> 'BoundingBox':
        return BoundingBox(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, other) -> 'BoundingBox':
        return BoundingBox(self.x / other, self.y / other, self.z / other)


def unit_interval() -> Interval:
    return Interval(0.0, 1.0)


def as_interval(value) -> Interval:
    """Accept an :class:`Interval` or an ``(a, b)`` pair."""
    if isinstance(value, Interval):
        return value
    a, b = value
    return Interval(float(a), float(b))


__all__ = [
    'Interval',
    'BoundingBox',
    'unit_interval',
    'as_interval',
]
