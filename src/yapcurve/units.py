## unit-tagged scalar quantities for yapCurve
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

"""Unit-tagged scalars.

Plain ``int``/``float`` values remain the ordinary currency of the
library, exactly as in yapCAD.  A :class:`Quantity` can be used where a
caller wants the unit checked: lengths, angles and unitless parameter
values cannot be mixed by addition or comparison.

Equality is exact (``==`` compares the stored float and unit).  An
approximate comparison always names its tolerance explicitly, see
:meth:`Quantity.close`.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import degrees as _degrees, radians as _radians

from yapcurve.geom import isgoodnum

LENGTH = 'length'
ANGLE = 'angle'
UNITLESS = 'unitless'

UNITS = (LENGTH, ANGLE, UNITLESS)


@dataclass(frozen=True)
class Quantity:
    """A float tagged with one of ``LENGTH``, ``ANGLE`` or ``UNITLESS``."""

    value: float
    unit: str = UNITLESS

    def __post_init__(self):
        if self.unit not in UNITS:
            raise ValueError('unknown unit: {}'.format(self.unit))
        if not isgoodnum(self.value):
            raise ValueError('bad quantity value: {}'.format(self.value))
        object.__setattr__(self, 'value', float(self.value))

    def _coerce(self, other) -> 'Quantity':
        if isinstance(other, Quantity):
            if other.unit != self.unit:
                raise ValueError('unit mismatch: {} vs {}'.format(self.unit, other.unit))
            return other
        if isgoodnum(other) and self.unit == UNITLESS:
            return Quantity(other, UNITLESS)
        raise ValueError('cannot combine {} quantity with {!r}'.format(self.unit, other))

    def __add__(self, other):
        return Quantity(self.value + self._coerce(other).value, self.unit)

    __radd__ = __add__

    def __sub__(self, other):
        return Quantity(self.value - self._coerce(other).value, self.unit)

    def __rsub__(self, other):
        return Quantity(self._coerce(other).value - self.value, self.unit)

    def __neg__(self):
        return Quantity(-self.value, self.unit)

    def __abs__(self):
        return Quantity(abs(self.value), self.unit)

    def __mul__(self, other):
        if isgoodnum(other):
            return Quantity(self.value * other, self.unit)
        if isinstance(other, Quantity):
            if other.unit == UNITLESS:
                return Quantity(self.value * other.value, self.unit)
            if self.unit == UNITLESS:
                return Quantity(self.value * other.value, other.unit)
            raise ValueError('product of {} and {} quantities is not supported'.format(
                self.unit, other.unit))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isgoodnum(other):
            return Quantity(self.value / other, self.unit)
        if isinstance(other, Quantity):
            if other.unit == self.unit:
                return Quantity(self.value / other.value, UNITLESS)
            if other.unit == UNITLESS:
                return Quantity(self.value / other.value, self.unit)
            raise ValueError('ratio of {} and {} quantities is not supported'.format(
                self.unit, other.unit))
        return NotImplemented

    def __lt__(self, other):
        return self.value < self._coerce(other).value

    def __le__(self, other):
        return self.value <= self._coerce(other).value

    def __gt__(self, other):
        return self.value > self._coerce(other).value

    def __ge__(self, other):
        return self.value >= self._coerce(other).value

    def __float__(self):
        return self.value

    def close(self, other, tolerance) -> bool:
        """Return ``True`` if ``|self - other| <= tolerance``.

        ``tolerance`` must carry the same unit (a plain number is accepted
        for unitless quantities only).
        """
        other = self._coerce(other)
        tol = self._coerce(tolerance)
        if tol.value < 0.0:
            raise ValueError('tolerance must be non-negative')
        return abs(self.value - other.value) <= tol.value

    def in_degrees(self) -> float:
        if self.unit != ANGLE:
            raise ValueError('only angles convert to degrees')
        return _degrees(self.value)


def length(value) -> Quantity:
    return Quantity(value, LENGTH)


def radians(value) -> Quantity:
    return Quantity(value, ANGLE)


def degrees(value) -> Quantity:
    return Quantity(_radians(value), ANGLE)


def unitless(value) -> Quantity:
    return Quantity(value, UNITLESS)


def _strip(value, unit, name):
    if isinstance(value, Quantity):
        if value.unit != unit:
            raise ValueError('{} must be a {} quantity, got {}'.format(name, unit, value.unit))
        return value.value
    if isgoodnum(value):
        return float(value)
    raise ValueError('bad {} value: {!r}'.format(name, value))


def as_length(value, name='length') -> float:
    """Return ``value`` as a float, rejecting non-length quantities."""
    return _strip(value, LENGTH, name)


def as_angle(value, name='angle') -> float:
    """Return ``value`` in radians as a float, rejecting non-angle quantities."""
    return _strip(value, ANGLE, name)


def as_parameter(value, name='parameter') -> float:
    """Return a curve parameter value as a float."""
    return _strip(value, UNITLESS, name)


__all__ = [
    'LENGTH',
    'ANGLE',
    'UNITLESS',
    'Quantity',
    'length',
    'radians',
    'degrees',
    'unitless',
    'as_length',
    'as_angle',
    'as_parameter',
]
