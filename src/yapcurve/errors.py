## exception types for yapCurve
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

"""Exception types raised by yapCurve.

Expected degeneracy is never signalled with an exception; see
:mod:`yapcurve.degeneracy` for the ``Ok``/``Err`` result values.  The
exceptions here cover malformed input, which is fatal and reported
immediately.
"""


class CurveError(ValueError):
    """Base class for invalid curve construction arguments."""


class InvalidKnotVectorError(CurveError):
    """Raised when a B-spline knot vector is malformed."""

    def __init__(self, message, knots=None):
        super().__init__(message)
        self.knots = list(knots) if knots is not None else None


class SpaceMismatchError(CurveError):
    """Raised when geometry expressed in different coordinate spaces is mixed."""

    def __init__(self, expected, actual):
        super().__init__(
            f"coordinate space mismatch: expected '{expected}', got '{actual}'")
        self.expected = expected
        self.actual = actual


class DegenerateCurveError(CurveError):
    """Raised by ``Err.unwrap()`` when a caller insists on a nondegenerate curve."""

    def __init__(self, degenerate):
        super().__init__(f"degenerate curve: {degenerate.kind.value}")
        self.degenerate = degenerate


__all__ = [
    'CurveError',
    'InvalidKnotVectorError',
    'SpaceMismatchError',
    'DegenerateCurveError',
]
