## B-spline decomposition into Bezier-family segments
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

"""B-spline helpers for yapCurve.

Converts a clamped or open knot vector plus (optionally weighted)
control points into independent Bezier-family segments, one per
non-empty knot span, and provides a reference Cox-de Boor evaluator.

Knot vectors use the full convention: ``len(knots) ==
len(control_points) + degree + 1``.  The valid parameter range is
``knots[degree] .. knots[-degree-1]``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from yapcurve.errors import CurveError, InvalidKnotVectorError
from yapcurve.geom import (GLOBAL, fpoint, homo, isgoodnum, lerp, lerp4, point,
                           weighted)
from yapcurve.splines import (CubicSpline, QuadraticSpline,
                              RationalCubicSpline, RationalQuadraticSpline,
                              Spline)

logger = logging.getLogger(__name__)


def open_uniform_knots(count: int, degree: int) -> List[float]:
    """Clamped knot vector with uniformly spaced interior knots."""

    if degree < 1:
        raise InvalidKnotVectorError('degree must be >= 1')
    if count < degree + 1:
        raise InvalidKnotVectorError(
            'need at least {} control points for degree {}'.format(degree + 1, degree))
    interior = count - degree - 1
    knots = [0.0] * (degree + 1)
    for i in range(1, interior + 1):
        knots.append(i / (interior + 1))
    knots.extend([1.0] * (degree + 1))
    return knots


def validate_knots(degree: int, knots: Sequence[float], count: int) -> List[float]:
    """Check a knot vector against ``degree`` and the control point count."""

    if not isinstance(degree, int) or isinstance(degree, bool) or degree < 1:
        raise InvalidKnotVectorError('degree must be a positive integer, got {!r}'.format(degree), knots)
    if count < degree + 1:
        raise InvalidKnotVectorError(
            'need at least {} control points for degree {}, got {}'.format(degree + 1, degree, count),
            knots)
    if len(knots) != count + degree + 1:
        raise InvalidKnotVectorError(
            'expected {} knots for {} control points of degree {}, got {}'.format(
                count + degree + 1, count, degree, len(knots)),
            knots)
    result = []
    for k in knots:
        if not isgoodnum(k):
            raise InvalidKnotVectorError('bad knot value: {!r}'.format(k), knots)
        result.append(float(k))
    for i in range(len(result) - 1):
        if result[i] > result[i + 1]:
            raise InvalidKnotVectorError(
                'knots must be non-decreasing: {} > {} at index {}'.format(
                    result[i], result[i + 1], i),
                knots)
    if not result[degree] < result[count]:
        raise InvalidKnotVectorError('knot vector has an empty parameter range', knots)
    return result


def _validate_weights(weights, count):
    if weights is None:
        return None
    if len(weights) != count:
        raise CurveError('expected {} weights, got {}'.format(count, len(weights)))
    for w in weights:
        if not isgoodnum(w) or w <= 0:
            raise CurveError('weights must be positive numbers, got {!r}'.format(w))
    return [float(w) for w in weights]


def b_spline_intervals(degree: int, knots: Sequence[float]) -> List[Tuple[float, float]]:
    """Non-empty knot spans inside the valid parameter range, in order."""

    count = len(knots) - degree - 1
    knots = validate_knots(degree, knots, count)
    return [(knots[i], knots[i + 1]) for i in range(degree, count)
            if knots[i] < knots[i + 1]]


def _blossom(ctrl, knots, degree, span, args, interp):
    # de Boor's algorithm with a different parameter at each level
    work = [ctrl[j] for j in range(span - degree, span + 1)]
    for r in range(1, degree + 1):
        u = args[r - 1]
        for j in range(degree, r - 1, -1):
            k = span - degree + j
            alpha = (u - knots[k]) / (knots[k + degree + 1 - r] - knots[k])
            work[j] = interp(work[j - 1], work[j], alpha)
    return work[degree]


def _segment(degree, pts, wts, space):
    if wts is None:
        if degree == 2:
            return QuadraticSpline(*pts, space=space)
        if degree == 3:
            return CubicSpline(*pts, space=space)
        return Spline(tuple(pts), space=space)
    if degree == 2:
        return RationalQuadraticSpline(tuple(pts), tuple(wts), space=space)
    if degree == 3:
        return RationalCubicSpline(tuple(pts), tuple(wts), space=space)
    return Spline(tuple(pts), tuple(wts), space=space)


def b_spline_segments(degree: int, knots: Sequence[float], control_points: Sequence,
                      weights: Optional[Sequence[float]] = None, space: str = GLOBAL) -> list:
    """Decompose a B-spline into one Bezier-family curve per knot span.

    Parameters
    ----------
    degree : int
        Polynomial degree of the B-spline.
    knots : sequence of float
        Non-decreasing knot vector, ``len(control_points) + degree + 1`` long.
    control_points : sequence of point
        B-spline control points.
    weights : sequence of float, optional
        Positive weights; when given the segments are rational.
    space : str, optional
        Coordinate space tag of the resulting segments.

    Returns
    -------
    list
        ``QuadraticSpline``/``CubicSpline`` (or their rational versions)
        for degrees 2 and 3, :class:`~yapcurve.splines.Spline` otherwise.
        Segment ``i`` evaluated at ``s`` equals the B-spline at
        ``u = a_i + s*(b_i - a_i)`` for the i-th span of
        :func:`b_spline_intervals`.

    Raises
    ------
    InvalidKnotVectorError
        If the knot vector is malformed.
    """

    ctrl = [fpoint(p) for p in control_points]
    count = len(ctrl)
    knots = validate_knots(degree, knots, count)
    wts = _validate_weights(weights, count)
    if wts is None:
        work, interp = ctrl, lerp
    else:
        work, interp = [weighted(p, w) for p, w in zip(ctrl, wts)], lerp4

    segments = []
    for span in range(degree, count):
        a, b = knots[span], knots[span + 1]
        if not a < b:
            continue
        pts = [_blossom(work, knots, degree, span, [a] * (degree - m) + [b] * m, interp)
               for m in range(degree + 1)]
        if wts is None:
            segments.append(_segment(degree, pts, None, space))
        else:
            segments.append(_segment(degree, [homo(q) for q in pts],
                                     [q[3] for q in pts], space))
    logger.debug('decomposed degree %d B-spline with %d control points into %d segments',
                 degree, count, len(segments))
    return segments


def evaluate_bspline(degree: int, knots: Sequence[float], control_points: Sequence,
                     u: float, weights: Optional[Sequence[float]] = None) -> list:
    """Evaluate a (rational) B-spline at knot parameter ``u`` (Cox-de Boor)."""

    ctrl = [fpoint(p) for p in control_points]
    knots = validate_knots(degree, knots, len(ctrl))
    wts = _validate_weights(weights, len(ctrl)) or [1.0] * len(ctrl)
    numerator = [0.0, 0.0, 0.0]
    denominator = 0.0
    for i in range(len(ctrl)):
        basis = _nip(i, degree, u, knots)
        if basis == 0.0:
            continue
        w = wts[i] * basis
        v = ctrl[i]
        numerator[0] += w * v[0]
        numerator[1] += w * v[1]
        numerator[2] += w * v[2]
        denominator += w
    if denominator == 0.0:
        return point(ctrl[0])
    return point(numerator[0] / denominator, numerator[1] / denominator,
                 numerator[2] / denominator)


def _nip(i: int, p: int, u: float, knots: Sequence[float]) -> float:
    if p == 0:
        if knots[i] <= u < knots[i + 1] or (u == knots[-1] and knots[i] < knots[i + 1]
                                            and knots[i + 1] == knots[-1]):
            return 1.0
        return 0.0

    left = 0.0
    denom = knots[i + p] - knots[i]
    if denom != 0.0:
        left = (u - knots[i]) / denom * _nip(i, p - 1, u, knots)

    right = 0.0
    denom = knots[i + p + 1] - knots[i + 1]
    if denom != 0.0:
        right = (knots[i + p + 1] - u) / denom * _nip(i + 1, p - 1, u, knots)

    return left + right


__all__ = [
    'open_uniform_knots',
    'validate_knots',
    'b_spline_intervals',
    'b_spline_segments',
    'evaluate_bspline',
]
