## control-point algorithms for Bezier-family curves
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

"""Control-point algorithms shared by every Bezier-family curve.

Polynomial curves work on ordinary yapCAD points.  Rational curves work
on homogeneous control points ``[w*x, w*y, w*z, w]`` (see
:func:`yapcurve.geom.weighted`), so that splitting and restriction of a
rational curve is the same repeated linear interpolation as for a
polynomial one, just in R^4.

Nothing here knows about curve classes; :mod:`yapcurve.splines` wraps
these functions for the concrete families.
"""

from math import comb

from yapcurve.geom import (add, dist, homo, lerp, lerp4, scale3, scale4,
                           sub, sub4, zero)
from yapcurve.interval import BoundingBox, Interval

## de Casteljau evaluation
## -----------------------

def decasteljau(pts, u):
    """evaluate the polynomial Bezier curve with control points ``pts`` at ``u``"""
    if not pts:
        return zero()
    work = list(pts)
    n = len(work)
    if n == 1:
        return [work[0][0],work[0][1],work[0][2],1.0]
    for r in range(1,n):
        for i in range(n-r):
            work[i] = lerp(work[i],work[i+1],u)
    return work[0]

def decasteljau4(hpts, u):
    """evaluate a homogeneous (rational) Bezier curve at ``u``, without projecting"""
    if not hpts:
        return [0.0,0.0,0.0,0.0]
    work = list(hpts)
    n = len(work)
    for r in range(1,n):
        for i in range(n-r):
            work[i] = lerp4(work[i],work[i+1],u)
    return list(work[0])

## splitting
## ---------

def _split(pts, u, interp):
    work = list(pts)
    n = len(work)
    left = [work[0]]
    right = [work[-1]]
    for r in range(1,n):
        for i in range(n-r):
            work[i] = interp(work[i],work[i+1],u)
        left.append(work[0])
        right.append(work[n-r-1])
    right.reverse()
    return left, right

def split(pts, u):
    """split polynomial control points at ``u``, returning ``(left, right)``
    control point lists such that each half, re-parameterized over
    [0, 1], traces the corresponding part of the original curve"""
    return _split(pts, u, lerp)

def split4(hpts, u):
    """homogeneous version of :func:`split`, for rational curves"""
    return _split(hpts, u, lerp4)

def _restrict(pts, a, b, interp, splitter):
    if a == 0.0 and b == 1.0:
        return list(pts)
    if b == 0.0:
        return [pts[0]]*len(pts)
    left, _ = splitter(pts, b)
    _, right = splitter(left, a/b)
    return right

def restrict(pts, a, b):
    """control points of the sub-curve over parameter range ``[a, b]``"""
    return _restrict(pts, a, b, lerp, split)

def restrict4(hpts, a, b):
    """homogeneous version of :func:`restrict`"""
    return _restrict(hpts, a, b, lerp4, split4)

## hodographs and derivatives
## --------------------------

def hodograph(pts):
    """control points of the derivative curve, one degree lower"""
    n = len(pts) - 1
    return [scale3(sub(pts[i+1],pts[i]),n) for i in range(n)]

def hodograph4(hpts):
    n = len(hpts) - 1
    return [scale4(sub4(hpts[i+1],hpts[i]),n) for i in range(n)]

def derivative(pts, u, order):
    """``order``-th derivative of a polynomial Bezier curve at ``u``"""
    work = list(pts)
    for _ in range(order):
        if len(work) < 2:
            return zero()
        work = hodograph(work)
    return decasteljau(work, u)

def homogeneous_derivatives(hpts, u, order):
    """``[A(u), A'(u), ..., A^(order)(u)]`` for a homogeneous curve ``A``"""
    result = []
    work = list(hpts)
    for _ in range(order+1):
        if work:
            result.append(decasteljau4(work, u))
            work = hodograph4(work) if len(work) > 1 else []
        else:
            result.append([0.0,0.0,0.0,0.0])
    return result

def rational_derivatives(hders):
    """project homogeneous derivatives to derivatives of the rational curve.

    With ``A = [w*C, w]``, Leibniz' rule gives
    ``C^(k) = (A^(k) - sum_{i=1..k} binom(k,i) w^(i) C^(k-i)) / w``.
    """
    w = hders[0][3]
    ders = []
    for k, ak in enumerate(hders):
        v = [ak[0],ak[1],ak[2]]
        for i in range(1,k+1):
            c = comb(k,i)*hders[i][3]
            prev = ders[k-i]
            v = [v[0]-c*prev[0],v[1]-c*prev[1],v[2]-c*prev[2]]
        ders.append([v[0]/w,v[1]/w,v[2]/w,1.0])
    return ders

## bounds
## ------

def polygon_length(pts):
    """length of the control polygon, an upper bound on the length of
    any Bezier curve (polynomial or positively weighted rational) with
    these control points"""
    return sum(dist(pts[i],pts[i+1]) for i in range(len(pts)-1))

def hull_box(pts):
    """bounding box of a list of points, or the zero box when empty"""
    if not pts:
        return BoundingBox.singleton(zero())
    return BoundingBox.from_points(pts)

def derivative_box(pts, a, b, order):
    """box containing the ``order``-th derivative of a polynomial Bezier
    curve for every parameter in ``[a, b]`` (hodograph convex hull)"""
    work = list(pts)
    for _ in range(order):
        if len(work) < 2:
            return hull_box([])
        work = hodograph(work)
    return hull_box(restrict(work, a, b))

def _component_box(hpts):
    xyz = BoundingBox.from_points(hpts)
    w = Interval.hull(p[3] for p in hpts)
    return xyz, w

def rational_derivative_boxes(hpts, a, b):
    """boxes containing the first and second derivative of a rational
    Bezier curve over ``[a, b]``.

    Interval evaluation of the quotient rule: the curve itself is bounded
    by the convex hull of the projected sub-curve control points (weights
    are positive), and each homogeneous derivative by its hodograph hull.
    The control points are first moved so the sub-curve starts at the
    origin; derivatives do not change, and the boxes no longer grow with
    the distance of the curve from the origin.
    """
    o = homo(decasteljau4(hpts, a))
    hpts = [[q[0] - o[0]*q[3], q[1] - o[1]*q[3], q[2] - o[2]*q[3], q[3]]
            for q in hpts]
    sub_pts = restrict4(hpts, a, b)
    c_box = BoundingBox.from_points([homo(q) for q in sub_pts])
    w = Interval.hull(q[3] for q in sub_pts)

    h1 = hodograph4(hpts)
    if h1:
        a1, w1 = _component_box(restrict4(h1, a, b))
    else:
        a1, w1 = hull_box([]), Interval.singleton(0.0)
    h2 = hodograph4(h1) if len(h1) > 1 else []
    if h2:
        a2, w2 = _component_box(restrict4(h2, a, b))
    else:
        a2, w2 = hull_box([]), Interval.singleton(0.0)

    d1 = (a1 - c_box*w1)/w
    d2 = (a2 - d1*(w1*2.0) - c_box*w2)/w
    return d1, d2
