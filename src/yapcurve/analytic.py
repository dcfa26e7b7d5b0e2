## closed-form arc lengths for yapCurve
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

"""Closed-form arc lengths.

These are independent of the adaptive integrator in
:mod:`yapcurve.arclength` and are evaluated in extended precision with
mpmath, so they can serve as reference values.
"""

import mpmath as mpm

from yapcurve.ellipse import isellipticalarc
from yapcurve.splines import QuadraticSpline

## working precision, in decimal digits
DPS = 50


def quadratic_spline_length(q):
    """Exact length of a :class:`~yapcurve.splines.QuadraticSpline`.

    With ``A = p1 - 2*p2 + p3`` and ``B = p2 - p1`` the speed is
    ``2*sqrt(alpha*t*t + beta*t + gamma)`` where ``alpha = A.A``,
    ``beta = 2*A.B`` and ``gamma = B.B``, which integrates in closed form.
    """
    if not isinstance(q, QuadraticSpline):
        raise ValueError('bad argument to quadratic_spline_length(): {!r}'.format(q))
    with mpm.workdps(DPS):
        p1 = [mpm.mpf(c) for c in q.p1[:3]]
        p2 = [mpm.mpf(c) for c in q.p2[:3]]
        p3 = [mpm.mpf(c) for c in q.p3[:3]]
        A = [p1[i] - 2*p2[i] + p3[i] for i in range(3)]
        B = [p2[i] - p1[i] for i in range(3)]
        alpha = mpm.fsum(x*x for x in A)
        beta = 2*mpm.fsum(A[i]*B[i] for i in range(3))
        gamma = mpm.fsum(x*x for x in B)
        if alpha == 0:
            return float(2*mpm.sqrt(gamma))
        disc = 4*alpha*gamma - beta*beta
        if disc <= alpha*gamma*mpm.mpf(10)**(-(DPS - 10)):
            # collinear control points: sqrt(Q) == sqrt(alpha)*|t - t0|
            t0 = -beta/(2*alpha)
            if t0 <= 0:
                integral = mpm.mpf(1)/2 - t0
            elif t0 >= 1:
                integral = t0 - mpm.mpf(1)/2
            else:
                integral = (t0*t0 + (1 - t0)**2)/2
            return float(2*mpm.sqrt(alpha)*integral)

        def antiderivative(t):
            Q = alpha*t*t + beta*t + gamma
            sq = mpm.sqrt(Q)
            lin = 2*alpha*t + beta
            return (lin*sq/(4*alpha)
                    + disc/(8*alpha**mpm.mpf(1.5))*mpm.log(2*mpm.sqrt(alpha)*sq + lin))

        return float(2*(antiderivative(mpm.mpf(1)) - antiderivative(mpm.mpf(0))))


def elliptical_arc_length(arc):
    """Exact length of an :class:`~yapcurve.ellipse.EllipticalArc`, via the
    incomplete elliptic integral of the second kind."""
    if not isellipticalarc(arc):
        raise ValueError('bad argument to elliptical_arc_length(): {!r}'.format(arc))
    lo = min(arc.start_angle, arc.end_angle)
    hi = max(arc.start_angle, arc.end_angle)
    a, b = arc.x_radius, arc.y_radius
    if a == 0.0 and b == 0.0:
        return 0.0
    with mpm.workdps(DPS):
        lo = mpm.mpf(lo)
        hi = mpm.mpf(hi)
        if b >= a:
            # a^2 sin^2 + b^2 cos^2 == b^2 (1 - m sin^2)
            m = 1 - (mpm.mpf(a)/b)**2
            length = b*(mpm.ellipe(hi, m) - mpm.ellipe(lo, m))
        else:
            # == a^2 (1 - m cos^2), and cos^2(theta) == sin^2(theta - pi/2)
            m = 1 - (mpm.mpf(b)/a)**2
            shift = mpm.pi/2
            length = a*(mpm.ellipe(hi - shift, m) - mpm.ellipe(lo - shift, m))
        return float(length)


__all__ = [
    'quadratic_spline_length',
    'elliptical_arc_length',
]
