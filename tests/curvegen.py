"""Random curve generators shared by the yapCurve tests.

Every generator takes a ``random.Random`` so that failures are
reproducible from the seed reported by pytest.
"""

import random
from math import cos, pi, sin

from yapcurve.ellipse import elliptical_arc
from yapcurve.geom import dist, point
from yapcurve.splines import (CubicSpline, QuadraticSpline,
                              RationalCubicSpline, RationalQuadraticSpline,
                              Spline)

SEEDS = list(range(12))

FAMILIES = ('quadratic', 'cubic', 'rational_quadratic', 'rational_cubic',
            'spline', 'rational_spline', 'arc')


def rng_for(seed):
    return random.Random(1000 + seed)


def rand_point(rng, scale=10.0):
    return point(rng.uniform(-scale, scale), rng.uniform(-scale, scale),
                 rng.uniform(-scale, scale))


def rand_points(rng, n, scale=10.0):
    return [rand_point(rng, scale) for _ in range(n)]


def rand_weights(rng, n):
    return [rng.uniform(0.5, 2.0) for _ in range(n)]


def rand_arc(rng):
    phi = rng.uniform(-pi, pi)
    sweep = rng.choice((-1.0, 1.0))*rng.uniform(0.2, 1.8*pi)
    return elliptical_arc(rand_point(rng, 5.0),
                          rng.uniform(0.5, 5.0), rng.uniform(0.5, 5.0),
                          rng.uniform(-pi, pi), sweep,
                          x_direction=(cos(phi), sin(phi), 0.0))


def rand_curve(rng, family):
    if family == 'quadratic':
        return QuadraticSpline(*rand_points(rng, 3))
    if family == 'cubic':
        return CubicSpline(*rand_points(rng, 4))
    if family == 'rational_quadratic':
        return RationalQuadraticSpline(tuple(rand_points(rng, 3)), tuple(rand_weights(rng, 3)))
    if family == 'rational_cubic':
        return RationalCubicSpline(tuple(rand_points(rng, 4)), tuple(rand_weights(rng, 4)))
    if family == 'spline':
        n = rng.randint(2, 6)
        return Spline(tuple(rand_points(rng, n)))
    if family == 'rational_spline':
        n = rng.randint(2, 6)
        return Spline(tuple(rand_points(rng, n)), tuple(rand_weights(rng, n)))
    if family == 'arc':
        return rand_arc(rng)
    raise ValueError('unknown curve family: {}'.format(family))


def vnear(a, b, tol):
    """distance between two points, asserted to be within ``tol``"""
    d = dist(a, b)
    assert d <= tol, '{} and {} are {} apart'.format(a, b, d)
    return d
