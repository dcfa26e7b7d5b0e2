# -*- coding: utf-8 -*-
"""yapCurve: curve evaluation and arc length parameterization in the
yapCAD idiom.

The public API lives in the submodules:

* :mod:`yapcurve.splines`, :mod:`yapcurve.ellipse` -- curve families
* :mod:`yapcurve.curves` -- generic evaluation, splitting and bounds
* :mod:`yapcurve.degeneracy` -- nondegeneracy checks
* :mod:`yapcurve.arclength` -- arc length parameterization
* :mod:`yapcurve.bspline` -- B-spline decomposition
* :mod:`yapcurve.frames` -- coordinate spaces and projection
"""
from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("yapCurve")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
