## foundational vector operations for yapCurve
## Born on 29 July, 2020; adapted for curve evaluation
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

"""foundational vector operations for **yapCurve**

Points and vectors follow the yapCAD convention: a list of four
numbers, ``[x, y, z, w]``.  Curve geometry lies in the w=1 hyperplane,
and the R^3 operations below ignore the incoming w coordinate and
always produce ``w = 1.0``.  Two-dimensional geometry is simply
geometry in the z=0 plane.

The homogeneous (R^4) operations are used by the rational spline
evaluators, where a control point ``p`` with weight ``w`` is carried as
``[w*x, w*y, w*z, w]`` and projected back with :func:`homo`.

constants
=========

``epsilon`` is used only for approximate comparisons (:func:`close`,
:func:`vclose`).  Exactness properties of the curve evaluators never
depend on it.  Redefine it at your peril.
"""

from math import hypot
import copy

## constants
epsilon=0.000005


## name of the default coordinate space
GLOBAL = 'global'

deepcopy = copy.deepcopy

## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b,tol=epsilon):
    """ are two scalars the same within ``tol`` (default epsilon)
    """
    return abs(a-b) < tol


## operations on vectors
## ------------------------

def vect(a=False,b=False,c=False,d=False):
    """Convenience function for making a homogeneous coordinates 4 vector
from practically anything
    """
    r = [0,0,0,1]
    if isgoodnum(a):
        r[0]=a
        if isgoodnum(b):
            r[1]=b
            if isgoodnum(c):
                r[2]=c
                if isgoodnum(d):
                    r[3]=d
    elif isinstance(a,(tuple,list)):
        for i in range(min(4,len(a))):
            x=a[i]
            if isgoodnum(x):
                r[i]=x
    return r

def isvect(x):
    """
    check to see if argument is a proper vector for our purposes
    """
    return isinstance(x,list) and len(x) == 4 and isgoodnum(x[0]) and isgoodnum(x[1]) and isgoodnum(x[2]) and isgoodnum(x[3])

## determine if two vectors are the same, to within tol
def vclose(a,b,tol=epsilon):
    return close(mag(sub(a,b)),0,tol)

## R^3 -> R^3 functions: ignore w component
## ------------------------------------------------
def add(a,b):
    """ 3 vector, `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],1.0]

def sub(a,b):
    """ 3 vector, `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],1.0]

def scale3(a,c):
    """ 3 vector, vector ''a'' times scalar ``c``, `a * c`"""
    return [a[0]*c,a[1]*c,a[2]*c,1.0]

## written as (1-u)*a + u*b rather than a + u*(b-a) so that u=0 and
## u=1 return a and b exactly
def lerp(a,b,u):
    """ 3 vector linear interpolation, `(1-u)*a + u*b`"""
    v = 1.0-u
    return [v*a[0]+u*b[0],v*a[1]+u*b[1],v*a[2]+u*b[2],1.0]

def cross(a,b):
    """Compute the cross generalized product of a x b, assuming that both
    fall into the w=1 hyperplane

    """
    return [ a[1]*b[2] - a[2]*b[1],
             a[2]*b[0] - a[0]*b[2],
             a[0]*b[1] - a[1]*b[0],
             1.0 ]

def unit(a):
    """ unit 3 vector in the direction of ``a``; raises ``ValueError``
    for the zero vector"""
    m = mag(a)
    if m == 0.0:
        raise ValueError('zero-length vector has no direction')
    return [a[0]/m,a[1]/m,a[2]/m,1.0]

def iszero(a):
    """ is ``a`` exactly the zero 3 vector"""
    return a[0] == 0.0 and a[1] == 0.0 and a[2] == 0.0

def zero():
    """ the zero 3 vector"""
    return [0.0,0.0,0.0,1.0]

## R^4 -> R^4 functions: operate on w component
def add4(a,b):
    """ 4 vector `a + b`"""
    return [a[0]+b[0],a[1]+b[1],a[2]+b[2],a[3]+b[3]]

def sub4(a,b):
    """ 4 vector `a - b`"""
    return [a[0]-b[0],a[1]-b[1],a[2]-b[2],a[3]-b[3]]

def scale4(a,c):
    """ 4 vector ``a`` times scalar ``c``"""
    return [a[0]*c,a[1]*c,a[2]*c,a[3]*c]

def lerp4(a,b,u):
    """ 4 vector linear interpolation, `(1-u)*a + u*b`"""
    v = 1.0-u
    return [v*a[0]+u*b[0],v*a[1]+u*b[1],v*a[2]+u*b[2],v*a[3]+u*b[3]]

## Homogenize, or project back to the w=1 plane by scaling all values
## by w
def homo(a):
    """Homogenize, or project back to the w=1 plane by scaling all values by w"""
    return [ a[0]/a[3],
             a[1]/a[3],
             a[2]/a[3],
             1.0 ]

def weighted(p,w):
    """lift point ``p`` with weight ``w`` into homogeneous form `[w*x, w*y, w*z, w]`"""
    return [p[0]*w,p[1]*w,p[2]*w,w]

## R^3 -> R functions -- ignore w component
## ----------------------------------------
def dot(a,b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]

def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return hypot(a[0],a[1],a[2])

def dist(a,b):  # compute distance between two points a & b
    """ compute the euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a,b))

# pretty printing string formatter for vectors, falls back to str()
def vstr(a):
    """ format a vector leaving out extraneous coordinates"""
    if not isvect(a):
        return str(a)
    if abs(a[3]-1.0) > epsilon: # not in w=1
        return "[{}, {}, {}, {}]".format(a[0],a[1],a[2],a[3])
    elif abs(a[2]) > epsilon: # not in z=0
        return "[{}, {}, {}]".format(a[0],a[1],a[2])
    else: # in x-y plane
        return "[{}, {}]".format(a[0],a[1])


## operations on points
## --------------------

## points are vectors that lie in a positive, non-zero hyperplane,
## i.e. [x, y, z, w] such that w > 0.

def point(x=False,y=False,z=False,w=False):
    """Point creation from point or scalars"""
    if ispoint(x):
        return deepcopy(x)
    r = [0,0,0,1]
    if isgoodnum(x):
        r[0]=x
        if isgoodnum(y):
            r[1]=y
            if isgoodnum(z):
                r[2]=z
                if isgoodnum(w):
                    r[3]=w
    elif isinstance(x,(tuple,list)) and 2 <= len(x) <= 4:
        for i in range(len(x)):
            if not isgoodnum(x[i]):
                raise ValueError('bad coordinate passed to point(): {}'.format(x))
            r[i]=x[i]
    if r[3] > 0:
        return r
    else:
        raise ValueError('bad w argument to point()')

def ispoint(x):
    """ is it a point?"""
    if isvect(x) and x[3] > 0.0:
        return True
    return False

def fpoint(x):
    """ normalize a point-like value to float coordinates in the w=1 plane"""
    p = point(x)
    if p[3] != 1:
        p = homo(p)
    return [float(p[0]),float(p[1]),float(p[2]),1.0]
