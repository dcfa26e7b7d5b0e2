import pytest
from math import sqrt
from yapcurve.geom import *
## unit tests for yapCurve geom.py

class TestPoint:
    """unit tests for yapCurve point functions"""

    def test_create(self):
        a = point(5,0)
        b = point(0,5,-2)
        c = point(-2.3,4.6,-9.2,0.5)
        bb = point(b)
        assert a == [5,0,0,1]
        assert b == [0,5,-2,1]
        assert c == [-2.3,4.6,-9.2,0.5]
        assert bb == b and bb is not b

    def test_create_from_sequence(self):
        assert point((1,2)) == [1,2,0,1]
        assert point([1,2,3]) == [1,2,3,1]
        with pytest.raises(ValueError):
            point(('a',2))
        with pytest.raises(ValueError):
            point(1,2,3,-1)

    def test_discrimate(self):
        a = point(5,0)
        b = point(0,5)
        assert ispoint(a)
        assert ispoint(b)
        assert not ispoint(vect(1,2,3,-1))
        assert ispoint([0,2,2,1])
        assert not ispoint([1,2])

    def test_fpoint(self):
        assert fpoint((1,2)) == [1.0,2.0,0.0,1.0]
        assert all(isinstance(c,float) for c in fpoint([1,2,3,1]))
        # non-unit w is projected back to the w=1 plane
        assert fpoint([2,4,6,2]) == [1.0,2.0,3.0,1.0]

    def test_format(self):
        a = point(5,0)
        b = point(2,3,2)
        c = point(1,2,3,4)
        assert vstr(a) == '[5, 0]'
        assert vstr(b) == '[2, 3, 2]'
        assert vstr(c) == '[1, 2, 3, 4]'

class TestOperations:
    def test_vect(self):
        a = point(5,0)
        b = point(0,5)
        c = point(-3,-3)
        d = point(1,1)
        assert close(mag(a),5.0)
        assert vclose(add(a,b),point(5,5))
        assert vclose(sub(a,b),point(5,-5))
        assert close(dot(a,b),0)
        assert close(dot(d,c),-6)
        assert vclose(cross(a,b),point(0,0,25))
        assert vclose(cross(b,a),point(0,0,-25))
        assert close(mag(sub(a,b)),sqrt(50))
        assert close(dist(a,b),sqrt(50))

    def test_lerp_endpoints_exact(self):
        """``lerp`` reproduces its end points bit for bit"""
        a = point(0.1,0.7,-3.3)
        b = point(1e-3,12.9,4.1)
        assert lerp(a,b,0.0) == [0.1,0.7,-3.3,1.0]
        assert lerp(a,b,1.0) == [1e-3,12.9,4.1,1.0]
        assert vclose(lerp(a,b,0.5),scale3(add(a,b),0.5))

    def test_unit(self):
        assert vclose(unit(point(3,4)),point(0.6,0.8))
        with pytest.raises(ValueError):
            unit(zero())

    def test_iszero(self):
        assert iszero(zero())
        assert iszero([0.0,0.0,0.0,1.0])
        assert not iszero(point(0,0,1e-300))

class TestHomogeneous:
    def test_weighted_homo(self):
        p = point(1,2,3)
        q = weighted(p,2.5)
        assert q == [2.5,5.0,7.5,2.5]
        assert vclose(homo(q),p)

    def test_four_vector_ops(self):
        a = [1.0,2.0,3.0,4.0]
        b = [4.0,3.0,2.0,1.0]
        assert add4(a,b) == [5.0,5.0,5.0,5.0]
        assert sub4(a,b) == [-3.0,-1.0,1.0,3.0]
        assert scale4(a,2.0) == [2.0,4.0,6.0,8.0]
        assert lerp4(a,b,0.0) == a
        assert lerp4(a,b,1.0) == b
        assert lerp4(a,b,0.5) == [2.5,2.5,2.5,2.5]
