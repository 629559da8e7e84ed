import math

import pytest
from pytest import approx

from geodetics import Ellipsoid, WGS84, GRS80, GRS67, ANS, WGS72, CLARKE1858, CLARKE1880, SPHERE


def test_ellipsoid_from_a_and_inverse_f():
    e = Ellipsoid.from_a_and_inverse_f(6378137.0, 298.257223563)
    assert e.semi_major_axis_meters == 6378137.0
    assert e.inverse_flattening == 298.257223563
    assert e.flattening == 1 / 298.257223563
    assert e.semi_minor_axis_meters == (1 - e.flattening) * e.semi_major_axis_meters
    assert e.semi_minor_axis_meters == approx(6356752.314245, abs=1e-6)


def test_ellipsoid_from_a_and_f():
    e = Ellipsoid.from_a_and_f(6378137.0, 0.01)
    assert e.flattening == 0.01
    assert e.inverse_flattening == approx(100.)
    assert e.semi_minor_axis_meters == approx(6378137.0 * 0.99)

    sphere = Ellipsoid.from_a_and_f(1000., 0.)
    assert sphere.semi_minor_axis_meters == sphere.semi_major_axis_meters
    assert math.isinf(sphere.inverse_flattening)


@pytest.mark.parametrize('ellipsoid,a,inv_f', [
    (WGS84, 6378137.0, 298.257223563),
    (GRS80, 6378137.0, 298.257222101),
    (GRS67, 6378160.0, 298.25),
    (ANS, 6378160.0, 298.25),
    (WGS72, 6378135.0, 298.26),
    (CLARKE1858, 6378293.645, 294.26),
    (CLARKE1880, 6378249.145, 293.465),
])
def test_named_ellipsoids(ellipsoid, a, inv_f):
    assert ellipsoid.semi_major_axis_meters == a
    assert ellipsoid.inverse_flattening == inv_f
    assert ellipsoid.flattening * ellipsoid.inverse_flattening == approx(1.)
    assert ellipsoid.semi_minor_axis_meters == approx((1 - 1 / inv_f) * a)


def test_named_sphere():
    assert SPHERE.semi_major_axis_meters == 6371000.0
    assert SPHERE.semi_minor_axis_meters == 6371000.0
    assert SPHERE.flattening == 0.


def test_named_ellipsoids_on_class():
    assert Ellipsoid.WGS84 is WGS84
    assert Ellipsoid.SPHERE is SPHERE


def test_ellipsoid_eq():
    assert Ellipsoid.from_a_and_inverse_f(6378137.0, 298.257223563) == WGS84
    assert GRS67 == ANS
    assert WGS84 != GRS80
    assert WGS84 != 6378137.0


def test_ellipsoid_hash():
    assert len({WGS84, Ellipsoid.from_a_and_inverse_f(6378137.0, 298.257223563), GRS80}) == 2


def test_ellipsoid_repr():
    assert repr(Ellipsoid.from_a_and_f(2., 0.5)) == '<Ellipsoid(a=2.0, b=1.0, f=0.5, 1/f=2.0)>'
