import math

import pytest
from pytest import approx

from geodetics import Angle
from geodetics.angle import as_angle


def test_angle_init():
    assert Angle(math.pi).radians == math.pi
    assert Angle.from_radians(math.pi).degrees == approx(180.)
    assert Angle.from_degrees(180.).radians == approx(math.pi)
    assert Angle().radians == 0.


def test_angle_constants():
    assert Angle.ZERO.radians == 0.
    assert Angle.ANGLE_180.degrees == approx(180.)
    assert Angle.NAN.is_nan()
    assert not Angle.ZERO.is_nan()


def test_angle_from_degrees_and_minutes():
    assert Angle.from_degrees_and_minutes(10, 30.).degrees == approx(10.5)
    assert Angle.from_degrees_and_minutes(-10, 30.).degrees == approx(-10.5)
    assert Angle.from_degrees_and_minutes(0, -30.).degrees == approx(-0.5)


def test_angle_from_dms():
    assert Angle.from_dms(10, 30, 36.).degrees == approx(10.51)
    assert Angle.from_dms(-10, 30, 36.).degrees == approx(-10.51)
    assert Angle.from_dms(0, 0, -36.).degrees == approx(-0.01)


def test_angle_to_dms():
    assert Angle.from_degrees(10.51).to_dms() == (10, 30, approx(36.))
    assert Angle.from_degrees(-10.51).to_dms() == (-10, 30, approx(36.))
    assert Angle.from_degrees(-0.5).to_dms() == (0, -30, approx(0.))
    assert Angle.from_degrees(-0.01).to_dms() == (0, 0, approx(-36.))

    # Seconds that round to a whole minute carry over
    assert Angle.from_degrees(10 + 59 / 60 + 59.9999999 / 3600).to_dms() == (11, 0, approx(0.))

    with pytest.raises(ValueError):
        Angle.NAN.to_dms()


def test_angle_dms_round_trip():
    for value in (-123.456789, -0.75, -0.004, 0., 0.004, 45.5, 359.999):
        angle = Angle.from_degrees(value)
        assert Angle.from_dms(*angle.to_dms()).degrees == approx(value, abs=1e-8)


def test_angle_arithmetic():
    a, b = Angle.from_degrees(30.), Angle.from_degrees(45.)
    assert (a + b).degrees == approx(75.)
    assert (a - b).degrees == approx(-15.)
    assert (-a).degrees == approx(-30.)
    assert abs(Angle.from_degrees(-30.)).degrees == approx(30.)

    with pytest.raises(TypeError):
        _ = a + 1.


def test_angle_eq():
    assert Angle(1.) == Angle(1.)
    assert Angle(1.) != Angle(2.)
    assert Angle(1.) != 1.

    # No wrapping
    assert Angle.from_degrees(360.) != Angle.from_degrees(0.)

    # NaN is never equal to anything, including itself
    assert Angle.NAN != Angle.NAN
    assert Angle(math.nan) != Angle(0.)


def test_angle_hash():
    angles = [Angle(1.), Angle(1.), Angle(2.)]
    assert len(set(angles)) == 2
    assert Angle(2.) in set(angles)


def test_angle_ordering():
    a, b = Angle(1.), Angle(2.)
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert a <= Angle(1.)
    assert sorted([b, a]) == [a, b]

    with pytest.raises(TypeError):
        _ = a < 2.


def test_angle_compare():
    a, b = Angle(1.), Angle(2.)
    assert a.compare(b) == -1
    assert b.compare(a) == 1
    assert a.compare(Angle(1.)) == 0

    with pytest.raises(TypeError):
        a.compare(1.)


def test_angle_repr():
    assert repr(Angle.from_radians(0.)) == '<Angle(0.0 degrees)>'


def test_as_angle():
    angle = Angle(1.)
    assert as_angle(angle) is angle
    assert as_angle(90).radians == approx(math.pi / 2)
    assert as_angle('180').radians == approx(math.pi)
