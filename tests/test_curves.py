import math

from pytest import approx

from geodetics import Angle, GeodeticCurve, GeodeticMeasurement


def test_curve_init():
    curve = GeodeticCurve(100., Angle.from_degrees(10.), Angle.from_degrees(190.))
    assert curve.ellipsoidal_distance_meters == 100.
    assert curve.azimuth == Angle.from_degrees(10.)
    assert curve.reverse_azimuth == Angle.from_degrees(190.)


def test_curve_eq():
    curve = GeodeticCurve(100., Angle(1.), Angle(2.))
    assert curve == GeodeticCurve(100., Angle(1.), Angle(2.))
    assert curve != GeodeticCurve(101., Angle(1.), Angle(2.))
    assert curve != GeodeticCurve(100., Angle(1.), Angle(3.))
    assert curve != 100.


def test_curve_hash():
    curves = [
        GeodeticCurve(100., Angle(1.), Angle(2.)),
        GeodeticCurve(100., Angle(1.), Angle(2.)),
        GeodeticCurve(100., Angle(2.), Angle(1.)),
    ]
    assert len(set(curves)) == 2


def test_curve_repr():
    assert repr(GeodeticCurve(1., Angle.ZERO, Angle.ZERO)) == (
        '<GeodeticCurve(1.0m, azimuth=0.0, reverse_azimuth=0.0)>'
    )


def test_measurement_point_to_point():
    curve = GeodeticCurve(4., Angle(1.), Angle(2.))
    measurement = GeodeticMeasurement(curve, -3.)
    assert measurement.point_to_point_distance_meters == approx(5.)
    assert measurement.elevation_change_meters == -3.

    # Degenerate cases
    assert GeodeticMeasurement(curve, 0.).point_to_point_distance_meters == 4.
    assert GeodeticMeasurement(
        GeodeticCurve(0., Angle.ZERO, Angle.ZERO), 7.
    ).point_to_point_distance_meters == 7.


def test_measurement_passthrough():
    curve = GeodeticCurve(4., Angle(1.), Angle(2.))
    measurement = GeodeticMeasurement(curve, 3.)
    assert measurement.average_curve is curve
    assert measurement.ellipsoidal_distance_meters == 4.
    assert measurement.azimuth == Angle(1.)
    assert measurement.reverse_azimuth == Angle(2.)


def test_measurement_eq():
    curve = GeodeticCurve(4., Angle(1.), Angle(2.))
    assert GeodeticMeasurement(curve, 3.) == GeodeticMeasurement(curve, 3.)
    assert GeodeticMeasurement(curve, 3.) != GeodeticMeasurement(curve, -3.)
    assert GeodeticMeasurement(curve, 3.) != curve
    assert len({GeodeticMeasurement(curve, 3.), GeodeticMeasurement(curve, 3.)}) == 1


def test_measurement_nan():
    measurement = GeodeticMeasurement(GeodeticCurve(math.nan, Angle.NAN, Angle.NAN), 1.)
    assert math.isnan(measurement.point_to_point_distance_meters)
