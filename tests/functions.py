
from pytest import approx

from geodetics import Angle, GlobalCoordinates


def assert_coordinates_equal(c1: GlobalCoordinates, c2: GlobalCoordinates, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first GlobalCoordinates
        c2: The second GlobalCoordinates
        abs_tol: The absolute tolerance, in degrees, for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert c1.latitude.degrees == approx(c2.latitude.degrees, abs=abs_tol)
        assert c1.longitude.degrees == approx(c2.longitude.degrees, abs=abs_tol)
    except AssertionError as e:
        print(c1.latitude.degrees, c1.longitude.degrees)
        print(c2.latitude.degrees, c2.longitude.degrees)
        raise e


def assert_azimuths_equal(actual: Angle, expected_degrees: float, abs_tol=1e-7):
    """
    Asserts that an azimuth matches an expected bearing, treating 0 and 360
    degrees as the same direction.
    """
    diff = (actual.degrees - expected_degrees) % 360
    assert min(diff, 360 - diff) == approx(0., abs=abs_tol), (
        f'{actual.degrees} != {expected_degrees}'
    )
