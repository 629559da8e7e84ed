"""
Result values of geodetic calculations
"""

__all__ = ['GeodeticCurve', 'GeodeticMeasurement']

import math

from geodetics.angle import Angle


class GeodeticCurve:
    """
    The geodesic between two coordinates on a reference ellipsoid.

    Args:
        ellipsoidal_distance_meters:
            The length of the geodesic, in meters

        azimuth:
            Bearing at the start point, clockwise from north

        reverse_azimuth:
            Bearing at the end point looking back toward the start, clockwise from north
    """

    __slots__ = ('_distance', '_azimuth', '_reverse_azimuth')

    def __init__(self, ellipsoidal_distance_meters: float, azimuth: Angle, reverse_azimuth: Angle):
        self._distance = float(ellipsoidal_distance_meters)
        self._azimuth = azimuth
        self._reverse_azimuth = reverse_azimuth

    def __eq__(self, other):
        if not isinstance(other, GeodeticCurve):
            return False

        return (
            self._distance == other._distance and
            self._azimuth == other._azimuth and
            self._reverse_azimuth == other._reverse_azimuth
        )

    def __hash__(self):
        return hash((self._distance, self._azimuth, self._reverse_azimuth))

    def __repr__(self):
        return (
            f'<GeodeticCurve({self._distance}m, azimuth={self._azimuth.degrees}, '
            f'reverse_azimuth={self._reverse_azimuth.degrees})>'
        )

    @property
    def ellipsoidal_distance_meters(self) -> float:
        return self._distance

    @property
    def azimuth(self) -> Angle:
        return self._azimuth

    @property
    def reverse_azimuth(self) -> Angle:
        return self._reverse_azimuth


class GeodeticMeasurement:
    """
    A geodetic curve measured at the average elevation of its two end points,
    plus the change in elevation between them.

    The point-to-point distance combines the ellipsoidal distance and the
    elevation change as the two legs of a right triangle. It is derived once,
    on construction, and takes no part in equality or hashing.

    Args:
        average_curve:
            The GeodeticCurve between the two points, computed at their average elevation

        elevation_change_meters:
            End elevation minus start elevation, in meters
    """

    __slots__ = ('_average_curve', '_elevation_change', '_p2p')

    def __init__(self, average_curve: GeodeticCurve, elevation_change_meters: float):
        self._average_curve = average_curve
        self._elevation_change = float(elevation_change_meters)
        self._p2p = math.hypot(average_curve.ellipsoidal_distance_meters, self._elevation_change)

    def __eq__(self, other):
        if not isinstance(other, GeodeticMeasurement):
            return False

        return (
            self._average_curve == other._average_curve and
            self._elevation_change == other._elevation_change
        )

    def __hash__(self):
        return hash((self._average_curve, self._elevation_change))

    def __repr__(self):
        return (
            f'<GeodeticMeasurement({self._p2p}m, '
            f'elevation_change={self._elevation_change}m, curve={self._average_curve!r})>'
        )

    @property
    def average_curve(self) -> GeodeticCurve:
        return self._average_curve

    @property
    def ellipsoidal_distance_meters(self) -> float:
        return self._average_curve.ellipsoidal_distance_meters

    @property
    def azimuth(self) -> Angle:
        return self._average_curve.azimuth

    @property
    def reverse_azimuth(self) -> Angle:
        return self._average_curve.reverse_azimuth

    @property
    def elevation_change_meters(self) -> float:
        return self._elevation_change

    @property
    def point_to_point_distance_meters(self) -> float:
        return self._p2p
