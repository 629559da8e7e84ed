"""
Representation of a specific point on earth
"""

__all__ = ['GlobalCoordinates', 'GlobalPosition']

import math
from typing import Tuple, Union

from geodetics.angle import Angle, as_angle

_PI_OVER_2 = math.pi / 2
_TWO_PI = 2 * math.pi

AngleLike = Union[Angle, float, int, str]


def _canonicalize(latitude: float, longitude: float) -> Tuple[float, float]:
    """
    Folds a latitude/longitude pair (radians) into [-pi/2, pi/2] and (-pi, pi].

    Walking north along a meridian past the North Pole, latitude starts to
    decrease again and you are now on the opposite meridian; the same holds
    heading south past the South Pole.
    """
    lat, lon = latitude, longitude

    if not -_PI_OVER_2 <= lat <= _PI_OVER_2:
        lat = (lat + math.pi) % _TWO_PI - math.pi
        if lat > _PI_OVER_2:
            # Crosses the North Pole
            lat = math.pi - lat
            lon += math.pi
        elif lat < -_PI_OVER_2:
            # Crosses the South Pole
            lat = -math.pi - lat
            lon += math.pi

    if not -math.pi < lon <= math.pi:
        # Crosses the antimeridian
        lon = (lon + math.pi) % _TWO_PI - math.pi
        if lon <= -math.pi:
            lon += _TWO_PI

    return lat, lon


class GlobalCoordinates:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair).

    Coordinates are canonicalized on construction: latitude is folded into
    [-90, 90] degrees by reflecting across a pole (which moves the longitude
    by 180 degrees) and longitude is folded into (-180, 180] degrees.

    Coordinates are immutable; use .with_latitude() and .with_longitude() to
    derive new ones. Ordering is by longitude, then latitude.

    Args:
        latitude:
            The latitude, as an Angle or in degrees

        longitude:
            The longitude, as an Angle or in degrees
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(self, latitude: AngleLike, longitude: AngleLike):
        lat, lon = _canonicalize(as_angle(latitude).radians, as_angle(longitude).radians)
        self._latitude = Angle.from_radians(lat)
        self._longitude = Angle.from_radians(lon)

    def __eq__(self, other):
        if not isinstance(other, GlobalCoordinates):
            return False

        return (
            self._latitude == other._latitude and
            self._longitude == other._longitude
        )

    def __hash__(self):
        return hash((self._longitude, self._latitude))

    def __repr__(self):
        return f'<GlobalCoordinates({self._latitude.degrees}, {self._longitude.degrees})>'

    def __lt__(self, other):
        if not isinstance(other, GlobalCoordinates):
            return NotImplemented

        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, GlobalCoordinates):
            return NotImplemented

        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, GlobalCoordinates):
            return NotImplemented

        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, GlobalCoordinates):
            return NotImplemented

        return self.compare(other) >= 0

    @property
    def latitude(self) -> Angle:
        return self._latitude

    @property
    def longitude(self) -> Angle:
        return self._longitude

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float) -> 'GlobalCoordinates':
        """Creates GlobalCoordinates from a latitude/longitude pair in decimal degrees"""
        return cls(Angle.from_degrees(latitude), Angle.from_degrees(longitude))

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[int, int, float, str],
        lon: Tuple[int, int, float, str]
    ) -> 'GlobalCoordinates':
        """
        Creates GlobalCoordinates from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))

        Returns:
            GlobalCoordinates
        """
        def convert(dms: Tuple[int, int, float, str]) -> Angle:
            angle = Angle.from_dms(abs(dms[0]), abs(dms[1]), abs(dms[2]))
            return -angle if dms[3].upper() in ('S', 'W') else angle

        return cls(convert(lat), convert(lon))

    def compare(self, other: 'GlobalCoordinates') -> int:
        """
        Orders these coordinates against others, by longitude and then by latitude.

        Args:
            other:
                The GlobalCoordinates to compare to

        Returns:
            -1, 0 or 1

        Raises:
            TypeError if other is not GlobalCoordinates
        """
        if not isinstance(other, GlobalCoordinates):
            raise TypeError(
                'Can only compare GlobalCoordinates with other GlobalCoordinates, '
                f'not {type(other).__name__}'
            )

        return (
            self._longitude.compare(other._longitude) or
            self._latitude.compare(other._latitude)
        )

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the coordinates to a pair of (degrees, minutes, seconds, hemisphere)

        Returns:
            converted latitude and longitude as (degrees, minutes, seconds, hemisphere)
        """
        return (
            (*abs(self._latitude).to_dms(), 'N' if self._latitude.radians >= 0 else 'S'),
            (*abs(self._longitude).to_dms(), 'E' if self._longitude.radians >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinates to a tuple of decimal degrees (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        out = (self._latitude.degrees, self._longitude.degrees)
        if reverse:
            return out[::-1]

        return out

    def with_latitude(self, latitude: AngleLike) -> 'GlobalCoordinates':
        """Returns new coordinates with the latitude replaced, re-canonicalized"""
        return GlobalCoordinates(latitude, self._longitude)

    def with_longitude(self, longitude: AngleLike) -> 'GlobalCoordinates':
        """Returns new coordinates with the longitude replaced, re-canonicalized"""
        return GlobalCoordinates(self._latitude, longitude)


class GlobalPosition:
    """
    A coordinate on the globe together with an elevation above the reference
    ellipsoid, in meters.

    Ordering is by coordinates (longitude, then latitude) and then by elevation.

    Args:
        coordinates:
            The GlobalCoordinates of the position

        elevation_meters:
            (Default 0.0) Elevation above the ellipsoid surface, in meters
    """

    __slots__ = ('_coordinates', '_elevation')

    def __init__(self, coordinates: GlobalCoordinates, elevation_meters: float = 0.0):
        if not isinstance(coordinates, GlobalCoordinates):
            raise TypeError(
                f'coordinates must be GlobalCoordinates, not {type(coordinates).__name__}'
            )

        self._coordinates = coordinates
        self._elevation = float(elevation_meters)

    def __eq__(self, other):
        if not isinstance(other, GlobalPosition):
            return False

        return (
            self._coordinates == other._coordinates and
            self._elevation == other._elevation
        )

    def __hash__(self):
        return hash((self._coordinates, self._elevation))

    def __repr__(self):
        return (
            f'<GlobalPosition({self.latitude.degrees}, {self.longitude.degrees}, '
            f'{self._elevation}m)>'
        )

    def __lt__(self, other):
        if not isinstance(other, GlobalPosition):
            return NotImplemented

        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, GlobalPosition):
            return NotImplemented

        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, GlobalPosition):
            return NotImplemented

        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, GlobalPosition):
            return NotImplemented

        return self.compare(other) >= 0

    @property
    def coordinates(self) -> GlobalCoordinates:
        return self._coordinates

    @property
    def latitude(self) -> Angle:
        return self._coordinates.latitude

    @property
    def longitude(self) -> Angle:
        return self._coordinates.longitude

    @property
    def elevation_meters(self) -> float:
        return self._elevation

    @classmethod
    def from_degrees(
        cls,
        latitude: float,
        longitude: float,
        elevation_meters: float = 0.0
    ) -> 'GlobalPosition':
        """Creates a GlobalPosition from decimal degrees and an elevation in meters"""
        return cls(GlobalCoordinates.from_degrees(latitude, longitude), elevation_meters)

    def compare(self, other: 'GlobalPosition') -> int:
        """
        Orders this position against another, by coordinates and then elevation.

        Raises:
            TypeError if other is not a GlobalPosition
        """
        if not isinstance(other, GlobalPosition):
            raise TypeError(
                'Can only compare GlobalPositions with other GlobalPositions, '
                f'not {type(other).__name__}'
            )

        return self._coordinates.compare(other._coordinates) or (
            (self._elevation > other._elevation) - (self._elevation < other._elevation)
        )

    def with_coordinates(self, coordinates: GlobalCoordinates) -> 'GlobalPosition':
        return GlobalPosition(coordinates, self._elevation)

    def with_elevation(self, elevation_meters: float) -> 'GlobalPosition':
        return GlobalPosition(self._coordinates, elevation_meters)
