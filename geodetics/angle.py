"""
Representation of an angular measurement
"""

__all__ = ['Angle', 'as_angle']

import math
from typing import Tuple, Union

from geodetics.utils.functions import round_half_up


class Angle:
    """
    An angle, stored in radians.

    Comparisons are performed in absolute terms and no wrapping occurs, i.e.
    360 degrees != 0 degrees.
    """

    ZERO: 'Angle'
    ANGLE_180: 'Angle'
    NAN: 'Angle'

    __slots__ = ('_radians',)

    def __init__(self, radians: Union[float, int] = 0.0):
        self._radians = float(radians)

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return Angle(self._radians + other._radians)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return Angle(self._radians - other._radians)

    def __neg__(self):
        return Angle(-self._radians)

    def __abs__(self):
        return Angle(abs(self._radians))

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return False

        return self._radians == other._radians

    def __lt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return self._radians < other._radians

    def __le__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return self._radians <= other._radians

    def __gt__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return self._radians > other._radians

    def __ge__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented

        return self._radians >= other._radians

    def __hash__(self):
        return hash(self._radians)

    def __repr__(self):
        return f'<Angle({self.degrees} degrees)>'

    @property
    def degrees(self) -> float:
        """The angle, in degrees"""
        return math.degrees(self._radians)

    @property
    def radians(self) -> float:
        """The angle, in radians"""
        return self._radians

    @classmethod
    def from_radians(cls, radians: float) -> 'Angle':
        """Creates an Angle from a measurement in radians"""
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Angle':
        """Creates an Angle from a measurement in degrees"""
        return cls(math.radians(degrees))

    @classmethod
    def from_degrees_and_minutes(cls, degrees: int, minutes: float) -> 'Angle':
        """
        Creates an Angle from whole degrees and decimal minutes.

        The sign of the degrees applies to the whole angle, so (-10, 30) is
        -10.5 degrees. An angle smaller than one degree carries its sign on the
        minutes instead, e.g. (0, -30).

        Args:
            degrees:
                Whole degrees

            minutes:
                Decimal minutes

        Returns:
            Angle
        """
        dec = minutes / 60
        dec = degrees - dec if degrees < 0 else degrees + dec
        return cls.from_degrees(dec)

    @classmethod
    def from_dms(cls, degrees: int, minutes: int, seconds: float) -> 'Angle':
        """
        Creates an Angle from degrees, minutes and seconds. Signs are handled
        the same as Angle.from_degrees_and_minutes().

        Args:
            degrees:
                Whole degrees

            minutes:
                Whole minutes

            seconds:
                Decimal seconds

        Returns:
            Angle
        """
        dec = (seconds / 3600) + (minutes / 60)
        dec = degrees - dec if degrees < 0 else degrees + dec
        return cls.from_degrees(dec)

    def compare(self, other: 'Angle') -> int:
        """
        Orders this angle against another.

        Args:
            other:
                The Angle to compare to

        Returns:
            -1, 0 or 1 as this angle is smaller, equal or larger

        Raises:
            TypeError if other is not an Angle
        """
        if not isinstance(other, Angle):
            raise TypeError(
                f'Can only compare Angles with other Angles, not {type(other).__name__}'
            )

        return (self._radians > other._radians) - (self._radians < other._radians)

    def is_nan(self) -> bool:
        return math.isnan(self._radians)

    def to_dms(self) -> Tuple[int, int, float]:
        """
        Converts the angle to (degrees, minutes, seconds). A negative angle
        carries its sign on the first non-zero component, which round-trips
        through Angle.from_dms().

        Returns:
            (degrees, minutes, seconds)

        Raises:
            ValueError if the angle is NaN or infinite
        """
        dd = self.degrees
        if not math.isfinite(dd):
            raise ValueError(f'Cannot convert a non-finite angle ({dd}) to DMS')

        minutes, seconds = divmod(abs(dd) * 3600, 60)
        degrees, minutes = divmod(minutes, 60)
        out_d, out_m, out_s = int(degrees), int(minutes), round_half_up(seconds, 5)

        # Rounding can carry seconds up to a whole minute
        if out_s >= 60:
            out_s -= 60
            out_m += 1
        if out_m >= 60:
            out_m -= 60
            out_d += 1

        if dd < 0:
            if out_d:
                out_d = -out_d
            elif out_m:
                out_m = -out_m
            else:
                out_s = -out_s

        return out_d, out_m, out_s


Angle.ZERO = Angle(0.0)
Angle.ANGLE_180 = Angle(math.pi)
Angle.NAN = Angle(math.nan)


def as_angle(value: Union[Angle, float, int, str]) -> Angle:
    """
    Returns value as an Angle. Plain numbers (and numeric strings) are taken
    to be degrees.

    Args:
        value:
            An Angle, or a measurement in degrees

    Returns:
        Angle
    """
    if isinstance(value, Angle):
        return value

    return Angle.from_degrees(float(value))
