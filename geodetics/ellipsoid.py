"""
Reference ellipsoids, i.e. the mathematical shape of a planet
"""

__all__ = [
    'Ellipsoid',
    'ANS', 'CLARKE1858', 'CLARKE1880', 'GRS67', 'GRS80', 'SPHERE', 'WGS72', 'WGS84',
]

import math

from geodetics import _const


class Ellipsoid:
    """
    A reference ellipsoid, described by its semi-major axis, semi-minor axis,
    flattening and inverse flattening.

    The four values are kept mutually consistent, so instances should only be
    built via Ellipsoid.from_a_and_inverse_f() or Ellipsoid.from_a_and_f().
    """

    # Named ellipsoids, assigned below the class body
    WGS84: 'Ellipsoid'
    GRS80: 'Ellipsoid'
    GRS67: 'Ellipsoid'
    ANS: 'Ellipsoid'
    WGS72: 'Ellipsoid'
    CLARKE1858: 'Ellipsoid'
    CLARKE1880: 'Ellipsoid'
    SPHERE: 'Ellipsoid'

    __slots__ = ('_a', '_b', '_f', '_inv_f')

    def __init__(
        self,
        semi_major_axis_meters: float,
        semi_minor_axis_meters: float,
        flattening: float,
        inverse_flattening: float,
    ):
        self._a = float(semi_major_axis_meters)
        self._b = float(semi_minor_axis_meters)
        self._f = float(flattening)
        self._inv_f = float(inverse_flattening)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        # b and 1/f are derived from these
        return self._a == other._a and self._f == other._f

    def __hash__(self):
        return hash((self._a, self._f))

    def __repr__(self):
        return (
            f'<Ellipsoid(a={self._a}, b={self._b}, '
            f'f={self._f}, 1/f={self._inv_f})>'
        )

    @classmethod
    def from_a_and_inverse_f(cls, semi_major_axis_meters: float, inverse_flattening: float):
        """
        Builds an Ellipsoid from its semi-major axis and inverse flattening.

        Args:
            semi_major_axis_meters:
                The semi-major (equatorial) axis, in meters

            inverse_flattening:
                The inverse flattening, 1/f

        Returns:
            Ellipsoid
        """
        f = 1.0 / inverse_flattening
        b = (1.0 - f) * semi_major_axis_meters
        return cls(semi_major_axis_meters, b, f, inverse_flattening)

    @classmethod
    def from_a_and_f(cls, semi_major_axis_meters: float, flattening: float):
        """
        Builds an Ellipsoid from its semi-major axis and flattening. A flattening
        of zero describes a sphere, with an infinite inverse flattening.

        Args:
            semi_major_axis_meters:
                The semi-major (equatorial) axis, in meters

            flattening:
                The flattening, f

        Returns:
            Ellipsoid
        """
        inv_f = 1.0 / flattening if flattening else math.inf
        b = (1.0 - flattening) * semi_major_axis_meters
        return cls(semi_major_axis_meters, b, flattening, inv_f)

    @property
    def semi_major_axis_meters(self) -> float:
        return self._a

    @property
    def semi_minor_axis_meters(self) -> float:
        return self._b

    @property
    def flattening(self) -> float:
        return self._f

    @property
    def inverse_flattening(self) -> float:
        return self._inv_f


WGS84 = Ellipsoid.from_a_and_inverse_f(_const.WGS84_A, _const.WGS84_INV_F)
GRS80 = Ellipsoid.from_a_and_inverse_f(_const.GRS80_A, _const.GRS80_INV_F)
GRS67 = Ellipsoid.from_a_and_inverse_f(_const.GRS67_A, _const.GRS67_INV_F)
ANS = Ellipsoid.from_a_and_inverse_f(_const.ANS_A, _const.ANS_INV_F)
WGS72 = Ellipsoid.from_a_and_inverse_f(_const.WGS72_A, _const.WGS72_INV_F)
CLARKE1858 = Ellipsoid.from_a_and_inverse_f(_const.CLARKE1858_A, _const.CLARKE1858_INV_F)
CLARKE1880 = Ellipsoid.from_a_and_inverse_f(_const.CLARKE1880_A, _const.CLARKE1880_INV_F)
SPHERE = Ellipsoid.from_a_and_f(_const.SPHERE_A, _const.SPHERE_F)

Ellipsoid.WGS84 = WGS84
Ellipsoid.GRS80 = GRS80
Ellipsoid.GRS67 = GRS67
Ellipsoid.ANS = ANS
Ellipsoid.WGS72 = WGS72
Ellipsoid.CLARKE1858 = CLARKE1858
Ellipsoid.CLARKE1880 = CLARKE1880
Ellipsoid.SPHERE = SPHERE
