from geodetics._version import __version__  # noqa: F401
from geodetics.utils.logging import LOGGER
from geodetics.angle import Angle
from geodetics.ellipsoid import (
    Ellipsoid,
    ANS, CLARKE1858, CLARKE1880, GRS67, GRS80, SPHERE, WGS72, WGS84,
)
from geodetics.coordinates import GlobalCoordinates, GlobalPosition
from geodetics.curves import GeodeticCurve, GeodeticMeasurement
from geodetics.calc import GeodeticCalculator, destination, measure, solve_direct, solve_inverse

__all__ = [
    'Angle',
    'Ellipsoid',
    'GeodeticCalculator',
    'GeodeticCurve',
    'GeodeticMeasurement',
    'GlobalCoordinates',
    'GlobalPosition',
    'ANS',
    'CLARKE1858',
    'CLARKE1880',
    'GRS67',
    'GRS80',
    'SPHERE',
    'WGS72',
    'WGS84',
    'destination',
    'measure',
    'solve_direct',
    'solve_inverse',
    'LOGGER',
]
