from gps2ned._version import __version__  # noqa: F401
from gps2ned.utils.logging import LOGGER
from gps2ned.coordinates import LatLon, NED, format_sexagesimal, parse_sexagesimal
from gps2ned.conversion import convert, convert_sexagesimal, gps_to_ned
from gps2ned.ellipsoid import EllipsoidModel, WGS84
from gps2ned.exceptions import ConfigError, Gps2NedError, ParseError, ValidationError
from gps2ned.reference import (
    DEFAULT_REFERENCE, ReferencePoint, TEST_REFERENCE,
    get_reference, reset_reference, set_reference, use_reference
)
from gps2ned.utils.functions import round_significant


__all__ = [
    'ConfigError',
    'DEFAULT_REFERENCE',
    'EllipsoidModel',
    'Gps2NedError',
    'LatLon',
    'NED',
    'ParseError',
    'ReferencePoint',
    'TEST_REFERENCE',
    'ValidationError',
    'WGS84',
    'convert',
    'convert_sexagesimal',
    'format_sexagesimal',
    'get_reference',
    'gps_to_ned',
    'parse_sexagesimal',
    'reset_reference',
    'round_significant',
    'set_reference',
    'use_reference',
    'LOGGER',
]
