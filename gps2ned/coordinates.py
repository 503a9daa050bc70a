"""
Geodetic and local-frame value types, and the sexagesimal string format
"""

__all__ = ['LatLon', 'NED', 'format_sexagesimal', 'parse_angle', 'parse_sexagesimal']

import re
from typing import NamedTuple

from gps2ned._const import SECONDS_WIDTH, SIGNIFICANT_DIGITS
from gps2ned.exceptions import ParseError
from gps2ned.utils.functions import round_half_up, round_significant
from gps2ned.utils.logging import LOGGER, warn_once


_SEXAGESIMAL_PATTERNS = {
    'latitude': re.compile(
        r'(?P<hemisphere>[NS])(?P<degrees>\d{2})-(?P<minutes>\d{2})-(?P<seconds>\d{1,2}(?:\.\d+)?)',
        re.ASCII
    ),
    'longitude': re.compile(
        r'(?P<hemisphere>[EW])(?P<degrees>\d{3})-(?P<minutes>\d{2})-(?P<seconds>\d{1,2}(?:\.\d+)?)',
        re.ASCII
    ),
}

_FORMATS = {
    'latitude': ('N', 'S', 2),
    'longitude': ('E', 'W', 3),
}


class LatLon(NamedTuple):
    """A latitude/longitude pair, in decimal degrees"""
    latitude: float
    longitude: float

    @classmethod
    def from_sexagesimal(cls, latitude: str, longitude: str, signed: bool = True) -> 'LatLon':
        """Shortcut for parse_sexagesimal()"""
        return parse_sexagesimal(latitude, longitude, signed=signed)

    def to_sexagesimal(self):
        """Converts this pair back into (latitude, longitude) sexagesimal strings"""
        return (
            format_sexagesimal(self.latitude, 'latitude'),
            format_sexagesimal(self.longitude, 'longitude'),
        )


class NED(NamedTuple):
    """
    A position in the local North-East-Down frame, in meters.

    Down is positive below the reference point, i.e. a point 10 meters above the
    reference has down == -10.
    """
    north: float
    east: float
    down: float

    def rounded(self, digits: int = SIGNIFICANT_DIGITS) -> 'NED':
        """Rounds every component to a number of significant digits"""
        return NED(*(round_significant(x, digits) for x in self))

    def to_str(self) -> str:
        """Renders the position as 'N: ...', 'E: ...', 'D: ...' lines"""
        return f'N: {self.north:g}\nE: {self.east:g}\nD: {self.down:g}'


def parse_angle(value: str, axis: str, signed: bool = True) -> float:
    """
    Parses a single sexagesimal string into decimal degrees.

    Latitudes take the form <N|S><DD>-<MM>-<SS.ss> and longitudes the form
    <E|W><DDD>-<MM>-<SS.ss>. Only the first five characters of the seconds field
    are read.

    Args:
        value:
            The sexagesimal string, e.g. 'N38-09-01.50'

        axis:
            Either 'latitude' or 'longitude'

        signed: (bool)
            (Default True) If True, southern and western hemispheres produce
            negative values. If False, the hemisphere letter is ignored and
            the magnitude is returned.

    Returns:
        float
    """
    if axis not in _SEXAGESIMAL_PATTERNS:
        raise ValueError(f'Unknown axis {axis!r}; expected latitude or longitude')

    if not isinstance(value, str):
        raise ParseError(axis, value, 'expected a string')

    match = _SEXAGESIMAL_PATTERNS[axis].fullmatch(value)
    if match is None:
        _, _, width = _FORMATS[axis]
        raise ParseError(
            axis,
            value,
            f'expected <hemisphere>{"D" * width}-MM-SS.ss'
        )

    seconds = match.group('seconds')
    if len(seconds) > SECONDS_WIDTH:
        warn_once(
            f'Seconds fields are read to {SECONDS_WIDTH} characters; '
            'additional digits are ignored. (this warning will not repeat)'
        )
        seconds = seconds[:SECONDS_WIDTH]

    result = (
        float(match.group('degrees'))
        + float(match.group('minutes')) / 60.0
        + float(seconds) / 3600.0
    )
    if signed and match.group('hemisphere') in ('S', 'W'):
        result = -result

    return result


def parse_sexagesimal(latitude: str, longitude: str, signed: bool = True) -> LatLon:
    """
    Parses a sexagesimal latitude/longitude pair into decimal degrees.

    Args:
        latitude:
            The latitude, ex. 'N38-09-01.50'

        longitude:
            The longitude, ex. 'W076-25-29.70'

        signed: (bool)
            (Default True) Apply the hemisphere as a sign. Pass False to
            reproduce the behavior of older fixture generators, which ignored it.

    Returns:
        LatLon
    """
    result = LatLon(
        parse_angle(latitude, 'latitude', signed),
        parse_angle(longitude, 'longitude', signed),
    )
    LOGGER.debug('Parsed %s %s as %s', latitude, longitude, result)
    return result


def format_sexagesimal(value: float, axis: str) -> str:
    """
    Converts a decimal degree value into the fixed sexagesimal string format,
    with seconds rounded to hundredths.

    Args:
        value:
            The value, in decimal degrees. Negative values are rendered as
            southern/western hemispheres.

        axis:
            Either 'latitude' or 'longitude'

    Returns:
        str, e.g. 'W076-25-29.70'
    """
    if axis not in _FORMATS:
        raise ValueError(f'Unknown axis {axis!r}; expected latitude or longitude')

    positive, negative, width = _FORMATS[axis]
    hundredths = int(round_half_up(abs(value) * 360_000, 0))
    degrees, remainder = divmod(hundredths, 360_000)
    minutes, seconds = divmod(remainder, 6_000)

    hemisphere = negative if value < 0 else positive
    return f'{hemisphere}{degrees:0{width}d}-{minutes:02d}-{seconds / 100:05.2f}'
