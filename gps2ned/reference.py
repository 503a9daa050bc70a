"""
The reference point that defines the origin of the local NED frame.

A single reference is configured per process. It is stored as an immutable
ReferencePoint and replaced wholesale, so a conversion that reads it once sees a
self-consistent origin even if another thread reconfigures it mid-run.
"""

__all__ = [
    'DEFAULT_REFERENCE', 'ReferencePoint', 'TEST_REFERENCE',
    'get_reference', 'reset_reference', 'set_reference', 'use_reference'
]

from contextlib import contextmanager
import threading
from typing import Iterator, NamedTuple, Optional, Union

from gps2ned.coordinates import LatLon, parse_sexagesimal
from gps2ned.utils.logging import LOGGER


class ReferencePoint(NamedTuple):
    """
    Origin of the local frame.

    Args:
        latitude:
            Sexagesimal latitude, ex. 'N41-50-5.778'

        longitude:
            Sexagesimal longitude, ex. 'W111-54-34.854'

        altitude:
            Altitude above mean sea level, in meters
    """
    latitude: str
    longitude: str
    altitude: float

    def to_latlon(self, signed: bool = True) -> LatLon:
        """Parses the reference strings into decimal degrees"""
        return parse_sexagesimal(self.latitude, self.longitude, signed=signed)


# Built-in origin
DEFAULT_REFERENCE = ReferencePoint('N41-50-5.778', 'W111-54-34.854', 1410.102336)

# Origin used by the fixture test mode
TEST_REFERENCE = ReferencePoint('N38-09-01.50', 'W076-25-29.70', 6.7056)

_LOCK = threading.Lock()
_CURRENT = DEFAULT_REFERENCE


def get_reference() -> ReferencePoint:
    """Returns the currently configured reference point"""
    return _CURRENT


def set_reference(
    latitude: Union[str, ReferencePoint],
    longitude: Optional[str] = None,
    altitude: Optional[float] = None,
) -> ReferencePoint:
    """
    Replaces the configured reference point. All three values are set together;
    there is no partial update.

    The strings are parsed before anything is replaced, so a ParseError leaves the
    previous reference in place.

    Args:
        latitude:
            Sexagesimal latitude, or a complete ReferencePoint (in which case
            longitude and altitude must be omitted)

        longitude:
            Sexagesimal longitude

        altitude:
            Altitude above mean sea level, in meters

    Returns:
        The previously configured ReferencePoint
    """
    global _CURRENT  # pylint: disable=global-statement

    if isinstance(latitude, ReferencePoint):
        if longitude is not None or altitude is not None:
            raise TypeError('Pass either a ReferencePoint or latitude, longitude and altitude')
        reference = latitude
    else:
        if longitude is None or altitude is None:
            raise TypeError('latitude, longitude and altitude must be set together')
        reference = ReferencePoint(latitude, longitude, float(altitude))

    reference.to_latlon()

    with _LOCK:
        previous, _CURRENT = _CURRENT, reference

    LOGGER.debug('Reference point set to %s (was %s)', reference, previous)
    return previous


def reset_reference() -> ReferencePoint:
    """Restores the built-in default reference point"""
    return set_reference(DEFAULT_REFERENCE)


@contextmanager
def use_reference(reference: ReferencePoint) -> Iterator[ReferencePoint]:
    """
    Temporarily installs a reference point, restoring the previous one on exit.

        with use_reference(TEST_REFERENCE):
            check_fixtures(...)
    """
    previous = set_reference(reference)
    try:
        yield reference
    finally:
        set_reference(previous)
