"""
Geodetic to local North-East-Down conversion
"""

__all__ = [
    'convert', 'convert_sexagesimal', 'geodetic_to_ecef', 'gps_to_ned',
    'ned_rotation', 'prime_vertical_factor'
]

import math
from typing import Optional

import numpy as np

from gps2ned._const import PI_D180
from gps2ned.coordinates import LatLon, NED, parse_sexagesimal
from gps2ned.ellipsoid import EllipsoidModel, WGS84
from gps2ned.exceptions import ConfigError
from gps2ned.reference import ReferencePoint, get_reference
from gps2ned.utils.logging import LOGGER, warn_once


def prime_vertical_factor(lat_rad: float, ellipsoid: EllipsoidModel = WGS84) -> float:
    """Returns chi = sqrt(1 - e2 * sin^2(lat)), so that a / chi is the prime vertical radius"""
    return math.sqrt(1 - ellipsoid.e2 * math.sin(lat_rad) * math.sin(lat_rad))


def geodetic_to_ecef(
    lat_rad: float,
    lon_rad: float,
    h: float,
    chi: float,
    ellipsoid: EllipsoidModel = WGS84,
) -> np.ndarray:
    """
    Converts a geodetic position to Earth Centered Earth Fixed coordinates.

    Args:
        lat_rad:
            Latitude, in radians

        lon_rad:
            Longitude, in radians

        h:
            Height above the ellipsoid

        chi:
            The prime vertical factor to use (see prime_vertical_factor()).
            Passed in so that several points can share the reference's factor.

        ellipsoid:
            (Default WGS84) The ellipsoid model

    Returns:
        np.ndarray of [x, y, z], in meters
    """
    a, e2 = ellipsoid.a, ellipsoid.e2
    return np.array([
        (a / chi + h) * math.cos(lat_rad) * math.cos(lon_rad),
        (a / chi + h) * math.cos(lat_rad) * math.sin(lon_rad),
        (a * (1 - e2) / chi + h) * math.sin(lat_rad),
    ])


def ned_rotation(lat_rad: float, lon_rad: float, west_positive: bool = False) -> np.ndarray:
    """
    Rotation matrix from ECEF deltas to the local tangent plane at a
    latitude/longitude. Rows are north, east and down.

    Args:
        lat_rad:
            Latitude, in radians

        lon_rad:
            Longitude, in radians

        west_positive: (bool)
            (Default False) Set if longitudes, and therefore the ECEF y axis,
            are measured positive westward. Flips the east row so that east
            still points east.
    """
    sin_lat, cos_lat = math.sin(lat_rad), math.cos(lat_rad)
    sin_lon, cos_lon = math.sin(lon_rad), math.cos(lon_rad)
    east = [sin_lon, -cos_lon, 0.] if west_positive else [-sin_lon, cos_lon, 0.]
    return np.array([
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        east,
        [-cos_lat * cos_lon, -cos_lat * sin_lon, -sin_lat],
    ])


def gps_to_ned(
    point: LatLon,
    altitude: float,
    reference: Optional[ReferencePoint] = None,
    ellipsoid: EllipsoidModel = WGS84,
    signed: bool = True,
    legacy_altitude: bool = False,
) -> NED:
    """
    Converts a geodetic position into NED offsets from a reference point.

    The prime vertical factor (chi) is computed once at the reference latitude and
    reused for the target point.

    Args:
        point:
            The target position, in decimal degrees

        altitude:
            The target altitude above mean sea level, in meters

        reference: (Optional)
            The origin of the local frame. Defaults to the configured reference
            (see gps2ned.reference.set_reference()).

        ellipsoid:
            (Default WGS84) The ellipsoid model

        signed: (bool)
            (Default True) Whether hemisphere letters are applied as signs. Must
            agree with how `point` was parsed. When False, every longitude is
            treated as a west-positive magnitude, which is only correct for
            points in the western hemisphere.

        legacy_altitude: (bool)
            (Default False) If True, scales the reference altitude by pi/180 the
            way older fixture generators did. Breaks the zero-offset property at
            the reference point; only use it to reproduce legacy fixtures.

    Returns:
        NED
    """
    if not isinstance(ellipsoid, EllipsoidModel):
        raise ConfigError(f'Expected an EllipsoidModel, not {type(ellipsoid)}')

    # Read once so the whole conversion sees one origin
    reference = reference if reference is not None else get_reference()
    ref = reference.to_latlon(signed=signed)

    r_lat = ref.latitude * PI_D180
    r_lon = ref.longitude * PI_D180
    r_h = float(reference.altitude)
    if legacy_altitude:
        warn_once(
            'Legacy altitude scaling is enabled; reference altitude is multiplied by pi/180. '
            '(this warning will not repeat)'
        )
        r_h = r_h * PI_D180

    chi = prime_vertical_factor(r_lat, ellipsoid)
    ref_ecef = geodetic_to_ecef(r_lat, r_lon, r_h, chi, ellipsoid)
    ecef = geodetic_to_ecef(
        point.latitude * PI_D180,
        point.longitude * PI_D180,
        float(altitude),
        chi,
        ellipsoid,
    )

    delta = ecef - ref_ecef
    LOGGER.debug('ECEF delta from reference: %s', delta)

    # Unsigned longitudes are west-positive magnitudes
    north, east, down = ned_rotation(r_lat, r_lon, west_positive=not signed) @ delta
    return NED(float(north), float(east), float(down))


convert = gps_to_ned


def convert_sexagesimal(
    latitude: str,
    longitude: str,
    altitude: float,
    reference: Optional[ReferencePoint] = None,
    ellipsoid: EllipsoidModel = WGS84,
    signed: bool = True,
    legacy_altitude: bool = False,
) -> NED:
    """
    Parses a sexagesimal latitude/longitude pair and converts it to NED.

    See gps_to_ned() for a description of the arguments.
    """
    point = parse_sexagesimal(latitude, longitude, signed=signed)
    return gps_to_ned(
        point,
        altitude,
        reference=reference,
        ellipsoid=ellipsoid,
        signed=signed,
        legacy_altitude=legacy_altitude,
    )
