"""Equatorial to horizontal coordinate transform.

Both the Sun and the Moon models end in equatorial coordinates; this is the
single place where those are turned into altitude and azimuth for an
observer, so the sign conventions live here only: azimuth is measured
clockwise from true north, altitude is positive above the horizon.
"""

import math

from ..angles import clamp, normalize_degrees
from ..space_time.sidereal import local_sidereal_degrees
from .models import HorizontalPosition

# |sin(altitude)| at or beyond this is treated as the zenith or nadir,
# where azimuth is undefined
ZENITH_SIN_THRESHOLD = 1.0 - 1e-12


def equatorial_to_horizontal(
    right_ascension: float,
    declination: float,
    latitude: float,
    longitude: float,
    julian_date: float,
) -> HorizontalPosition:
    """Convert equatorial coordinates to the observer's horizon frame.

    Args:
        right_ascension: Right ascension in radians
        declination: Declination in radians
        latitude: Observer latitude in degrees, positive north
        longitude: Observer longitude in degrees, positive east
        julian_date: Julian date (UTC) of the observation

    Returns:
        HorizontalPosition in degrees. At the zenith or nadir the azimuth
        is reported as 0.0.
    """
    lst = local_sidereal_degrees(julian_date, longitude)
    hour_angle = math.radians(lst) - right_ascension

    lat_rad = math.radians(latitude)
    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    sin_dec = math.sin(declination)
    cos_dec = math.cos(declination)

    # Clamp against floating-point overshoot before asin
    sin_alt = clamp(
        sin_lat * sin_dec + cos_lat * cos_dec * math.cos(hour_angle), -1.0, 1.0
    )
    altitude = math.degrees(math.asin(sin_alt))

    if abs(sin_alt) >= ZENITH_SIN_THRESHOLD:
        return HorizontalPosition(altitude=altitude, azimuth=0.0)

    # sin(Az) = -cos(dec) sin(H) / cos(alt)
    # cos(Az) = (sin(dec) - sin(alt) sin(lat)) / (cos(alt) cos(lat))
    # Both share the non-negative factor 1 / (cos(alt) cos(lat)), which atan2
    # does not need.
    y = -cos_dec * math.sin(hour_angle) * cos_lat
    x = sin_dec - sin_alt * sin_lat
    azimuth = normalize_degrees(math.degrees(math.atan2(y, x)))

    return HorizontalPosition(altitude=altitude, azimuth=azimuth)
