"""Low-precision lunar position.

Mean orbital elements of the Moon with the largest periodic terms in
longitude and latitude. Errors are a few tenths of a degree, which is
plenty for pointing a camera at the Moon but not for occultations.
"""

import math
from datetime import datetime
from typing import Optional, Tuple, Union

from ..angles import clamp
from ..space_time.julian_calc import J2000, julian_day
from ..space_time.utc_datetime import UtcDateTime
from .horizontal import equatorial_to_horizontal
from .models import HorizontalPosition, ObserverLocation

DAYS_PER_JULIAN_CENTURY = 36525.0


def _sin_deg(angle: float) -> float:
    return math.sin(math.radians(angle))


def moon_ecliptic(julian_date: float) -> Tuple[float, float]:
    """Geocentric ecliptic longitude and latitude of the Moon.

    Args:
        julian_date: Julian date (UTC)

    Returns:
        (longitude, latitude) in degrees. The longitude is not wrapped.
    """
    t = (julian_date - J2000) / DAYS_PER_JULIAN_CENTURY

    mean_longitude = (218.3164477 + 481267.88123421 * t) % 360
    elongation = (297.8501921 + 445267.1114034 * t) % 360
    mean_anomaly = (134.9633964 + 477198.8675055 * t) % 360
    latitude_argument = (93.2720950 + 483202.0175233 * t) % 360
    sun_mean_anomaly = 357.529 + 35999.05 * t

    longitude = (
        mean_longitude
        + 6.289 * _sin_deg(mean_anomaly)
        + 1.274 * _sin_deg(2 * elongation - mean_anomaly)
        + 0.658 * _sin_deg(2 * elongation)
        + 0.214 * _sin_deg(2 * mean_anomaly)
        - 0.186 * _sin_deg(sun_mean_anomaly)
    )
    latitude = (
        5.128 * _sin_deg(latitude_argument)
        + 0.280 * _sin_deg(mean_anomaly + latitude_argument)
        + 0.277 * _sin_deg(mean_anomaly - latitude_argument)
        + 0.173 * _sin_deg(2 * elongation - latitude_argument)
    )
    return longitude, latitude


def moon_equatorial(julian_date: float) -> Tuple[float, float]:
    """Right ascension and declination of the Moon.

    Args:
        julian_date: Julian date (UTC)

    Returns:
        (right ascension, declination) in radians; right ascension in (-pi, pi]
    """
    longitude, latitude = moon_ecliptic(julian_date)
    t = (julian_date - J2000) / DAYS_PER_JULIAN_CENTURY

    lon_rad = math.radians(longitude)
    lat_rad = math.radians(latitude)
    obliquity = math.radians(23.439291 - 0.0000137 * t)

    # Rotate the ecliptic direction cosines about the equinox axis
    xe = math.cos(lat_rad) * math.cos(lon_rad)
    ye = math.cos(obliquity) * math.cos(lat_rad) * math.sin(lon_rad) - math.sin(
        obliquity
    ) * math.sin(lat_rad)
    ze = math.sin(obliquity) * math.cos(lat_rad) * math.sin(lon_rad) + math.cos(
        obliquity
    ) * math.sin(lat_rad)

    right_ascension = math.atan2(ye, xe)
    declination = math.asin(clamp(ze, -1.0, 1.0))
    return right_ascension, declination


def moon_position_at(
    latitude: float, longitude: float, julian_date: float
) -> HorizontalPosition:
    right_ascension, declination = moon_equatorial(julian_date)
    return equatorial_to_horizontal(
        right_ascension, declination, latitude, longitude, julian_date
    )


def moon_position(
    latitude: float,
    longitude: float,
    instant: Optional[Union[UtcDateTime, datetime]] = None,
) -> HorizontalPosition:
    """Altitude and azimuth of the Moon for an observer.

    Args:
        latitude: Observer latitude in degrees, positive north
        longitude: Observer longitude in degrees, positive east
        instant: UTC instant; defaults to the current time

    Returns:
        HorizontalPosition of the Moon
    """
    location = ObserverLocation(latitude, longitude)
    return moon_position_at(location.latitude, location.longitude, julian_day(instant))
