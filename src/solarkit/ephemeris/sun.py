"""Low-precision solar position.

Mean longitude and mean anomaly with the first two terms of the equation
of center; good to roughly 0.01 degrees in declination for dates near J2000.
"""

import math
from datetime import datetime
from typing import Optional, Tuple, Union

from ..space_time.julian_calc import J2000, julian_day
from ..space_time.utc_datetime import UtcDateTime
from .horizontal import equatorial_to_horizontal
from .models import HorizontalPosition, ObserverLocation


def sun_equatorial(julian_date: float) -> Tuple[float, float]:
    """Apparent right ascension and declination of the Sun.

    Args:
        julian_date: Julian date (UTC)

    Returns:
        (right ascension, declination) in radians; right ascension in (-pi, pi]
    """
    n = julian_date - J2000

    mean_longitude = (280.460 + 0.9856474 * n) % 360
    mean_anomaly = math.radians((357.528 + 0.9856003 * n) % 360)
    ecliptic_longitude = math.radians(
        mean_longitude
        + 1.915 * math.sin(mean_anomaly)
        + 0.020 * math.sin(2 * mean_anomaly)
    )
    obliquity = math.radians(23.439 - 0.0000004 * n)

    right_ascension = math.atan2(
        math.cos(obliquity) * math.sin(ecliptic_longitude),
        math.cos(ecliptic_longitude),
    )
    declination = math.asin(math.sin(obliquity) * math.sin(ecliptic_longitude))
    return right_ascension, declination


def sun_position_at(
    latitude: float, longitude: float, julian_date: float
) -> HorizontalPosition:
    right_ascension, declination = sun_equatorial(julian_date)
    return equatorial_to_horizontal(
        right_ascension, declination, latitude, longitude, julian_date
    )


def sun_position(
    latitude: float,
    longitude: float,
    instant: Optional[Union[UtcDateTime, datetime]] = None,
) -> HorizontalPosition:
    """Altitude and azimuth of the Sun for an observer.

    Args:
        latitude: Observer latitude in degrees, positive north
        longitude: Observer longitude in degrees, positive east
        instant: UTC instant; defaults to the current time

    Returns:
        HorizontalPosition of the Sun
    """
    location = ObserverLocation(latitude, longitude)
    return sun_position_at(location.latitude, location.longitude, julian_day(instant))
