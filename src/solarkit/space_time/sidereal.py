from datetime import datetime

from ..angles import normalize_degrees
from .julian_calc import J2000, julian_day


def greenwich_sidereal_degrees(julian_date: float) -> float:
    """
    Greenwich Mean Sidereal Time as an angle in [0, 360) degrees.

    Parameters:
    julian_date (float): The Julian Date in UTC.
    """
    d = julian_date - J2000
    return normalize_degrees(280.46061837 + 360.98564736629 * d)


def local_sidereal_degrees(julian_date: float, longitude: float) -> float:
    """
    Local Mean Sidereal Time as an angle in [0, 360) degrees.

    Parameters:
    julian_date (float): The Julian Date in UTC.
    longitude (float): Observer's longitude in degrees.
                       Positive for East of Prime Meridian,
                       Negative for West.
    """
    return normalize_degrees(greenwich_sidereal_degrees(julian_date) + longitude)


def sidereal_time_from_julian(julian_date: float, longitude: float) -> float:
    """
    Calculate Local Mean Sidereal Time (LMST) for a given Julian Date and longitude.

    Returns:
    float: LMST in decimal hours (0 <= LMST < 24).
    """
    return local_sidereal_degrees(julian_date, longitude) / 15.0


def sidereal_time_from_datetime(dt: datetime, longitude: float) -> float:
    return sidereal_time_from_julian(julian_day(dt), longitude)
