"""Julian date calculation module.

Converts UTC calendar instants to Julian dates and back using the
low-precision civil-calendar algorithm from Meeus, "Astronomical Algorithms".
Only dates after 1582 (Gregorian calendar adoption) are supported.
"""

import math
from datetime import datetime, timedelta
from typing import Optional, Union

from ..errors import InvalidInputError
from .pythonic_datetimes import get_utc_datetime
from .utc_datetime import UtcDateTime, as_utc_datetime

# Julian date of the J2000.0 epoch, 2000-01-01 12:00 UTC
J2000 = 2451545.0


def _gregorian_day_start(year: int, month: int, day: int) -> float:
    """Julian date at 0h UTC of a Gregorian calendar date.

    Raises:
        InvalidInputError: If the year is before 1583
    """
    if year < 1583:
        raise InvalidInputError("Dates before 1583 are not supported")

    # Jan & Feb are months 13 & 14 of the previous year
    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + (a // 4)

    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
    )


# Supported Julian dates run from 1583-01-01T00:00:00 to 9999-12-31T23:59:59 UTC
MIN_JULIAN_DATE = _gregorian_day_start(1583, 1, 1)
MAX_JULIAN_DATE = _gregorian_day_start(9999, 12, 31) + 86399 / 86400.0


def check_julian_date(jd: float) -> float:
    """Return jd as a float if it is a supported Julian date.

    Raises:
        InvalidInputError: If jd is not finite or lies outside 1583-9999
    """
    jd = float(jd)
    if not math.isfinite(jd):
        raise InvalidInputError(f"Julian date must be finite, got {jd}")
    if not MIN_JULIAN_DATE <= jd <= MAX_JULIAN_DATE:
        raise InvalidInputError(
            f"Julian date {jd} is outside the supported range "
            f"1583-01-01 to 9999-12-31"
        )
    return jd


def _day_fraction(hour: int, minute: int, second: int) -> float:
    """Fraction of the day elapsed at the given time of day."""
    return (hour + minute / 60.0 + second / 3600.0) / 24.0


def julian_day(instant: Optional[Union[UtcDateTime, datetime]] = None) -> float:
    """Convert a UTC instant to a Julian date.

    Args:
        instant: UtcDateTime or timezone-aware datetime. Defaults to now.

    Returns:
        Julian date (JD)
    """
    utc = as_utc_datetime(instant)
    jd_day = _gregorian_day_start(utc.year, utc.month, utc.day)
    return jd_day + _day_fraction(utc.hour, utc.minute, utc.second)


def julian_to_utc(jd: float) -> UtcDateTime:
    """Convert a Julian date to a UtcDateTime, rounded to the nearest second.

    Args:
        jd: Julian date

    Returns:
        UtcDateTime for the same instant

    Raises:
        InvalidInputError: If jd is not a supported Julian date
    """
    jd_plus_half = check_julian_date(jd) + 0.5
    z = math.floor(jd_plus_half)
    f = jd_plus_half - z

    alpha = math.floor((z - 1867216.25) / 36524.25)
    a = z + 1 + alpha - alpha // 4

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    # Rounding the seconds can roll the time over into the next day
    midnight = get_utc_datetime(year, month, day)
    dt = midnight + timedelta(seconds=round(f * 86400))
    return UtcDateTime.from_datetime(dt)
