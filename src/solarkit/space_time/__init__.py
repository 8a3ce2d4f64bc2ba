from .utc_datetime import UtcDateTime, as_utc_datetime
from .julian_calc import J2000, check_julian_date, julian_day, julian_to_utc
from .sidereal import (
    greenwich_sidereal_degrees,
    local_sidereal_degrees,
    sidereal_time_from_julian,
    sidereal_time_from_datetime,
)

__all__ = [
    "UtcDateTime",
    "as_utc_datetime",
    "J2000",
    "check_julian_date",
    "julian_day",
    "julian_to_utc",
    "greenwich_sidereal_degrees",
    "local_sidereal_degrees",
    "sidereal_time_from_julian",
    "sidereal_time_from_datetime",
]
