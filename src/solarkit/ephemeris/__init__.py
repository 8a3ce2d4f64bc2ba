from .models import HorizontalPosition, ObserverLocation
from .horizontal import equatorial_to_horizontal
from .sun import sun_equatorial, sun_position
from .moon import moon_ecliptic, moon_equatorial, moon_position
from .ephemeris import Ephemeris, LowPrecisionEphemeris
from .util import (
    azimuth_difference,
    signed_azimuth_offset,
    get_compass_point,
    format_altitude,
    format_azimuth,
)
from .time_spec import TimeSpec, TimeSpecType

__all__ = [
    "HorizontalPosition",
    "ObserverLocation",
    "equatorial_to_horizontal",
    "sun_equatorial",
    "sun_position",
    "moon_ecliptic",
    "moon_equatorial",
    "moon_position",
    "Ephemeris",
    "LowPrecisionEphemeris",
    "azimuth_difference",
    "signed_azimuth_offset",
    "get_compass_point",
    "format_altitude",
    "format_azimuth",
    "TimeSpec",
    "TimeSpecType",
]
