"""Sun and Moon positions in an observer's sky from closed-form series."""

from .errors import InvalidInputError
from .body import Body
from .space_time.utc_datetime import UtcDateTime
from .space_time.julian_calc import julian_day, julian_to_utc
from .ephemeris.models import HorizontalPosition, ObserverLocation
from .ephemeris.sun import sun_position
from .ephemeris.moon import moon_position
from .ephemeris.ephemeris import Ephemeris, LowPrecisionEphemeris
from .ephemeris.time_spec import TimeSpec
from .angles import normalize_degrees
from .pointing import alignment_offsets, is_aligned

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "Body",
    "UtcDateTime",
    "julian_day",
    "julian_to_utc",
    "HorizontalPosition",
    "ObserverLocation",
    "sun_position",
    "moon_position",
    "Ephemeris",
    "LowPrecisionEphemeris",
    "TimeSpec",
    "normalize_degrees",
    "alignment_offsets",
    "is_aligned",
]
