from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from ..errors import InvalidInputError
from ..space_time.julian_calc import check_julian_date, julian_day
from ..space_time.utc_datetime import UtcDateTime

TimePoint = Union[UtcDateTime, datetime, float]

STEP_UNITS_IN_DAYS = {
    "s": 1.0 / 86400.0,
    "m": 1.0 / 1440.0,
    "h": 1.0 / 24.0,
    "d": 1.0,
}

# Absorbs accumulated rounding when the stop time lands on a step
_STOP_TOLERANCE_DAYS = 1e-8


class TimeSpecType(Enum):
    RANGE = "RANGE"  # start/stop/step
    DATES = "DATES"  # list of specific dates


def to_julian(time: TimePoint) -> float:
    """Julian date for a UtcDateTime, aware datetime, or Julian date float.

    Raises:
        InvalidInputError: If the value is unsupported or out of range
    """
    if isinstance(time, (UtcDateTime, datetime)):
        return julian_day(time)
    if isinstance(time, (int, float)) and not isinstance(time, bool):
        return check_julian_date(time)
    raise InvalidInputError(f"Unsupported time value: {time!r}")


def parse_step(step_size: str) -> float:
    """Parse a step like '30s', '5m', '1h' or '1d' into days.

    Raises:
        InvalidInputError: If the step is malformed or not positive
    """
    if not step_size or len(step_size) < 2:
        raise InvalidInputError(
            "Invalid step size format. Must be like '30s', '1h', '5m', '1d'"
        )

    unit = step_size[-1].lower()
    if unit not in STEP_UNITS_IN_DAYS:
        raise InvalidInputError(
            "Step size must end with 's' (seconds), 'm' (minutes), "
            "'h' (hours), or 'd' (days)"
        )

    try:
        value = int(step_size[:-1])
    except ValueError:
        raise InvalidInputError(
            "Invalid step size format. Must be like '30s', '1h', '5m', '1d'"
        )
    if value <= 0:
        raise InvalidInputError("Step size value must be positive")

    return value * STEP_UNITS_IN_DAYS[unit]


@dataclass
class TimeSpec:
    """The instants a batch of position queries should be evaluated at."""

    dates: Optional[List[TimePoint]] = None
    start_time: Optional[TimePoint] = None
    stop_time: Optional[TimePoint] = None
    step_size: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate time parameters after initialization."""
        if self.start_time is not None and self.stop_time is not None:
            if to_julian(self.start_time) > to_julian(self.stop_time):
                raise InvalidInputError("Start time must be before stop time")

    @property
    def spec_type(self) -> TimeSpecType:
        if self.dates is not None:
            return TimeSpecType.DATES
        return TimeSpecType.RANGE

    @classmethod
    def from_dates(cls, dates: List[TimePoint]) -> "TimeSpec":
        """Create TimeSpec from a list of dates.

        Instants that resolve to the same Julian date share one entry in
        the position dictionaries an Ephemeris returns.

        Args:
            dates: UtcDateTime objects, aware datetimes or Julian dates

        Returns:
            TimeSpec: New TimeSpec instance
        """
        return cls(dates=list(dates))

    @classmethod
    def from_range(cls, start: TimePoint, stop: TimePoint, step: str) -> "TimeSpec":
        """Create TimeSpec from a time range.

        Args:
            start: Start instant
            stop: Stop instant, included when it lands on a step
            step: Step size string (e.g. "30s", "1h", "5m", "1d")

        Returns:
            TimeSpec: New TimeSpec instance
        """
        return cls(start_time=start, stop_time=stop, step_size=step)

    def to_julian_days(self) -> List[float]:
        """
        Convert the TimeSpec to a list of Julian dates.

        Raises:
            InvalidInputError: If neither dates nor a complete range is specified
        """
        if self.dates is not None:
            return [to_julian(date) for date in self.dates]

        if self.start_time is None or self.stop_time is None or self.step_size is None:
            raise InvalidInputError(
                "Must specify either dates list or complete range (start, stop, step)"
            )

        start_jd = to_julian(self.start_time)
        stop_jd = to_julian(self.stop_time)
        step_days = parse_step(self.step_size)

        # Multiply rather than accumulate so long ranges do not drift
        julian_days: List[float] = []
        index = 0
        current_jd = start_jd
        while current_jd <= stop_jd + _STOP_TOLERANCE_DAYS:
            julian_days.append(current_jd)
            index += 1
            current_jd = start_jd + index * step_days

        return julian_days
