"""Calendar instant in UTC, the time input of every position query."""

import calendar
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from ..errors import InvalidInputError
from .pythonic_datetimes import ensure_utc, get_utc_datetime, utc_now


@dataclass(frozen=True)
class UtcDateTime:
    """A UTC calendar instant with whole-second resolution."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        """Validate the calendar fields."""
        if not 1 <= self.month <= 12:
            raise InvalidInputError(f"Month must be between 1 and 12, got {self.month}")
        days_in_month = calendar.monthrange(self.year, self.month)[1]
        if not 1 <= self.day <= days_in_month:
            raise InvalidInputError(
                f"Day must be between 1 and {days_in_month} for "
                f"{self.year}-{self.month:02d}, got {self.day}"
            )
        if not 0 <= self.hour <= 23:
            raise InvalidInputError(f"Hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidInputError(
                f"Minute must be between 0 and 59, got {self.minute}"
            )
        if not 0 <= self.second <= 59:
            raise InvalidInputError(
                f"Second must be between 0 and 59, got {self.second}"
            )

    @classmethod
    def from_datetime(cls, dt: datetime) -> "UtcDateTime":
        """Build from a timezone-aware datetime. Microseconds are dropped."""
        dt = ensure_utc(dt)
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    @classmethod
    def now(cls) -> "UtcDateTime":
        return cls.from_datetime(utc_now())

    def to_datetime(self) -> datetime:
        return get_utc_datetime(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}T"
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}Z"
        )

    def __str__(self) -> str:
        return self.isoformat()


def as_utc_datetime(instant: Optional[Union[UtcDateTime, datetime]]) -> UtcDateTime:
    """Normalize the accepted instant inputs; None means the current time."""
    if instant is None:
        return UtcDateTime.now()
    if isinstance(instant, UtcDateTime):
        return instant
    if isinstance(instant, datetime):
        return UtcDateTime.from_datetime(instant)
    raise InvalidInputError(
        f"Expected UtcDateTime or datetime, got {type(instant).__name__}"
    )
