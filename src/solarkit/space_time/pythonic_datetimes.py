from datetime import datetime, timezone
import pytz

from ..errors import InvalidInputError


class NaiveDateTimeError(InvalidInputError):
    """Raised when a datetime object has no timezone info."""

    pass


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current system time as an aware UTC datetime."""
    return datetime.now(pytz.UTC)


def assume_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime, or convert an aware one to UTC."""
    if dt.tzinfo is None:
        return pytz.UTC.localize(dt)
    return ensure_utc(dt)


def get_utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Create a UTC datetime object.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
        microsecond: Microsecond (0-999999)

    Returns:
        datetime: UTC datetime object
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=pytz.UTC,
    )
