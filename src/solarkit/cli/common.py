"""
Command-line interface utilities for solarkit.

This module provides logging configuration and the date parsing shared by
the solarkit commands.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Sequence, Union

import click

from ..ephemeris.time_spec import TimeSpec, parse_step
from ..errors import InvalidInputError
from ..logging import FORMATTER, set_log_level
from ..space_time.pythonic_datetimes import assume_utc
from ..space_time.utc_datetime import UtcDateTime

DateInput = Union[UtcDateTime, float]


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags: quiet, debug and verbose count
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(FORMATTER)
        root_logger.addHandler(handler)
    for handler in root_logger.handlers:
        handler.setLevel(log_level)

    # Apply log level to all solarkit loggers
    set_log_level(log_level)

    root_logger.debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def parse_date_input(date_str: str) -> DateInput:
    """Parse date input in various formats.

    Args:
        date_str: Date string in various formats:
            - Julian date (e.g., "2460385.333333333")
            - ISO format with timezone (e.g., "2024-03-15T20:00:00+05:00")
            - ISO format without timezone, taken as UTC (e.g., "2024-03-15T20:00:00")
            - "now"

    Returns:
        Either a UtcDateTime (for ISO format or "now") or a float (for Julian date)

    Raises:
        InvalidInputError: If date string is invalid
    """
    if date_str.strip().lower() == "now":
        return UtcDateTime.now()

    try:
        return float(date_str.strip("' "))
    except ValueError:
        pass

    iso = date_str.strip()
    if iso.endswith(("Z", "z")):
        iso = iso[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(iso)
    except ValueError:
        raise InvalidInputError(f"Invalid date format: {date_str}")
    return UtcDateTime.from_datetime(assume_utc(dt))


def build_time_spec(
    dates: Sequence[str],
    start: Optional[str] = None,
    stop: Optional[str] = None,
    step: Optional[str] = None,
) -> TimeSpec:
    """Turn the --date/--start/--stop/--step options into a TimeSpec.

    With no options at all the current time is used.

    Raises:
        click.BadParameter: If the options are incomplete or invalid
    """
    range_options = [start, stop, step]
    try:
        if dates:
            if any(range_options):
                raise click.BadParameter("--date cannot be combined with a range")
            return TimeSpec.from_dates([parse_date_input(d) for d in dates])
        if all(range_options):
            parse_step(step)  # type: ignore[arg-type]
            return TimeSpec.from_range(
                parse_date_input(start),  # type: ignore[arg-type]
                parse_date_input(stop),  # type: ignore[arg-type]
                step,  # type: ignore[arg-type]
            )
        if any(range_options):
            raise click.BadParameter(
                "Must specify either --date or all of --start, --stop, and --step"
            )
        return TimeSpec.from_dates([UtcDateTime.now()])
    except InvalidInputError as e:
        raise click.BadParameter(str(e))
