"""CLI command for checking whether a pointing direction faces a body."""

import sys
from typing import Optional

import click

from ..body import Body
from ..ephemeris.ephemeris import LowPrecisionEphemeris
from ..ephemeris.models import ObserverLocation
from ..ephemeris.util import format_altitude, format_azimuth
from ..errors import InvalidInputError
from ..pointing import (
    DEFAULT_ALTITUDE_TOLERANCE,
    DEFAULT_AZIMUTH_TOLERANCE,
    alignment_offsets,
    is_aligned,
)
from .common import parse_date_input
from .position import latitude_option, longitude_option


@click.command()
@click.argument("body", type=click.Choice([b.value for b in Body], case_sensitive=False))
@latitude_option
@longitude_option
@click.option(
    "--azimuth",
    type=float,
    required=True,
    help="Pointing azimuth in degrees from true north.",
)
@click.option(
    "--altitude",
    type=click.FloatRange(-90.0, 90.0),
    required=True,
    help="Pointing elevation in degrees above the horizon.",
)
@click.option("--date", "-d", default=None, help="Instant to check. Defaults to now.")
@click.option(
    "--azimuth-tolerance",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_AZIMUTH_TOLERANCE,
    show_default=True,
)
@click.option(
    "--altitude-tolerance",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_ALTITUDE_TOLERANCE,
    show_default=True,
)
def aim(
    body: str,
    latitude: float,
    longitude: float,
    azimuth: float,
    altitude: float,
    date: Optional[str],
    azimuth_tolerance: float,
    altitude_tolerance: float,
) -> None:
    """Check whether a pointing direction is on the Sun or the Moon.

    Exits with status 0 when aligned and 1 otherwise.

    Example:

       solarkit aim sun --lat 31.46 --lon 74.31 --azimuth 172 --altitude 80
    """
    try:
        time = parse_date_input(date) if date else None
        body_enum = Body.from_name(body)
        target = LowPrecisionEphemeris().get_position(
            body_enum, ObserverLocation(latitude, longitude), time
        )
    except InvalidInputError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)

    azimuth_offset, altitude_offset = alignment_offsets(azimuth, altitude, target)
    aligned = is_aligned(
        azimuth,
        altitude,
        target,
        azimuth_tolerance=azimuth_tolerance,
        altitude_tolerance=altitude_tolerance,
    )

    click.echo(
        f"{body_enum.display_name} altitude {format_altitude(target.altitude)}, "
        f"azimuth {format_azimuth(target.azimuth)}"
    )
    click.echo(f"Turn {azimuth_offset:+.2f}° in azimuth, {altitude_offset:+.2f}° in altitude")
    click.echo("ALIGNED" if aligned else "NOT ALIGNED")
    sys.exit(0 if aligned else 1)
