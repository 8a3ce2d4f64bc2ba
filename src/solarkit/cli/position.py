"""CLI command for computing Sun and Moon positions."""

import json
import sys
from typing import Any, Dict, List, Optional, Tuple

import click

from ..body import Body
from ..ephemeris.ephemeris import LowPrecisionEphemeris
from ..ephemeris.models import ObserverLocation
from ..ephemeris.util import format_altitude, format_azimuth
from ..errors import InvalidInputError
from ..logging import get_logger
from ..space_time.julian_calc import julian_to_utc
from .common import build_time_spec

logger = get_logger(__name__)

BODY_CHOICES = [body.value for body in Body] + ["all"]


def latitude_option(f: Any) -> Any:
    return click.option(
        "--lat",
        "latitude",
        type=click.FloatRange(-90.0, 90.0),
        envvar="SOLARKIT_LATITUDE",
        required=True,
        help="Observer latitude in degrees, positive north. Env: SOLARKIT_LATITUDE.",
    )(f)


def longitude_option(f: Any) -> Any:
    return click.option(
        "--lon",
        "longitude",
        type=click.FloatRange(-180.0, 180.0),
        envvar="SOLARKIT_LONGITUDE",
        required=True,
        help="Observer longitude in degrees, positive east. Env: SOLARKIT_LONGITUDE.",
    )(f)


def selected_bodies(body: str) -> List[Body]:
    if body.lower() == "all":
        return list(Body)
    return [Body.from_name(body)]


@click.command()
@click.argument("body", type=click.Choice(BODY_CHOICES, case_sensitive=False))
@latitude_option
@longitude_option
@click.option(
    "--date",
    "-d",
    multiple=True,
    default=(),
    help="Date(s) to compute positions for. Can be specified multiple times. "
    "Use ISO format (UTC when no offset is given), a Julian date, or 'now'.",
)
@click.option("--start", help="Start date for range (ISO format or Julian date)")
@click.option("--stop", help="Stop date for range (ISO format or Julian date)")
@click.option("--step", help="Step size for range (e.g. '30s', '5m', '1h', '1d')")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Defaults to text.",
)
def position(
    body: str,
    latitude: float,
    longitude: float,
    date: Tuple[str, ...],
    start: Optional[str] = None,
    stop: Optional[str] = None,
    step: Optional[str] = None,
    output_format: str = "text",
) -> None:
    """Get the altitude and azimuth of the Sun or the Moon.

    Examples:

    Right now:
       solarkit position sun --lat 31.46 --lon 74.31

    Single time point:
       solarkit position moon --lat 31.46 --lon 74.31 --date 2025-03-19T20:00:00

    Time range, both bodies:
       solarkit position all --lat 31.46 --lon 74.31 --start 2025-03-19T20:00:00 --stop 2025-03-19T22:00:00 --step 30m
    """
    time_spec = build_time_spec(date, start, stop, step)

    try:
        location = ObserverLocation(latitude, longitude)
        ephemeris = LowPrecisionEphemeris()
        rows: List[Dict[str, Any]] = []
        for body_enum in selected_bodies(body):
            results = ephemeris.get_positions(body_enum, location, time_spec)
            for jd, pos in sorted(results.items()):
                rows.append(
                    {
                        "body": body_enum.value,
                        "julian_date": jd,
                        "utc": julian_to_utc(jd).isoformat(),
                        "altitude": pos.altitude,
                        "azimuth": pos.azimuth,
                    }
                )
    except InvalidInputError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)

    logger.info(f"Computed {len(rows)} positions for {location}")

    if output_format == "json":
        click.echo(json.dumps(rows, indent=2))
        return

    for row in rows:
        click.echo(f"JD {row['julian_date']:.6f} {row['utc']}")
        click.echo(
            f"{row['body'].capitalize()} altitude {format_altitude(row['altitude'])}, "
            f"azimuth {format_azimuth(row['azimuth'])}"
        )
        click.echo("")
