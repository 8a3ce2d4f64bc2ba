"""CLI command for converting between UTC instants and Julian dates."""

import click

from ..errors import InvalidInputError
from ..space_time.julian_calc import julian_day, julian_to_utc
from .common import parse_date_input


@click.command()
@click.argument("date", default="now")
def julian(date: str) -> None:
    """Convert a UTC instant to a Julian date, or a Julian date to UTC.

    Examples:

       solarkit julian 2000-01-01T12:00:00

       solarkit julian 2451545.0
    """
    try:
        parsed = parse_date_input(date)
        if isinstance(parsed, float):
            click.echo(julian_to_utc(parsed).isoformat())
        else:
            click.echo(f"{julian_day(parsed):.6f}")
    except InvalidInputError as e:
        raise click.BadParameter(str(e), param_hint="DATE")
