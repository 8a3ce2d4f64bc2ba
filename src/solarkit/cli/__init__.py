"""CLI entry point for solarkit."""

import click

from .position import position
from .julian import julian
from .aim import aim
from . import common as common
from ..logging import get_logger


logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Sun and Moon positions for an observer."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(position)
cli.add_command(julian)
cli.add_command(aim)

if __name__ == "__main__":
    cli()
