"""Compare a pointing direction against a body's position.

Each check is a pure function of the current reading; remembering whether a
body was already reported is the caller's job.
"""

from typing import Tuple

from .ephemeris.models import HorizontalPosition
from .ephemeris.util import azimuth_difference, signed_azimuth_offset

DEFAULT_AZIMUTH_TOLERANCE = 10.0
DEFAULT_ALTITUDE_TOLERANCE = 5.0


def alignment_offsets(
    azimuth: float, altitude: float, target: HorizontalPosition
) -> Tuple[float, float]:
    """How far to turn to face the target.

    Args:
        azimuth: Pointing azimuth in degrees, true north
        altitude: Pointing elevation in degrees
        target: Position of the body

    Returns:
        (azimuth offset in [-180, 180), positive clockwise;
         altitude offset, positive upward)
    """
    return (
        signed_azimuth_offset(azimuth, target.azimuth),
        target.altitude - altitude,
    )


def is_aligned(
    azimuth: float,
    altitude: float,
    target: HorizontalPosition,
    azimuth_tolerance: float = DEFAULT_AZIMUTH_TOLERANCE,
    altitude_tolerance: float = DEFAULT_ALTITUDE_TOLERANCE,
) -> bool:
    """Whether a pointing direction is within tolerance of the target."""
    return (
        azimuth_difference(azimuth, target.azimuth) <= azimuth_tolerance
        and abs(altitude - target.altitude) <= altitude_tolerance
    )
