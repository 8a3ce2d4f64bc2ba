"""Utility functions for horizontal position formatting and comparison."""

from ..angles import normalize_degrees

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def azimuth_difference(a: float, b: float) -> float:
    """Smallest angle between two compass bearings.

    Args:
        a: Bearing in degrees
        b: Bearing in degrees

    Returns:
        Angle in degrees within [0, 180]
    """
    diff = abs(a - b) % 360.0
    return 360.0 - diff if diff > 180.0 else diff


def signed_azimuth_offset(source: float, target: float) -> float:
    """Turn from ``source`` to ``target`` in degrees, positive clockwise, in [-180, 180)."""
    return normalize_degrees(target - source + 180.0) - 180.0


def get_compass_point(azimuth: float) -> str:
    """Get the 16-wind compass point for an azimuth.

    Args:
        azimuth: Azimuth in degrees clockwise from north

    Returns:
        Compass abbreviation such as "N" or "SSW"
    """
    index = int(normalize_degrees(azimuth) / 22.5 + 0.5) % 16
    return COMPASS_POINTS[index]


def format_altitude(altitude: float) -> str:
    """Format altitude with a note when the body is below the horizon.

    Args:
        altitude: Altitude in degrees

    Returns:
        String representing the formatted altitude
    """
    if altitude < 0:
        return f"{altitude:.2f}° (below horizon)"
    return f"{altitude:.2f}°"


def format_azimuth(azimuth: float) -> str:
    """Format azimuth with its compass point.

    Args:
        azimuth: Azimuth in degrees

    Returns:
        String representing the formatted azimuth
    """
    return f"{azimuth:.2f}° {get_compass_point(azimuth)}"
