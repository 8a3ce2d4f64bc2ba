"""Angle helpers shared by the time and position calculations."""


def normalize_degrees(angle: float) -> float:
    """Wrap an angle into [0, 360) degrees.

    Args:
        angle: Angle in degrees, any sign or magnitude

    Returns:
        Equivalent angle in [0, 360)
    """
    result = angle % 360.0
    # A tiny negative angle can round up to exactly 360.0
    if result >= 360.0:
        return 0.0
    return result


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
