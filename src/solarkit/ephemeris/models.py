from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidInputError


@dataclass(frozen=True)
class HorizontalPosition:
    """Where a body appears in the observer's sky."""

    altitude: float  # in degrees, positive above the horizon
    azimuth: float  # in degrees [0, 360), clockwise from true north

    def is_above_horizon(self) -> bool:
        return self.altitude > 0.0


@dataclass(frozen=True)
class ObserverLocation:
    """A location on Earth for astronomical observations."""

    latitude: float  # in degrees, positive north
    longitude: float  # in degrees, positive east
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the coordinates."""
        if not -90 <= self.latitude <= 90:
            raise InvalidInputError("Latitude must be between -90 and 90 degrees")
        if not -180 <= self.longitude <= 180:
            raise InvalidInputError("Longitude must be between -180 and 180 degrees")

    def __str__(self) -> str:
        """Return string representation of location.

        Returns:
            str: Location in format "lat,lon" prefixed by the name when set
        """
        coordinates = f"{self.latitude:.4f},{self.longitude:.4f}"
        if self.name:
            return f"{self.name} ({coordinates})"
        return coordinates
