from enum import Enum

from .errors import InvalidInputError


class Body(Enum):
    """Celestial bodies the ephemeris can place in the sky."""

    SUN = "sun"
    MOON = "moon"

    @classmethod
    def from_name(cls, name: str) -> "Body":
        """Look up a body by case-insensitive name.

        Raises:
            InvalidInputError: If the name is not a known body
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidInputError(f"Unknown body: {name}")

    @property
    def display_name(self) -> str:
        return self.name.capitalize()
