"""Exceptions raised by solarkit."""


class InvalidInputError(ValueError):
    """Raised when an instant, location or request cannot be used."""

    pass
