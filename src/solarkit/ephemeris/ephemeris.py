from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Dict, Optional, Union

from ..body import Body
from ..logging import get_logger
from ..space_time.julian_calc import julian_day
from ..space_time.utc_datetime import UtcDateTime
from .models import HorizontalPosition, ObserverLocation
from .moon import moon_position_at
from .sun import sun_position_at
from .time_spec import TimeSpec, to_julian

logger = get_logger(__name__)

Time = Union[UtcDateTime, datetime, float]


class Ephemeris(ABC):
    """
    Abstract interface for sources of apparent body positions.

    Implementations place a body in an observer's sky at one instant or
    across the instants of a TimeSpec.
    """

    @abstractmethod
    def get_position(
        self,
        body: Body,
        location: ObserverLocation,
        time: Optional[Time] = None,
    ) -> HorizontalPosition:
        """
        Get a body's horizontal position at a specific time.

        Args:
            body: The body to locate.
            location: Where the observer stands.
            time: The time for which to compute the position.
                  If None, the current time is used.
                  Can be a Julian date float, a UtcDateTime or an aware datetime.

        Returns:
            The altitude and azimuth of the body.
        """
        pass

    @abstractmethod
    def get_positions(
        self,
        body: Body,
        location: ObserverLocation,
        time_spec: TimeSpec,
    ) -> Dict[float, HorizontalPosition]:
        """
        Get a body's positions for multiple times specified by a TimeSpec.

        Returns:
            A dictionary mapping Julian dates (as floats) to positions.
        """
        pass


class LowPrecisionEphemeris(Ephemeris):
    """Ephemeris backed by the closed-form Sun and Moon series."""

    _MODELS: Dict[Body, Callable[[float, float, float], HorizontalPosition]] = {
        Body.SUN: sun_position_at,
        Body.MOON: moon_position_at,
    }

    def _position_at(
        self, body: Body, location: ObserverLocation, jd: float
    ) -> HorizontalPosition:
        model = self._MODELS[body]
        return model(location.latitude, location.longitude, jd)

    def get_position(
        self,
        body: Body,
        location: ObserverLocation,
        time: Optional[Time] = None,
    ) -> HorizontalPosition:
        jd = julian_day() if time is None else to_julian(time)
        position = self._position_at(body, location, jd)
        logger.debug(
            f"{body.display_name} at {location} JD {jd:.6f}: "
            f"alt={position.altitude:.4f} az={position.azimuth:.4f}"
        )
        return position

    def get_positions(
        self,
        body: Body,
        location: ObserverLocation,
        time_spec: TimeSpec,
    ) -> Dict[float, HorizontalPosition]:
        julian_days = time_spec.to_julian_days()
        logger.debug(
            f"Computing {len(julian_days)} {body.display_name} positions at {location}"
        )
        return {jd: self._position_at(body, location, jd) for jd in julian_days}
