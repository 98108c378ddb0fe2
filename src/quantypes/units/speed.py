"""Types and constants for handling speed."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.units.length import FOOT, KILOMETRE, MILE, NAUTICAL_MILE

SECONDS_PER_HOUR = 3600.0

# Scale of each unit relative to the base unit (metre per second)
KILOMETRE_PER_HOUR = KILOMETRE / SECONDS_PER_HOUR
MILE_PER_HOUR = MILE / SECONDS_PER_HOUR
KNOT = NAUTICAL_MILE / SECONDS_PER_HOUR
FOOT_PER_SECOND = FOOT


class Speed(LinearMeasurement):
    """
    A speed, stored in metres per second.

    Example
    -------
    >>> from datetime import timedelta
    >>> trip = Speed.from_kilometres_per_hour(90) * timedelta(hours=2)
    >>> trip.as_kilometres()
    180.0
    """

    base_units_name = "m/s"

    @classmethod
    def from_meters_per_second(cls, meters_per_second: float) -> Speed:
        return cls.from_base_units(meters_per_second)

    @classmethod
    def from_metres_per_second(cls, metres_per_second: float) -> Speed:
        return cls.from_base_units(metres_per_second)

    @classmethod
    def from_kilometers_per_hour(cls, kilometers_per_hour: float) -> Speed:
        return cls.from_base_units(kilometers_per_hour * KILOMETRE_PER_HOUR)

    @classmethod
    def from_kilometres_per_hour(cls, kilometres_per_hour: float) -> Speed:
        return cls.from_kilometers_per_hour(kilometres_per_hour)

    @classmethod
    def from_miles_per_hour(cls, miles_per_hour: float) -> Speed:
        return cls.from_base_units(miles_per_hour * MILE_PER_HOUR)

    @classmethod
    def from_knots(cls, knots: float) -> Speed:
        return cls.from_base_units(knots * KNOT)

    @classmethod
    def from_feet_per_second(cls, feet_per_second: float) -> Speed:
        return cls.from_base_units(feet_per_second * FOOT_PER_SECOND)

    def as_meters_per_second(self) -> float:
        return self._base

    def as_metres_per_second(self) -> float:
        return self._base

    def as_kilometers_per_hour(self) -> float:
        return self._base / KILOMETRE_PER_HOUR

    def as_kilometres_per_hour(self) -> float:
        return self.as_kilometers_per_hour()

    def as_miles_per_hour(self) -> float:
        return self._base / MILE_PER_HOUR

    def as_knots(self) -> float:
        return self._base / KNOT

    def as_feet_per_second(self) -> float:
        return self._base / FOOT_PER_SECOND


__all__ = ["Speed"]
