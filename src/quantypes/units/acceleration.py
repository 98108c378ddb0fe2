"""Types and constants for handling acceleration."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.core.utils import pretty_unit_name
from quantypes.units.length import FOOT

# Scale of each unit relative to the base unit (metre per second squared)
FOOT_PER_SECOND_SQUARED = FOOT
STANDARD_GRAVITY = 9.80665


class Acceleration(LinearMeasurement):
    """
    An acceleration, stored in metres per second per second.

    Example
    -------
    From standstill to 120 mph in 10 s:

    >>> from datetime import timedelta
    >>> from quantypes import Speed
    >>> finish = Speed.from_miles_per_hour(120.0)
    >>> accel = finish / timedelta(seconds=10)
    >>> round(accel.as_meters_per_second_per_second(), 2)
    5.36
    """

    base_units_name = pretty_unit_name("m/s^2")

    @classmethod
    def from_meters_per_second_per_second(cls, meters_per_second_per_second: float) -> Acceleration:
        return cls.from_base_units(meters_per_second_per_second)

    @classmethod
    def from_metres_per_second_per_second(cls, metres_per_second_per_second: float) -> Acceleration:
        return cls.from_base_units(metres_per_second_per_second)

    @classmethod
    def from_feet_per_second_per_second(cls, feet_per_second_per_second: float) -> Acceleration:
        return cls.from_base_units(feet_per_second_per_second * FOOT_PER_SECOND_SQUARED)

    @classmethod
    def from_standard_gravities(cls, gravities: float) -> Acceleration:
        """Multiples of standard gravity (g0 = 9.80665 m/s²)."""
        return cls.from_base_units(gravities * STANDARD_GRAVITY)

    def as_meters_per_second_per_second(self) -> float:
        return self._base

    def as_metres_per_second_per_second(self) -> float:
        return self._base

    def as_feet_per_second_per_second(self) -> float:
        return self._base / FOOT_PER_SECOND_SQUARED

    def as_standard_gravities(self) -> float:
        return self._base / STANDARD_GRAVITY


__all__ = ["Acceleration"]
