"""Types and constants for handling angular velocity."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.units.angle import DEGREE, TURN

# Scale of each unit relative to the base unit (radian per second)
DEGREE_PER_SECOND = DEGREE
REVOLUTION_PER_SECOND = TURN
REVOLUTION_PER_MINUTE = TURN / 60.0


class AngularVelocity(LinearMeasurement):
    """
    An angular velocity, stored in radians per second.

    Power / Torque gives an AngularVelocity.

    Example
    -------
    >>> shaft = AngularVelocity.from_rpm(3000)
    >>> round(shaft.as_hertz(), 9)
    50.0
    """

    base_units_name = "rad/s"

    @classmethod
    def from_radians_per_second(cls, radians_per_second: float) -> AngularVelocity:
        return cls.from_base_units(radians_per_second)

    @classmethod
    def from_degrees_per_second(cls, degrees_per_second: float) -> AngularVelocity:
        return cls.from_base_units(degrees_per_second * DEGREE_PER_SECOND)

    @classmethod
    def from_rpm(cls, rpm: float) -> AngularVelocity:
        """Revolutions per minute."""
        return cls.from_base_units(rpm * REVOLUTION_PER_MINUTE)

    @classmethod
    def from_hertz(cls, hertz: float) -> AngularVelocity:
        """Revolutions per second."""
        return cls.from_base_units(hertz * REVOLUTION_PER_SECOND)

    def as_radians_per_second(self) -> float:
        return self._base

    def as_degrees_per_second(self) -> float:
        return self._base / DEGREE_PER_SECOND

    def as_rpm(self) -> float:
        return self._base / REVOLUTION_PER_MINUTE

    def as_hertz(self) -> float:
        return self._base / REVOLUTION_PER_SECOND


__all__ = ["AngularVelocity"]
