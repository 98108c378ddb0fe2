"""Types and constants for handling angles."""
from __future__ import annotations

import math
from typing import Tuple

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (radian)
DEGREE = math.pi / 180.0
GRADIAN = math.pi / 200.0
TURN = 2.0 * math.pi
ARCMINUTE = DEGREE / 60.0
ARCSECOND = ARCMINUTE / 60.0


class Angle(LinearMeasurement):
    """
    An angle, stored in radians.

    Example
    -------
    >>> whole_cake = Angle.from_degrees(360.0)
    >>> slice_ = whole_cake / 6
    >>> round(slice_.as_degrees(), 6)
    60.0
    """

    base_units_name = "rad"

    @classmethod
    def from_str(cls, text: str) -> Angle:
        """Parse e.g. ``"90°"``, ``"1.5 rad"`` or ``"45"`` (degrees)."""
        from quantypes.units.parser import parse_angle

        return parse_angle(text)

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        return cls.from_base_units(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls.from_base_units(degrees * DEGREE)

    @classmethod
    def from_arcminutes(cls, arcminutes: float) -> Angle:
        return cls.from_base_units(arcminutes * ARCMINUTE)

    @classmethod
    def from_arcseconds(cls, arcseconds: float) -> Angle:
        return cls.from_base_units(arcseconds * ARCSECOND)

    @classmethod
    def from_gradians(cls, gradians: float) -> Angle:
        return cls.from_base_units(gradians * GRADIAN)

    @classmethod
    def from_turns(cls, turns: float) -> Angle:
        return cls.from_base_units(turns * TURN)

    # Inverse trigonometric constructors
    @classmethod
    def asin(cls, value: float) -> Angle:
        return cls.from_base_units(math.asin(value))

    @classmethod
    def acos(cls, value: float) -> Angle:
        return cls.from_base_units(math.acos(value))

    @classmethod
    def atan(cls, value: float) -> Angle:
        return cls.from_base_units(math.atan(value))

    @classmethod
    def atan2(cls, y: float, x: float) -> Angle:
        return cls.from_base_units(math.atan2(y, x))

    def as_radians(self) -> float:
        return self._base

    def as_degrees(self) -> float:
        return self._base / DEGREE

    def as_arcminutes(self) -> float:
        return self._base / ARCMINUTE

    def as_arcseconds(self) -> float:
        return self._base / ARCSECOND

    def as_gradians(self) -> float:
        return self._base / GRADIAN

    def as_turns(self) -> float:
        return self._base / TURN

    def sin(self) -> float:
        return math.sin(self._base)

    def cos(self) -> float:
        return math.cos(self._base)

    def tan(self) -> float:
        return math.tan(self._base)

    def sin_cos(self) -> Tuple[float, float]:
        return math.sin(self._base), math.cos(self._base)


__all__ = ["Angle"]
