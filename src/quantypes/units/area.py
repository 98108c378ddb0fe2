"""Types and constants for handling areas."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.core.utils import pretty_unit_name
from quantypes.units.length import CENTIMETRE, FOOT, INCH, KILOMETRE, MILE, MILLIMETRE, YARD

# Scale of each unit relative to the base unit (square metre)
SQUARE_MILLIMETRE = MILLIMETRE ** 2
SQUARE_CENTIMETRE = CENTIMETRE ** 2
HECTARE = 1e4
SQUARE_KILOMETRE = KILOMETRE ** 2

SQUARE_INCH = INCH ** 2
SQUARE_FOOT = FOOT ** 2
SQUARE_YARD = YARD ** 2
ACRE = 4840 * SQUARE_YARD
SQUARE_MILE = MILE ** 2


class Area(LinearMeasurement):
    """
    An area, stored in square metres.

    Length * Length gives an Area; Area / Length gives a Length back.
    """

    base_units_name = pretty_unit_name("m^2")
    appropriate_units = (
        (pretty_unit_name("mm^2"), SQUARE_MILLIMETRE),
        (pretty_unit_name("cm^2"), SQUARE_CENTIMETRE),
        (pretty_unit_name("m^2"), 1.0),
        ("ha", HECTARE),
        (pretty_unit_name("km^2"), SQUARE_KILOMETRE),
    )

    @classmethod
    def from_square_millimetres(cls, square_millimetres: float) -> Area:
        return cls.from_base_units(square_millimetres * SQUARE_MILLIMETRE)

    @classmethod
    def from_square_centimetres(cls, square_centimetres: float) -> Area:
        return cls.from_base_units(square_centimetres * SQUARE_CENTIMETRE)

    @classmethod
    def from_square_metres(cls, square_metres: float) -> Area:
        return cls.from_base_units(square_metres)

    @classmethod
    def from_square_meters(cls, square_meters: float) -> Area:
        return cls.from_base_units(square_meters)

    @classmethod
    def from_hectares(cls, hectares: float) -> Area:
        return cls.from_base_units(hectares * HECTARE)

    @classmethod
    def from_square_kilometres(cls, square_kilometres: float) -> Area:
        return cls.from_base_units(square_kilometres * SQUARE_KILOMETRE)

    @classmethod
    def from_square_inches(cls, square_inches: float) -> Area:
        return cls.from_base_units(square_inches * SQUARE_INCH)

    @classmethod
    def from_square_feet(cls, square_feet: float) -> Area:
        return cls.from_base_units(square_feet * SQUARE_FOOT)

    @classmethod
    def from_square_yards(cls, square_yards: float) -> Area:
        return cls.from_base_units(square_yards * SQUARE_YARD)

    @classmethod
    def from_acres(cls, acres: float) -> Area:
        return cls.from_base_units(acres * ACRE)

    @classmethod
    def from_square_miles(cls, square_miles: float) -> Area:
        return cls.from_base_units(square_miles * SQUARE_MILE)

    def as_square_millimetres(self) -> float:
        return self._base / SQUARE_MILLIMETRE

    def as_square_centimetres(self) -> float:
        return self._base / SQUARE_CENTIMETRE

    def as_square_metres(self) -> float:
        return self._base

    def as_square_meters(self) -> float:
        return self._base

    def as_hectares(self) -> float:
        return self._base / HECTARE

    def as_square_kilometres(self) -> float:
        return self._base / SQUARE_KILOMETRE

    def as_square_inches(self) -> float:
        return self._base / SQUARE_INCH

    def as_square_feet(self) -> float:
        return self._base / SQUARE_FOOT

    def as_square_yards(self) -> float:
        return self._base / SQUARE_YARD

    def as_acres(self) -> float:
        return self._base / ACRE

    def as_square_miles(self) -> float:
        return self._base / SQUARE_MILE


__all__ = ["Area"]
