"""Types and constants for handling volumes."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.core.utils import pretty_unit_name
from quantypes.units.length import CENTIMETRE, FOOT, INCH, KILOMETRE, MILLIMETRE, YARD

# Scale of each unit relative to the base unit (cubic metre)
CUBIC_MILLIMETRE = MILLIMETRE ** 3
CUBIC_CENTIMETRE = CENTIMETRE ** 3
MILLILITRE = CUBIC_CENTIMETRE
LITRE = 1e-3
CUBIC_KILOMETRE = KILOMETRE ** 3

CUBIC_INCH = INCH ** 3
CUBIC_FOOT = FOOT ** 3
CUBIC_YARD = YARD ** 3

# US customary liquid measures
US_GALLON = 231 * CUBIC_INCH
US_QUART = US_GALLON / 4
US_PINT = US_GALLON / 8
US_CUP = US_GALLON / 16
US_FLUID_OUNCE = US_GALLON / 128
US_TABLESPOON = US_FLUID_OUNCE / 2
US_TEASPOON = US_FLUID_OUNCE / 6

# Imperial measures
IMPERIAL_GALLON = 4.54609e-3
IMPERIAL_QUART = IMPERIAL_GALLON / 4
IMPERIAL_PINT = IMPERIAL_GALLON / 8
IMPERIAL_FLUID_OUNCE = IMPERIAL_GALLON / 160


class Volume(LinearMeasurement):
    """
    A volume, stored in cubic metres.

    Example
    -------
    >>> pint = Volume.from_imperial_pints(1)
    >>> round(pint.as_millilitres(), 1)
    568.3
    """

    base_units_name = pretty_unit_name("m^3")
    appropriate_units = (
        (pretty_unit_name("mm^3"), CUBIC_MILLIMETRE),
        (pretty_unit_name("cm^3"), CUBIC_CENTIMETRE),
        ("l", LITRE),
        (pretty_unit_name("m^3"), 1.0),
        (pretty_unit_name("km^3"), CUBIC_KILOMETRE),
    )

    # --- metric ---
    @classmethod
    def from_cubic_millimetres(cls, cubic_millimetres: float) -> Volume:
        return cls.from_base_units(cubic_millimetres * CUBIC_MILLIMETRE)

    @classmethod
    def from_cubic_centimetres(cls, cubic_centimetres: float) -> Volume:
        return cls.from_base_units(cubic_centimetres * CUBIC_CENTIMETRE)

    @classmethod
    def from_millilitres(cls, millilitres: float) -> Volume:
        return cls.from_base_units(millilitres * MILLILITRE)

    @classmethod
    def from_litres(cls, litres: float) -> Volume:
        return cls.from_base_units(litres * LITRE)

    @classmethod
    def from_liters(cls, liters: float) -> Volume:
        return cls.from_litres(liters)

    @classmethod
    def from_cubic_metres(cls, cubic_metres: float) -> Volume:
        return cls.from_base_units(cubic_metres)

    @classmethod
    def from_cubic_meters(cls, cubic_meters: float) -> Volume:
        return cls.from_base_units(cubic_meters)

    @classmethod
    def from_cubic_kilometres(cls, cubic_kilometres: float) -> Volume:
        return cls.from_base_units(cubic_kilometres * CUBIC_KILOMETRE)

    # --- imperial / US ---
    @classmethod
    def from_cubic_inches(cls, cubic_inches: float) -> Volume:
        return cls.from_base_units(cubic_inches * CUBIC_INCH)

    @classmethod
    def from_cubic_feet(cls, cubic_feet: float) -> Volume:
        return cls.from_base_units(cubic_feet * CUBIC_FOOT)

    @classmethod
    def from_cubic_yards(cls, cubic_yards: float) -> Volume:
        return cls.from_base_units(cubic_yards * CUBIC_YARD)

    @classmethod
    def from_gallons(cls, gallons: float) -> Volume:
        """US liquid gallons."""
        return cls.from_base_units(gallons * US_GALLON)

    @classmethod
    def from_quarts(cls, quarts: float) -> Volume:
        return cls.from_base_units(quarts * US_QUART)

    @classmethod
    def from_pints(cls, pints: float) -> Volume:
        return cls.from_base_units(pints * US_PINT)

    @classmethod
    def from_cups(cls, cups: float) -> Volume:
        return cls.from_base_units(cups * US_CUP)

    @classmethod
    def from_fluid_ounces(cls, fluid_ounces: float) -> Volume:
        return cls.from_base_units(fluid_ounces * US_FLUID_OUNCE)

    @classmethod
    def from_tablespoons(cls, tablespoons: float) -> Volume:
        return cls.from_base_units(tablespoons * US_TABLESPOON)

    @classmethod
    def from_teaspoons(cls, teaspoons: float) -> Volume:
        return cls.from_base_units(teaspoons * US_TEASPOON)

    @classmethod
    def from_imperial_gallons(cls, imperial_gallons: float) -> Volume:
        return cls.from_base_units(imperial_gallons * IMPERIAL_GALLON)

    @classmethod
    def from_imperial_quarts(cls, imperial_quarts: float) -> Volume:
        return cls.from_base_units(imperial_quarts * IMPERIAL_QUART)

    @classmethod
    def from_imperial_pints(cls, imperial_pints: float) -> Volume:
        return cls.from_base_units(imperial_pints * IMPERIAL_PINT)

    @classmethod
    def from_imperial_fluid_ounces(cls, imperial_fluid_ounces: float) -> Volume:
        return cls.from_base_units(imperial_fluid_ounces * IMPERIAL_FLUID_OUNCE)

    def as_cubic_millimetres(self) -> float:
        return self._base / CUBIC_MILLIMETRE

    def as_cubic_centimetres(self) -> float:
        return self._base / CUBIC_CENTIMETRE

    def as_millilitres(self) -> float:
        return self._base / MILLILITRE

    def as_litres(self) -> float:
        return self._base / LITRE

    def as_liters(self) -> float:
        return self.as_litres()

    def as_cubic_metres(self) -> float:
        return self._base

    def as_cubic_meters(self) -> float:
        return self._base

    def as_cubic_kilometres(self) -> float:
        return self._base / CUBIC_KILOMETRE

    def as_cubic_inches(self) -> float:
        return self._base / CUBIC_INCH

    def as_cubic_feet(self) -> float:
        return self._base / CUBIC_FOOT

    def as_cubic_yards(self) -> float:
        return self._base / CUBIC_YARD

    def as_gallons(self) -> float:
        return self._base / US_GALLON

    def as_quarts(self) -> float:
        return self._base / US_QUART

    def as_pints(self) -> float:
        return self._base / US_PINT

    def as_cups(self) -> float:
        return self._base / US_CUP

    def as_fluid_ounces(self) -> float:
        return self._base / US_FLUID_OUNCE

    def as_tablespoons(self) -> float:
        return self._base / US_TABLESPOON

    def as_teaspoons(self) -> float:
        return self._base / US_TEASPOON

    def as_imperial_gallons(self) -> float:
        return self._base / IMPERIAL_GALLON

    def as_imperial_quarts(self) -> float:
        return self._base / IMPERIAL_QUART

    def as_imperial_pints(self) -> float:
        return self._base / IMPERIAL_PINT

    def as_imperial_fluid_ounces(self) -> float:
        return self._base / IMPERIAL_FLUID_OUNCE


__all__ = ["Volume"]
