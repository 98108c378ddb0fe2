"""Types and constants for handling density."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.core.utils import pretty_unit_name
from quantypes.units.mass import GRAM, OUNCE, POUND
from quantypes.units.volume import CUBIC_CENTIMETRE, CUBIC_FOOT, CUBIC_INCH, LITRE, US_GALLON

# Scale of each unit relative to the base unit (kilogram per cubic metre)
GRAM_PER_CUBIC_CENTIMETRE = GRAM / CUBIC_CENTIMETRE
GRAM_PER_LITRE = GRAM / LITRE
POUND_PER_CUBIC_FOOT = POUND / CUBIC_FOOT
POUND_PER_CUBIC_INCH = POUND / CUBIC_INCH
POUND_PER_GALLON = POUND / US_GALLON
OUNCE_PER_CUBIC_INCH = OUNCE / CUBIC_INCH


class Density(LinearMeasurement):
    """
    A density, stored in kilograms per cubic metre.

    Mass / Volume gives a Density, and Density * Volume gives the Mass back.
    """

    base_units_name = pretty_unit_name("kg/m^3")

    @classmethod
    def from_kilograms_per_cubic_meter(cls, kilograms_per_cubic_meter: float) -> Density:
        return cls.from_base_units(kilograms_per_cubic_meter)

    @classmethod
    def from_kilograms_per_cubic_metre(cls, kilograms_per_cubic_metre: float) -> Density:
        return cls.from_base_units(kilograms_per_cubic_metre)

    @classmethod
    def from_grams_per_cubic_centimetre(cls, grams_per_cubic_centimetre: float) -> Density:
        return cls.from_base_units(grams_per_cubic_centimetre * GRAM_PER_CUBIC_CENTIMETRE)

    @classmethod
    def from_grams_per_litre(cls, grams_per_litre: float) -> Density:
        return cls.from_base_units(grams_per_litre * GRAM_PER_LITRE)

    @classmethod
    def from_pounds_per_cubic_foot(cls, pounds_per_cubic_foot: float) -> Density:
        return cls.from_base_units(pounds_per_cubic_foot * POUND_PER_CUBIC_FOOT)

    @classmethod
    def from_pounds_per_cubic_inch(cls, pounds_per_cubic_inch: float) -> Density:
        return cls.from_base_units(pounds_per_cubic_inch * POUND_PER_CUBIC_INCH)

    @classmethod
    def from_pounds_per_gallon(cls, pounds_per_gallon: float) -> Density:
        """US liquid gallons."""
        return cls.from_base_units(pounds_per_gallon * POUND_PER_GALLON)

    @classmethod
    def from_ounces_per_cubic_inch(cls, ounces_per_cubic_inch: float) -> Density:
        return cls.from_base_units(ounces_per_cubic_inch * OUNCE_PER_CUBIC_INCH)

    def as_kilograms_per_cubic_meter(self) -> float:
        return self._base

    def as_kilograms_per_cubic_metre(self) -> float:
        return self._base

    def as_grams_per_cubic_centimetre(self) -> float:
        return self._base / GRAM_PER_CUBIC_CENTIMETRE

    def as_grams_per_litre(self) -> float:
        return self._base / GRAM_PER_LITRE

    def as_pounds_per_cubic_foot(self) -> float:
        return self._base / POUND_PER_CUBIC_FOOT

    def as_pounds_per_cubic_inch(self) -> float:
        return self._base / POUND_PER_CUBIC_INCH

    def as_pounds_per_gallon(self) -> float:
        return self._base / POUND_PER_GALLON

    def as_ounces_per_cubic_inch(self) -> float:
        return self._base / OUNCE_PER_CUBIC_INCH


__all__ = ["Density"]
