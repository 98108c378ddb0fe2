"""Types and constants for handling force."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.units.acceleration import FOOT_PER_SECOND_SQUARED, STANDARD_GRAVITY
from quantypes.units.mass import OUNCE, POUND

# Scale of each unit relative to the base unit (newton)
NANONEWTON = 1e-9
MICRONEWTON = 1e-6
MILLINEWTON = 1e-3
KILONEWTON = 1e3
MEGANEWTON = 1e6

DYNE = 1e-5
POUND_FORCE = POUND * STANDARD_GRAVITY
OUNCE_FORCE = OUNCE * STANDARD_GRAVITY
KILOGRAM_FORCE = STANDARD_GRAVITY
POUNDAL = POUND * FOOT_PER_SECOND_SQUARED


class Force(LinearMeasurement):
    """
    A force, stored in newtons.

    Mass * Acceleration and Pressure * Area give a Force. Force * Length is
    ambiguous (torque or energy) and gives a `TorqueEnergy`.
    """

    base_units_name = "N"
    appropriate_units = (
        ("nN", NANONEWTON),
        ("µN", MICRONEWTON),
        ("mN", MILLINEWTON),
        ("N", 1.0),
        ("kN", KILONEWTON),
        ("MN", MEGANEWTON),
    )

    @classmethod
    def from_nanonewtons(cls, nanonewtons: float) -> Force:
        return cls.from_base_units(nanonewtons * NANONEWTON)

    @classmethod
    def from_micronewtons(cls, micronewtons: float) -> Force:
        return cls.from_base_units(micronewtons * MICRONEWTON)

    @classmethod
    def from_millinewtons(cls, millinewtons: float) -> Force:
        return cls.from_base_units(millinewtons * MILLINEWTON)

    @classmethod
    def from_newtons(cls, newtons: float) -> Force:
        return cls.from_base_units(newtons)

    @classmethod
    def from_kilonewtons(cls, kilonewtons: float) -> Force:
        return cls.from_base_units(kilonewtons * KILONEWTON)

    @classmethod
    def from_meganewtons(cls, meganewtons: float) -> Force:
        return cls.from_base_units(meganewtons * MEGANEWTON)

    @classmethod
    def from_dynes(cls, dynes: float) -> Force:
        return cls.from_base_units(dynes * DYNE)

    @classmethod
    def from_pounds_force(cls, pounds_force: float) -> Force:
        return cls.from_base_units(pounds_force * POUND_FORCE)

    @classmethod
    def from_ounces_force(cls, ounces_force: float) -> Force:
        return cls.from_base_units(ounces_force * OUNCE_FORCE)

    @classmethod
    def from_kilograms_force(cls, kilograms_force: float) -> Force:
        return cls.from_base_units(kilograms_force * KILOGRAM_FORCE)

    @classmethod
    def from_poundals(cls, poundals: float) -> Force:
        return cls.from_base_units(poundals * POUNDAL)

    def as_nanonewtons(self) -> float:
        return self._base / NANONEWTON

    def as_micronewtons(self) -> float:
        return self._base / MICRONEWTON

    def as_millinewtons(self) -> float:
        return self._base / MILLINEWTON

    def as_newtons(self) -> float:
        return self._base

    def as_kilonewtons(self) -> float:
        return self._base / KILONEWTON

    def as_meganewtons(self) -> float:
        return self._base / MEGANEWTON

    def as_dynes(self) -> float:
        return self._base / DYNE

    def as_pounds_force(self) -> float:
        return self._base / POUND_FORCE

    def as_ounces_force(self) -> float:
        return self._base / OUNCE_FORCE

    def as_kilograms_force(self) -> float:
        return self._base / KILOGRAM_FORCE

    def as_poundals(self) -> float:
        return self._base / POUNDAL


__all__ = ["Force"]
