"""Types and constants for handling electric current."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (ampere)
MICROAMPERE = 1e-6
MILLIAMPERE = 1e-3
KILOAMPERE = 1e3


class Current(LinearMeasurement):
    """An electric current, stored in amperes."""

    base_units_name = "A"
    appropriate_units = (
        ("µA", MICROAMPERE),
        ("mA", MILLIAMPERE),
        ("A", 1.0),
        ("kA", KILOAMPERE),
    )

    @classmethod
    def from_microamperes(cls, microamperes: float) -> Current:
        return cls.from_base_units(microamperes * MICROAMPERE)

    @classmethod
    def from_milliamperes(cls, milliamperes: float) -> Current:
        return cls.from_base_units(milliamperes * MILLIAMPERE)

    @classmethod
    def from_amperes(cls, amperes: float) -> Current:
        return cls.from_base_units(amperes)

    @classmethod
    def from_kiloamperes(cls, kiloamperes: float) -> Current:
        return cls.from_base_units(kiloamperes * KILOAMPERE)

    def as_microamperes(self) -> float:
        return self._base / MICROAMPERE

    def as_milliamperes(self) -> float:
        return self._base / MILLIAMPERE

    def as_amperes(self) -> float:
        return self._base

    def as_kiloamperes(self) -> float:
        return self._base / KILOAMPERE


__all__ = ["Current"]
