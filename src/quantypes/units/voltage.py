"""Types and constants for handling voltage."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (volt)
MICROVOLT = 1e-6
MILLIVOLT = 1e-3
KILOVOLT = 1e3
MEGAVOLT = 1e6


class Voltage(LinearMeasurement):
    """A voltage, stored in volts. Current * Resistance gives a Voltage."""

    base_units_name = "V"
    appropriate_units = (
        ("µV", MICROVOLT),
        ("mV", MILLIVOLT),
        ("V", 1.0),
        ("kV", KILOVOLT),
        ("MV", MEGAVOLT),
    )

    @classmethod
    def from_microvolts(cls, microvolts: float) -> Voltage:
        return cls.from_base_units(microvolts * MICROVOLT)

    @classmethod
    def from_millivolts(cls, millivolts: float) -> Voltage:
        return cls.from_base_units(millivolts * MILLIVOLT)

    @classmethod
    def from_volts(cls, volts: float) -> Voltage:
        return cls.from_base_units(volts)

    @classmethod
    def from_kilovolts(cls, kilovolts: float) -> Voltage:
        return cls.from_base_units(kilovolts * KILOVOLT)

    @classmethod
    def from_megavolts(cls, megavolts: float) -> Voltage:
        return cls.from_base_units(megavolts * MEGAVOLT)

    def as_microvolts(self) -> float:
        return self._base / MICROVOLT

    def as_millivolts(self) -> float:
        return self._base / MILLIVOLT

    def as_volts(self) -> float:
        return self._base

    def as_kilovolts(self) -> float:
        return self._base / KILOVOLT

    def as_megavolts(self) -> float:
        return self._base / MEGAVOLT


__all__ = ["Voltage"]
