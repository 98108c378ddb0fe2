"""Types and constants for handling electrical resistance."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (ohm)
MILLIOHM = 1e-3
KILOOHM = 1e3
MEGAOHM = 1e6


class Resistance(LinearMeasurement):
    """
    An electrical resistance, stored in ohms.

    Voltage / Current gives a Resistance (Ohm's law).
    """

    base_units_name = "Ω"
    appropriate_units = (
        ("mΩ", MILLIOHM),
        ("Ω", 1.0),
        ("kΩ", KILOOHM),
        ("MΩ", MEGAOHM),
    )

    @classmethod
    def from_milliohms(cls, milliohms: float) -> Resistance:
        return cls.from_base_units(milliohms * MILLIOHM)

    @classmethod
    def from_ohms(cls, ohms: float) -> Resistance:
        return cls.from_base_units(ohms)

    @classmethod
    def from_kiloohms(cls, kiloohms: float) -> Resistance:
        return cls.from_base_units(kiloohms * KILOOHM)

    @classmethod
    def from_megaohms(cls, megaohms: float) -> Resistance:
        return cls.from_base_units(megaohms * MEGAOHM)

    def as_milliohms(self) -> float:
        return self._base / MILLIOHM

    def as_ohms(self) -> float:
        return self._base

    def as_kiloohms(self) -> float:
        return self._base / KILOOHM

    def as_megaohms(self) -> float:
        return self._base / MEGAOHM


__all__ = ["Resistance"]
