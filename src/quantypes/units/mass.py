"""Types and constants for handling masses."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (kilogram)
MICROGRAM = 1e-9
MILLIGRAM = 1e-6
CARAT = 2e-4
GRAM = 1e-3
TONNE = 1e3

# avoirdupois
POUND = 0.45359237
OUNCE = POUND / 16
GRAIN = POUND / 7000
STONE = 14 * POUND
SHORT_TON = 2000 * POUND
LONG_TON = 2240 * POUND

# troy
TROY_OUNCE = 480 * GRAIN
TROY_POUND = 12 * TROY_OUNCE
PENNYWEIGHT = 24 * GRAIN


class Mass(LinearMeasurement):
    """
    A mass, stored in kilograms.

    Example
    -------
    >>> bag = Mass.from_pounds(5)
    >>> f"{bag:.3f}"
    '2.268 kg'
    """

    base_units_name = "kg"
    appropriate_units = (
        ("ng", 1e-12),
        ("µg", MICROGRAM),
        ("mg", MILLIGRAM),
        ("g", GRAM),
        ("kg", 1.0),
        ("tonnes", TONNE),
        ("thousand tonnes", 1e6),
        ("million tonnes", 1e9),
    )

    # --- metric ---
    @classmethod
    def from_micrograms(cls, micrograms: float) -> Mass:
        return cls.from_base_units(micrograms * MICROGRAM)

    @classmethod
    def from_milligrams(cls, milligrams: float) -> Mass:
        return cls.from_base_units(milligrams * MILLIGRAM)

    @classmethod
    def from_carats(cls, carats: float) -> Mass:
        return cls.from_base_units(carats * CARAT)

    @classmethod
    def from_grams(cls, grams: float) -> Mass:
        return cls.from_base_units(grams * GRAM)

    @classmethod
    def from_kilograms(cls, kilograms: float) -> Mass:
        return cls.from_base_units(kilograms)

    @classmethod
    def from_metric_tons(cls, metric_tons: float) -> Mass:
        return cls.from_base_units(metric_tons * TONNE)

    @classmethod
    def from_tonnes(cls, tonnes: float) -> Mass:
        return cls.from_metric_tons(tonnes)

    # --- avoirdupois ---
    @classmethod
    def from_grains(cls, grains: float) -> Mass:
        return cls.from_base_units(grains * GRAIN)

    @classmethod
    def from_ounces(cls, ounces: float) -> Mass:
        return cls.from_base_units(ounces * OUNCE)

    @classmethod
    def from_pounds(cls, pounds: float) -> Mass:
        return cls.from_base_units(pounds * POUND)

    @classmethod
    def from_stones(cls, stones: float) -> Mass:
        return cls.from_base_units(stones * STONE)

    @classmethod
    def from_short_tons(cls, short_tons: float) -> Mass:
        return cls.from_base_units(short_tons * SHORT_TON)

    @classmethod
    def from_long_tons(cls, long_tons: float) -> Mass:
        return cls.from_base_units(long_tons * LONG_TON)

    # --- troy ---
    @classmethod
    def from_pennyweights(cls, pennyweights: float) -> Mass:
        return cls.from_base_units(pennyweights * PENNYWEIGHT)

    @classmethod
    def from_troy_ounces(cls, troy_ounces: float) -> Mass:
        return cls.from_base_units(troy_ounces * TROY_OUNCE)

    @classmethod
    def from_troy_pounds(cls, troy_pounds: float) -> Mass:
        return cls.from_base_units(troy_pounds * TROY_POUND)

    def as_micrograms(self) -> float:
        return self._base / MICROGRAM

    def as_milligrams(self) -> float:
        return self._base / MILLIGRAM

    def as_carats(self) -> float:
        return self._base / CARAT

    def as_grams(self) -> float:
        return self._base / GRAM

    def as_kilograms(self) -> float:
        return self._base

    def as_metric_tons(self) -> float:
        return self._base / TONNE

    def as_tonnes(self) -> float:
        return self.as_metric_tons()

    def as_grains(self) -> float:
        return self._base / GRAIN

    def as_ounces(self) -> float:
        return self._base / OUNCE

    def as_pounds(self) -> float:
        return self._base / POUND

    def as_stones(self) -> float:
        return self._base / STONE

    def as_short_tons(self) -> float:
        return self._base / SHORT_TON

    def as_long_tons(self) -> float:
        return self._base / LONG_TON

    def as_pennyweights(self) -> float:
        return self._base / PENNYWEIGHT

    def as_troy_ounces(self) -> float:
        return self._base / TROY_OUNCE

    def as_troy_pounds(self) -> float:
        return self._base / TROY_POUND


__all__ = ["Mass"]
