"""Types and constants for handling pressure."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (pascal)
HECTOPASCAL = 100.0
MILLIBAR = 100.0
KILOPASCAL = 1e3
BAR = 1e5
MEGAPASCAL = 1e6
ATMOSPHERE = 101325.0
TORR = ATMOSPHERE / 760.0
PSI = 6894.757293168
INCH_OF_MERCURY = 3386.389
MILLIMETRE_OF_MERCURY = 133.322387415


class Pressure(LinearMeasurement):
    """
    A pressure, stored in pascals.

    Force / Area gives a Pressure.

    Example
    -------
    >>> tyre = Pressure.from_psi(32)
    >>> round(tyre.as_bars(), 3)
    2.206
    """

    base_units_name = "Pa"
    appropriate_units = (
        ("Pa", 1.0),
        ("hPa", HECTOPASCAL),
        ("kPa", KILOPASCAL),
        ("MPa", MEGAPASCAL),
    )

    @classmethod
    def from_pascals(cls, pascals: float) -> Pressure:
        return cls.from_base_units(pascals)

    @classmethod
    def from_hectopascals(cls, hectopascals: float) -> Pressure:
        return cls.from_base_units(hectopascals * HECTOPASCAL)

    @classmethod
    def from_millibars(cls, millibars: float) -> Pressure:
        return cls.from_base_units(millibars * MILLIBAR)

    @classmethod
    def from_kilopascals(cls, kilopascals: float) -> Pressure:
        return cls.from_base_units(kilopascals * KILOPASCAL)

    @classmethod
    def from_bars(cls, bars: float) -> Pressure:
        return cls.from_base_units(bars * BAR)

    @classmethod
    def from_megapascals(cls, megapascals: float) -> Pressure:
        return cls.from_base_units(megapascals * MEGAPASCAL)

    @classmethod
    def from_atmospheres(cls, atmospheres: float) -> Pressure:
        return cls.from_base_units(atmospheres * ATMOSPHERE)

    @classmethod
    def from_torr(cls, torr: float) -> Pressure:
        return cls.from_base_units(torr * TORR)

    @classmethod
    def from_psi(cls, psi: float) -> Pressure:
        return cls.from_base_units(psi * PSI)

    @classmethod
    def from_inches_of_mercury(cls, inches_of_mercury: float) -> Pressure:
        return cls.from_base_units(inches_of_mercury * INCH_OF_MERCURY)

    @classmethod
    def from_millimetres_of_mercury(cls, millimetres_of_mercury: float) -> Pressure:
        return cls.from_base_units(millimetres_of_mercury * MILLIMETRE_OF_MERCURY)

    def as_pascals(self) -> float:
        return self._base

    def as_hectopascals(self) -> float:
        return self._base / HECTOPASCAL

    def as_millibars(self) -> float:
        return self._base / MILLIBAR

    def as_kilopascals(self) -> float:
        return self._base / KILOPASCAL

    def as_bars(self) -> float:
        return self._base / BAR

    def as_megapascals(self) -> float:
        return self._base / MEGAPASCAL

    def as_atmospheres(self) -> float:
        return self._base / ATMOSPHERE

    def as_torr(self) -> float:
        return self._base / TORR

    def as_psi(self) -> float:
        return self._base / PSI

    def as_inches_of_mercury(self) -> float:
        return self._base / INCH_OF_MERCURY

    def as_millimetres_of_mercury(self) -> float:
        return self._base / MILLIMETRE_OF_MERCURY


__all__ = ["Pressure"]
