"""Types and constants for handling energy."""
from __future__ import annotations

from typing import TYPE_CHECKING

from quantypes.core.measurement import LinearMeasurement

if TYPE_CHECKING:
    from quantypes.units.torque_energy import TorqueEnergy

# Scale of each unit relative to the base unit (joule)
KILOJOULE = 1e3
MEGAJOULE = 1e6
GIGAJOULE = 1e9
CALORIE = 4.184
KILOCALORIE = 4184.0
BTU = 1055.05585262
WATT_HOUR = 3600.0
KILOWATT_HOUR = 3.6e6
ELECTRONVOLT = 1.602176634e-19
ERG = 1e-7


class Energy(LinearMeasurement):
    """
    An energy, stored in joules.

    Power * Duration gives an Energy. Force * Length gives a `TorqueEnergy`,
    which turns into an Energy with `from_torque_energy` or
    `TorqueEnergy.into_energy`.

    Example
    -------
    >>> kettle = Energy.from_kilowatt_hours(0.1)
    >>> kettle.as_kilojoules()
    360.0
    """

    base_units_name = "J"
    appropriate_units = (
        ("J", 1.0),
        ("kJ", KILOJOULE),
        ("MJ", MEGAJOULE),
        ("GJ", GIGAJOULE),
    )

    @classmethod
    def from_torque_energy(cls, torque_energy: TorqueEnergy) -> Energy:
        """Read a force x length product as work done."""
        return cls.from_base_units(torque_energy.as_base_units())

    @classmethod
    def from_joules(cls, joules: float) -> Energy:
        return cls.from_base_units(joules)

    @classmethod
    def from_kilojoules(cls, kilojoules: float) -> Energy:
        return cls.from_base_units(kilojoules * KILOJOULE)

    @classmethod
    def from_megajoules(cls, megajoules: float) -> Energy:
        return cls.from_base_units(megajoules * MEGAJOULE)

    @classmethod
    def from_gigajoules(cls, gigajoules: float) -> Energy:
        return cls.from_base_units(gigajoules * GIGAJOULE)

    @classmethod
    def from_calories(cls, calories: float) -> Energy:
        return cls.from_base_units(calories * CALORIE)

    @classmethod
    def from_kilocalories(cls, kilocalories: float) -> Energy:
        return cls.from_base_units(kilocalories * KILOCALORIE)

    @classmethod
    def from_btu(cls, btu: float) -> Energy:
        return cls.from_base_units(btu * BTU)

    @classmethod
    def from_watt_hours(cls, watt_hours: float) -> Energy:
        return cls.from_base_units(watt_hours * WATT_HOUR)

    @classmethod
    def from_kilowatt_hours(cls, kilowatt_hours: float) -> Energy:
        return cls.from_base_units(kilowatt_hours * KILOWATT_HOUR)

    @classmethod
    def from_electronvolts(cls, electronvolts: float) -> Energy:
        return cls.from_base_units(electronvolts * ELECTRONVOLT)

    @classmethod
    def from_ergs(cls, ergs: float) -> Energy:
        return cls.from_base_units(ergs * ERG)

    def as_joules(self) -> float:
        return self._base

    def as_kilojoules(self) -> float:
        return self._base / KILOJOULE

    def as_megajoules(self) -> float:
        return self._base / MEGAJOULE

    def as_gigajoules(self) -> float:
        return self._base / GIGAJOULE

    def as_calories(self) -> float:
        return self._base / CALORIE

    def as_kilocalories(self) -> float:
        return self._base / KILOCALORIE

    def as_btu(self) -> float:
        return self._base / BTU

    def as_watt_hours(self) -> float:
        return self._base / WATT_HOUR

    def as_kilowatt_hours(self) -> float:
        return self._base / KILOWATT_HOUR

    def as_electronvolts(self) -> float:
        return self._base / ELECTRONVOLT

    def as_ergs(self) -> float:
        return self._base / ERG


__all__ = ["Energy"]
