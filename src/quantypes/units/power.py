"""Types and constants for handling power."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement
from quantypes.units.energy import BTU

# Scale of each unit relative to the base unit (watt)
MILLIWATT = 1e-3
KILOWATT = 1e3
MEGAWATT = 1e6
GIGAWATT = 1e9
HORSEPOWER = 745.69987158227022
METRIC_HORSEPOWER = 735.49875
BTU_PER_MINUTE = BTU / 60.0
FOOT_POUND_PER_SECOND = 1.3558179483314004


class Power(LinearMeasurement):
    """
    A power, stored in watts.

    Energy / Duration, Force * Speed and Voltage * Current give a Power.
    """

    base_units_name = "W"
    appropriate_units = (
        ("mW", MILLIWATT),
        ("W", 1.0),
        ("kW", KILOWATT),
        ("MW", MEGAWATT),
        ("GW", GIGAWATT),
    )

    @classmethod
    def from_milliwatts(cls, milliwatts: float) -> Power:
        return cls.from_base_units(milliwatts * MILLIWATT)

    @classmethod
    def from_watts(cls, watts: float) -> Power:
        return cls.from_base_units(watts)

    @classmethod
    def from_kilowatts(cls, kilowatts: float) -> Power:
        return cls.from_base_units(kilowatts * KILOWATT)

    @classmethod
    def from_megawatts(cls, megawatts: float) -> Power:
        return cls.from_base_units(megawatts * MEGAWATT)

    @classmethod
    def from_gigawatts(cls, gigawatts: float) -> Power:
        return cls.from_base_units(gigawatts * GIGAWATT)

    @classmethod
    def from_horsepower(cls, horsepower: float) -> Power:
        """Mechanical (imperial) horsepower."""
        return cls.from_base_units(horsepower * HORSEPOWER)

    @classmethod
    def from_metric_horsepower(cls, metric_horsepower: float) -> Power:
        return cls.from_base_units(metric_horsepower * METRIC_HORSEPOWER)

    @classmethod
    def from_btu_per_minute(cls, btu_per_minute: float) -> Power:
        return cls.from_base_units(btu_per_minute * BTU_PER_MINUTE)

    @classmethod
    def from_foot_pounds_per_second(cls, foot_pounds_per_second: float) -> Power:
        return cls.from_base_units(foot_pounds_per_second * FOOT_POUND_PER_SECOND)

    def as_milliwatts(self) -> float:
        return self._base / MILLIWATT

    def as_watts(self) -> float:
        return self._base

    def as_kilowatts(self) -> float:
        return self._base / KILOWATT

    def as_megawatts(self) -> float:
        return self._base / MEGAWATT

    def as_gigawatts(self) -> float:
        return self._base / GIGAWATT

    def as_horsepower(self) -> float:
        return self._base / HORSEPOWER

    def as_metric_horsepower(self) -> float:
        return self._base / METRIC_HORSEPOWER

    def as_btu_per_minute(self) -> float:
        return self._base / BTU_PER_MINUTE

    def as_foot_pounds_per_second(self) -> float:
        return self._base / FOOT_POUND_PER_SECOND


__all__ = ["Power"]
