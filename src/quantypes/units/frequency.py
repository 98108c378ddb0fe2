"""Types and constants for handling frequency."""
from __future__ import annotations

from datetime import timedelta
from typing import Union

from quantypes.core.measurement import LinearMeasurement, base_units_of
from quantypes.units.duration import Duration

# Scale of each unit relative to the base unit (hertz)
NANOHERTZ = 1e-9
MICROHERTZ = 1e-6
MILLIHERTZ = 1e-3
KILOHERTZ = 1e3
MEGAHERTZ = 1e6
GIGAHERTZ = 1e9
TERAHERTZ = 1e12


class Frequency(LinearMeasurement):
    """
    A frequency, stored in hertz.

    Example
    -------
    >>> from datetime import timedelta
    >>> mains = Frequency.from_period(timedelta(milliseconds=20))
    >>> mains.as_hertz()
    50.0
    """

    base_units_name = "Hz"
    appropriate_units = (
        ("nHz", NANOHERTZ),
        ("µHz", MICROHERTZ),
        ("mHz", MILLIHERTZ),
        ("Hz", 1.0),
        ("kHz", KILOHERTZ),
        ("MHz", MEGAHERTZ),
        ("GHz", GIGAHERTZ),
        ("THz", TERAHERTZ),
    )

    @classmethod
    def from_period(cls, period: Union[Duration, timedelta]) -> Frequency:
        """
        Frequency of something repeating once every ``period``.

        Raises ``ZeroDivisionError`` for a zero period.
        """
        return cls.from_base_units(1.0 / base_units_of(period))

    @classmethod
    def from_nanohertz(cls, nanohertz: float) -> Frequency:
        return cls.from_base_units(nanohertz * NANOHERTZ)

    @classmethod
    def from_microhertz(cls, microhertz: float) -> Frequency:
        return cls.from_base_units(microhertz * MICROHERTZ)

    @classmethod
    def from_millihertz(cls, millihertz: float) -> Frequency:
        return cls.from_base_units(millihertz * MILLIHERTZ)

    @classmethod
    def from_hertz(cls, hertz: float) -> Frequency:
        return cls.from_base_units(hertz)

    @classmethod
    def from_kilohertz(cls, kilohertz: float) -> Frequency:
        return cls.from_base_units(kilohertz * KILOHERTZ)

    @classmethod
    def from_megahertz(cls, megahertz: float) -> Frequency:
        return cls.from_base_units(megahertz * MEGAHERTZ)

    @classmethod
    def from_gigahertz(cls, gigahertz: float) -> Frequency:
        return cls.from_base_units(gigahertz * GIGAHERTZ)

    @classmethod
    def from_terahertz(cls, terahertz: float) -> Frequency:
        return cls.from_base_units(terahertz * TERAHERTZ)

    def as_period(self) -> Duration:
        """Inverse of `from_period`."""
        return Duration.from_base_units(1.0 / self._base)

    def as_nanohertz(self) -> float:
        return self._base / NANOHERTZ

    def as_microhertz(self) -> float:
        return self._base / MICROHERTZ

    def as_millihertz(self) -> float:
        return self._base / MILLIHERTZ

    def as_hertz(self) -> float:
        return self._base

    def as_kilohertz(self) -> float:
        return self._base / KILOHERTZ

    def as_megahertz(self) -> float:
        return self._base / MEGAHERTZ

    def as_gigahertz(self) -> float:
        return self._base / GIGAHERTZ

    def as_terahertz(self) -> float:
        return self._base / TERAHERTZ


__all__ = ["Frequency"]
