"""
Types and constants for handling relative humidity.

Relative humidity is the amount of water vapour in the air as a share of the
most the air could hold at the same temperature (the saturation vapour
pressure). On its own it is a percentage; combined with the air temperature
it gives the dewpoint, the vapour pressure and the absolute humidity.

All formulas assume standard atmospheric pressure (1013.25 hPa).
"""
from __future__ import annotations

import math

from quantypes.core.measurement import Measurement
from quantypes.units.density import Density
from quantypes.units.pressure import Pressure
from quantypes.units.temperature import Temperature

# Magnus coefficients after Alduchov and Eskridge (1996)
MAGNUS_B = 17.625
MAGNUS_C = 243.04  # °C

# Buck (1981) saturation vapour pressure, valid to +/-0.02% from 0 to 50 °C
BUCK_A = 0.61121  # kPa
BUCK_B = 18.678
BUCK_C = 234.5  # °C
BUCK_D = 257.14  # °C

# Specific gas constant for water vapour, J/(kg·K)
WATER_VAPOUR_GAS_CONSTANT = 461.5


def _magnus_gamma(celsius: float) -> float:
    return (MAGNUS_B * celsius) / (MAGNUS_C + celsius)


class Humidity(Measurement):
    """
    A relative humidity, stored in percent.

    Humidity takes part in no arithmetic; it supports comparison, display and
    the psychrometric conversions below.

    Example
    -------
    >>> air = Temperature.from_celsius(18.0)
    >>> dewpoint = Humidity.from_percent(85.0).as_dewpoint(air)
    >>> round(dewpoint.as_celsius(), 2)
    15.44
    """

    base_units_name = "%"

    @classmethod
    def from_percent(cls, percent: float) -> Humidity:
        return cls.from_base_units(percent)

    @classmethod
    def from_ratio(cls, ratio: float) -> Humidity:
        """From a fraction between 0.0 and 1.0."""
        return cls.from_base_units(ratio * 100.0)

    @classmethod
    def from_dewpoint(cls, dewpoint: Temperature, temp: Temperature) -> Humidity:
        """Relative humidity of air at ``temp`` whose dewpoint is ``dewpoint``."""
        return cls.from_base_units(
            100.0
            * math.exp(_magnus_gamma(dewpoint.as_celsius()))
            / math.exp(_magnus_gamma(temp.as_celsius()))
        )

    def as_percent(self) -> float:
        return self._base

    def as_ratio(self) -> float:
        return self._base / 100.0

    def as_dewpoint(self, temp: Temperature) -> Temperature:
        """
        Temperature to which air at ``temp`` must cool to become saturated.

        A humidity of zero or less has no dew point and gives a NaN
        temperature.
        """
        ratio = self.as_ratio()
        ln_rh = math.log(ratio) if ratio > 0 else (-math.inf if ratio == 0 else math.nan)
        gamma = _magnus_gamma(temp.as_celsius())
        return Temperature.from_celsius(MAGNUS_C * (ln_rh + gamma) / (MAGNUS_B - ln_rh - gamma))

    def as_vapor_pressure(self, temp: Temperature) -> Pressure:
        """Partial pressure of water vapour in air at ``temp``."""
        celsius = temp.as_celsius()
        saturation = BUCK_A * math.exp((BUCK_B - celsius / BUCK_C) * (celsius / (BUCK_D + celsius)))
        return Pressure.from_kilopascals(self.as_ratio() * saturation)

    def as_absolute_humidity(self, temp: Temperature) -> Density:
        """Mass of water vapour per volume of air at ``temp`` (ideal gas law)."""
        pascals = self.as_vapor_pressure(temp).as_pascals()
        return Density.from_kilograms_per_cubic_meter(
            pascals / (temp.as_kelvin() * WATER_VAPOUR_GAS_CONSTANT)
        )


__all__ = ["Humidity"]
