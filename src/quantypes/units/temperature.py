"""
Types and constants for handling temperature.

Two classes live here. `Temperature` is an absolute temperature: a point on a
scale whose zero (0 °C, 0 °F) is a convention. `TemperatureDelta` is the
difference between two temperatures and behaves like any other linear
quantity::

    >>> boiling = Temperature.from_celsius(100.0)
    >>> freezing = Temperature.from_celsius(0.0)
    >>> rise = boiling - freezing
    >>> round(rise.as_fahrenheit(), 9)
    180.0
    >>> round((freezing + rise).as_celsius(), 9)
    100.0

Adding two temperatures, or scaling one, raises ``TypeError``.
"""
from __future__ import annotations

from quantypes.core.affine import AbsoluteMeasurement
from quantypes.core.measurement import LinearMeasurement

# Kelvin at 0 °C, and °F at 0 °C
CELSIUS_OFFSET = 273.15
FAHRENHEIT_OFFSET = 32.0

# Size of a kelvin in fahrenheit (or rankine) degrees
FAHRENHEIT_PER_KELVIN = 1.8


class TemperatureDelta(LinearMeasurement):
    """A difference between two temperatures, stored in kelvin."""

    base_units_name = "K"

    @classmethod
    def from_kelvin(cls, kelvin: float) -> TemperatureDelta:
        return cls.from_base_units(kelvin)

    @classmethod
    def from_celsius(cls, celsius: float) -> TemperatureDelta:
        return cls.from_base_units(celsius)

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> TemperatureDelta:
        return cls.from_base_units(fahrenheit / FAHRENHEIT_PER_KELVIN)

    @classmethod
    def from_rankine(cls, rankine: float) -> TemperatureDelta:
        return cls.from_base_units(rankine / FAHRENHEIT_PER_KELVIN)

    def as_kelvin(self) -> float:
        return self._base

    def as_celsius(self) -> float:
        return self._base

    def as_fahrenheit(self) -> float:
        return self._base * FAHRENHEIT_PER_KELVIN

    def as_rankine(self) -> float:
        return self._base * FAHRENHEIT_PER_KELVIN


class Temperature(AbsoluteMeasurement):
    """
    An absolute temperature, stored in kelvin.

    Only ``Temperature - Temperature``, ``Temperature +/- TemperatureDelta``
    and ``TemperatureDelta + Temperature`` are defined.
    """

    base_units_name = "K"
    delta_type = TemperatureDelta

    @classmethod
    def from_str(cls, text: str) -> Temperature:
        """Parse e.g. ``"21.5 °C"``, ``"70F"``, ``"300 K"`` or ``"18"`` (celsius)."""
        from quantypes.units.parser import parse_temperature

        return parse_temperature(text)

    @classmethod
    def from_kelvin(cls, kelvin: float) -> Temperature:
        return cls.from_base_units(kelvin)

    @classmethod
    def from_celsius(cls, celsius: float) -> Temperature:
        return cls.from_base_units(celsius + CELSIUS_OFFSET)

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> Temperature:
        return cls.from_base_units(
            (fahrenheit - FAHRENHEIT_OFFSET) / FAHRENHEIT_PER_KELVIN + CELSIUS_OFFSET
        )

    @classmethod
    def from_rankine(cls, rankine: float) -> Temperature:
        return cls.from_base_units(rankine / FAHRENHEIT_PER_KELVIN)

    def as_kelvin(self) -> float:
        return self._base

    def as_celsius(self) -> float:
        return self._base - CELSIUS_OFFSET

    def as_fahrenheit(self) -> float:
        return (self._base - CELSIUS_OFFSET) * FAHRENHEIT_PER_KELVIN + FAHRENHEIT_OFFSET

    def as_rankine(self) -> float:
        return self._base * FAHRENHEIT_PER_KELVIN


__all__ = ["Temperature", "TemperatureDelta"]
