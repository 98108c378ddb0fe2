"""
Text parsing for the quantities that are commonly written by hand.

    "21.5 °C", "70F", "300 K", "100 deg R", "18"  -> Temperature
    "90°", "45 deg", "1.5 rad", "30"               -> Angle

A bare number is read in the everyday unit (celsius, degrees) and an empty
string is zero. Anything else raises `MeasurementParseError`.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Dict, Tuple

from quantypes.core.exceptions import MeasurementParseError
from quantypes.units.angle import Angle
from quantypes.units.temperature import Temperature

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"

_TEMPERATURE_RE = re.compile(
    rf"\s*(?P<number>{_NUMBER})\s?(?:deg|°)?\s?(?P<unit>[fckr])\s*",
    re.IGNORECASE,
)
_ANGLE_RE = re.compile(
    rf"\s*(?P<number>{_NUMBER})\s?(?P<unit>deg|°|rad)\s*",
    re.IGNORECASE,
)

_TEMPERATURE_UNITS: Dict[str, Callable[[float], Temperature]] = {
    "c": Temperature.from_celsius,
    "f": Temperature.from_fahrenheit,
    "k": Temperature.from_kelvin,
    "r": Temperature.from_rankine,
}
_ANGLE_UNITS: Dict[str, Callable[[float], Angle]] = {
    "deg": Angle.from_degrees,
    "°": Angle.from_degrees,
    "rad": Angle.from_radians,
}


def _bare_number(text: str) -> float | None:
    """The value of ``text`` if it is nothing but a decimal number."""
    if re.fullmatch(rf"\s*{_NUMBER}\s*", text) is None:
        return None
    return float(text)


@lru_cache(maxsize=256)
def _split(text: str, pattern: re.Pattern[str]) -> Tuple[float, str]:
    """Split ``text`` into (value, lower-cased unit) or raise."""
    match = pattern.fullmatch(text)
    if match is None:
        raise MeasurementParseError(text, "expected a number followed by a unit")
    return float(match.group("number")), match.group("unit").lower()


def parse_temperature(text: str) -> Temperature:
    """
    Parse an absolute temperature.

    Accepts ``<number>[ ][deg|°][ ]<C|F|K|R>`` in any letter case; a bare
    number is celsius and an empty string is 0 °C.

    Raises
    ------
    MeasurementParseError
        If the number is malformed or the unit is not C, F, K or R.
    """
    if text == "":
        return Temperature.from_celsius(0.0)
    bare = _bare_number(text)
    if bare is not None:
        return Temperature.from_celsius(bare)
    value, unit = _split(text, _TEMPERATURE_RE)
    return _TEMPERATURE_UNITS[unit](value)


def parse_angle(text: str) -> Angle:
    """
    Parse an angle.

    Accepts ``<number>[ ]<deg|°|rad>`` in any letter case; a bare number is
    degrees and an empty string is 0°.

    Raises
    ------
    MeasurementParseError
        If the number is malformed or the unit is not deg, ° or rad.
    """
    if text == "":
        return Angle.from_degrees(0.0)
    bare = _bare_number(text)
    if bare is not None:
        return Angle.from_degrees(bare)
    value, unit = _split(text, _ANGLE_RE)
    return _ANGLE_UNITS[unit](value)


__all__ = ["parse_temperature", "parse_angle"]
