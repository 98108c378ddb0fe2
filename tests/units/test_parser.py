import math

import pytest

from quantypes.core.exceptions import MeasurementParseError, QuantypesError
from quantypes.units.angle import Angle
from quantypes.units.parser import parse_angle, parse_temperature
from quantypes.units.temperature import Temperature


# --------------------------
# Temperature
# --------------------------

@pytest.mark.parametrize("text, scale, value", [
    ("100C", "celsius", 100.0),
    ("100 C", "celsius", 100.0),
    ("100°C", "celsius", 100.0),
    ("100 °c", "celsius", 100.0),
    ("100F", "fahrenheit", 100.0),
    ("100 f", "fahrenheit", 100.0),
    ("100 deg f", "fahrenheit", 100.0),
    ("100 DEG F", "fahrenheit", 100.0),
    ("300K", "kelvin", 300.0),
    ("100R", "rankine", 100.0),
    ("100 °R", "rankine", 100.0),
    ("  21.5 C  ", "celsius", 21.5),
    ("-40 F", "fahrenheit", -40.0),
    (".5C", "celsius", 0.5),
])
def test_parse_temperature_with_units(text, scale, value):
    t = parse_temperature(text)
    assert isinstance(t, Temperature)
    assert getattr(t, f"as_{scale}")() == pytest.approx(value)


def test_plain_number_is_celsius():
    assert parse_temperature("100.5").as_celsius() == pytest.approx(100.5)
    assert parse_temperature("-3").as_celsius() == pytest.approx(-3.0)


def test_empty_temperature_is_freezing_point():
    assert parse_temperature("").as_celsius() == pytest.approx(0.0)


@pytest.mark.parametrize("text", ["abcd", "C", "100 X", "1.2.3C", "100 CC", "100 deg", "12 34 C"])
def test_parse_temperature_rejects_garbage(text):
    with pytest.raises(MeasurementParseError) as excinfo:
        parse_temperature(text)
    assert excinfo.value.text == text
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, QuantypesError)


def test_temperature_from_str_delegates():
    assert Temperature.from_str("212F") == parse_temperature("212F")


# --------------------------
# Angle
# --------------------------

@pytest.mark.parametrize("text, degrees", [
    ("100", 100.0),
    ("100deg", 100.0),
    ("100 deg", 100.0),
    ("100°", 100.0),
    ("100 DEG", 100.0),
    ("", 0.0),
    ("-45 deg", -45.0),
])
def test_parse_angle_in_degrees(text, degrees):
    a = parse_angle(text)
    assert isinstance(a, Angle)
    assert a.as_degrees() == pytest.approx(degrees)


def test_parse_angle_in_radians():
    assert parse_angle("100rad").as_radians() == pytest.approx(100.0)
    assert parse_angle("3.14159 RAD").as_degrees() == pytest.approx(180.0, abs=1e-3)


@pytest.mark.parametrize("text", ["abcd", "rad", "10 grad", "10 degrees", "1..5 deg"])
def test_parse_angle_rejects_garbage(text):
    with pytest.raises(MeasurementParseError):
        parse_angle(text)


def test_angle_from_str_delegates():
    assert Angle.from_str("90°").as_radians() == pytest.approx(math.pi / 2)


def test_error_message_quotes_input():
    with pytest.raises(MeasurementParseError, match="'abcd'"):
        parse_angle("abcd")
