import pytest

from quantypes.units.temperature import Temperature, TemperatureDelta
from tests.utils import _plain


@pytest.mark.parametrize("factory, value, kelvin", [
    (Temperature.from_kelvin, 100.0, 100.0),
    (Temperature.from_celsius, 0.0, 273.15),
    (Temperature.from_celsius, -273.15, 0.0),
    (Temperature.from_fahrenheit, 32.0, 273.15),
    (Temperature.from_fahrenheit, 212.0, 373.15),
    (Temperature.from_rankine, 491.67, 273.15),
])
def test_absolute_scales(factory, value, kelvin):
    assert factory(value).as_kelvin() == pytest.approx(kelvin)


def test_kelvin_to_other_scales():
    t = Temperature.from_kelvin(100.0)
    assert t.as_celsius() == pytest.approx(-173.15)
    assert t.as_fahrenheit() == pytest.approx(-279.67)
    assert t.as_rankine() == pytest.approx(180.0)


def test_minus_forty_is_the_same_in_celsius_and_fahrenheit():
    assert Temperature.from_celsius(-40).as_fahrenheit() == pytest.approx(-40.0)


@pytest.mark.parametrize("factory, value, kelvin", [
    (TemperatureDelta.from_kelvin, 10.0, 10.0),
    (TemperatureDelta.from_celsius, 10.0, 10.0),
    (TemperatureDelta.from_fahrenheit, 18.0, 10.0),
    (TemperatureDelta.from_rankine, 18.0, 10.0),
])
def test_delta_scales_have_no_offset(factory, value, kelvin):
    assert factory(value).as_kelvin() == pytest.approx(kelvin)


def test_temperature_display_in_kelvin():
    assert _plain(str(Temperature.from_kelvin(300))) == "300 K"
    assert repr(TemperatureDelta.from_kelvin(5)) == "TemperatureDelta(5 K)"


def test_temperatures_order_across_scales():
    assert Temperature.from_fahrenheit(100) > Temperature.from_celsius(37)
    assert Temperature.from_celsius(0) == Temperature.from_kelvin(273.15)


def test_temperature_and_delta_are_different_kinds():
    assert Temperature.from_kelvin(5) != TemperatureDelta.from_kelvin(5)
    with pytest.raises(TypeError):
        _ = Temperature.from_kelvin(5) < TemperatureDelta.from_kelvin(5)


def test_sum_of_temperatures_is_refused():
    with pytest.raises(TypeError):
        _ = Temperature.from_celsius(20) + Temperature.from_celsius(20)


def test_scaling_a_temperature_is_refused():
    with pytest.raises(TypeError):
        _ = Temperature.from_celsius(20) * 2
    with pytest.raises(TypeError):
        _ = Temperature.from_celsius(20) / Temperature.from_celsius(10)


def test_average_via_deltas():
    readings = [Temperature.from_celsius(c) for c in (18.0, 21.0, 24.0)]
    origin = readings[0]
    spread = sum((r - origin for r in readings[1:]), TemperatureDelta.from_kelvin(0))
    mean = origin + spread / len(readings)
    assert mean.as_celsius() == pytest.approx(21.0)
