import pytest

from quantypes.core.affine import AbsoluteMeasurement
from quantypes.core.measurement import LinearMeasurement
from quantypes.units.length import Length
from quantypes.units.temperature import Temperature, TemperatureDelta


class Span(LinearMeasurement):
    base_units_name = "s"


class Instant(AbsoluteMeasurement):
    base_units_name = "s"
    delta_type = Span


# -------------------------------
# Allowed mixed operations
# -------------------------------

def test_absolute_plus_delta():
    t = Instant.from_base_units(100) + Span.from_base_units(5)
    assert type(t) is Instant
    assert t.as_base_units() == 105.0


def test_delta_plus_absolute():
    t = Span.from_base_units(5) + Instant.from_base_units(100)
    assert type(t) is Instant
    assert t.as_base_units() == 105.0


def test_absolute_minus_delta():
    t = Instant.from_base_units(100) - Span.from_base_units(5)
    assert type(t) is Instant
    assert t.as_base_units() == 95.0


def test_absolute_minus_absolute_gives_delta():
    d = Instant.from_base_units(100) - Instant.from_base_units(40)
    assert type(d) is Span
    assert d.as_base_units() == 60.0


def test_absolutes_compare_and_hash():
    a, b = Instant.from_base_units(1), Instant.from_base_units(2)
    assert a < b
    assert a == Instant.from_base_units(1)
    assert hash(a) == hash(Instant.from_base_units(1))


# -------------------------------
# Refused operations
# -------------------------------

def test_absolute_plus_absolute_raises():
    with pytest.raises(TypeError):
        _ = Instant.from_base_units(1) + Instant.from_base_units(2)


def test_delta_minus_absolute_raises():
    with pytest.raises(TypeError):
        _ = Span.from_base_units(1) - Instant.from_base_units(2)


@pytest.mark.parametrize("op", [
    lambda t: t * 2,
    lambda t: 2 * t,
    lambda t: t / 2,
    lambda t: -t,
])
def test_absolutes_cannot_be_scaled(op):
    with pytest.raises(TypeError):
        op(Instant.from_base_units(10))


def test_foreign_delta_is_refused():
    with pytest.raises(TypeError):
        _ = Temperature.from_kelvin(300) + Length.from_metres(1)


def test_delta_type_must_be_linear():
    with pytest.raises(TypeError):
        class BadAbsolute(AbsoluteMeasurement):
            base_units_name = "x"
            delta_type = int


# -------------------------------
# Temperature pair
# -------------------------------

def test_temperature_difference_is_a_delta():
    rise = Temperature.from_celsius(100) - Temperature.from_celsius(0)
    assert type(rise) is TemperatureDelta
    assert rise.as_kelvin() == pytest.approx(100.0)
    assert rise.as_fahrenheit() == pytest.approx(180.0)


def test_temperature_shifted_by_delta():
    warm = Temperature.from_celsius(20) + TemperatureDelta.from_fahrenheit(9)
    assert warm.as_celsius() == pytest.approx(25.0)
    cool = Temperature.from_celsius(20) - TemperatureDelta.from_celsius(5)
    assert cool.as_celsius() == pytest.approx(15.0)


def test_temperature_delta_has_full_linear_algebra():
    d = TemperatureDelta.from_kelvin(10)
    assert (d * 2).as_kelvin() == 20.0
    assert (d + d) / d == 2.0
    assert (-d).as_celsius() == -10.0
