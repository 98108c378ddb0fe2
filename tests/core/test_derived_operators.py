from math import isclose

import pytest

from quantypes.units.length import Length
from quantypes.units.mass import Mass
from quantypes.units.power import Power


# -------------------------------
# Same-kind arithmetic
# -------------------------------

def test_add_and_subtract_stay_in_kind():
    a = Length.from_metres(3)
    b = Length.from_centimetres(50)
    total = a + b
    diff = a - b
    assert type(total) is Length and type(diff) is Length
    assert isclose(total.as_metres(), 3.5)
    assert isclose(diff.as_metres(), 2.5)


def test_additive_closure_matches_base_units():
    a = Mass.from_pounds(3)
    b = Mass.from_ounces(5)
    assert (a + b).as_base_units() == a.as_base_units() + b.as_base_units()
    assert (a - b).as_base_units() == a.as_base_units() - b.as_base_units()


def test_scaling_both_sides():
    p = Power.from_watts(40)
    assert (p * 3) == Power.from_watts(120)
    assert (3 * p) == Power.from_watts(120)
    assert (p * 0.5) == Power.from_watts(20)
    assert (p / 4) == Power.from_watts(10)


def test_same_kind_ratio_is_plain_float():
    ratio = Length.from_kilometres(1) / Length.from_metres(250)
    assert type(ratio) is float
    assert isclose(ratio, 4.0)


@pytest.mark.parametrize("x", [1e-9, 0.3, 1.0, 42.0, 1e12, -7.25])
def test_ratio_with_itself_is_one(x):
    a = Mass.from_kilograms(x)
    assert a / a == 1.0


def test_unary_operators():
    a = Length.from_metres(-2)
    assert -a == Length.from_metres(2)
    assert +a is a
    assert abs(a) == Length.from_metres(2)


# -------------------------------
# Refusals
# -------------------------------

def test_cross_kind_addition_raises():
    with pytest.raises(TypeError):
        _ = Length.from_metres(1) + Mass.from_kilograms(1)
    with pytest.raises(TypeError):
        _ = Length.from_metres(1) - Mass.from_kilograms(1)


def test_adding_plain_numbers_raises():
    with pytest.raises(TypeError):
        _ = Length.from_metres(1) + 1
    with pytest.raises(TypeError):
        _ = 1 + Length.from_metres(1)


def test_number_divided_by_measurement_raises():
    with pytest.raises(TypeError):
        _ = 1 / Length.from_metres(2)


def test_bool_is_not_a_scale_factor():
    with pytest.raises(TypeError):
        _ = Length.from_metres(1) * True


def test_unrelated_product_raises():
    with pytest.raises(TypeError):
        _ = Mass.from_kilograms(2) * Mass.from_kilograms(3)


def test_division_by_zero_scalar_raises():
    with pytest.raises(ZeroDivisionError):
        _ = Length.from_metres(1) / 0


def test_division_by_zero_quantity_raises():
    with pytest.raises(ZeroDivisionError):
        _ = Length.from_metres(1) / Length.from_metres(0)
