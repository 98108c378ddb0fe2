import math
import pickle

import pytest

from quantypes.core.measurement import (
    LinearMeasurement,
    Measurement,
    SupportsBaseUnits,
    check_unit_table,
    is_scalar,
)
from quantypes.units.length import Length
from quantypes.units.mass import Mass
from quantypes.units.pressure import Pressure
from tests.utils import _plain


# -------------------------------
# Contract
# -------------------------------

def test_base_units_round_trip_is_exact():
    for x in (0.0, 1.0, -2.5, 1e-300, 6.02e23):
        assert Length.from_base_units(x).as_base_units() == x


def test_from_base_units_stores_float():
    m = Mass.from_base_units(3)
    assert isinstance(m.as_base_units(), float)
    assert m.as_base_units() == 3.0


def test_base_units_name_is_class_level():
    assert Length.get_base_units_name() == "m"
    assert Mass.from_grams(5).get_base_units_name() == "kg"


def test_missing_base_units_name_raises():
    class Nameless(Measurement):
        pass

    with pytest.raises(NotImplementedError):
        Nameless.get_base_units_name()


def test_measurements_satisfy_protocol():
    assert isinstance(Length.from_metres(1), SupportsBaseUnits)
    assert not isinstance(1.0, SupportsBaseUnits)


def test_direct_construction_is_refused():
    with pytest.raises(TypeError, match="from_"):
        Length(3.0)


def test_nan_and_infinity_propagate():
    assert math.isnan(Length.from_metres(float("nan")).as_metres())
    assert Length.from_metres(float("inf")).as_kilometres() == float("inf")


# -------------------------------
# Immutability
# -------------------------------

def test_values_are_immutable():
    m = Length.from_metres(1.0)
    with pytest.raises(AttributeError):
        m._base = 2.0
    with pytest.raises(AttributeError):
        m.anything = 1
    with pytest.raises(AttributeError):
        del m._base


def test_pickle_round_trip():
    m = Mass.from_kilograms(2.5)
    clone = pickle.loads(pickle.dumps(m))
    assert type(clone) is Mass
    assert clone == m


# -------------------------------
# Equality, ordering, hashing
# -------------------------------

def test_equality_is_exact_in_base_units():
    assert Length.from_metres(1000) == Length.from_kilometres(1)
    assert Length.from_metres(1.0) != Length.from_metres(1.0 + 1e-12)


def test_different_kinds_never_compare_equal():
    assert Length.from_metres(1) != Mass.from_kilograms(1)
    assert not (Length.from_metres(1) == 1.0)


def test_ordering_within_a_kind():
    small, big = Length.from_centimetres(99), Length.from_metres(1)
    assert small < big
    assert small <= big
    assert big > small
    assert big >= small
    assert sorted([big, small]) == [small, big]
    assert max(small, big) is big


def test_ordering_across_kinds_raises():
    with pytest.raises(TypeError):
        _ = Length.from_metres(1) < Mass.from_kilograms(2)
    with pytest.raises(TypeError):
        _ = Length.from_metres(1) < 2


def test_hash_consistent_with_equality():
    a = Length.from_metres(1000)
    b = Length.from_kilometres(1)
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    # same number, different kinds -> distinct keys
    assert len({Length.from_base_units(1), Mass.from_base_units(1)}) == 2


def test_truthiness_follows_zero():
    assert not Length.from_metres(0)
    assert Length.from_metres(-1)


# -------------------------------
# Unit selection
# -------------------------------

@pytest.mark.regression(reason="Boundary: a value of exactly one unit must display in that unit")
@pytest.mark.parametrize("kilograms, unit, value", [
    (1.0, "kg", 1.0),
    (0.999, "g", 999.0),
    (1.001, "kg", 1.001),
    (-1.0, "kg", -1.0),
    (-0.5, "g", -500.0),
    (1500.0, "tonnes", 1.5),
])
def test_mass_appropriate_units_boundaries(kilograms, unit, value):
    got_unit, got_value = Mass.from_kilograms(kilograms).get_appropriate_units()
    assert got_unit == unit
    assert got_value == pytest.approx(value)


def test_appropriate_units_falls_back_to_smallest():
    unit, value = Mass.from_kilograms(1e-15).get_appropriate_units()
    assert unit == "ng"
    assert value == pytest.approx(1e-3)


def test_appropriate_units_zero_uses_smallest_unit():
    assert Mass.from_kilograms(0).get_appropriate_units() == ("ng", 0.0)


def test_no_table_means_base_unit():
    from quantypes.units.speed import Speed

    assert Speed.from_meters_per_second(3).get_appropriate_units() == ("m/s", 3.0)


def test_pick_with_explicit_table():
    table = (("mm", 1e-3), ("m", 1.0))
    assert Length.from_metres(0.5).pick_appropriate_units(table) == ("mm", 500.0)
    assert Length.from_metres(2).pick_appropriate_units(table) == ("m", 2.0)


def test_pick_with_empty_table_raises():
    with pytest.raises(ValueError):
        Length.from_metres(1).pick_appropriate_units(())


@pytest.mark.parametrize("table", [
    (),
    (("a", 1.0), ("b", 1.0)),
    (("a", 10.0), ("b", 1.0)),
    (("a", 0.0), ("b", 1.0)),
    (("a", -1.0), ("b", 1.0)),
])
def test_bad_unit_tables_rejected(table):
    with pytest.raises(ValueError):
        check_unit_table("Bad", table)


def test_bad_unit_table_rejected_at_class_creation():
    with pytest.raises(ValueError):
        class Broken(LinearMeasurement):
            base_units_name = "x"
            appropriate_units = (("big", 10.0), ("small", 1.0))


# -------------------------------
# Display
# -------------------------------

def test_str_uses_appropriate_unit_and_nbsp():
    s = str(Mass.from_grams(1500))
    assert s == "1.5\u00a0kg"
    assert _plain(str(Mass.from_grams(250))) == "250 g"


def test_repr_shows_class_and_base_units():
    assert repr(Length.from_kilometres(2)) == "Length(2000 m)"


@pytest.mark.regression
def test_repr_keeps_every_digit():
    m = Mass.from_kilograms(1.0000000000000002)
    assert repr(m) == "Mass(1.0000000000000002 kg)"
    assert _plain(str(m)) == "1 kg"


@pytest.mark.parametrize("spec, expected", [
    ("", "1.5 kg"),
    ("base", "1.5 kg"),
    (".2f", "1.50 kg"),
    (".1e", "1.5e+00 kg"),
])
def test_format_specs(spec, expected):
    m = Mass.from_grams(1500)
    assert _plain(format(m, spec)) == expected


def test_format_base_ignores_table():
    p = Pressure.from_kilopascals(2)
    assert _plain(f"{p}") == "2 kPa"
    assert _plain(f"{p:base}") == "2000 Pa"


def test_invalid_format_spec_raises():
    with pytest.raises(ValueError):
        format(Mass.from_grams(1), "nonsense")


def test_is_scalar_excludes_bool():
    assert is_scalar(1) and is_scalar(2.5)
    assert not is_scalar(True)
    assert not is_scalar("1")
