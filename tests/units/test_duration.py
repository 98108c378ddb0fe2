from datetime import timedelta

import pytest

from quantypes.core.measurement import (
    base_units_of,
    construct,
    external_type_for,
    kind_of,
    register_external_type,
)
from quantypes.units.duration import Duration
from quantypes.units.length import Length
from tests.utils import _plain


# -------------------------------
# Units
# -------------------------------

def test_duration_units():
    assert Duration.get_base_units_name() == "s"
    assert Duration.from_minutes(90).as_hours() == pytest.approx(1.5)
    assert Duration.from_days(1).as_seconds() == 86400.0
    assert Duration.from_weeks(2).as_days() == pytest.approx(14.0)
    assert Duration.from_microseconds(1500).as_milliseconds() == pytest.approx(1.5)


@pytest.mark.parametrize("duration, expected", [
    (Duration.from_nanoseconds(250), "250 ns"),
    (Duration.from_milliseconds(20), "20 ms"),
    (Duration.from_seconds(90), "1.5 min"),
    (Duration.from_hours(36), "1.5 d"),
])
def test_duration_display(duration, expected):
    assert _plain(str(duration)) == expected


def test_duration_is_linear():
    lap = Duration.from_seconds(30)
    assert lap + lap == Duration.from_minutes(1)
    assert lap * 4 == Duration.from_minutes(2)
    assert Duration.from_minutes(3) / lap == pytest.approx(6.0)


# -------------------------------
# timedelta interop
# -------------------------------

def test_from_and_as_timedelta():
    d = Duration.from_timedelta(timedelta(minutes=2, milliseconds=500))
    assert d.as_seconds() == pytest.approx(120.5)
    assert d.as_timedelta() == timedelta(minutes=2, milliseconds=500)


def test_as_timedelta_rounds_to_microseconds():
    assert Duration.from_nanoseconds(100).as_timedelta() == timedelta(0)
    assert Duration.from_seconds(2.0000004).as_timedelta() == timedelta(seconds=2)


def test_timedelta_stands_in_for_duration():
    adapter = external_type_for(timedelta)
    assert adapter is not None
    assert adapter.kind is Duration
    assert adapter.get_base_units_name() == "s"
    assert kind_of(timedelta(hours=1)) is Duration
    assert base_units_of(timedelta(hours=1)) == 3600.0


def test_kind_of_plain_values():
    assert kind_of(Length.from_metres(1)) is Length
    assert kind_of("3 s") is str


def test_unregistered_types_do_not_satisfy_the_contract():
    assert external_type_for(str) is None
    with pytest.raises(TypeError):
        base_units_of("3 s")
    with pytest.raises(TypeError):
        construct(str, 3.0)
    with pytest.raises(TypeError):
        construct(timedelta, 3.0)


def test_external_kind_must_be_a_measurement():
    class Ticks:
        pass

    with pytest.raises(TypeError):
        register_external_type(Ticks, kind=int, to_base=float)
    assert external_type_for(Ticks) is None


def test_construct_builds_measurements():
    assert construct(Length, 2.0) == Length.from_metres(2)
    assert construct(Duration, 60.0) == Duration.from_minutes(1)
