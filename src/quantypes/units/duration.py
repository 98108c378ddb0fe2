"""
Types and constants for handling durations.

`Duration` is the time quantity of the relation table. It stores float
seconds, so relation results keep sub-microsecond detail and are not limited
to the range of ``datetime.timedelta``. A ``timedelta`` operand is accepted
anywhere a `Duration` is, and `Duration.as_timedelta` converts back on request.
"""
from __future__ import annotations

from datetime import timedelta

from quantypes.core.measurement import LinearMeasurement, register_external_type

# Scale of each unit relative to the base unit (second)
NANOSECOND = 1e-9
MICROSECOND = 1e-6
MILLISECOND = 1e-3
MINUTE = 60.0
HOUR = 3600.0
DAY = 86400.0
WEEK = 7 * DAY


class Duration(LinearMeasurement):
    """
    A span of time, stored in seconds.

    Example
    -------
    >>> from quantypes import Length, Speed
    >>> lap = Length.from_metres(100) / Speed.from_metres_per_second(4)
    >>> lap
    Duration(25 s)
    >>> lap.as_timedelta()
    datetime.timedelta(seconds=25)
    """

    base_units_name = "s"
    appropriate_units = (
        ("ns", NANOSECOND),
        ("µs", MICROSECOND),
        ("ms", MILLISECOND),
        ("s", 1.0),
        ("min", MINUTE),
        ("h", HOUR),
        ("d", DAY),
    )

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        return cls.from_base_units(value.total_seconds())

    @classmethod
    def from_nanoseconds(cls, nanoseconds: float) -> Duration:
        return cls.from_base_units(nanoseconds * NANOSECOND)

    @classmethod
    def from_microseconds(cls, microseconds: float) -> Duration:
        return cls.from_base_units(microseconds * MICROSECOND)

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> Duration:
        return cls.from_base_units(milliseconds * MILLISECOND)

    @classmethod
    def from_seconds(cls, seconds: float) -> Duration:
        return cls.from_base_units(seconds)

    @classmethod
    def from_minutes(cls, minutes: float) -> Duration:
        return cls.from_base_units(minutes * MINUTE)

    @classmethod
    def from_hours(cls, hours: float) -> Duration:
        return cls.from_base_units(hours * HOUR)

    @classmethod
    def from_days(cls, days: float) -> Duration:
        return cls.from_base_units(days * DAY)

    @classmethod
    def from_weeks(cls, weeks: float) -> Duration:
        return cls.from_base_units(weeks * WEEK)

    def as_timedelta(self) -> timedelta:
        """
        The same span as a ``timedelta``, rounded to whole microseconds.

        Raises ``OverflowError`` outside the range ``timedelta`` can hold.
        """
        return timedelta(seconds=self._base)

    def as_nanoseconds(self) -> float:
        return self._base / NANOSECOND

    def as_microseconds(self) -> float:
        return self._base / MICROSECOND

    def as_milliseconds(self) -> float:
        return self._base / MILLISECOND

    def as_seconds(self) -> float:
        return self._base

    def as_minutes(self) -> float:
        return self._base / MINUTE

    def as_hours(self) -> float:
        return self._base / HOUR

    def as_days(self) -> float:
        return self._base / DAY

    def as_weeks(self) -> float:
        return self._base / WEEK


register_external_type(timedelta, kind=Duration, to_base=timedelta.total_seconds)


__all__ = ["Duration"]
