"""
quantypes.core.affine
=====================

Absolute quantities: measurements whose zero is a reference point rather than
an arithmetic identity (absolute temperature, clock time, ...).

An `AbsoluteMeasurement` is paired with a delta class (a `LinearMeasurement`
in the same base unit) and gets only these mixed rules::

    Absolute + Delta    -> Absolute
    Delta    + Absolute -> Absolute
    Absolute - Delta    -> Absolute
    Absolute - Absolute -> Delta

``Absolute + Absolute`` and scaling an absolute are not defined. Equality,
ordering and display come from `Measurement`.
"""
from __future__ import annotations

from typing import Any, ClassVar

from quantypes.core.measurement import LinearMeasurement, Measurement


class AbsoluteMeasurement(Measurement):
    """Base class for the absolute half of an absolute/delta pair."""
    __slots__ = ()

    delta_type: ClassVar[type[LinearMeasurement]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        delta = cls.__dict__.get("delta_type")
        if delta is not None and not (
            isinstance(delta, type) and issubclass(delta, LinearMeasurement)
        ):
            raise TypeError(f"{cls.__name__}.delta_type must be a LinearMeasurement subclass")

    def __add__(self, other: object) -> Any:
        if isinstance(other, self.delta_type):
            return self.from_base_units(self._base + other.as_base_units())
        return NotImplemented

    # Delta + Absolute: the delta's __add__ declines, Python lands here.
    def __radd__(self, other: object) -> Any:
        return self.__add__(other)

    def __sub__(self, other: object) -> Any:
        if self._same_kind(other):
            return self.delta_type.from_base_units(self._base - other.as_base_units())  # type: ignore[attr-defined]
        if isinstance(other, self.delta_type):
            return self.from_base_units(self._base - other.as_base_units())
        return NotImplemented


__all__ = ["AbsoluteMeasurement"]
