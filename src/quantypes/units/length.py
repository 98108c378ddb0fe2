"""Types and constants for handling lengths (distances)."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (metre)
NANOMETRE = 1e-9
MICROMETRE = 1e-6
MILLIMETRE = 1e-3
CENTIMETRE = 1e-2
DECIMETRE = 1e-1
DECAMETRE = 1e1
HECTOMETRE = 1e2
KILOMETRE = 1e3

INCH = 0.0254
FOOT = 12 * INCH
YARD = 3 * FOOT
FURLONG = 220 * YARD
MILE = 1760 * YARD
NAUTICAL_MILE = 1852.0


class Length(LinearMeasurement):
    """
    A length, stored in metres.

    Example
    -------
    >>> football_field = Length.from_yards(100)
    >>> round(football_field.as_metres(), 2)
    91.44
    """

    base_units_name = "m"
    appropriate_units = (
        ("nm", NANOMETRE),
        ("µm", MICROMETRE),
        ("mm", MILLIMETRE),
        ("cm", CENTIMETRE),
        ("m", 1.0),
        ("km", KILOMETRE),
        ("thousand km", 1e6),
        ("million km", 1e9),
    )

    # --- metric ---
    @classmethod
    def from_nanometres(cls, nanometres: float) -> Length:
        return cls.from_base_units(nanometres * NANOMETRE)

    @classmethod
    def from_micrometres(cls, micrometres: float) -> Length:
        return cls.from_base_units(micrometres * MICROMETRE)

    @classmethod
    def from_microns(cls, microns: float) -> Length:
        return cls.from_micrometres(microns)

    @classmethod
    def from_millimetres(cls, millimetres: float) -> Length:
        return cls.from_base_units(millimetres * MILLIMETRE)

    @classmethod
    def from_centimetres(cls, centimetres: float) -> Length:
        return cls.from_base_units(centimetres * CENTIMETRE)

    @classmethod
    def from_decimetres(cls, decimetres: float) -> Length:
        return cls.from_base_units(decimetres * DECIMETRE)

    @classmethod
    def from_metres(cls, metres: float) -> Length:
        return cls.from_base_units(metres)

    @classmethod
    def from_meters(cls, meters: float) -> Length:
        return cls.from_base_units(meters)

    @classmethod
    def from_decametres(cls, decametres: float) -> Length:
        return cls.from_base_units(decametres * DECAMETRE)

    @classmethod
    def from_hectometres(cls, hectometres: float) -> Length:
        return cls.from_base_units(hectometres * HECTOMETRE)

    @classmethod
    def from_kilometres(cls, kilometres: float) -> Length:
        return cls.from_base_units(kilometres * KILOMETRE)

    @classmethod
    def from_kilometers(cls, kilometers: float) -> Length:
        return cls.from_kilometres(kilometers)

    # --- imperial ---
    @classmethod
    def from_inches(cls, inches: float) -> Length:
        return cls.from_base_units(inches * INCH)

    @classmethod
    def from_feet(cls, feet: float) -> Length:
        return cls.from_base_units(feet * FOOT)

    @classmethod
    def from_yards(cls, yards: float) -> Length:
        return cls.from_base_units(yards * YARD)

    @classmethod
    def from_furlongs(cls, furlongs: float) -> Length:
        return cls.from_base_units(furlongs * FURLONG)

    @classmethod
    def from_miles(cls, miles: float) -> Length:
        return cls.from_base_units(miles * MILE)

    @classmethod
    def from_nautical_miles(cls, nautical_miles: float) -> Length:
        return cls.from_base_units(nautical_miles * NAUTICAL_MILE)

    def as_nanometres(self) -> float:
        return self._base / NANOMETRE

    def as_micrometres(self) -> float:
        return self._base / MICROMETRE

    def as_microns(self) -> float:
        return self.as_micrometres()

    def as_millimetres(self) -> float:
        return self._base / MILLIMETRE

    def as_centimetres(self) -> float:
        return self._base / CENTIMETRE

    def as_decimetres(self) -> float:
        return self._base / DECIMETRE

    def as_metres(self) -> float:
        return self._base

    def as_meters(self) -> float:
        return self._base

    def as_decametres(self) -> float:
        return self._base / DECAMETRE

    def as_hectometres(self) -> float:
        return self._base / HECTOMETRE

    def as_kilometres(self) -> float:
        return self._base / KILOMETRE

    def as_kilometers(self) -> float:
        return self.as_kilometres()

    def as_inches(self) -> float:
        return self._base / INCH

    def as_feet(self) -> float:
        return self._base / FOOT

    def as_yards(self) -> float:
        return self._base / YARD

    def as_furlongs(self) -> float:
        return self._base / FURLONG

    def as_miles(self) -> float:
        return self._base / MILE

    def as_nautical_miles(self) -> float:
        return self._base / NAUTICAL_MILE


# Distance is another name for Length.
Distance = Length

__all__ = ["Length", "Distance"]
