"""Types and constants for handling quantities of digital data."""
from __future__ import annotations

from quantypes.core.measurement import LinearMeasurement

# Scale of each unit relative to the base unit (octet)
BIT = 1.0 / 8.0
KILOBIT = 1e3 * BIT
MEGABIT = 1e6 * BIT
GIGABIT = 1e9 * BIT
KIBIBIT = 1024 * BIT
MEBIBIT = 1024 * KIBIBIT
GIBIBIT = 1024 * MEBIBIT

KILOBYTE = 1e3
MEGABYTE = 1e6
GIGABYTE = 1e9
TERABYTE = 1e12
KIBIBYTE = 1024.0
MEBIBYTE = 1024 * KIBIBYTE
GIBIBYTE = 1024 * MEBIBYTE
TEBIBYTE = 1024 * GIBIBYTE


class Data(LinearMeasurement):
    """
    An amount of data, stored in octets (8-bit bytes).

    Example
    -------
    >>> ram = Data.from_gibibytes(1)
    >>> ram.as_mebibytes()
    1024.0
    """

    base_units_name = "octets"
    appropriate_units = (
        ("octets", 1.0),
        ("KiB", KIBIBYTE),
        ("MiB", MEBIBYTE),
        ("GiB", GIBIBYTE),
        ("TiB", TEBIBYTE),
    )

    @classmethod
    def from_bits(cls, bits: float) -> Data:
        return cls.from_base_units(bits * BIT)

    @classmethod
    def from_octets(cls, octets: float) -> Data:
        return cls.from_base_units(octets)

    @classmethod
    def from_bytes(cls, bytes_: float) -> Data:
        return cls.from_base_units(bytes_)

    @classmethod
    def from_kilobits(cls, kilobits: float) -> Data:
        return cls.from_base_units(kilobits * KILOBIT)

    @classmethod
    def from_megabits(cls, megabits: float) -> Data:
        return cls.from_base_units(megabits * MEGABIT)

    @classmethod
    def from_gigabits(cls, gigabits: float) -> Data:
        return cls.from_base_units(gigabits * GIGABIT)

    @classmethod
    def from_kibibits(cls, kibibits: float) -> Data:
        return cls.from_base_units(kibibits * KIBIBIT)

    @classmethod
    def from_mebibits(cls, mebibits: float) -> Data:
        return cls.from_base_units(mebibits * MEBIBIT)

    @classmethod
    def from_gibibits(cls, gibibits: float) -> Data:
        return cls.from_base_units(gibibits * GIBIBIT)

    @classmethod
    def from_kilobytes(cls, kilobytes: float) -> Data:
        return cls.from_base_units(kilobytes * KILOBYTE)

    @classmethod
    def from_megabytes(cls, megabytes: float) -> Data:
        return cls.from_base_units(megabytes * MEGABYTE)

    @classmethod
    def from_gigabytes(cls, gigabytes: float) -> Data:
        return cls.from_base_units(gigabytes * GIGABYTE)

    @classmethod
    def from_terabytes(cls, terabytes: float) -> Data:
        return cls.from_base_units(terabytes * TERABYTE)

    @classmethod
    def from_kibibytes(cls, kibibytes: float) -> Data:
        return cls.from_base_units(kibibytes * KIBIBYTE)

    @classmethod
    def from_mebibytes(cls, mebibytes: float) -> Data:
        return cls.from_base_units(mebibytes * MEBIBYTE)

    @classmethod
    def from_gibibytes(cls, gibibytes: float) -> Data:
        return cls.from_base_units(gibibytes * GIBIBYTE)

    @classmethod
    def from_tebibytes(cls, tebibytes: float) -> Data:
        return cls.from_base_units(tebibytes * TEBIBYTE)

    def as_bits(self) -> float:
        return self._base / BIT

    def as_octets(self) -> float:
        return self._base

    def as_bytes(self) -> float:
        return self._base

    def as_kilobits(self) -> float:
        return self._base / KILOBIT

    def as_megabits(self) -> float:
        return self._base / MEGABIT

    def as_gigabits(self) -> float:
        return self._base / GIGABIT

    def as_kibibits(self) -> float:
        return self._base / KIBIBIT

    def as_mebibits(self) -> float:
        return self._base / MEBIBIT

    def as_gibibits(self) -> float:
        return self._base / GIBIBIT

    def as_kilobytes(self) -> float:
        return self._base / KILOBYTE

    def as_megabytes(self) -> float:
        return self._base / MEGABYTE

    def as_gigabytes(self) -> float:
        return self._base / GIGABYTE

    def as_terabytes(self) -> float:
        return self._base / TERABYTE

    def as_kibibytes(self) -> float:
        return self._base / KIBIBYTE

    def as_mebibytes(self) -> float:
        return self._base / MEBIBYTE

    def as_gibibytes(self) -> float:
        return self._base / GIBIBYTE

    def as_tebibytes(self) -> float:
        return self._base / TEBIBYTE


__all__ = ["Data"]
