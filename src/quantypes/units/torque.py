"""Types and constants for handling torque."""
from __future__ import annotations

from typing import TYPE_CHECKING

from quantypes.core.measurement import LinearMeasurement

if TYPE_CHECKING:
    from quantypes.units.torque_energy import TorqueEnergy

# Scale of each unit relative to the base unit (newton metre)
POUND_FOOT = 1.0 / 0.73756326522588
KILONEWTON_METRE = 1e3
MILLINEWTON_METRE = 1e-3


class Torque(LinearMeasurement):
    """
    A torque, stored in newton metres.

    Force * Length is ambiguous between torque and energy, so it yields a
    `TorqueEnergy`; resolve it with `from_torque_energy` or
    `TorqueEnergy.into_torque`.

    Example
    -------
    >>> from quantypes import Force, Length
    >>> wrench = Torque.from_torque_energy(
    ...     Force.from_newtons(40) * Length.from_centimetres(25)
    ... )
    >>> wrench.as_newton_metres()
    10.0
    """

    base_units_name = "N·m"
    appropriate_units = (
        ("mN·m", MILLINEWTON_METRE),
        ("N·m", 1.0),
        ("kN·m", KILONEWTON_METRE),
    )

    @classmethod
    def from_torque_energy(cls, torque_energy: TorqueEnergy) -> Torque:
        """Read a force x length product as a turning moment."""
        return cls.from_base_units(torque_energy.as_base_units())

    @classmethod
    def from_millinewton_metres(cls, millinewton_metres: float) -> Torque:
        return cls.from_base_units(millinewton_metres * MILLINEWTON_METRE)

    @classmethod
    def from_newton_metres(cls, newton_metres: float) -> Torque:
        return cls.from_base_units(newton_metres)

    @classmethod
    def from_kilonewton_metres(cls, kilonewton_metres: float) -> Torque:
        return cls.from_base_units(kilonewton_metres * KILONEWTON_METRE)

    @classmethod
    def from_pound_feet(cls, pound_feet: float) -> Torque:
        return cls.from_base_units(pound_feet * POUND_FOOT)

    def as_millinewton_metres(self) -> float:
        return self._base / MILLINEWTON_METRE

    def as_newton_metres(self) -> float:
        return self._base

    def as_kilonewton_metres(self) -> float:
        return self._base / KILONEWTON_METRE

    def as_pound_feet(self) -> float:
        return self._base / POUND_FOOT


__all__ = ["Torque"]
