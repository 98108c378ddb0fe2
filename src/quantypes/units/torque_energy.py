"""
The product of a force and a length.

Newton metres measure both torque (a turning moment) and energy (work done
moving a force through a distance), and nothing in ``Force * Length`` says
which one was meant. That product is therefore a `TorqueEnergy`, and the
caller decides what it is.

    >>> from quantypes import Force, Length
    >>> te = Force.from_newtons(10.0) * Length.from_metres(2.0)
    >>> te.into_torque().as_newton_metres()
    20.0
    >>> te.into_energy().as_joules()
    20.0
"""
from __future__ import annotations

from quantypes.core.measurement import Measurement
from quantypes.units.energy import Energy
from quantypes.units.torque import Torque


class TorqueEnergy(Measurement):
    """
    Either a torque or an energy, stored in newton metres.

    Carries no arithmetic of its own beyond the relation table's quotients
    (``TorqueEnergy / Force -> Length`` and ``TorqueEnergy / Length -> Force``).
    """

    base_units_name = "Nm||J"

    def into_torque(self) -> Torque:
        return Torque.from_torque_energy(self)

    def into_energy(self) -> Energy:
        return Energy.from_torque_energy(self)


__all__ = ["TorqueEnergy"]
