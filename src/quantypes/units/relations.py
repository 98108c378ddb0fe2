"""
Wires the physical relations between the built-in quantities into
`quantypes.core.algebra.DEFAULT_RELATIONS`.

Each line ``register(A, B, C)`` reads ``A = B x C`` and gives ``B * C``,
``C * B``, ``A / B`` and ``A / C``. Imported once by ``quantypes.units``.
"""
from __future__ import annotations

from quantypes.core.algebra import DEFAULT_RELATIONS, RelationTable
from quantypes.units.duration import Duration
from quantypes.units.acceleration import Acceleration
from quantypes.units.angular_velocity import AngularVelocity
from quantypes.units.area import Area
from quantypes.units.current import Current
from quantypes.units.density import Density
from quantypes.units.energy import Energy
from quantypes.units.force import Force
from quantypes.units.length import Length
from quantypes.units.mass import Mass
from quantypes.units.power import Power
from quantypes.units.pressure import Pressure
from quantypes.units.resistance import Resistance
from quantypes.units.speed import Speed
from quantypes.units.torque import Torque
from quantypes.units.torque_energy import TorqueEnergy
from quantypes.units.voltage import Voltage
from quantypes.units.volume import Volume


def register_builtin_relations(table: RelationTable) -> None:
    """Register every built-in relation on ``table``."""
    # geometry
    table.register(Area, Length, Length)
    table.register(Volume, Length, Area)

    # kinematics
    table.register(Length, Speed, Duration)
    table.register(Speed, Acceleration, Duration)

    # mechanics
    table.register(Force, Mass, Acceleration)
    table.register(Force, Pressure, Area)
    table.register(Mass, Density, Volume)
    table.register(Energy, Power, Duration)
    table.register(Power, Force, Speed)
    table.register(Power, Torque, AngularVelocity)

    # electrics
    table.register(Power, Voltage, Current)
    table.register(Voltage, Resistance, Current)

    # Force x Length is torque or energy: bridge through TorqueEnergy, and
    # keep the quotients of the resolved types.
    table.register(TorqueEnergy, Force, Length)
    table.register_quotient(Torque, Length, Force)
    table.register_quotient(Torque, Force, Length)
    table.register_quotient(Energy, Length, Force)
    table.register_quotient(Energy, Force, Length)


register_builtin_relations(DEFAULT_RELATIONS)


__all__ = ["register_builtin_relations"]
