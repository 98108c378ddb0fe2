"""
The built-in quantity catalogue.

Importing this package loads every quantity module and wires the default
relation table, so ``Mass * Acceleration`` works as soon as both classes are
in hand.
"""
from quantypes.units.acceleration import Acceleration
from quantypes.units.angle import Angle
from quantypes.units.angular_velocity import AngularVelocity
from quantypes.units.area import Area
from quantypes.units.current import Current
from quantypes.units.data import Data
from quantypes.units.density import Density
from quantypes.units.duration import Duration
from quantypes.units.energy import Energy
from quantypes.units.force import Force
from quantypes.units.frequency import Frequency
from quantypes.units.humidity import Humidity
from quantypes.units.length import Distance, Length
from quantypes.units.mass import Mass
from quantypes.units.power import Power
from quantypes.units.pressure import Pressure
from quantypes.units.resistance import Resistance
from quantypes.units.speed import Speed
from quantypes.units.temperature import Temperature, TemperatureDelta
from quantypes.units.torque import Torque
from quantypes.units.torque_energy import TorqueEnergy
from quantypes.units.voltage import Voltage
from quantypes.units.volume import Volume

from quantypes.units import relations  # noqa: F401  (wires DEFAULT_RELATIONS)

__all__ = [
    "Acceleration",
    "Angle",
    "AngularVelocity",
    "Area",
    "Current",
    "Data",
    "Density",
    "Distance",
    "Duration",
    "Energy",
    "Force",
    "Frequency",
    "Humidity",
    "Length",
    "Mass",
    "Power",
    "Pressure",
    "Resistance",
    "Speed",
    "Temperature",
    "TemperatureDelta",
    "Torque",
    "TorqueEnergy",
    "Voltage",
    "Volume",
]
