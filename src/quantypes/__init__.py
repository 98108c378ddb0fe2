"""
Quantypes: typed physical quantities for Python.

Every kind of measurement (length, mass, temperature, torque, ...) is its own
class, so the type of a value says what it measures. Arithmetic between
quantity kinds is limited to the physical relations wired into the default
relation table (e.g. ``Force = Mass * Acceleration``).

This module exposes a minimal, stable public API. The quantity catalogue is
imported lazily on first attribute access to keep ``import quantypes`` cheap.
"""

import logging
from importlib import metadata as _metadata


__author__ = "Parneet Sidhu"
__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("quantypes")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# One NullHandler, even across reloads.
if not any(isinstance(h, logging.NullHandler) for h in logging.getLogger(__name__).handlers):
    logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__"]

from typing import Any

# name -> defining module (relative to quantypes.units)
_LAZY_QUANTITIES = {
    "Acceleration": "acceleration",
    "Angle": "angle",
    "AngularVelocity": "angular_velocity",
    "Area": "area",
    "Current": "current",
    "Data": "data",
    "Density": "density",
    "Duration": "duration",
    "Distance": "length",
    "Energy": "energy",
    "Force": "force",
    "Frequency": "frequency",
    "Humidity": "humidity",
    "Length": "length",
    "Mass": "mass",
    "Power": "power",
    "Pressure": "pressure",
    "Resistance": "resistance",
    "Speed": "speed",
    "Temperature": "temperature",
    "TemperatureDelta": "temperature",
    "Torque": "torque",
    "TorqueEnergy": "torque_energy",
    "Voltage": "voltage",
    "Volume": "volume",
}

# Lazy access helpers -------------------------------------------------------

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. ``quantypes.Length`` imports the units package
    (which also wires the default relation table) on first use.
    """
    module_name = _LAZY_QUANTITIES.get(name)
    if module_name is not None:
        from importlib import import_module  # local import
        module = import_module(f"quantypes.units.{module_name}")
        return getattr(module, name)
    if name == "Measurement":
        from quantypes.core.measurement import Measurement
        return Measurement
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY_QUANTITIES) + ["Measurement"])
