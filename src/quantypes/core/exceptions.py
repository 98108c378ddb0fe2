"""
quantypes.core.exceptions
=========================

Exception types raised by the framework. Everything derives from
``QuantypesError`` and, where the failure is a bad value, from ``ValueError``
as well so plain ``except ValueError`` handlers keep working.
"""


class QuantypesError(Exception):
    """Base class for all quantypes errors."""


class AmbiguousRelationError(QuantypesError, ValueError):
    """A product was registered for an operand pair that already has a different result type.

    Physically ambiguous products (e.g. Force x Length) must go through a
    bridging type such as ``TorqueEnergy`` instead.
    """


class MeasurementParseError(QuantypesError, ValueError):
    """Text could not be turned into a measurement."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")
