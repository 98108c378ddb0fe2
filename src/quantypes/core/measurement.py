"""
quantypes.core.measurement
==========================

Defines the quantity contract and the operators derived from it.

This module provides:
- `SupportsBaseUnits`, the protocol every quantity satisfies: convert to and
  from a single base unit and name that unit.
- `Measurement`, the base class implementing the contract over one immutable
  base-unit float, plus equality, ordering, hashing, display and unit
  selection from an appropriate-unit table.
- `LinearMeasurement`, which adds the derived operator set (add, subtract,
  scaling, same-kind ratio, negation) for quantities measured from a true zero.
- External-type adapters (`register_external_type`) so that foreign types such
  as ``datetime.timedelta`` can stand in for a measurement class in
  cross-quantity relations.

Products and quotients between *different* quantity kinds are looked up in the
default relation table (`quantypes.core.algebra.DEFAULT_RELATIONS`); when no
relation applies the operator returns ``NotImplemented`` and Python raises
``TypeError``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    Union,
    runtime_checkable,
)

from quantypes.core.algebra import DEFAULT_RELATIONS
from quantypes.core.utils import NBSP, format_exact, format_number

Number = Union[int, float]
UnitTable = Sequence[Tuple[str, float]]
M = TypeVar("M", bound="Measurement")


@runtime_checkable
class SupportsBaseUnits(Protocol):
    """The quantity contract."""

    def as_base_units(self) -> float: ...

    @classmethod
    def from_base_units(cls, units: float) -> Any: ...

    @classmethod
    def get_base_units_name(cls) -> str: ...


def is_scalar(value: object) -> bool:
    """True for plain numbers that may scale a measurement (bool excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_unit_table(owner: str, table: UnitTable) -> None:
    """
    Validate an appropriate-unit table: non-empty, scales positive and strictly
    increasing. Raises ``ValueError`` naming ``owner`` otherwise.
    """
    if not table:
        raise ValueError(f"{owner}: appropriate-unit table must not be empty")
    previous = 0.0
    for name, scale in table:
        if not scale > previous:
            raise ValueError(
                f"{owner}: appropriate-unit scales must be positive and strictly "
                f"increasing, got {scale!r} for {name!r} after {previous!r}"
            )
        previous = scale


# ---------------------------------------------------------------------------
# External types
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class ExternalType:
    """
    Contract adapter for a type we do not own (e.g. ``timedelta``).

    Values of the adapted type are read as the measurement class ``kind``
    when operands are matched against the relation table. Results are always
    built as ``kind``, never as the foreign type.
    """

    kind: type
    to_base: Callable[[Any], float]

    def get_base_units_name(self) -> str:
        return self.kind.get_base_units_name()


_EXTERNAL_LOCK = threading.RLock()
_EXTERNAL_TYPES: Dict[type, ExternalType] = {}


def register_external_type(
    cls: type,
    *,
    kind: type,
    to_base: Callable[[Any], float],
) -> None:
    """Let instances of ``cls`` stand in for the measurement class ``kind``."""
    if not (isinstance(kind, type) and issubclass(kind, Measurement)):
        raise TypeError(f"kind must be a Measurement subclass, got {kind!r}")
    with _EXTERNAL_LOCK:
        _EXTERNAL_TYPES[cls] = ExternalType(kind, to_base)


def external_type_for(cls: type) -> Optional[ExternalType]:
    with _EXTERNAL_LOCK:
        for klass in cls.__mro__:
            adapter = _EXTERNAL_TYPES.get(klass)
            if adapter is not None:
                return adapter
    return None


def base_units_of(value: object) -> float:
    """Base-unit scalar of a measurement or a registered external value."""
    if isinstance(value, Measurement):
        return value.as_base_units()
    adapter = external_type_for(type(value))
    if adapter is None:
        raise TypeError(f"{type(value).__name__} does not satisfy the quantity contract")
    return adapter.to_base(value)


def kind_of(value: object) -> type:
    """The class ``value`` is looked up as in the relation table."""
    if isinstance(value, Measurement):
        return type(value)
    adapter = external_type_for(type(value))
    return type(value) if adapter is None else adapter.kind


def construct(cls: type, units: float) -> Any:
    """Build a measurement of ``cls`` from base units."""
    if not (isinstance(cls, type) and issubclass(cls, Measurement)):
        raise TypeError(f"{getattr(cls, '__name__', cls)!r} is not a Measurement class")
    return cls.from_base_units(units)


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------
class Measurement:
    """
    A physical quantity stored as one float in its base unit.

    Subclasses set ``base_units_name`` and, when several display units are
    common, an ``appropriate_units`` table ordered from the smallest scale to
    the largest. Named constructors (``from_<unit>``) and accessors
    (``as_<unit>``) are thin linear or affine transforms of the base value.

    Values are immutable and only created through classmethods; calling the
    class directly raises ``TypeError``.

    Attributes
    ----------
    base_units_name : str
        Symbol of the base unit (e.g. "m", "kg", "K").
    appropriate_units : sequence of (str, float) or None
        Display units with their scale relative to the base unit.
    """
    __slots__ = ("_base",)

    base_units_name: ClassVar[str] = ""
    appropriate_units: ClassVar[Optional[UnitTable]] = None

    _base: float

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        table = cls.__dict__.get("appropriate_units")
        if table is not None:
            check_unit_table(cls.__name__, table)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        name = type(self).__name__
        raise TypeError(
            f"{name} values are created with {name}.from_<unit>(...) "
            f"or {name}.from_base_units(...)"
        )

    # --- Quantity contract ---
    @classmethod
    def from_base_units(cls: type[M], units: Number) -> M:
        obj = object.__new__(cls)
        object.__setattr__(obj, "_base", float(units))
        return obj

    def as_base_units(self) -> float:
        return self._base

    @classmethod
    def get_base_units_name(cls) -> str:
        if not cls.base_units_name:
            raise NotImplementedError(f"{cls.__name__} does not declare base_units_name")
        return cls.base_units_name

    def get_appropriate_units(self) -> Tuple[str, float]:
        """
        Return the most readable unit for this value and the value in it.

        Uses the class's ``appropriate_units`` table when one is declared,
        otherwise the base unit.
        """
        if self.appropriate_units is None:
            return self.get_base_units_name(), self._base
        return self.pick_appropriate_units(self.appropriate_units)

    def pick_appropriate_units(self, table: UnitTable) -> Tuple[str, float]:
        """
        Pick the largest unit in which this value has a magnitude of at least 1.

        ``table`` lists (unit name, scale relative to the base unit) from the
        smallest scale to the largest. Values closer to zero than the smallest
        unit fall back to that unit, so the returned magnitude may be below 1.

        Raises
        ------
        ValueError
            If ``table`` is empty.
        """
        if not table:
            raise ValueError("appropriate-unit table must not be empty")
        base = self._base
        for unit, scale in reversed(table):
            value = base / scale
            if value >= 1.0 or value <= -1.0:
                return unit, value
        unit, scale = table[0]
        return unit, base / scale

    # --- Immutability ---
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> Tuple[Any, Tuple[float]]:
        return (type(self).from_base_units, (self._base,))

    # --- Comparison ---
    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self)

    def __eq__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._base == other._base  # type: ignore[attr-defined]

    def __ne__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._base != other._base  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._base < other._base  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._base <= other._base  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._base > other._base  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._base >= other._base  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._base))

    def __bool__(self) -> bool:
        return self._base != 0.0

    # --- Cross-quantity relations ---
    def __mul__(self, other: object) -> Any:
        return _relation_product(self, other)

    def __rmul__(self, other: object) -> Any:
        return _relation_product(other, self)

    def __truediv__(self, other: object) -> Any:
        return _relation_quotient(self, other)

    def __rtruediv__(self, other: object) -> Any:
        return _relation_quotient(other, self)

    # --- Display ---
    def __str__(self) -> str:
        unit, value = self.get_appropriate_units()
        return f"{format_number(value)}{NBSP}{unit}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_exact(self._base)} {self.get_base_units_name()})"

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for measurements.

        Supported specifiers
        --------------------
        "" (empty)
            Same as ``str()``: appropriate unit, compact number.
        "base"
            Value in the base unit.
        any float format spec (e.g. ".2f", "10.3e")
            Applied to the value in the appropriate unit.

        Examples
        --------
        >>> m = Mass.from_grams(1500)
        >>> f"{m}"
        '1.5 kg'
        >>> f"{m:.2f}"
        '1.50 kg'
        >>> f"{m:base}"
        '1.5 kg'

        Raises
        ------
        ValueError
            If the format specifier is not valid for a float.
        """
        spec = (spec or "").strip()
        if spec == "":
            return str(self)
        if spec == "base":
            return f"{format_number(self._base)}{NBSP}{self.get_base_units_name()}"
        unit, value = self.get_appropriate_units()
        return f"{format(value, spec)}{NBSP}{unit}"


class LinearMeasurement(Measurement):
    """
    A measurement with a true zero, closed under addition and scaling.

    Provides, for a concrete class ``T``::

        T + T -> T          T - T -> T
        T * n -> T          n * T -> T          T / n -> T
        T / T -> float      -T, +T, abs(T) -> T

    Everything else is delegated to the relation table.
    """
    __slots__ = ()

    def __add__(self: M, other: object) -> M:
        if not self._same_kind(other):
            return NotImplemented
        return self.from_base_units(self._base + other._base)  # type: ignore[attr-defined]

    def __sub__(self: M, other: object) -> M:
        if not self._same_kind(other):
            return NotImplemented
        return self.from_base_units(self._base - other._base)  # type: ignore[attr-defined]

    def __mul__(self, other: object) -> Any:
        if is_scalar(other):
            return self.from_base_units(self._base * other)  # type: ignore[operator]
        return super().__mul__(other)

    def __rmul__(self, other: object) -> Any:
        # scalar * T is commutative
        if is_scalar(other):
            return self.__mul__(other)
        return super().__rmul__(other)

    def __truediv__(self, other: object) -> Any:
        if is_scalar(other):
            return self.from_base_units(self._base / other)  # type: ignore[operator]
        if self._same_kind(other):
            # same kind -> dimensionless ratio
            return self._base / other._base  # type: ignore[attr-defined]
        return super().__truediv__(other)

    def __neg__(self: M) -> M:
        return self.from_base_units(-self._base)

    def __pos__(self: M) -> M:
        return self

    def __abs__(self: M) -> M:
        return self.from_base_units(abs(self._base))


# --- Relation dispatch -------------------------------------------------------

def _relation_product(left: object, right: object) -> Any:
    result_type = DEFAULT_RELATIONS.product_type(kind_of(left), kind_of(right))
    if result_type is None:
        return NotImplemented
    return construct(result_type, base_units_of(left) * base_units_of(right))


def _relation_quotient(left: object, right: object) -> Any:
    result_type = DEFAULT_RELATIONS.quotient_type(kind_of(left), kind_of(right))
    if result_type is None:
        return NotImplemented
    return construct(result_type, base_units_of(left) / base_units_of(right))


__all__ = [
    "SupportsBaseUnits",
    "Measurement",
    "LinearMeasurement",
    "ExternalType",
    "register_external_type",
    "base_units_of",
    "kind_of",
    "construct",
    "is_scalar",
    "check_unit_table",
]
