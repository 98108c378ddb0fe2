"""
quantypes.core.utils
====================

Small helpers shared by the framework: number formatting for display, unit
name prettifying and tolerant float comparison.

This module provides helper functions for representing unit names in a
readable scientific format (e.g., 'm/s²') and for comparing floating point
results where exact equality is too strict.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from quantypes.core.measurement import Measurement

# Separator between a value and its unit when displaying a measurement.
NBSP = "\u00a0"

DEFAULT_REL_TOL = 1e-5
# Absolute floor so that values that should be exactly zero still compare equal.
DEFAULT_ABS_TOL = 1e-12

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def pretty_unit_name(name: str) -> str:
    """
    Restyle ASCII exponents as unicode superscripts and '*' as a middle dot.

    'm^2' -> 'm²', 'm/s^2' -> 'm/s²', 'kg*m^-3' -> 'kg·m⁻³'.
    """
    name = name.replace("*", "·")
    name = re.sub(r"\^\((-?\d+)\)", lambda m: _sup(int(m.group(1))), name)
    name = re.sub(r"\^(-?\d+)", lambda m: _sup(int(m.group(1))), name)
    return name


def format_number(value: float) -> str:
    """Render a float compactly: '50', '0.001', '1e-09', 'nan'."""
    return f"{value:.15g}"


def format_exact(value: float) -> str:
    """Shortest text that reads back as the same float: '50', '1.0000000000000002'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


Comparable = Union[float, int, "Measurement"]


def _as_float_pair(a: Comparable, b: Comparable) -> tuple[float, float]:
    from quantypes.core.measurement import Measurement

    a_is_m = isinstance(a, Measurement)
    b_is_m = isinstance(b, Measurement)
    if a_is_m or b_is_m:
        if type(a) is not type(b):
            raise TypeError(
                f"Cannot compare {type(a).__name__} with {type(b).__name__}"
            )
        return a.as_base_units(), b.as_base_units()  # type: ignore[union-attr]
    return float(a), float(b)


def almost_eq(
    a: Comparable,
    b: Comparable,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL,
) -> bool:
    """
    Tolerant equality for floats or two measurements of the same class.

    Measurements compare by base units. The framework's own ``==`` is exact,
    use this wherever a value went through a unit conversion.
    """
    x, y = _as_float_pair(a, b)
    return math.isclose(x, y, rel_tol=rel_tol, abs_tol=abs_tol)


def assert_almost_eq(
    a: Comparable,
    b: Comparable,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL,
) -> None:
    """Raise ``AssertionError`` unless ``almost_eq(a, b)``."""
    if not almost_eq(a, b, rel_tol=rel_tol, abs_tol=abs_tol):
        raise AssertionError(f"assertion failed: {a!r} != {b!r} (within {rel_tol!r})")
