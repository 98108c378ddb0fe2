"""
quantypes.core.algebra
======================

The cross-quantity relation table.

A relation ``A = B x C`` wires four typed operators between independently
defined quantity classes::

    B * C -> A      C * B -> A
    A / B -> C      A / C -> B

All of them compute through base units, so the three classes of a relation
must share an SI-coherent base system (metres, kilograms, seconds, newtons,
...). The table itself is pure bookkeeping: it maps operand *types* to result
types and never touches values. ``quantypes.core.measurement`` performs the
arithmetic.

Key points
----------
- One auditable artifact: every relation lives in a ``RelationTable`` and can
  be listed with ``relations()``.
- Ambiguous products are refused (``AmbiguousRelationError``); route them
  through a bridging type and register the unambiguous quotients with
  ``register_quotient``.
- Lookups follow the operands' MROs, so subclasses inherit relations.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from quantypes.core.exceptions import AmbiguousRelationError

logger = logging.getLogger(__name__)

TypePair = Tuple[type, type]


@dataclass(frozen=True, slots=True)
class Relation:
    """
    ``product = left x right`` in base units.

    ``quotient_only`` entries wire just ``product / left -> right``.
    """

    product: type
    left: type
    right: type
    quotient_only: bool = False

    def __str__(self) -> str:
        if self.quotient_only:
            return f"{self.product.__name__} / {self.left.__name__} -> {self.right.__name__}"
        return f"{self.product.__name__} = {self.left.__name__} × {self.right.__name__}"


class RelationTable:
    """Thread-safe mapping from operand type pairs to result types."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._products: Dict[TypePair, type] = {}
        self._quotients: Dict[TypePair, type] = {}
        self._relations: List[Relation] = []

    # -------------------------- public API ---------------------------------
    def register(self, product: type, left: type, right: Optional[type] = None) -> None:
        """Register ``product = left x right`` (``right`` defaults to ``left``).

        Raises `AmbiguousRelationError` if ``left x right`` already yields a
        different type.
        """
        if right is None:
            right = left

        with self._lock:
            # Check everything first so a failed registration leaves no trace.
            self._check_free(self._products, (left, right), product)
            self._check_free(self._products, (right, left), product)
            self._check_free(self._quotients, (product, left), right)
            self._check_free(self._quotients, (product, right), left)

            self._products[(left, right)] = product
            self._products[(right, left)] = product
            self._quotients[(product, left)] = right
            self._quotients[(product, right)] = left
            self._remember(Relation(product, left, right))

        logger.debug(
            "Registered relation %s = %s x %s",
            product.__name__, left.__name__, right.__name__,
        )

    def register_quotient(self, dividend: type, divisor: type, quotient: type) -> None:
        """Register only ``dividend / divisor -> quotient`` (no product)."""
        with self._lock:
            self._check_free(self._quotients, (dividend, divisor), quotient)
            self._quotients[(dividend, divisor)] = quotient
            self._remember(Relation(dividend, divisor, quotient, quotient_only=True))

        logger.debug(
            "Registered quotient %s / %s -> %s",
            dividend.__name__, divisor.__name__, quotient.__name__,
        )

    def product_type(self, left: type, right: type) -> Optional[type]:
        """Result type of ``left * right`` or None when no relation applies."""
        return self._lookup(self._products, left, right)

    def quotient_type(self, left: type, right: type) -> Optional[type]:
        """Result type of ``left / right`` or None when no relation applies."""
        return self._lookup(self._quotients, left, right)

    def relations(self) -> Tuple[Relation, ...]:
        with self._lock:
            return tuple(self._relations)

    def __contains__(self, relation: object) -> bool:
        with self._lock:
            return relation in self._relations

    def __len__(self) -> int:
        with self._lock:
            return len(self._relations)

    # ------------------------- internals -----------------------------------
    def _remember(self, relation: Relation) -> None:
        # Re-registering an identical relation is a no-op.
        if relation not in self._relations:
            self._relations.append(relation)

    @staticmethod
    def _check_free(table: Dict[TypePair, type], key: TypePair, result: type) -> None:
        existing = table.get(key)
        if existing is not None and existing is not result:
            left, right = key
            raise AmbiguousRelationError(
                f"{left.__name__} and {right.__name__} already combine into "
                f"{existing.__name__}; cannot also yield {result.__name__}. "
                "Use a bridging type for ambiguous products."
            )

    def _lookup(self, table: Dict[TypePair, type], left: type, right: type) -> Optional[type]:
        with self._lock:
            for lcls in left.__mro__:
                for rcls in right.__mro__:
                    hit = table.get((lcls, rcls))
                    if hit is not None:
                        return hit
        return None


# Public, shared default table. Populated by quantypes.units.relations.
DEFAULT_RELATIONS: RelationTable = RelationTable()


__all__ = [
    "Relation",
    "RelationTable",
    "DEFAULT_RELATIONS",
]
