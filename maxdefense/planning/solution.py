# -*- coding: utf-8 -*-
"""
Solution models and aggregation helpers for maxdefense results.

Solvers return plain lists of ArmorItem; the Solution record wraps such a
list with its totals and timing for the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from maxdefense.business_objects.items import ArmorItem


def sum_armor(armors: Iterable[ArmorItem]) -> Tuple[int, float]:
    """Return (total_cost, total_defense) of the given armor items."""
    total_cost = 0
    total_defense = 0.0
    for armor in armors:
        total_cost += armor.cost
        total_defense += armor.defense
    return total_cost, total_defense


@dataclass(frozen=True)
class Solution:
    """
    A selection of armor items produced by one solver run.

    Attributes
    ----------
    method : str
        Name of the solver that produced the selection ("dynamic", "exhaustive").
    items : tuple[ArmorItem, ...]
        Chosen items, in the order the solver reported them.
    total_cost : int
        Sum of item costs.
    total_defense : float
        Sum of item defense points.
    budget : float
        Gold budget the solver was given.
    elapsed_seconds : float
        Wall-clock solve time (0.0 when not measured).
    """
    method: str
    items: Tuple[ArmorItem, ...]
    total_cost: int
    total_defense: float
    budget: float
    elapsed_seconds: float = 0.0

    @classmethod
    def from_items(
        cls,
        method: str,
        items: Sequence[ArmorItem],
        budget: float,
        elapsed_seconds: float = 0.0,
    ) -> "Solution":
        total_cost, total_defense = sum_armor(items)
        return cls(
            method=method,
            items=tuple(items),
            total_cost=total_cost,
            total_defense=total_defense,
            budget=budget,
            elapsed_seconds=elapsed_seconds,
        )
