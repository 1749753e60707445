# -*- coding: utf-8 -*-
"""
Dynamic-programming solver for the max-defense (0/1 knapsack) problem.

Table layout:
  table[i][b] = best total defense using only the first i armors with a
                budget of exactly b gold. Row 0 and column 0 are zero.

Tie-break: when taking armor i-1 yields exactly the same defense as leaving
it, the armor is left out. Reconstruction relies on this, since it selects
an armor only when table[i][b] differs from table[i-1][b].

Complexity: O(n * budget) time and space. The table lives only for the
duration of one call.
"""

from __future__ import annotations
import logging
from typing import List, Sequence

from maxdefense.business_objects.errors import ContractViolationError
from maxdefense.business_objects.items import ArmorItem

logger = logging.getLogger(__name__)


def _check_budget(total_cost: int) -> None:
    if isinstance(total_cost, bool) or not isinstance(total_cost, int):
        raise ContractViolationError(
            f"dynamic solver needs an integer budget, got {total_cost!r}"
        )
    if total_cost < 0:
        raise ContractViolationError(f"budget must be >= 0, got {total_cost}")


def build_defense_table(armors: Sequence[ArmorItem], total_cost: int) -> List[List[float]]:
    """Fill the (n+1) x (total_cost+1) best-defense table."""
    _check_budget(total_cost)
    n = len(armors)
    table: List[List[float]] = [[0.0] * (total_cost + 1)]
    for i in range(1, n + 1):
        armor = armors[i - 1]
        prev = table[i - 1]
        row = [0.0] * (total_cost + 1)
        for b in range(1, total_cost + 1):
            leave = prev[b]
            if b < armor.cost:
                row[b] = leave
                continue
            take = armor.defense + prev[b - armor.cost]
            row[b] = take if take > leave else leave
        table.append(row)
    logger.debug("built %dx%d defense table", n + 1, total_cost + 1)
    return table


def reconstruct_selection(
    armors: Sequence[ArmorItem],
    table: List[List[float]],
    total_cost: int,
) -> List[ArmorItem]:
    """
    Backtrack through a filled table and return the chosen armors,
    last index first.
    """
    selected: List[ArmorItem] = []
    i = len(armors)
    cursor = total_cost
    # defense is non-negative, so a zero cell means nothing is left to pick
    while i > 0 and table[i][cursor] > 0:
        if table[i][cursor] != table[i - 1][cursor]:
            armor = armors[i - 1]
            selected.append(armor)
            cursor -= armor.cost
        i -= 1
    return selected


def dynamic_max_defense(armors: Sequence[ArmorItem], total_cost: int) -> List[ArmorItem]:
    """
    Compute the optimal set of armor items with the dynamic algorithm:
    among all selections whose gold cost fits within `total_cost`, return
    one whose total defense is greatest.

    Raises
    ------
    ContractViolationError
        If `total_cost` is not a non-negative integer.
    """
    table = build_defense_table(armors, total_cost)
    return reconstruct_selection(armors, table, total_cost)
