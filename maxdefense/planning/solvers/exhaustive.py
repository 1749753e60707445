# -*- coding: utf-8 -*-
"""
Exhaustive-search solver for the max-defense problem.

Every subset of the input is identified by an index in [0, 2**n): armor j is
a member of subset `mask` iff bit j of `mask` is set. All 2**n subsets are
evaluated, so this is only practical on small, pre-filtered inputs; it serves
as the ground truth the dynamic solver is checked against.
"""

from __future__ import annotations
import logging
import math
from typing import List, Sequence

from maxdefense.business_objects.errors import ContractViolationError
from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.solution import sum_armor

logger = logging.getLogger(__name__)

# Subsets must be representable as a 64-bit pattern.
MAX_EXHAUSTIVE_ITEMS = 63


def subset_from_mask(armors: Sequence[ArmorItem], mask: int) -> List[ArmorItem]:
    """Members of subset `mask`, in index order."""
    return [armor for j, armor in enumerate(armors) if (mask >> j) & 1]


def exhaustive_max_defense(armors: Sequence[ArmorItem], total_cost: float) -> List[ArmorItem]:
    """
    Among all subsets of `armors`, return the one whose gold cost fits within
    `total_cost` and whose total defense is greatest. On ties the subset found
    first (lowest mask) is kept.

    Raises
    ------
    ContractViolationError
        If there are more than MAX_EXHAUSTIVE_ITEMS armors, or the budget is
        negative or NaN.
    """
    n = len(armors)
    if n > MAX_EXHAUSTIVE_ITEMS:
        raise ContractViolationError(
            f"exhaustive search supports at most {MAX_EXHAUSTIVE_ITEMS} items, got {n}"
        )
    if math.isnan(total_cost) or total_cost < 0:
        raise ContractViolationError(f"budget must be >= 0, got {total_cost}")

    best: List[ArmorItem] = []
    best_defense = 0.0
    for mask in range(1 << n):
        candidate = subset_from_mask(armors, mask)
        cand_cost, cand_defense = sum_armor(candidate)
        if cand_cost <= total_cost and cand_defense > best_defense:
            best = candidate
            best_defense = cand_defense

    logger.debug("enumerated %d subsets of %d armors", 1 << n, n)
    return best
