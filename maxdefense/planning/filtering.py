# -*- coding: utf-8 -*-
"""
Catalog filtering ahead of the solvers.

Used to drop armor with irrelevant defense and to cap the input size for the
exhaustive search, whose running time is exponential in the number of items.
"""

from __future__ import annotations
from typing import Iterable, List

from maxdefense.business_objects.items import ArmorItem


def filter_armor(
    source: Iterable[ArmorItem],
    min_defense: float,
    max_defense: float,
    total_size: int,
) -> List[ArmorItem]:
    """
    Return the first `total_size` items of `source` whose defense lies in
    [min_defense, max_defense] (inclusive), preserving source order.

    The source is not modified and items are shared, not copied.
    """
    result: List[ArmorItem] = []
    if total_size <= 0:
        return result
    for armor in source:
        if min_defense <= armor.defense <= max_defense:
            result.append(armor)
            if len(result) >= total_size:
                break
    return result
