# -*- coding: utf-8 -*-
"""
Plain-text rendering of armor lists and DP tables for console output.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

from maxdefense.business_objects.items import ArmorItem
from maxdefense.config import MAX_PRINTABLE_DIM
from maxdefense.planning.solution import sum_armor


def format_armor_items(armors: Sequence[ArmorItem]) -> str:
    """Each armor on its own line, followed by the grand totals."""
    lines: List[str] = ["*** Armor Vector ***"]
    if not armors:
        lines.append("[empty armor list]")
        return "\n".join(lines)

    for armor in armors:
        lines.append(
            f"Ye olde {armor.description} ==> Cost of {armor.cost} gold; "
            f"Defense points = {armor.defense:g}"
        )
    total_cost, total_defense = sum_armor(armors)
    lines.append(f"> Grand total cost: {total_cost} gold")
    lines.append(f"> Grand total defense: {total_defense:g}")
    return "\n".join(lines)


def format_2d_cache(table: Sequence[Iterable[float]], max_dim: int = MAX_PRINTABLE_DIM) -> str:
    """
    Render a 2-D table with 5-wide columns. Tables larger than `max_dim` in
    either dimension are not rendered.
    """
    lines: List[str] = ["*** 2D Cache ***"]
    rows = [list(r) for r in table]
    if not rows:
        lines.append("[empty]")
    elif len(rows) > max_dim or len(rows[0]) > max_dim:
        lines.append("[too large]")
    else:
        for row in rows:
            lines.append("".join(f"{value:>5g}" for value in row))
    return "\n".join(lines)
