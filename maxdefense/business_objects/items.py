# -*- coding: utf-8 -*-
"""
Armor item model.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class ArmorItem:
    """
    One armor item available for purchase.

    Attributes
    ----------
    description : str
        Human-readable description, e.g. "new enchanted helmet". Non-empty.
    cost : int
        Cost in units of gold. Must be positive.
    defense : float
        Defense points. Must be non-negative.
    """
    description: str
    cost: int
    defense: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("ArmorItem.description must be non-empty.")
        if self.cost <= 0:
            raise StateValidationError(f"ArmorItem[{self.description}] cost must be > 0.")
        if self.defense < 0:
            raise StateValidationError(f"ArmorItem[{self.description}] defense must be >= 0.")
