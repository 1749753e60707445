# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a maxdefense run.

Filtering:
  - min_defense / max_defense: inclusive defense range kept from the catalog.
    max_defense=None means "use the budget as the upper bound".
  - total_size: cap on the number of items handed to the solvers.

Solving:
  - budget: gold budget (non-negative).
  - method: "dynamic" | "exhaustive" | "both"
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from maxdefense.business_objects.errors import StateValidationError
from maxdefense.config import DEFAULT_BUDGET, DEFAULT_MAX_ITEMS, DEFAULT_MIN_DEFENSE

METHODS = ("dynamic", "exhaustive", "both")


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    min_defense : float
        Lowest defense an item may have to be considered.
    max_defense : float | None
        Highest defense an item may have; None resolves to `budget`.
    total_size : int
        Maximum number of filtered items passed to the solvers.
    budget : int
        Gold budget.
    method : str
        Which solver(s) to run: "dynamic", "exhaustive" or "both".
    """
    min_defense: float = DEFAULT_MIN_DEFENSE
    max_defense: Optional[float] = None
    total_size: int = DEFAULT_MAX_ITEMS
    budget: int = DEFAULT_BUDGET
    method: str = "dynamic"

    def __post_init__(self) -> None:  # type: ignore[override]
        if isinstance(self.budget, bool) or not isinstance(self.budget, int):
            raise StateValidationError(
                f"Policy.budget must be a whole number of gold, got {self.budget!r}."
            )
        if self.budget < 0:
            raise StateValidationError(f"Policy.budget must be >= 0, got {self.budget}.")
        if self.total_size < 0:
            raise StateValidationError(f"Policy.total_size must be >= 0, got {self.total_size}.")
        if self.method not in METHODS:
            raise StateValidationError(f"Policy.method must be one of {METHODS}, got {self.method!r}.")
        lo, hi = self.defense_range()
        if lo > hi:
            raise StateValidationError(f"Policy defense range is empty: [{lo}, {hi}].")

    def defense_range(self) -> Tuple[float, float]:
        hi = float(self.budget) if self.max_defense is None else float(self.max_defense)
        return float(self.min_defense), hi

    def methods(self) -> Tuple[str, ...]:
        """Solver names this policy asks for, in run order."""
        if self.method == "both":
            return ("dynamic", "exhaustive")
        return (self.method,)
