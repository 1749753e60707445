# -*- coding: utf-8 -*-
"""
Timed solver dispatch.

Thin wrapper that connects a method name to its solver, measures the solve
time, and packages the result as a Solution.
"""

from __future__ import annotations
import logging
import math
import time
from typing import Callable, Dict, List, Sequence, Tuple

from maxdefense.business_objects.errors import ContractViolationError
from maxdefense.business_objects.items import ArmorItem
from maxdefense.planning.solution import Solution
from maxdefense.planning.solvers.dynamic import dynamic_max_defense
from maxdefense.planning.solvers.exhaustive import exhaustive_max_defense
from maxdefense.quality_metrics.core import solutions_agree

logger = logging.getLogger(__name__)

SolverFn = Callable[[Sequence[ArmorItem], float], List[ArmorItem]]


def _check_budget(budget: float) -> None:
    if isinstance(budget, bool) or not math.isfinite(budget) or budget < 0:
        raise ContractViolationError(f"budget must be a finite number >= 0, got {budget!r}")


def _run_dynamic(armors: Sequence[ArmorItem], budget: float) -> List[ArmorItem]:
    # The table is indexed by whole gold pieces.
    return dynamic_max_defense(armors, int(budget))


SOLVERS: Dict[str, SolverFn] = {
    "dynamic": _run_dynamic,
    "exhaustive": exhaustive_max_defense,
}


def run_solver(method: str, armors: Sequence[ArmorItem], budget: float) -> Solution:
    """
    Run one solver and return its Solution with the measured elapsed time.

    Raises
    ------
    ValueError
        If `method` is not a key of SOLVERS.
    ContractViolationError
        If `budget` is negative or not finite.
    """
    try:
        solver = SOLVERS[method]
    except KeyError:
        raise ValueError(f"Unknown solver {method!r}; expected one of {sorted(SOLVERS)}") from None
    _check_budget(budget)

    start = time.perf_counter()
    chosen = solver(armors, budget)
    elapsed = time.perf_counter() - start

    solution = Solution.from_items(method, chosen, budget=budget, elapsed_seconds=elapsed)
    logger.info(
        "%s: n=%d budget=%s -> %d items, cost=%d, defense=%.2f in %.6fs",
        method, len(armors), budget, len(solution.items),
        solution.total_cost, solution.total_defense, elapsed,
    )
    return solution


def compare_solvers(armors: Sequence[ArmorItem], budget: float) -> Tuple[Solution, Solution]:
    """Run both solvers on the same input and warn if their optima differ."""
    dynamic = run_solver("dynamic", armors, budget)
    exhaustive = run_solver("exhaustive", armors, budget)
    if not solutions_agree(dynamic, exhaustive):
        logger.warning(
            "Solvers disagree: dynamic=%.6f exhaustive=%.6f",
            dynamic.total_defense, exhaustive.total_defense,
        )
    return dynamic, exhaustive
