# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for maxdefense runs.

Files produced (when Tracker is used):
  - selection_<method>.csv  (chosen armors of one solution)
  - run_summary.csv         (one KPI row per solution)
  - dp_table.csv            (the DP table, only when small enough)
  - timing_sweep.csv        (elapsed time per solver and input size)

Notes
-----
- Callers decide when to invoke these writers; nothing is written implicitly.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from maxdefense.config import MAX_PRINTABLE_DIM
from maxdefense.planning.solution import Solution
from maxdefense.quality_metrics.core import compute_solution_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_selection_csv(self, solution: Solution, filename: Optional[str] = None) -> str:
        """
        Persist the chosen armors of one solution.

        Columns:
          order_index, description, cost, defense
        """
        path = os.path.join(self.out_dir, filename or f"selection_{solution.method}.csv")
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "description", "cost", "defense"])
            for idx, armor in enumerate(solution.items):
                w.writerow([idx, armor.description, armor.cost, float(armor.defense)])
        return path

    def write_run_summary_csv(
        self,
        solutions: Iterable[Solution],
        filename: str = "run_summary.csv",
    ) -> str:
        """
        One row per solution.

        Columns:
          method, then the keys of compute_solution_metrics()
        """
        path = os.path.join(self.out_dir, filename)
        rows: List[Dict[str, Any]] = []
        for sol in solutions:
            row: Dict[str, Any] = {"method": sol.method}
            row.update(compute_solution_metrics(sol))
            rows.append(row)

        with open(path, "w", newline="", encoding="utf-8") as f:
            if not rows:
                return path
            w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            w.writeheader()
            w.writerows(rows)
        return path

    def write_table_csv(
        self,
        table: Sequence[Sequence[float]],
        filename: str = "dp_table.csv",
        max_dim: int = MAX_PRINTABLE_DIM,
    ) -> Optional[str]:
        """
        Dump a DP table, one row per item prefix. Returns None (and writes
        nothing) when either dimension exceeds `max_dim`.
        """
        if len(table) > max_dim or (table and len(table[0]) > max_dim):
            return None
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            for row in table:
                w.writerow(row)
        return path

    def write_timing_csv(
        self,
        rows: Iterable[Dict[str, Any]],
        filename: str = "timing_sweep.csv",
    ) -> str:
        """
        Columns:
          method, n, budget, total_defense, elapsed_seconds
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(
                f, fieldnames=["method", "n", "budget", "total_defense", "elapsed_seconds"]
            )
            w.writeheader()
            for row in rows:
                w.writerow(row)
        return path
