#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Time the dynamic and exhaustive solvers over growing input sizes taken from
the same armor catalog, and export timing_sweep.csv.

Usage:
  python scripts/run_timing_sweep.py
"""

from __future__ import annotations
import os
from typing import Any, Dict, List

# ====== CONFIGURATION ======
DB_PATH = "data/armor.csv"
OUT_DIR = "reports/timing"

BUDGET = 500
MIN_DEFENSE = 1.0

DYNAMIC_SIZES = [5, 10, 20, 40, 70]
EXHAUSTIVE_SIZES = [4, 8, 12, 16]   # 2**n subsets: keep these small
# ===========================

from maxdefense.config import configure_logging
from maxdefense.planning import filter_armor
from maxdefense.planning.runner import run_solver
from maxdefense.planning.tracker import Tracker
from maxdefense.utils.read_csv import load_armor_database


def main() -> None:
    configure_logging()
    armors = load_armor_database(DB_PATH)

    rows: List[Dict[str, Any]] = []
    plan = [("dynamic", n) for n in DYNAMIC_SIZES] + [("exhaustive", n) for n in EXHAUSTIVE_SIZES]
    for method, n in plan:
        subset = filter_armor(armors, MIN_DEFENSE, BUDGET, n)
        sol = run_solver(method, subset, BUDGET)
        rows.append({
            "method": method,
            "n": len(subset),
            "budget": BUDGET,
            "total_defense": sol.total_defense,
            "elapsed_seconds": sol.elapsed_seconds,
        })
        print(f"{method:>10}  n={len(subset):>3}  defense={sol.total_defense:10.2f}  "
              f"elapsed={sol.elapsed_seconds:.6f}s")

    path = Tracker(out_dir=OUT_DIR).write_timing_csv(rows)
    print(f"\nTiming CSV written to: {os.path.abspath(path)}")


if __name__ == "__main__":
    main()
