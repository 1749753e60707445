#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load an armor catalog, filter it, and solve max-defense with the chosen
method(s). Prints the selection and writes CSV artifacts.

This script does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_maxdefense.py
"""

from __future__ import annotations
import os
import sys
from typing import List

# ====== CONFIGURATION ======
DB_PATH = "data/armor.csv"
OUT_DIR = "reports/maxdefense"

BUDGET = 500
MIN_DEFENSE = 1.0
MAX_DEFENSE = None      # None -> use BUDGET as the upper bound
TOTAL_SIZE = 16         # keep small when METHOD includes "exhaustive"

# "dynamic", "exhaustive" or "both"
METHOD = "both"
LOG_LEVEL = "INFO"
# ============================

from maxdefense.business_objects import ArmorItem, SchemaError
from maxdefense.config import MAX_PRINTABLE_DIM, configure_logging
from maxdefense.planning import Policy, Solution, filter_armor
from maxdefense.planning.runner import run_solver
from maxdefense.planning.solvers.dynamic import build_defense_table
from maxdefense.planning.tracker import Tracker
from maxdefense.quality_metrics.core import solutions_agree
from maxdefense.reporting import format_2d_cache, format_armor_items
from maxdefense.utils.read_csv import load_armor_database


def main() -> int:
    configure_logging(LOG_LEVEL)

    policy = Policy(
        min_defense=MIN_DEFENSE,
        max_defense=MAX_DEFENSE,
        total_size=TOTAL_SIZE,
        budget=BUDGET,
        method=METHOD,
    )

    # Load problem
    try:
        armors: List[ArmorItem] = load_armor_database(DB_PATH)
    except SchemaError as e:
        print(f"Failed to load armor database: {e}", file=sys.stderr)
        return 1

    lo, hi = policy.defense_range()
    filtered = filter_armor(armors, lo, hi, policy.total_size)
    print(f"Catalog: {len(armors)} armors; after filter: {len(filtered)}")

    tracker = Tracker(out_dir=OUT_DIR)
    solutions: List[Solution] = []
    for method in policy.methods():
        sol = run_solver(method, filtered, policy.budget)
        solutions.append(sol)
        tracker.write_selection_csv(sol)

        print(f"\n=== {method} ({sol.elapsed_seconds:.6f} s) ===")
        print(format_armor_items(sol.items))

    # The table is only rebuilt for display when it is small enough to show.
    printable = len(filtered) < MAX_PRINTABLE_DIM and policy.budget < MAX_PRINTABLE_DIM
    if "dynamic" in policy.methods() and printable:
        table = build_defense_table(filtered, policy.budget)
        print()
        print(format_2d_cache(table))
        tracker.write_table_csv(table)

    if len(solutions) == 2:
        verdict = "agree" if solutions_agree(*solutions) else "DISAGREE"
        print(f"\nSolvers {verdict} on the optimal defense.")

    tracker.write_run_summary_csv(solutions)
    print(f"\nArtifacts written under: {os.path.abspath(OUT_DIR)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
