# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for maxdefense solutions.
- No side effects
- Works off Solution records

Public API:
  - compute_solution_metrics(solution) -> Dict[str, float]
  - solutions_agree(a, b, tol=1e-9) -> bool
"""

from __future__ import annotations
from typing import Dict

from maxdefense.planning.solution import Solution


def _safe_div(num: float, den: float) -> float:
    if den == 0:
        return 0.0
    return num / den


def compute_solution_metrics(solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Items": ...,
        "Total Cost": ...,
        "Total Defense": ...,
        "Budget": ...,
        "Budget Used %": ...,      # percent (0..100)
        "Defense per Gold": ...,
        "Elapsed Seconds": ...
      }
    """
    cost = float(solution.total_cost)
    budget = float(solution.budget)
    return {
        "Items": float(len(solution.items)),
        "Total Cost": cost,
        "Total Defense": float(solution.total_defense),
        "Budget": budget,
        "Budget Used %": _safe_div(cost, budget) * 100.0,
        "Defense per Gold": _safe_div(float(solution.total_defense), cost),
        "Elapsed Seconds": float(solution.elapsed_seconds),
    }


def solutions_agree(a: Solution, b: Solution, tol: float = 1e-9) -> bool:
    """True when both solutions reach the same total defense (within tol)."""
    return abs(a.total_defense - b.total_defense) <= tol
