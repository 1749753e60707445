# -*- coding: utf-8 -*-
"""
Planning layer public API for maxdefense.

This module exposes the core planning-time data contracts:
  - Policy configuration
  - Solution model and the sum_armor aggregation helper
  - filter_armor

Solvers, the runner and the tracker are intentionally not exported here to
avoid cluttering the namespace. They should be imported explicitly when needed.
"""

from .policy import Policy
from .solution import Solution, sum_armor
from .filtering import filter_armor

__all__ = [
    "Policy",
    "Solution",
    "sum_armor",
    "filter_armor",
]
