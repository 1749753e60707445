# -*- coding: utf-8 -*-
"""
maxdefense: choose the armor set with the greatest defense within a gold
budget, by dynamic programming or by exhaustive search.
"""

__version__ = "0.1.0"
