# -*- coding: utf-8 -*-
"""
Minimal per-trip capacity search: largest-fit feasibility predicate driven
by an integer binary search.
"""

__version__ = "0.1.0"
