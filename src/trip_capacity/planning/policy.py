# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the capacity search.

Search:
  - search_strategy: {"binary","linear"}
      * "binary": integer binary search over [max_weight, total_weight]
      * "linear": scan upward from max_weight; first feasible capacity wins.
        Slow, kept as a cross-check for the binary search.

Verification:
  - max_exhaustive_items: largest input the exhaustive verifier accepts.
"""

from __future__ import annotations
from dataclasses import dataclass

SEARCH_STRATEGIES = ("binary", "linear")


@dataclass(frozen=True)
class Policy:
    """
    Search knobs (pure data holder).

    Attributes
    ----------
    search_strategy : str
        "binary" | "linear".
    max_exhaustive_items : int
        Upper bound on n for solvers.exhaustive.exact_min_capacity.
    """
    search_strategy: str = "binary"
    max_exhaustive_items: int = 12

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.search_strategy not in SEARCH_STRATEGIES:
            raise ValueError(
                f"Unknown search strategy: {self.search_strategy}. "
                f"Expected one of: {', '.join(SEARCH_STRATEGIES)}."
            )
