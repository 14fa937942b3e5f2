# -*- coding: utf-8 -*-
"""
Solution and probe models for capacity search results.

These data classes define the shape of outputs produced by the solvers
and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Probe:
    """
    One call of the feasibility predicate made by the search.

    Attributes
    ----------
    index : int
        0-based order of the call.
    low, high : int
        Search range when the call was made.
    capacity : int
        Capacity tested.
    feasible : bool
        Predicate result.
    """
    index: int
    low: int
    high: int
    capacity: int
    feasible: bool


@dataclass(frozen=True)
class TripLoad:
    """
    Items carried on one trip of the witness packing.

    Attributes
    ----------
    index : int
        1-based trip number.
    item_ids : tuple[str | None, ...]
        Ids of the items, in the order they were loaded.
    weights : tuple[int, ...]
        Matching weights (non-increasing).
    """
    index: int
    item_ids: Tuple[Optional[str], ...]
    weights: Tuple[int, ...]

    @property
    def load(self) -> int:
        return sum(self.weights)


@dataclass(frozen=True)
class Solution:
    """
    Result of a capacity search.

    Attributes
    ----------
    capacity : int
        Minimal capacity found.
    trips : list[TripLoad]
        Packing produced by the greedy rule at `capacity` (trips actually used).
    probes : list[Probe]
        Every predicate call made while searching, in order.
    strategy : str
        Search strategy that produced this result.
    """
    capacity: int
    trips: List[TripLoad]
    probes: List[Probe]
    strategy: str
