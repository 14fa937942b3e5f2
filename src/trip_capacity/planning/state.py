# -*- coding: utf-8 -*-
"""
Problem state for the trip capacity planning pipeline.

This module defines:
  - ProblemState: immutable input snapshot (items + number of trips)

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
- The mutable working set for a single feasibility check is a
  heuristics.largest_fit.pool.WeightPool, built fresh on every call.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from trip_capacity.business_objects.errors import StateValidationError
from trip_capacity.business_objects.items import Item


@dataclass(frozen=True)
class ProblemState:
    """
    Immutable problem input for a planning run.

    Attributes
    ----------
    items : list[Item]
        All items; every one must be carried.
    trips : int
        Number of trips available (k >= 1).
    """
    items: List[Item]
    trips: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if isinstance(self.trips, bool) or not isinstance(self.trips, int):
            raise StateValidationError(f"trips must be an integer (got {self.trips!r}).")
        if self.trips < 1:
            raise StateValidationError(f"trips must be >= 1 (got {self.trips}).")
        if not self.items:
            raise StateValidationError("At least one item is required.")

        seen: set[str] = set()
        for it in self.items:
            if it.id in seen:
                raise StateValidationError(f"Duplicate Item.id: {it.id}")
            seen.add(it.id)

    @classmethod
    def from_weights(
        cls,
        weights: Sequence[int],
        trips: int,
        expected_count: Optional[int] = None,
    ) -> "ProblemState":
        """
        Build a state from bare weights; items are named w1..wn.

        `expected_count` is the declared number of items (n), checked
        against len(weights) when given.
        """
        if expected_count is not None and expected_count != len(weights):
            raise StateValidationError(
                f"Expected {expected_count} weights but received {len(weights)}."
            )
        items = [Item(id=f"w{i}", weight=w) for i, w in enumerate(weights, start=1)]
        return cls(items=items, trips=trips)

    @property
    def weights(self) -> List[int]:
        return [it.weight for it in self.items]

    @property
    def max_weight(self) -> int:
        """Smallest capacity that could possibly work."""
        return max(it.weight for it in self.items)

    @property
    def total_weight(self) -> int:
        """Capacity that always works (a single trip carries everything)."""
        return sum(it.weight for it in self.items)
