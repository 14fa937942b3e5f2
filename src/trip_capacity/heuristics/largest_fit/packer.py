# -*- coding: utf-8 -*-
"""
Largest-fit packing rule and the feasibility predicate built on it.

Public entry points:
    load_trip(pool, capacity)           -> loads for one trip (mutates pool)
    pack_trips(pool, trips, capacity)   -> loads for up to `trips` trips
    can_carry(trips, weights, capacity) -> bool

Rule (per trip, trips handled in order):
  1) remaining = capacity
  2) take the largest weight <= remaining; if none, the trip is closed
  3) subtract it from remaining and repeat 2)

The predicate is True iff no weight is left after at most `trips` trips.
This is a greedy rule, not an optimal bin packer: it never backtracks and
never skips an item that fits in favour of a smaller one.
"""

from __future__ import annotations
import logging
from typing import List, Sequence

from trip_capacity.business_objects.errors import StateValidationError
from trip_capacity.heuristics.largest_fit.pool import Entry, WeightPool

logger = logging.getLogger(__name__)


def load_trip(pool: WeightPool, capacity: int) -> List[Entry]:
    """Fill a single trip of the given capacity from `pool`."""
    remaining = capacity
    loaded: List[Entry] = []
    while pool:
        taken = pool.take_largest_at_most(remaining)
        if taken is None:
            break
        loaded.append(taken)
        remaining -= taken[0]
    return loaded


def pack_trips(pool: WeightPool, trips: int, capacity: int) -> List[List[Entry]]:
    """
    Run up to `trips` trips against `pool`, stopping early once it is empty.

    Whatever is still in `pool` afterwards could not be carried.
    """
    loads: List[List[Entry]] = []
    debug = logger.isEnabledFor(logging.DEBUG)
    for i in range(trips):
        if not pool:
            break
        loaded = load_trip(pool, capacity)
        if debug:
            logger.debug(
                "cap=%d trip #%d: %s (left=%d)",
                capacity, i + 1, [w for w, _ in loaded], len(pool),
            )
        loads.append(loaded)
    return loads


def can_carry(trips: int, weights: Sequence[int], capacity: int) -> bool:
    """
    Feasibility predicate: can `trips` trips of `capacity` carry every weight?

    Parameters
    ----------
    trips : int
        Number of trips available (>= 1).
    weights : Sequence[int]
        Item weights. Read only; a private pool is built per call.
    capacity : int
        Candidate per-trip capacity (>= 0).
    """
    if trips < 1:
        raise StateValidationError(f"trips must be >= 1 (got {trips}).")
    if capacity < 0:
        raise StateValidationError(f"capacity must be >= 0 (got {capacity}).")

    pool = WeightPool(weights)
    pack_trips(pool, trips, capacity)
    return not pool
