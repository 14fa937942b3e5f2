# -*- coding: utf-8 -*-
"""
Minimal feasible capacity search.

Pipeline:
  1) Search the integer range [max_weight, total_weight] with the
     largest-fit feasibility predicate (policy.search_strategy):
        - "binary": low/high narrowing, mid = low + (high - low) // 2
        - "linear": first feasible capacity scanning up from max_weight
  2) Record every predicate call as a Probe (and via Tracker, if given)
  3) Re-run the packing at the final capacity to produce a witness Solution

Binary search post-condition (holds for any predicate, monotone or not):
  - the returned capacity is feasible
  - it equals max_weight, or capacity - 1 was probed and found infeasible
total_weight is always feasible, so the range never runs dry.
"""

from __future__ import annotations
import logging
from typing import Callable, List, Optional, Sequence

from trip_capacity.heuristics.largest_fit.packer import can_carry, pack_trips
from trip_capacity.heuristics.largest_fit.pool import WeightPool
from trip_capacity.planning import ProblemState, Policy, Probe, TripLoad, Solution
from trip_capacity.planning.tracker import Tracker

logger = logging.getLogger(__name__)


def _binary_search(state: ProblemState, probe: Callable[[int, int, int], bool]) -> int:
    low, high = state.max_weight, state.total_weight
    while low < high:
        mid = low + (high - low) // 2
        if probe(low, high, mid):
            high = mid
        else:
            low = mid + 1
    return low


def _linear_search(state: ProblemState, probe: Callable[[int, int, int], bool]) -> int:
    low, high = state.max_weight, state.total_weight
    cap = low
    while cap < high and not probe(low, high, cap):
        cap += 1
    return cap


def witness_packing(state: ProblemState, capacity: int) -> List[TripLoad]:
    """Trips produced by the largest-fit rule at `capacity` (only trips actually used)."""
    pool = WeightPool(state.weights, labels=[it.id for it in state.items])
    loads = pack_trips(pool, state.trips, capacity)
    return [
        TripLoad(
            index=i,
            item_ids=tuple(lbl for _, lbl in loaded),
            weights=tuple(w for w, _ in loaded),
        )
        for i, loaded in enumerate(loads, start=1)
        if loaded
    ]


def run_capacity_search(
    state: ProblemState,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Solution:
    """
    Find the minimal capacity for which `state.trips` trips carry every item.

    Parameters
    ----------
    state : ProblemState
        Immutable problem input.
    policy : Policy | None
        Uses policy.search_strategy; defaults to Policy().
    tracker : Tracker | None
        If provided, appends one search_log.csv row per predicate call.

    Returns
    -------
    Solution
        Minimal capacity, witness packing and probe history.
    """
    policy = policy or Policy()
    weights = state.weights
    probes: List[Probe] = []

    def probe(low: int, high: int, capacity: int) -> bool:
        feasible = can_carry(state.trips, weights, capacity)
        p = Probe(index=len(probes), low=low, high=high, capacity=capacity, feasible=feasible)
        probes.append(p)
        logger.debug("probe #%d [%d, %d] cap=%d -> %s", p.index, low, high, capacity, feasible)
        if tracker is not None:
            tracker.append_probe(p)
        return feasible

    if policy.search_strategy == "linear":
        capacity = _linear_search(state, probe)
    else:
        capacity = _binary_search(state, probe)

    logger.info(
        "min capacity %d for %d items over %d trips (%s, %d probes)",
        capacity, len(state.items), state.trips, policy.search_strategy, len(probes),
    )
    return Solution(
        capacity=capacity,
        trips=witness_packing(state, capacity),
        probes=probes,
        strategy=policy.search_strategy,
    )


def min_capacity(
    trips: int,
    weights: Sequence[int],
    expected_count: Optional[int] = None,
) -> int:
    """
    Minimal per-trip capacity for plain integer input.

    `expected_count` is the declared number of weights (n), if any.
    """
    state = ProblemState.from_weights(weights, trips, expected_count=expected_count)
    return run_capacity_search(state).capacity
