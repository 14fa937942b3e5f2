# -*- coding: utf-8 -*-
"""
Exhaustive verifier: the true minimal capacity over every partition of the
items into at most `trips` groups.

Exponential; only meant to check the greedy search on small inputs. It is
never used as the feasibility predicate.

Search: depth-first, heaviest item first. An item is not tried on two trips
whose current loads are equal (interchangeable), and a branch is cut as soon
as its max load reaches the best found so far.
"""

from __future__ import annotations
from typing import List

from trip_capacity.business_objects.errors import StateValidationError
from trip_capacity.planning import ProblemState

DEFAULT_MAX_ITEMS = 12


def exact_min_capacity(state: ProblemState, max_items: int = DEFAULT_MAX_ITEMS) -> int:
    if len(state.items) > max_items:
        raise StateValidationError(
            f"Exhaustive search is limited to {max_items} items (got {len(state.items)})."
        )

    weights = sorted(state.weights, reverse=True)
    loads: List[int] = [0] * state.trips
    # One trip carrying everything is always a valid partition.
    best = state.total_weight

    def assign(i: int, current_max: int) -> None:
        nonlocal best
        if current_max >= best:
            return
        if i == len(weights):
            best = current_max
            return
        w = weights[i]
        tried: set[int] = set()
        for t in range(len(loads)):
            if loads[t] in tried:
                continue
            tried.add(loads[t])
            loads[t] += w
            assign(i + 1, max(current_max, loads[t]))
            loads[t] -= w

    assign(0, 0)
    return best
