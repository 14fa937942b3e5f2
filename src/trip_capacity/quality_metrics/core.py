# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to compute KPIs for a capacity search result.
- No side effects
- No external dependencies
- Works off ProblemState and Solution

Public API:
  - capacity_lower_bound(state) -> int
  - per_trip_metrics(solution) -> List[Dict]
  - compute_global_metrics(state, solution) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Any, Dict, List

from trip_capacity.planning import ProblemState, Solution


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _utilization(load: int, capacity: int) -> float:
    if capacity == 0:
        return 0.0
    return 100.0 * load / capacity


# ---------------------------------------------------------------------------
# 1) Bounds
# ---------------------------------------------------------------------------
def capacity_lower_bound(state: ProblemState) -> int:
    """
    No packing of any kind can beat this:
      - the heaviest item must fit on some trip
      - k trips must hold the total weight between them
    """
    return max(state.max_weight, _ceil_div(state.total_weight, state.trips))


# ---------------------------------------------------------------------------
# 2) Per-trip metrics
# ---------------------------------------------------------------------------
def per_trip_metrics(solution: Solution) -> List[Dict[str, Any]]:
    """
    One row per trip used in the witness packing:
      trip_index, items, load, slack, utilization (percent 0..100)
    """
    rows: List[Dict[str, Any]] = []
    for trip in solution.trips:
        load = trip.load
        rows.append({
            "trip_index": trip.index,
            "items": len(trip.weights),
            "load": load,
            "slack": solution.capacity - load,
            "utilization": _utilization(load, solution.capacity),
        })
    return rows


# ---------------------------------------------------------------------------
# 3) Global metrics
# ---------------------------------------------------------------------------
def compute_global_metrics(state: ProblemState, solution: Solution) -> Dict[str, float]:
    """
    Returns:
      {
        "Capacity": ...,
        "Lower Bound": ...,
        "Gap To Lower Bound": ...,
        "Trips Used": ...,
        "Trips Available": ...,
        "Total Items": ...,
        "Total Weight": ...,
        "Mean Utilization": ...,   # percent over used trips
        "Probes": ...
      }
    """
    lb = capacity_lower_bound(state)
    used = len(solution.trips)
    rows = per_trip_metrics(solution)
    mean_util = sum(r["utilization"] for r in rows) / used if used else 0.0

    return {
        "Capacity": solution.capacity,
        "Lower Bound": lb,
        "Gap To Lower Bound": solution.capacity - lb,
        "Trips Used": used,
        "Trips Available": state.trips,
        "Total Items": len(state.items),
        "Total Weight": state.total_weight,
        "Mean Utilization": mean_util,
        "Probes": len(solution.probes),
    }
