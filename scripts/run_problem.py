#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run the capacity search on problems/problem_1 and export CSV artifacts.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py

Outputs under OUT_DIR:
  - search_log.csv   (one row per feasibility check)
  - trips.csv        (greedy packing at the minimal capacity)
  - summary.csv      (global KPIs)
"""

from __future__ import annotations
import logging
import os

# ====== CONFIGURATION ======
PROBLEM_PATH = "problems/problem_1/problem.json"
OUT_DIR = "reports/problem_1"

# "binary" or "linear"
SEARCH_STRATEGY = "binary"

# Cross-check against the exhaustive optimum when n is at most this
MAX_EXHAUSTIVE_ITEMS = 12

LOG_LEVEL = logging.INFO
# ============================

from trip_capacity.planning import Policy, ProblemState, Solution
from trip_capacity.planning.solvers.capacity_search import run_capacity_search
from trip_capacity.planning.solvers.exhaustive import exact_min_capacity
from trip_capacity.planning.tracker import Tracker
from trip_capacity.utils.readers import read_problem_json

logger = logging.getLogger("run_problem")


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")

    # Load problem
    state: ProblemState = read_problem_json(PROBLEM_PATH)

    policy = Policy(search_strategy=SEARCH_STRATEGY, max_exhaustive_items=MAX_EXHAUSTIVE_ITEMS)
    tracker = Tracker(out_dir=OUT_DIR)

    # Search (appends search_log.csv as it goes)
    solution: Solution = run_capacity_search(state, policy, tracker=tracker)
    tracker.write_trips_csv(solution)
    tracker.write_summary_csv(state, solution)

    print("\n=== Capacity Search Complete (problem_1) ===")
    print(f"Minimal capacity: {solution.capacity}")
    for trip in solution.trips:
        print(f"  - trip {trip.index}: {list(trip.weights)} (load {trip.load})")

    if len(state.items) <= policy.max_exhaustive_items:
        exact = exact_min_capacity(state, max_items=policy.max_exhaustive_items)
        if exact != solution.capacity:
            logger.warning("greedy capacity %d above exact optimum %d", solution.capacity, exact)
        else:
            logger.info("exact optimum agrees: %d", exact)

    print(f"\nArtifacts written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
