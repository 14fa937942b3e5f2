# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for a capacity search.

Files produced (when Tracker is used):
  - search_log.csv   (append-as-you-go, one row per predicate call)
  - trips.csv        (witness packing at the final capacity)
  - summary.csv      (global KPIs)

Notes
-----
- Callers decide when to invoke the final writers; the capacity search
  solver appends probes while it runs.
"""

from __future__ import annotations
import csv
import json
import os
from dataclasses import dataclass, field

from trip_capacity.planning import ProblemState, Probe, Solution
from trip_capacity.quality_metrics.core import compute_global_metrics, per_trip_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str
    _search_log_path: str = field(init=False, repr=False)
    _search_started: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)
        self._search_log_path = os.path.join(self.out_dir, "search_log.csv")

    @property
    def search_log_path(self) -> str:
        return self._search_log_path

    # -----------------------------
    # Search log CSV
    # -----------------------------
    def append_probe(self, probe: Probe) -> str:
        """
        Append a single predicate call.

        Columns:
          probe_index, low, high, capacity, feasible
        """
        mode = "a" if self._search_started else "w"
        with open(self._search_log_path, mode, newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            if not self._search_started:
                w.writerow(["probe_index", "low", "high", "capacity", "feasible"])
                self._search_started = True
            w.writerow([probe.index, probe.low, probe.high, probe.capacity, int(probe.feasible)])
        return self._search_log_path

    # -----------------------------
    # Final artifacts
    # -----------------------------
    def write_trips_csv(self, solution: Solution, filename: str = "trips.csv") -> str:
        """
        Persist the witness packing.

        Columns:
          trip_index, item_ids_json, weights_json, load, slack, utilization
        """
        path = os.path.join(self.out_dir, filename)
        metrics = {row["trip_index"]: row for row in per_trip_metrics(solution)}

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["trip_index", "item_ids_json", "weights_json", "load", "slack", "utilization"])
            for trip in solution.trips:
                m = metrics[trip.index]
                w.writerow([
                    trip.index,
                    json.dumps(list(trip.item_ids)),
                    json.dumps(list(trip.weights)),
                    m["load"],
                    m["slack"],
                    f"{m['utilization']:.2f}",
                ])
        return path

    def write_summary_csv(
        self,
        state: ProblemState,
        solution: Solution,
        filename: str = "summary.csv",
    ) -> str:
        """Write global KPIs as metric,value rows."""
        path = os.path.join(self.out_dir, filename)
        metrics = compute_global_metrics(state, solution)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["metric", "value"])
            w.writerow(["Strategy", solution.strategy])
            for key, value in metrics.items():
                w.writerow([key, value])
        return path
