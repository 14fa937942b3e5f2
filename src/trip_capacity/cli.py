# -*- coding: utf-8 -*-
"""
Command-line entry point.

Reads `n k` and n weights from stdin and prints the minimal per-trip
capacity as a single integer. Diagnostics go to stderr; set
TRIP_CAPACITY_LOG_LEVEL (e.g. DEBUG) to see the search probes.

Usage:
  echo "3 2
  1 2 3" | python -m trip_capacity
"""

from __future__ import annotations
import logging
import os
import sys

from trip_capacity.business_objects.errors import SchemaError, StateValidationError
from trip_capacity.planning.solvers.capacity_search import run_capacity_search
from trip_capacity.utils.readers import read_problem_stream

LOG_LEVEL_ENV = "TRIP_CAPACITY_LOG_LEVEL"

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    _configure_logging()
    try:
        state = read_problem_stream(sys.stdin)
    except (SchemaError, StateValidationError) as e:
        logger.debug("rejected input", exc_info=True)
        sys.exit(f"ERROR: {e}")

    solution = run_capacity_search(state)
    print(solution.capacity)
    return 0


if __name__ == "__main__":
    sys.exit(main())
