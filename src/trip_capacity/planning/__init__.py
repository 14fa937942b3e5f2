# -*- coding: utf-8 -*-
"""
Planning layer public API for the trip capacity pipeline.

This module exposes the core planning-time data contracts:
  - State model (ProblemState)
  - Policy configuration
  - Solution, TripLoad and Probe models

Solvers and the tracker are intentionally not exported here to avoid
cluttering the namespace. They should be imported explicitly when needed.
"""

from .state import ProblemState
from .policy import Policy
from .solution import Probe, TripLoad, Solution

__all__ = [
    "ProblemState",
    "Policy",
    "Probe",
    "TripLoad",
    "Solution",
]
