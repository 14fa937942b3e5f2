# -*- coding: utf-8 -*-
"""
Item model for the trip capacity problem.
"""

from __future__ import annotations
from dataclasses import dataclass
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    An item that must be carried on exactly one trip.

    Attributes
    ----------
    id : str
        Unique identifier.
    weight : int
        Positive integer weight (capacity consumption).
    """
    id: str
    weight: int

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.id:
            raise StateValidationError("Item.id must be non-empty.")
        # bool is an int subclass; True is not a weight.
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise StateValidationError(
                f"Item[{self.id}] weight must be an integer (got {self.weight!r})."
            )
        if self.weight <= 0:
            raise StateValidationError(f"Item[{self.id}] weight must be > 0.")
