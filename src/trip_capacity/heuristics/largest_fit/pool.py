# -*- coding: utf-8 -*-
"""
Ordered working multiset for the largest-fit packing rule.

A WeightPool holds the weights that are still unassigned during a single
feasibility check. It is backed by a `sortedcontainers.SortedList`, which
gives the one query the packer needs in O(log n):

    take_largest_at_most(bound) -> (weight, label) | None

Duplicates are kept. Labels (item ids) are optional and travel with their
weight so a packing can be reported per item.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from sortedcontainers import SortedList

Entry = Tuple[int, Optional[str]]


class WeightPool:
    """
    Sorted (ascending) multiset of remaining weights.

    Built fresh from the caller's sequence; the caller's data is never
    touched afterwards.
    """

    def __init__(
        self,
        weights: Iterable[int],
        labels: Optional[Iterable[str]] = None,
    ) -> None:
        ws = list(weights)
        if labels is None:
            pairs: List[Entry] = [(w, None) for w in sorted(ws)]
        else:
            ls = list(labels)
            if len(ls) != len(ws):
                raise ValueError(
                    f"labels ({len(ls)}) and weights ({len(ws)}) differ in length."
                )
            pairs = sorted(zip(ws, ls))
        # Entries are (weight, rank); rank is the position in `pairs`, so
        # equal weights keep their label order and never compare labels.
        self._labels: List[Optional[str]] = [lbl for _, lbl in pairs]
        self._entries = SortedList((w, rank) for rank, (w, _) in enumerate(pairs))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"WeightPool({self.remaining_weights()!r})"

    def remaining_weights(self) -> List[int]:
        """Snapshot of unassigned weights, ascending."""
        return [w for w, _ in self._entries]

    def take_largest_at_most(self, bound: int) -> Optional[Entry]:
        """
        Remove and return the greatest weight <= bound, or None if every
        remaining weight exceeds it. Among equal weights the last in sort
        order is taken.
        """
        idx = self._entries.bisect_right((bound, len(self._labels)))
        if idx == 0:
            return None
        weight, rank = self._entries.pop(idx - 1)
        return weight, self._labels[rank]
