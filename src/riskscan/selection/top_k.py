"""TopKSelector keeps the K highest-risk files seen for one directory.

Results live in fixed slots. Once full, a candidate replaces the lowest-risk
slot only if its risk is strictly greater, and takes over that slot. On equal
minimum risk the lowest slot index is evicted. drain() returns the slots in
slot order, not sorted by risk.

The minimum is tracked with a heapq min-heap of (risk, slot) pairs, so the
(risk, slot) ordering gives the lowest-index tie-break for free.
"""

from __future__ import annotations

import heapq

from riskscan.models.results import FileResult
from riskscan.selection.base import Selector

DEFAULT_CAPACITY = 10


class TopKSelector(Selector):
    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._slots: list[FileResult] = []
        self._heap: list[tuple[float, int]] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def offer(self, candidate: FileResult) -> bool:
        if len(self._slots) < self._capacity:
            heapq.heappush(self._heap, (candidate.risk, len(self._slots)))
            self._slots.append(candidate)
            return True

        min_risk, slot = self._heap[0]
        if candidate.risk <= min_risk:
            return False
        heapq.heapreplace(self._heap, (candidate.risk, slot))
        self._slots[slot] = candidate
        return True

    def drain(self) -> list[FileResult]:
        drained = self._slots
        self._slots = []
        self._heap = []
        return drained

    def __len__(self) -> int:
        return len(self._slots)
