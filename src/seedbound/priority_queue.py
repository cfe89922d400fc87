from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class PriorityQueue(Generic[T]):
    """Min-heap keyed by a float priority with O(1) membership.

    Pushing an item that is already queued is ignored: the item keeps the priority it
    was first queued with. Equal priorities pop in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._members: set[T] = set()
        self._counter = itertools.count()

    def push(self, item: T, priority: float) -> bool:
        if item in self._members:
            return False
        heapq.heappush(self._heap, (float(priority), next(self._counter), item))
        self._members.add(item)
        return True

    def pop(self) -> T | None:
        if not self._heap:
            return None
        _, _, item = heapq.heappop(self._heap)
        self._members.discard(item)
        return item

    def peek_priority(self) -> float:
        if not self._heap:
            return math.inf
        return self._heap[0][0]

    def drain(self) -> list[T]:
        """Remove every item, returning them in no particular order."""
        items = [item for _, _, item in self._heap]
        self._heap.clear()
        self._members.clear()
        return items

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        return (item for _, _, item in self._heap)
