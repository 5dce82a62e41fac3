# unit_pathfinder/core/frontiers.py
from __future__ import annotations
import heapq
from typing import Callable, Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-heap by key(x). Equal keys pop in insertion order."""
    def __init__(self, key: Callable[[T], object]):
        self.key = key
        self.h: List[Tuple[object, int, T]] = []
        self.counter = 0  # tie-breaker for stability
    def push(self, x: T) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self) -> T:
        return heapq.heappop(self.h)[2]
    def peek(self) -> T:
        return self.h[0][2]
    def clear(self) -> None:
        self.h.clear()
        self.counter = 0
    def __len__(self) -> int: return len(self.h)
    def __iter__(self) -> Iterator[T]:
        # heap order, not sorted order
        return (entry[2] for entry in self.h)


def vertex_frontier() -> PriorityQueue:
    """Frontier of open vertices, cheapest cost first."""
    return PriorityQueue(key=lambda v: v.cost.sort_key())
