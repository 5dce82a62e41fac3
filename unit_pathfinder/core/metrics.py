# unit_pathfinder/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import time, tracemalloc


@dataclass
class SearchStats:
    """Bookkeeping counters of one PathFinder; reset on invalidation."""
    expansions: int = 0
    pushes: int = 0
    stale_drops: int = 0
    rejected: int = 0
    deaths: int = 0
    # sort keys of popped vertices, only filled when tracing is enabled
    popped: List[Tuple[int, int, int, int]] = field(default_factory=list)

    def reset(self) -> None:
        self.expansions = self.pushes = self.stale_drops = 0
        self.rejected = self.deaths = 0
        self.popped.clear()


@dataclass
class SearchResult:
    scenario: str
    success: bool
    steps: int
    turns: int
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        self._tracing = True
        tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
