# Best-known table: per-location Pareto front of the vertices found so far.
# unit_pathfinder/core/table.py
from __future__ import annotations
from collections import defaultdict
from typing import DefaultDict, Iterator, List, Optional

from .vertex import Tile, Vertex


class BestKnownTable:
    """
    Multi-valued mapping from location to the undominated vertices at that
    location. Vertices with a different ``(loaded, moved)`` or incomparable
    costs coexist; a vertex is only stored if nothing already stored is at
    least as good.
    """

    def __init__(self) -> None:
        self._by_location: DefaultDict[Tile, List[Vertex]] = defaultdict(list)

    def offer(self, candidate: Vertex) -> bool:
        """
        Stores ``candidate`` unless an equal or better comparable vertex is
        known. Comparable vertices it strictly improves on are removed.
        Returns True if the candidate was stored.
        """
        entries = self._by_location[candidate.location]
        kept: List[Vertex] = []
        for i, existing in enumerate(entries):
            if existing.comparable(candidate):
                if candidate.cost < existing.cost:
                    continue  # superseded
                # We already have it or something better
                kept.extend(entries[i:])
                self._by_location[candidate.location] = kept
                return False
            kept.append(existing)
        kept.append(candidate)
        self._by_location[candidate.location] = kept
        return True

    def add(self, vertex: Vertex) -> None:
        """Unconditional insert, used for the root."""
        self._by_location[vertex.location].append(vertex)

    def at(self, location: Tile) -> List[Vertex]:
        return list(self._by_location.get(location, ()))

    def find(self, vertex: Vertex) -> Optional[Vertex]:
        """The stored vertex equal to ``vertex``, or None if it was superseded."""
        for stored in self._by_location.get(vertex.location, ()):
            if stored == vertex:
                return stored
        return None

    def best_at(self, location: Tile) -> Optional[Vertex]:
        """Cheapest stored vertex at ``location`` by the total cost order."""
        entries = self._by_location.get(location)
        if not entries:
            return None
        return min(entries, key=lambda v: v.cost.sort_key())

    def clear(self) -> None:
        self._by_location.clear()

    def __contains__(self, location: Tile) -> bool:
        return bool(self._by_location.get(location))

    def __iter__(self) -> Iterator[Vertex]:
        for entries in self._by_location.values():
            yield from entries

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._by_location.values())
