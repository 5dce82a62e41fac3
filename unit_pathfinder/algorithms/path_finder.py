# Incremental multi-criteria Dijkstra search over unit states.
# unit_pathfinder/algorithms/path_finder.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Optional

from ..config import PathFinderConfig
from ..core.cost import Cost
from ..core.frontiers import vertex_frontier
from ..core.metrics import SearchStats
from ..core.path import Path, reconstruct_path
from ..core.rules import GameMap, Rules
from ..core.table import BestKnownTable
from ..core.turn import end_of_turn
from ..core.unit import Unit
from ..core.vertex import Tile, Vertex
from .expansion import OPERATORS

logger = logging.getLogger(__name__)


class SearchStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    INTERRUPTED = "interrupted"  # expansion budget spent, state kept


class PathFinder:
    """
    Finds the cheapest way for one unit to reach a tile.

    Costs are compared on four criteria at once (turns, moves left, health,
    fuel left), so several incomparable vertices may be kept per tile. The
    frontier and the best-known table survive between calls: asking for a
    second destination resumes the search where the first one stopped.

    The path finder becomes useless once the unit moves or changes; call
    ``unit_changed`` (or ``invalidate``) to start over from its new state.
    Not thread-safe.
    """

    def __init__(self, unit: Unit, game_map: GameMap, rules: Rules,
                 config: Optional[PathFinderConfig] = None):
        self.unit = unit
        self.game_map = game_map
        self.rules = rules
        self.config = config or PathFinderConfig()
        self.frontier = vertex_frontier()
        self.best_vertices = BestKnownTable()
        self.stats = SearchStats()
        self.status = SearchStatus.IDLE
        self._insert_initial_vertex()

    # --- state management ----------------------------------------------------

    def _insert_initial_vertex(self) -> None:
        u = self.unit
        root = Vertex(u.tile, u.transporter, u.moved,
                      Cost(0, u.moves_left, u.hp, u.fuel))
        self.frontier.push(root)
        self.best_vertices.add(root)
        self.stats.pushes += 1

    def invalidate(self, cause: str = "unit changed") -> None:
        """Drops all search state and restarts from the unit's current stats."""
        logger.info("path finder for unit %s invalidated: %s", self.unit.id, cause)
        self.best_vertices.clear()
        self.frontier.clear()
        self.stats.reset()
        self.status = SearchStatus.IDLE
        self._insert_initial_vertex()

    def unit_changed(self, unit: Unit) -> None:
        """Notifies the path finder that its unit moved, died or changed stats."""
        self.unit = unit
        # We can try to be smarter later. For now, invalidate everything.
        self.invalidate(f"unit {unit.id} changed")

    # --- admission -----------------------------------------------------------

    def _maybe_insert(self, candidate: Vertex) -> bool:
        """Admits ``candidate`` if no known vertex is as good. Returns True if pushed."""
        if candidate.cost.moves_left <= 0:
            candidate = end_of_turn(candidate, self.unit, self.rules, self.config.turn_order)
            if candidate is None:
                self.stats.deaths += 1
                return False
        if not self.best_vertices.offer(candidate):
            self.stats.rejected += 1
            return False
        self.frontier.push(candidate)
        self.stats.pushes += 1
        return True

    def _expand(self, vertex: Vertex) -> None:
        self.stats.expansions += 1
        for operator in OPERATORS:
            for candidate in operator(vertex, self.unit, self.game_map, self.rules):
                self._maybe_insert(candidate)

    # --- search --------------------------------------------------------------

    def _already_found(self, destination: Tile) -> bool:
        best = self.best_vertices.best_at(destination)
        if best is None:
            return False
        # Keep searching if the tip of the queue is cheaper: not everything was checked
        return not self.frontier or not (self.frontier.peek().cost < best.cost)

    def run_search(self, destination: Tile) -> bool:
        """
        Runs Dijkstra until ``destination`` is reached or nothing is left to
        explore. Returns True if a path to the destination is known.
        """
        if self._already_found(destination):
            self.status = SearchStatus.FOUND
            return True

        self.status = SearchStatus.RUNNING
        budget = self.config.max_expansions
        expanded_here = 0
        while self.frontier:
            v = self.frontier.peek()

            # Arrived. Leave the vertex queued so that its neighbours are
            # generated if the search is extended later.
            if v.location == destination:
                self.status = SearchStatus.FOUND
                return True

            if budget is not None and expanded_here >= budget:
                logger.debug("expansion budget of %d spent before reaching %r", budget, destination)
                self.status = SearchStatus.INTERRUPTED
                return False

            self.frontier.pop()
            if self.config.record_trace:
                self.stats.popped.append(v.cost.sort_key())
            # An equivalent or better vertex may have been processed meanwhile
            parent = self.best_vertices.find(v)
            if parent is None:
                self.stats.stale_drops += 1
                continue

            self._expand(parent)
            expanded_here += 1

        logger.debug("no path to %r: frontier exhausted after %d expansions",
                     destination, self.stats.expansions)
        self.status = SearchStatus.EXHAUSTED
        return False

    def find_path(self, destination: Tile) -> Path:
        """
        Cheapest path to ``destination``, or an empty path when the unit is
        frozen, already there, or cannot reach it.
        """
        if destination is None:
            logger.error("find_path called without a destination for unit %s", self.unit.id)
            raise ValueError("destination must be a tile, got None")

        if self.unit.stay:
            # Unit frozen by scenario
            return Path()
        if self.unit.tile == destination:
            return Path()

        if not self.run_search(destination):
            return Path()

        # Several vertices may have reached the tile: take the cheapest one
        best = self.best_vertices.best_at(destination)
        return reconstruct_path(best)
