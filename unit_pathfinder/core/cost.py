# Four-criteria cost attached to every vertex of the unit path search.
# unit_pathfinder/core/cost.py
from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple


@total_ordering
@dataclass(frozen=True, eq=True)
class Cost:
    """
    Cost of reaching a vertex: (turns, moves_left, health, fuel_left).

    Lower turns are better; for the other three criteria more is better.
    Two costs only dominate each other when every criterion agrees
    (see ``comparable``). ``<`` is a strict total order used to pick the
    frontier minimum and to break ties, not to decide dominance.
    """
    turns: int = 0
    moves_left: int = 0
    health: int = 0
    fuel_left: int = 0

    def sort_key(self) -> Tuple[int, int, int, int]:
        # fewest turns, then most moves, then healthiest, then most fuel
        return (self.turns, -self.moves_left, -self.health, -self.fuel_left)

    def __lt__(self, other: "Cost") -> bool:
        if not isinstance(other, Cost):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def comparable(self, other: "Cost") -> bool:
        """True if one cost is never worse than the other on every criterion."""
        # Positive means self does better on that criterion.
        deltas = (
            other.turns - self.turns,
            self.moves_left - other.moves_left,
            self.health - other.health,
            self.fuel_left - other.fuel_left,
        )
        return all(d <= 0 for d in deltas) or all(d >= 0 for d in deltas)

    def dominates(self, other: "Cost") -> bool:
        """Weakly better on every criterion and strictly better on one."""
        return self != other and self.comparable(other) and self < other

    def is_valid(self) -> bool:
        return min(self.turns, self.moves_left, self.health, self.fuel_left) >= 0
