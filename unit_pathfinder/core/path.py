# Path returned to callers, and its reconstruction from a goal vertex.
# unit_pathfinder/core/path.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .cost import Cost
from .vertex import Order, Tile, Vertex


@dataclass(frozen=True)
class PathStep:
    location: Tile
    turn: int
    order: Order
    loaded: Optional[int] = None
    cost: Optional[Cost] = None


class Path:
    """Ordered steps from (excluding) the unit's tile to the destination."""

    def __init__(self, steps: Sequence[PathStep] = ()):
        self._steps = tuple(steps)

    @property
    def steps(self) -> Sequence[PathStep]:
        return self._steps

    @property
    def turns(self) -> int:
        """Turn on which the destination is reached (0 = this turn)."""
        return self._steps[-1].turn if self._steps else 0

    @property
    def destination(self) -> Optional[Tile]:
        return self._steps[-1].location if self._steps else None

    def empty(self) -> bool:
        return not self._steps

    def orders(self) -> List[Order]:
        return [step.order for step in self._steps]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[PathStep]:
        return iter(self._steps)

    def __getitem__(self, i):
        return self._steps[i]

    def __bool__(self) -> bool:
        return bool(self._steps)

    def __eq__(self, other) -> bool:
        return isinstance(other, Path) and self._steps == other._steps

    def __repr__(self) -> str:
        return f"Path({list(self._steps)!r})"

    def __str__(self) -> str:
        if not self._steps:
            return "(empty path)"
        lines = []
        for i, step in enumerate(self._steps, start=1):
            lines.append(f"{i:>3}. turn {step.turn}: {step.order} -> {step.location!r}")
        return "\n".join(lines)


def reconstruct_path(vertex: Vertex) -> Path:
    steps = []
    cur = vertex
    while cur.parent is not None:
        steps.append(PathStep(cur.location, cur.arrived_turn, cur.order, cur.loaded, cur.cost))
        cur = cur.parent
    steps.reverse()
    return Path(steps)
