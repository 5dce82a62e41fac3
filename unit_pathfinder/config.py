# unit_pathfinder/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .core.turn import TurnOrder

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class PathFinderConfig:
    """
    Tunables of a PathFinder.

    turn_order      which of fuel and hit points is settled first at a turn change
    max_expansions  expansion budget per find_path call; None = run to completion
    record_trace    keep the cost of every popped vertex in SearchStats.popped
    """
    turn_order: TurnOrder = TurnOrder.FUEL_FIRST
    max_expansions: Optional[int] = None
    record_trace: bool = False

    def __post_init__(self):
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError(f"max_expansions must be >= 0, got {self.max_expansions}")

    @classmethod
    def from_env(cls) -> "PathFinderConfig":
        """Overrides read from PATHFINDER_* environment variables."""
        order = os.getenv("PATHFINDER_TURN_ORDER", TurnOrder.FUEL_FIRST.value).strip().lower()
        budget = os.getenv("PATHFINDER_MAX_EXPANSIONS", "").strip()
        trace = os.getenv("PATHFINDER_RECORD_TRACE", "0").strip().lower()
        try:
            turn_order = TurnOrder(order)
        except ValueError:
            raise ValueError(
                f"PATHFINDER_TURN_ORDER={order!r}; expected one of "
                f"{', '.join(o.value for o in TurnOrder)}"
            ) from None
        return cls(
            turn_order=turn_order,
            max_expansions=int(budget) if budget else None,
            record_trace=trace in _TRUE,
        )
