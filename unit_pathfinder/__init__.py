"""Multi-criteria path finding for game units (turns, moves, health, fuel)."""
from .algorithms.path_finder import PathFinder, SearchStatus
from .config import PathFinderConfig
from .core.cost import Cost
from .core.path import Path, PathStep
from .core.turn import TurnOrder
from .core.unit import Unit
from .core.vertex import ActionId, Direction8, Order, OrderKind, Vertex

__all__ = [
    "PathFinder", "SearchStatus", "PathFinderConfig", "Cost", "Path", "PathStep",
    "TurnOrder", "Unit", "ActionId", "Direction8", "Order", "OrderKind", "Vertex",
]
