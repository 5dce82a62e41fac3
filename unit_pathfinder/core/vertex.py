# Defines the Vertex class: one hypothetical unit state in the path search graph,
# plus the order descriptor that tells which action produced it.
# unit_pathfinder/core/vertex.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Hashable, Optional

from .cost import Cost

Tile = Hashable


class Direction8(Enum):
    NORTHWEST = 0
    NORTH = 1
    NORTHEAST = 2
    WEST = 3
    EAST = 4
    SOUTHWEST = 5
    SOUTH = 6
    SOUTHEAST = 7
    ORIGIN = -1


class OrderKind(Enum):
    MOVE = "move"
    FULL_MP = "full_mp"
    PERFORM_ACTION = "perform_action"


class ActionId(Enum):
    TRANSPORT_BOARD = "transport_board"
    TRANSPORT_EMBARK = "transport_embark"
    TRANSPORT_ALIGHT = "transport_alight"
    # The rules engine models disembarking onto a tile in two variants
    TRANSPORT_DISEMBARK1 = "transport_disembark1"
    TRANSPORT_DISEMBARK2 = "transport_disembark2"


@dataclass(frozen=True)
class Order:
    kind: OrderKind
    direction: Direction8 = Direction8.ORIGIN
    target: Optional[Tile] = None
    action: Optional[ActionId] = None

    def __str__(self) -> str:
        if self.kind is OrderKind.MOVE:
            return f"move {self.direction.name.lower()}"
        if self.kind is OrderKind.FULL_MP:
            return "wait for full MP"
        name = self.action.value if self.action is not None else "action"
        return f"{name} -> {self.target!r}"


# Placeholder order carried by the root vertex; it is never emitted as a step.
ROOT_ORDER = Order(OrderKind.FULL_MP)


@dataclass(frozen=True)
class Vertex:
    """
    A point of the search space: where the unit is, what carries it and
    whether it already moved this turn, together with what it cost to get
    there. ``parent``, ``order`` and ``arrived_turn`` describe how the vertex
    was generated and take no part in equality. ``arrived_turn`` is the turn
    in which ``order`` was carried out; ``cost.turns`` is already past the
    turn change when the order used up the last movement points.
    """
    location: Tile
    loaded: Optional[int]
    moved: bool
    cost: Cost
    parent: Optional["Vertex"] = field(default=None, compare=False, repr=False)
    order: Order = field(default=ROOT_ORDER, compare=False)
    arrived_turn: int = field(default=0, compare=False)

    @property
    def key(self):
        """Bucket in which vertices may dominate each other."""
        return (self.location, self.loaded, self.moved)

    def comparable(self, other: "Vertex") -> bool:
        """
        True when one vertex is unambiguously better than the other.
        Vertices in different buckets are never comparable. Not transitive.
        """
        return self.key == other.key and self.cost.comparable(other.cost)

    def child(self, order: Order, **changes) -> "Vertex":
        """Copy of this vertex generated by ``order``, with ``changes`` applied."""
        return replace(self, parent=self, order=order, arrived_turn=self.cost.turns, **changes)

    def with_cost(self, **changes) -> "Vertex":
        return replace(self, cost=replace(self.cost, **changes))

    def is_root(self) -> bool:
        return self.parent is None
