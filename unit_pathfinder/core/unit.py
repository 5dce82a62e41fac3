# Plain unit snapshot handed to the rules collaborators.
# unit_pathfinder/core/unit.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Hashable, Optional

from .vertex import Vertex


@dataclass(frozen=True)
class Unit:
    """
    The stats of a unit that path finding reads or simulates.

    ``utype`` is opaque to the search; only the rules collaborator looks at it.
    ``transporter`` is the id of the carrying unit, ``stay`` marks a unit frozen
    by the scenario.
    """
    id: int
    tile: Hashable
    moves_left: int
    hp: int
    fuel: int = 0
    utype: Any = None
    owner: Any = None
    transporter: Optional[int] = None
    moved: bool = False
    stay: bool = False


def fill_probe(unit: Unit, vertex: Vertex) -> Unit:
    """
    Copy of ``unit`` whose path-finding stats reflect ``vertex``. Any other
    property of the unit is left unchanged.
    """
    return replace(
        unit,
        tile=vertex.location,
        transporter=vertex.loaded,
        moved=vertex.moved,
        fuel=vertex.cost.fuel_left,
        hp=vertex.cost.health,
        moves_left=vertex.cost.moves_left,
    )
