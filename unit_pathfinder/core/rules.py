# Query interfaces the path finder consults: map adjacency and game rules.
# unit_pathfinder/core/rules.py
from __future__ import annotations
from typing import Iterable, Optional, Protocol, Tuple

from .unit import Unit
from .vertex import ActionId, Direction8, Tile


class GameMap(Protocol):
    """Map adjacency, as seen by the unit owner."""
    def adjacent(self, tile: Tile) -> Iterable[Tuple[Tile, Direction8]]: ...
    # False for tiles whose terrain the owner has never seen
    def is_known(self, tile: Tile) -> bool: ...


class Rules(Protocol):
    """
    Action legality, movement costs and unit capabilities.

    Every query receives a probe: a throwaway copy of the unit whose stats
    were overridden by the search. Implementations must not keep it.
    """
    # Movement
    def can_move_to_tile(self, probe: Unit, tile: Tile) -> bool: ...
    def move_cost(self, probe: Unit, tile: Tile) -> int: ...

    # Actions
    def is_action_enabled_unit_on_unit(self, action: ActionId, probe: Unit, target: Unit) -> bool: ...
    def is_action_enabled_unit_on_tile(self, action: ActionId, probe: Unit, tile: Tile) -> bool: ...
    def moves_left_after_action(self, action: ActionId, probe: Unit) -> int: ...
    def transporter_for_unit(self, probe: Unit) -> Optional[Unit]: ...
    def unit_by_id(self, unit_id: int) -> Optional[Unit]: ...

    # Capabilities
    def move_rate(self, probe: Unit) -> int: ...
    def fuel_capacity(self, probe: Unit) -> int: ...
    def is_being_refueled(self, probe: Unit) -> bool: ...
    def restore_hitpoints(self, probe: Unit) -> int: ...


def visible_neighbors(game_map: GameMap, tile: Tile) -> Iterable[Tuple[Tile, Direction8]]:
    """Adjacent tiles with known terrain (fog of war hides the rest)."""
    for target, direction in game_map.adjacent(tile):
        if game_map.is_known(target):
            yield target, direction
