# unit_pathfinder/problems/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.unit import Unit
from ..core.vertex import ActionId, Direction8

Coord = Tuple[int, int]

_DIRS: Dict[Direction8, Coord] = {
    Direction8.NORTHWEST: (-1, -1),
    Direction8.NORTH: (-1, 0),
    Direction8.NORTHEAST: (-1, 1),
    Direction8.WEST: (0, -1),
    Direction8.EAST: (0, 1),
    Direction8.SOUTHWEST: (1, -1),
    Direction8.SOUTH: (1, 0),
    Direction8.SOUTHEAST: (1, 1),
}

# Map legend used by GridWorld.from_strings
_TERRAIN = {
    ".": 1,  # grassland
    "h": 2,  # hills
    "m": 3,  # mountains
    "C": 1,  # city
    "~": 1,  # ocean
    "?": 1,  # never seen
}

LAND, SEA, AIR = "land", "sea", "air"


@dataclass(frozen=True)
class UnitType:
    name: str
    move_rate: int
    hp: int = 10
    fuel: int = 0                 # 0 = no fuel needed
    regen: int = 1                # hp recovered per turn outside cities
    domain: str = LAND
    capacity: int = 0             # transport slots
    carries: Tuple[str, ...] = ()
    attrition: int = 0            # hp lost per turn away from cities (helicopters)


WARRIORS = UnitType("Warriors", move_rate=1)
EXPLORER = UnitType("Explorer", move_rate=3)
TRIREME = UnitType("Trireme", move_rate=3, domain=SEA, capacity=2, carries=(LAND,))
FIGHTER = UnitType("Fighter", move_rate=4, fuel=1, domain=AIR)
BOMBER = UnitType("Bomber", move_rate=3, fuel=2, domain=AIR)
HELICOPTER = UnitType("Helicopter", move_rate=4, domain=AIR, attrition=3)


@dataclass
class GridWorld:
    """
    8-neighbour tile grid implementing both the map and the rules the path
    finder queries.

    - move_costs[r, c]: movement points to enter the tile (land units)
    - known[r, c]: False where the terrain is hidden by fog of war
    - ocean[r, c]: only sea units, air units and loaded cargo may be there
    - cities: refuel fuel units, heal every unit, harbour ships
    Units standing on the map (e.g. transports) are registered with add_unit.
    """
    move_costs: np.ndarray
    known: np.ndarray
    ocean: np.ndarray
    cities: set = field(default_factory=set)
    units: Dict[int, Unit] = field(default_factory=dict)

    def __post_init__(self):
        shape = self.move_costs.shape
        if self.known.shape != shape or self.ocean.shape != shape:
            raise ValueError(
                f"terrain layers disagree: move_costs {shape}, known {self.known.shape}, "
                f"ocean {self.ocean.shape}"
            )

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> "GridWorld":
        """Builds a world from a picture; see _TERRAIN for the legend."""
        if not rows or len({len(r) for r in rows}) != 1:
            raise ValueError("map rows must be non-empty and of equal length")
        try:
            costs = np.array([[_TERRAIN[ch] for ch in row] for row in rows], dtype=int)
        except KeyError as e:
            raise ValueError(f"unknown terrain symbol {e.args[0]!r}") from None
        chars = np.array([list(row) for row in rows])
        cities = {(int(r), int(c)) for r, c in zip(*np.nonzero(chars == "C"))}
        return cls(move_costs=costs, known=chars != "?", ocean=chars == "~", cities=cities)

    @property
    def shape(self) -> Coord:
        return self.move_costs.shape

    def in_bounds(self, tile: Coord) -> bool:
        r, c = tile
        rows, cols = self.shape
        return 0 <= r < rows and 0 <= c < cols

    def add_unit(self, unit: Unit) -> Unit:
        self.units[unit.id] = unit
        return unit

    # --- GameMap -----------------------------------------------------------

    def adjacent(self, tile: Coord) -> Iterable[Tuple[Coord, Direction8]]:
        r, c = tile
        for direction, (dr, dc) in _DIRS.items():
            target = (r + dr, c + dc)
            if self.in_bounds(target):
                yield target, direction

    def is_known(self, tile: Coord) -> bool:
        return bool(self.known[tile])

    # --- helpers -----------------------------------------------------------

    @staticmethod
    def _is_adjacent(a: Coord, b: Coord) -> bool:
        return max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1

    def _native(self, utype: UnitType, tile: Coord) -> bool:
        if utype.domain == AIR:
            return True
        if utype.domain == SEA:
            return bool(self.ocean[tile]) or tile in self.cities
        return not self.ocean[tile]

    def _cargo(self, transport: Unit) -> List[Unit]:
        return [u for u in self.units.values() if u.transporter == transport.id]

    def _can_carry(self, transport: Unit, probe: Unit) -> bool:
        ttype: UnitType = transport.utype
        if transport.id == probe.id or ttype.capacity <= 0:
            return False
        if probe.utype.domain not in ttype.carries:
            return False
        if transport.owner != probe.owner:
            return False
        cargo = [u for u in self._cargo(transport) if u.id != probe.id]
        return len(cargo) < ttype.capacity

    # --- Rules: movement ---------------------------------------------------

    def can_move_to_tile(self, probe: Unit, tile: Coord) -> bool:
        if probe.moves_left <= 0 or not self._is_adjacent(probe.tile, tile):
            return False
        return self._native(probe.utype, tile)

    def move_cost(self, probe: Unit, tile: Coord) -> int:
        if probe.utype.domain != LAND:
            return 1
        return int(self.move_costs[tile])

    # --- Rules: actions ----------------------------------------------------

    def transporter_for_unit(self, probe: Unit) -> Optional[Unit]:
        for unit in sorted(self.units.values(), key=lambda u: u.id):
            if unit.tile == probe.tile and self._can_carry(unit, probe):
                return unit
        return None

    def unit_by_id(self, unit_id: int) -> Optional[Unit]:
        return self.units.get(unit_id)

    def is_action_enabled_unit_on_unit(self, action: ActionId, probe: Unit, target: Unit) -> bool:
        if action is ActionId.TRANSPORT_BOARD:
            return (target.tile == probe.tile and probe.transporter != target.id
                    and self._can_carry(target, probe))
        if action is ActionId.TRANSPORT_EMBARK:
            return (probe.moves_left > 0 and self._is_adjacent(probe.tile, target.tile)
                    and self._can_carry(target, probe))
        if action is ActionId.TRANSPORT_ALIGHT:
            # Alighting at sea would drown the unit
            return probe.transporter == target.id and self._native(probe.utype, probe.tile)
        return False

    def is_action_enabled_unit_on_tile(self, action: ActionId, probe: Unit, tile: Coord) -> bool:
        if probe.transporter is None or probe.moves_left <= 0:
            return False
        if not self._is_adjacent(probe.tile, tile) or not self._native(probe.utype, tile):
            return False
        if action is ActionId.TRANSPORT_DISEMBARK1:
            # Onto open land
            return tile not in self.cities
        if action is ActionId.TRANSPORT_DISEMBARK2:
            # Into a city
            return tile in self.cities
        return False

    def moves_left_after_action(self, action: ActionId, probe: Unit) -> int:
        # Transport actions are free; disembark/embark pay the terrain cost
        return probe.moves_left

    # --- Rules: capabilities -----------------------------------------------

    def move_rate(self, probe: Unit) -> int:
        utype: UnitType = probe.utype
        if utype.domain != LAND:
            return utype.move_rate
        # Damaged land units are slower, but can always move one tile
        return max(1, utype.move_rate * probe.hp // utype.hp)

    def fuel_capacity(self, probe: Unit) -> int:
        return probe.utype.fuel

    def is_being_refueled(self, probe: Unit) -> bool:
        return probe.tile in self.cities or probe.transporter is not None

    def restore_hitpoints(self, probe: Unit) -> int:
        utype: UnitType = probe.utype
        if probe.tile in self.cities:
            return utype.hp
        hp = probe.hp + utype.regen
        if probe.transporter is None:
            hp -= utype.attrition
        return min(hp, utype.hp)


def make_unit(unit_id: int, utype: UnitType, tile: Coord, **stats) -> Unit:
    """A unit at full strength unless ``stats`` says otherwise."""
    stats.setdefault("moves_left", utype.move_rate)
    stats.setdefault("hp", utype.hp)
    stats.setdefault("fuel", utype.fuel)
    return Unit(id=unit_id, tile=tile, utype=utype, **stats)


def make_grid_world() -> Tuple[GridWorld, Unit]:
    # Example: a coast with hills, a city across a bay and a trireme waiting
    world = GridWorld.from_strings([
        ".h..~~~...",
        ".m..~~~.C.",
        "....~~~...",
        ".C..~~~..h",
        "....~~~???",
    ])
    world.add_unit(make_unit(100, TRIREME, (2, 4)))
    explorer = make_unit(1, EXPLORER, (2, 0))
    return world, explorer
