"""
Tests for the end-of-turn transition: fuel, hit points, movement reset.
"""

from dataclasses import replace

from unit_pathfinder import Cost, TurnOrder, Vertex
from unit_pathfinder.core.turn import end_of_turn
from unit_pathfinder.problems.grid import (BOMBER, EXPLORER, FIGHTER, HELICOPTER, GridWorld,
                                           make_unit)


def exhausted(unit, tile, **cost):
    """Vertex for ``unit`` at ``tile`` with no movement left."""
    base = Cost(0, 0, unit.hp, unit.fuel)
    return Vertex(tile, None, True, replace(base, **cost))


def test_out_of_fuel_unit_is_lost():
    """moves 0, fuel 1, no refuel: no vertex at all."""
    world = GridWorld.from_strings(["C.."])
    fighter = make_unit(1, FIGHTER, (0, 0))
    assert end_of_turn(exhausted(fighter, (0, 2), fuel_left=1), fighter, world) is None


def test_refuel_in_city():
    world = GridWorld.from_strings(["C.."])
    bomber = make_unit(1, BOMBER, (0, 2))
    out = end_of_turn(exhausted(bomber, (0, 0), fuel_left=1), bomber, world)
    assert out.cost == Cost(1, BOMBER.move_rate, BOMBER.hp, BOMBER.fuel)
    assert out.moved is False


def test_fuel_is_consumed_outside_cities():
    world = GridWorld.from_strings(["C.."])
    bomber = make_unit(1, BOMBER, (0, 0))
    out = end_of_turn(exhausted(bomber, (0, 2), fuel_left=2), bomber, world)
    assert out.cost.fuel_left == 1
    assert out.cost.turns == 1


def test_attrition_can_kill():
    """Helicopters lose hit points away from cities."""
    world = GridWorld.from_strings(["C.."])
    heli = make_unit(1, HELICOPTER, (0, 0))
    assert end_of_turn(exhausted(heli, (0, 2), health=2), heli, world) is None
    survivor = end_of_turn(exhausted(heli, (0, 2), health=5), heli, world)
    assert survivor.cost.health == 3


def test_units_heal_fully_in_cities():
    world = GridWorld.from_strings(["C.."])
    heli = make_unit(1, HELICOPTER, (0, 0))
    out = end_of_turn(exhausted(heli, (0, 0), health=2), heli, world)
    assert out.cost.health == HELICOPTER.hp


def test_move_rate_follows_damage():
    """Damaged land units start the next turn with fewer moves."""
    world = GridWorld.from_strings(["..."])
    explorer = make_unit(1, EXPLORER, (0, 0))
    out = end_of_turn(exhausted(explorer, (0, 1), health=5), explorer, world)
    assert out.cost.moves_left == 1
    assert out.cost.health == 6


def test_parent_and_order_are_kept():
    world = GridWorld.from_strings(["..."])
    explorer = make_unit(1, EXPLORER, (0, 0))
    root = Vertex((0, 0), None, False, Cost(0, 3, 10, 0))
    child = exhausted(explorer, (0, 1))
    child = replace(child, parent=root)
    out = end_of_turn(child, explorer, world)
    assert out.parent is root
    assert out.location == (0, 1)


class RecordingWorld(GridWorld):
    """GridWorld that remembers the order of the turn-change queries."""

    def __post_init__(self):
        super().__post_init__()
        self.calls = []

    def fuel_capacity(self, probe):
        self.calls.append("fuel")
        return super().fuel_capacity(probe)

    def restore_hitpoints(self, probe):
        self.calls.append("health")
        return super().restore_hitpoints(probe)


def test_turn_order_is_configurable():
    base = GridWorld.from_strings(["C.."])
    world = RecordingWorld(base.move_costs, base.known, base.ocean, base.cities)
    bomber = make_unit(1, BOMBER, (0, 0))
    candidate = exhausted(bomber, (0, 2))

    end_of_turn(candidate, bomber, world, TurnOrder.FUEL_FIRST)
    assert world.calls == ["fuel", "health"]

    world.calls.clear()
    end_of_turn(candidate, bomber, world, TurnOrder.HEALTH_FIRST)
    assert world.calls == ["health", "fuel"]


def test_both_orders_agree_on_simple_rules():
    world = GridWorld.from_strings(["C.."])
    bomber = make_unit(1, BOMBER, (0, 0))
    candidate = exhausted(bomber, (0, 2), health=4)
    a = end_of_turn(candidate, bomber, world, TurnOrder.FUEL_FIRST)
    b = end_of_turn(candidate, bomber, world, TurnOrder.HEALTH_FIRST)
    assert a == b
