# The four ways a vertex is expanded: move, wait for full MP, load, unload.
# Each operator yields candidate vertices; admission is the caller's job.
# unit_pathfinder/algorithms/expansion.py
from __future__ import annotations
from dataclasses import replace
from typing import Callable, Iterator, Tuple

from ..core.rules import GameMap, Rules, visible_neighbors
from ..core.unit import Unit, fill_probe
from ..core.vertex import ActionId, Direction8, Order, OrderKind, Tile, Vertex

Operator = Callable[[Vertex, Unit, GameMap, Rules], Iterator[Vertex]]


def _move_cost(rules: Rules, probe: Unit, target: Tile) -> int:
    cost = rules.move_cost(probe, target)
    if cost is None or cost < 0:
        raise ValueError(
            f"move_cost returned {cost!r} for unit {probe.id} entering {target!r}. "
            "Check the rules' movement cost mapping."
        )
    return cost


def child_for_action(source: Vertex, action: ActionId, probe: Unit, rules: Rules,
                     target: Tile, **changes) -> Vertex:
    """
    Vertex reached from ``source`` by performing ``action`` on ``target``.
    Starts as a copy of the source, with the movement points the rules leave
    after the action.
    """
    order = Order(OrderKind.PERFORM_ACTION, Direction8.ORIGIN, target, action)
    cost = replace(source.cost, moves_left=rules.moves_left_after_action(action, probe))
    return source.child(order, cost=cost, **changes)


def attempt_move(source: Vertex, unit: Unit, game_map: GameMap, rules: Rules) -> Iterator[Vertex]:
    # Loaded units are moved by their transport
    if source.loaded is not None:
        return
    probe = fill_probe(unit, source)
    for target, direction in visible_neighbors(game_map, source.location):
        if not rules.can_move_to_tile(probe, target):
            continue
        move_cost = min(_move_cost(rules, probe, target), probe.moves_left)
        cost = replace(source.cost, moves_left=source.cost.moves_left - move_cost)
        yield source.child(Order(OrderKind.MOVE, direction, target),
                           location=target, moved=True, cost=cost)


def attempt_full_mp(source: Vertex, unit: Unit, game_map: GameMap, rules: Rules) -> Iterator[Vertex]:
    """
    Wait in place until the turn ends. A last resort that lets the unit
    regain hit points or fuel before going on.
    """
    cost = replace(source.cost, moves_left=0)
    yield source.child(Order(OrderKind.FULL_MP), cost=cost)


def attempt_load(source: Vertex, unit: Unit, game_map: GameMap, rules: Rules) -> Iterator[Vertex]:
    probe = fill_probe(unit, source)

    # Same tile, even if already loaded (another transport may heal us)
    transport = rules.transporter_for_unit(probe)
    if (transport is not None
            and rules.is_action_enabled_unit_on_unit(ActionId.TRANSPORT_BOARD, probe, transport)):
        yield child_for_action(source, ActionId.TRANSPORT_BOARD, probe, rules, probe.tile,
                               loaded=transport.id)

    for target, _ in visible_neighbors(game_map, source.location):
        transport = rules.transporter_for_unit(replace(probe, tile=target))
        # Legality is checked from where the unit stands
        if transport is None or not rules.is_action_enabled_unit_on_unit(
                ActionId.TRANSPORT_EMBARK, probe, transport):
            continue
        child = child_for_action(source, ActionId.TRANSPORT_EMBARK, probe, rules, target,
                                 location=target, moved=True, loaded=transport.id)
        yield child.with_cost(moves_left=child.cost.moves_left - _move_cost(rules, probe, target))


def attempt_unload(source: Vertex, unit: Unit, game_map: GameMap, rules: Rules) -> Iterator[Vertex]:
    if source.loaded is None:
        return
    probe = fill_probe(unit, source)

    carrier = rules.unit_by_id(source.loaded)
    if (carrier is not None
            and rules.is_action_enabled_unit_on_unit(ActionId.TRANSPORT_ALIGHT, probe, carrier)):
        yield child_for_action(source, ActionId.TRANSPORT_ALIGHT, probe, rules, probe.tile,
                               loaded=None)

    for target, _ in visible_neighbors(game_map, source.location):
        for action in (ActionId.TRANSPORT_DISEMBARK1, ActionId.TRANSPORT_DISEMBARK2):
            if not rules.is_action_enabled_unit_on_tile(action, probe, target):
                continue
            child = child_for_action(source, action, probe, rules, target,
                                     location=target, moved=True, loaded=None)
            yield child.with_cost(moves_left=child.cost.moves_left - _move_cost(rules, probe, target))


OPERATORS: Tuple[Operator, ...] = (attempt_move, attempt_full_mp, attempt_load, attempt_unload)
