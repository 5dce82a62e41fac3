# End-of-turn transition applied to a candidate vertex whose movement points ran out.
# unit_pathfinder/core/turn.py
from __future__ import annotations
import logging
from dataclasses import replace
from enum import Enum
from typing import Optional, Tuple

from .rules import Rules
from .unit import Unit, fill_probe
from .vertex import Vertex

logger = logging.getLogger(__name__)


class TurnOrder(Enum):
    """Which of fuel and hit points is settled first when a turn ends."""
    FUEL_FIRST = "fuel_first"
    HEALTH_FIRST = "health_first"


def _settle_fuel(probe: Unit, rules: Rules) -> Optional[Unit]:
    capacity = rules.fuel_capacity(probe)
    if not capacity:
        return probe
    if rules.is_being_refueled(probe):
        return replace(probe, fuel=capacity)
    if probe.fuel <= 1:
        # Out of fuel at the end of the turn: the unit is lost
        return None
    return replace(probe, fuel=probe.fuel - 1)


def _settle_health(probe: Unit, rules: Rules) -> Optional[Unit]:
    hp = rules.restore_hitpoints(probe)
    if hp <= 0:
        return None
    return replace(probe, hp=hp)


def end_of_turn(candidate: Vertex, unit: Unit, rules: Rules,
                order: TurnOrder = TurnOrder.FUEL_FIRST) -> Optional[Vertex]:
    """
    Move ``candidate`` to the start of the next turn.

    Returns the updated vertex, or None when the unit would not survive the
    turn change (fuel exhausted or hit points down to zero). The new movement
    allowance is computed from the stats the unit has when the turn ends.
    """
    probe = fill_probe(unit, candidate)
    moves = rules.move_rate(probe)

    steps: Tuple = (_settle_fuel, _settle_health)
    if order is TurnOrder.HEALTH_FIRST:
        steps = (_settle_health, _settle_fuel)

    for step in steps:
        probe = step(probe, rules)
        if probe is None:
            logger.debug("unit does not survive turn %d at %r (%s)",
                         candidate.cost.turns + 1, candidate.location, step.__name__)
            return None

    cost = replace(
        candidate.cost,
        turns=candidate.cost.turns + 1,
        moves_left=moves,
        health=probe.hp,
        fuel_left=probe.fuel,
    )
    return replace(candidate, cost=cost, moved=False)
