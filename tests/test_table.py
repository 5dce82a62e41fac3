"""
Tests for the best-known table: admission by dominance and Pareto-front invariant.
"""

import random

import pytest

from unit_pathfinder import Cost, Vertex
from unit_pathfinder.core.table import BestKnownTable
from unit_pathfinder.problems.checks import sanity_check_table


def vx(cost, location=(0, 0), loaded=None, moved=False):
    return Vertex(location, loaded, moved, cost)


def test_first_vertex_is_admitted():
    table = BestKnownTable()
    assert table.offer(vx(Cost(0, 3, 10, 0)))
    assert len(table) == 1
    assert (0, 0) in table


def test_better_vertex_replaces_worse():
    """A strictly better comparable candidate evicts the old entry."""
    table = BestKnownTable()
    table.offer(vx(Cost(0, 1, 10, 0)))
    assert table.offer(vx(Cost(0, 2, 10, 0)))
    assert table.at((0, 0)) == [vx(Cost(0, 2, 10, 0))]


def test_worse_or_equal_vertex_is_rejected():
    table = BestKnownTable()
    table.offer(vx(Cost(0, 2, 10, 0)))
    assert not table.offer(vx(Cost(0, 1, 10, 0)))
    assert not table.offer(vx(Cost(0, 2, 10, 0)))
    assert len(table) == 1


def test_incomparable_vertices_coexist():
    """More moves vs. more health: both are kept."""
    table = BestKnownTable()
    assert table.offer(vx(Cost(0, 3, 5, 0)))
    assert table.offer(vx(Cost(0, 2, 10, 0)))
    assert len(table) == 2
    assert table.best_at((0, 0)).cost == Cost(0, 3, 5, 0)


def test_different_buckets_never_compete():
    """Loaded and moved flags split the Pareto fronts."""
    table = BestKnownTable()
    assert table.offer(vx(Cost(0, 3, 10, 0)))
    assert table.offer(vx(Cost(0, 1, 10, 0), loaded=7))
    assert table.offer(vx(Cost(0, 1, 10, 0), moved=True))
    assert len(table.at((0, 0))) == 3


def test_better_candidate_evicts_several_entries():
    table = BestKnownTable()
    table.offer(vx(Cost(0, 3, 5, 0)))
    table.offer(vx(Cost(0, 2, 10, 0)))
    assert table.offer(vx(Cost(0, 3, 10, 0)))
    assert table.at((0, 0)) == [vx(Cost(0, 3, 10, 0))]


def test_find_returns_stored_instance():
    """Equality lookup ignores parent and order, and returns the owned vertex."""
    table = BestKnownTable()
    stored = vx(Cost(0, 3, 10, 0))
    table.offer(stored)
    probe = vx(Cost(0, 3, 10, 0))
    assert table.find(probe) is stored
    assert table.find(vx(Cost(0, 2, 10, 0))) is None
    assert table.find(vx(Cost(0, 3, 10, 0), location=(5, 5))) is None


def test_clear():
    table = BestKnownTable()
    table.offer(vx(Cost(0, 3, 10, 0)))
    table.clear()
    assert len(table) == 0
    assert (0, 0) not in table
    assert table.best_at((0, 0)) is None


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_front_invariant_holds_after_every_admission(seed):
    """No stored vertex ever weakly dominates another in its bucket."""
    rng = random.Random(seed)
    table = BestKnownTable()
    for _ in range(300):
        cost = Cost(rng.randint(0, 3), rng.randint(0, 3), rng.randint(1, 4), rng.randint(0, 2))
        table.offer(vx(cost, location=(rng.randint(0, 1), 0), moved=rng.random() < 0.5))
        sanity_check_table(table)


def test_sanity_check_detects_dominated_entries():
    table = BestKnownTable()
    table.add(vx(Cost(0, 3, 10, 0)))
    table.add(vx(Cost(0, 2, 10, 0)))
    with pytest.raises(AssertionError):
        sanity_check_table(table)
