"""
Tests for Cost: Pareto comparability and the tie-break total order.
"""

import pytest

from unit_pathfinder import Cost


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Cost(0, 3, 10, 0), Cost(0, 2, 10, 0), True),   # more moves, rest equal
        (Cost(0, 3, 10, 0), Cost(1, 3, 10, 0), True),   # fewer turns
        (Cost(0, 3, 10, 5), Cost(0, 3, 10, 5), True),   # equal
        (Cost(0, 3, 5, 0), Cost(0, 2, 10, 0), False),   # more moves but less health
        (Cost(1, 3, 10, 0), Cost(0, 1, 10, 0), False),  # more moves but later
        (Cost(0, 3, 10, 1), Cost(0, 3, 10, 2), True),
        (Cost(0, 3, 10, 1), Cost(0, 4, 9, 2), False),
    ],
)
def test_comparable(a, b, expected):
    """Comparability needs every criterion to point the same way."""
    assert a.comparable(b) is expected
    assert b.comparable(a) is expected


def test_total_order_prefers_fewer_turns_first():
    """Turns outweigh every other criterion."""
    assert Cost(0, 0, 1, 0) < Cost(1, 9, 10, 9)


def test_total_order_tie_breaks():
    """Then more moves, then more health, then more fuel."""
    costs = [
        Cost(0, 1, 10, 0),
        Cost(0, 2, 5, 0),
        Cost(0, 2, 5, 3),
        Cost(0, 2, 8, 0),
        Cost(1, 3, 10, 3),
    ]
    assert sorted(reversed(costs)) == [
        Cost(0, 2, 8, 0),
        Cost(0, 2, 5, 3),
        Cost(0, 2, 5, 0),
        Cost(0, 1, 10, 0),
        Cost(1, 3, 10, 3),
    ]


def test_equality_and_hash():
    """Costs are values."""
    assert Cost(1, 2, 3, 4) == Cost(1, 2, 3, 4)
    assert Cost(1, 2, 3, 4) != Cost(1, 2, 3, 5)
    assert len({Cost(1, 2, 3, 4), Cost(1, 2, 3, 4)}) == 1
    assert Cost(1, 2, 3, 4) <= Cost(1, 2, 3, 4)
    assert not Cost(1, 2, 3, 4) < Cost(1, 2, 3, 4)


def test_dominates():
    """Dominance is strict and requires comparability."""
    assert Cost(0, 3, 10, 0).dominates(Cost(0, 2, 10, 0))
    assert not Cost(0, 2, 10, 0).dominates(Cost(0, 3, 10, 0))
    assert not Cost(0, 3, 10, 0).dominates(Cost(0, 3, 10, 0))
    # Incomparable: neither dominates even though the total order ranks them
    assert not Cost(0, 3, 5, 0).dominates(Cost(0, 2, 10, 0))


def test_is_valid():
    assert Cost(0, 0, 1, 0).is_valid()
    assert not Cost(0, -1, 1, 0).is_valid()
    assert not Cost(0, 1, 1, -1).is_valid()
