"""
Shared fixtures: tiny worlds built from pictures.
"""

import pytest

from unit_pathfinder import PathFinder, PathFinderConfig
from unit_pathfinder.problems.grid import GridWorld, make_unit


@pytest.fixture
def world_from():
    """Build a GridWorld from rows of terrain symbols."""
    return GridWorld.from_strings


@pytest.fixture
def finder_for():
    """PathFinder for a fresh unit of ``utype`` at ``tile`` in ``world``."""
    def build(world, utype, tile, config=None, unit_id=1, **stats):
        unit = make_unit(unit_id, utype, tile, **stats)
        return PathFinder(unit, world, world, config or PathFinderConfig())
    return build
