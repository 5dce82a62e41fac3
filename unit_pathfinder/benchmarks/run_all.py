# unit_pathfinder/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, List, Tuple

import numpy as np

from ..algorithms.path_finder import PathFinder
from ..config import PathFinderConfig
from ..core.metrics import MeasuredRun, SearchResult
from ..problems.grid import (BOMBER, EXPLORER, HELICOPTER, TRIREME, GridWorld, make_unit)

# ---- Tunables (overridable via environment variables) -----------------------
GRID_SIZE = int(os.getenv("BENCH_GRID_SIZE", "40"))
HILL_RATE = float(os.getenv("BENCH_HILL_RATE", "0.25"))
FOG_RATE = float(os.getenv("BENCH_FOG_RATE", "0.05"))
SEED = int(os.getenv("BENCH_SEED", "7"))

logger = logging.getLogger(__name__)

Scenario = Callable[[GridWorld], Tuple[PathFinder, Tuple[int, int]]]


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def random_world(size: int, seed: int, hill_rate: float = HILL_RATE,
                 fog_rate: float = FOG_RATE) -> GridWorld:
    """
    Land on both sides of a one-tile ocean strait, joined by a land bridge
    along the top row. Hills and mountains are scattered at random; the top
    row and the corners stay visible. Cities line the top row.
    """
    rng = np.random.default_rng(seed)
    costs = np.ones((size, size), dtype=int)
    rough = rng.random((size, size))
    costs[rough < hill_rate] = 2
    costs[rough < hill_rate / 3] = 3
    known = rng.random((size, size)) >= fog_rate
    ocean = np.zeros((size, size), dtype=bool)
    ocean[1:, size // 2] = True
    known[0, :] = True
    for corner in [(0, 0), (size - 1, size - 1), (0, size - 1), (size - 1, 0)]:
        known[corner] = True
    cities = {(0, c) for c in range(0, size, 5)}
    cities |= {(size - 1, size - 1), (size // 2, size // 4), (size // 2, 3 * size // 4)}
    return GridWorld(move_costs=costs, known=known, ocean=ocean, cities=cities)


def _land_trek(world: GridWorld):
    size = world.shape[0]
    unit = make_unit(1, EXPLORER, (0, 0))
    return PathFinder(unit, world, world), (size - 1, size // 2 - 3)


def _ferry_crossing(world: GridWorld):
    size = world.shape[0]
    world.add_unit(make_unit(100, TRIREME, (size // 2, size // 2)))
    unit = make_unit(1, EXPLORER, (size // 2, size // 2 - 3))
    return PathFinder(unit, world, world), (size // 2, size // 2 + 2)


def _bomber_hops(world: GridWorld):
    size = world.shape[0]
    unit = make_unit(2, BOMBER, (0, 0))
    return PathFinder(unit, world, world), (0, size - 1)


def _helicopter_patrol(world: GridWorld):
    size = world.shape[0]
    unit = make_unit(3, HELICOPTER, (0, 0), hp=4)
    return PathFinder(unit, world, world), (0, 3 * size // 8)


SCENARIOS: List[Tuple[str, Scenario]] = [
    ("land trek", _land_trek),
    ("ferry crossing", _ferry_crossing),
    ("bomber hops", _bomber_hops),
    ("helicopter patrol", _helicopter_patrol),
]


def run_scenario(name: str, build: Scenario, size: int, seed: int,
                 config: PathFinderConfig) -> SearchResult:
    world = random_world(size, seed)
    finder, destination = build(world)
    finder.config = config
    with MeasuredRun() as meter:
        path = finder.find_path(destination)
    return SearchResult(
        scenario=name,
        success=bool(path),
        steps=len(path),
        turns=path.turns,
        nodes_expanded=finder.stats.expansions,
        time_s=meter.elapsed,
        peak_kb=meter.peak_kb,
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark the unit path finder on generated worlds.")
    parser.add_argument("--size", type=int, default=GRID_SIZE, help="Grid side length.")
    parser.add_argument("--seed", type=int, default=SEED, help="Seed of the world generator.")
    parser.add_argument("--out", type=Path, default=Path(__file__).with_name("results.json"),
                        help="Where to write the JSON results.")
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level (DEBUG, INFO, WARNING, ...).")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = PathFinderConfig.from_env()

    rows = []
    for name, build in SCENARIOS:
        print(f"→ Running {name} ...")
        try:
            r = run_scenario(name, build, args.size, args.seed, config)
        except ValueError as e:
            logger.exception("scenario %s failed", name)
            r = SearchResult(name, False, 0, 0, 0, 0.0, 0, error=repr(e))
        print(
            f"  {r.scenario}: "
            f"{'OK' if r.success else 'NO PATH'} "
            f"steps={r.steps} turns={r.turns} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        rows.append(vars(r))

    out = {"results": rows, "size": args.size, "seed": args.seed, "ts": time.time()}
    print(json.dumps(out, indent=2))
    try:
        args.out.write_text(json.dumps(out, indent=2))
    except OSError:
        logger.warning("could not write %s", args.out)
    return out


if __name__ == "__main__":
    main()
