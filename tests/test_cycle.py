"""Tests for the blizzard cycle cache."""

import math
from pathlib import Path

import pytest

from src.basin.cycle import CycleCache, build
from src.basin.generators import random_basin
from src.basin.parser import from_text
from src.basin.simulator import run

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load(name: str):
    return from_text((FIXTURES_DIR / name).read_text())


def interior_lcm(snapshot) -> int:
    return math.lcm(snapshot.interior_width, snapshot.interior_height)


class TestPeriod:
    def test_square_interior(self):
        cache = CycleCache.build(load("small_basin.txt"))
        assert cache.period == 5
        assert len(cache) == 5

    def test_rectangular_interior_reaches_lcm(self):
        # > cycles every 3 ticks, v every 2 ticks
        basin = from_text("#.###\n#>..#\n#..v#\n###.#")
        cache = CycleCache.build(basin)
        assert cache.period == 6 == interior_lcm(basin)

    def test_example_period_divides_lcm(self):
        basin = load("example_basin.txt")
        cache = CycleCache.build(basin)
        assert (basin.interior_width, basin.interior_height) == (6, 4)
        assert interior_lcm(basin) % cache.period == 0

    def test_no_blizzards_has_period_one(self):
        cache = CycleCache.build(from_text("#.###\n#...#\n#...#\n###.#"))
        assert cache.period == 1

    def test_random_basins_period_divides_lcm(self):
        for seed in range(6):
            basin = random_basin(5, 3, 0.5, seed)
            cache = build(basin)
            assert interior_lcm(basin) % cache.period == 0, f"seed={seed}"

    def test_snapshots_are_distinct(self):
        cache = CycleCache.build(load("example_basin.txt"))
        assert len(set(cache.snapshots)) == cache.period


class TestLookup:
    def test_at_zero_is_initial(self):
        basin = load("small_basin.txt")
        assert CycleCache.build(basin).at(0) == basin

    def test_at_wraps_by_period(self):
        cache = CycleCache.build(load("example_basin.txt"))
        for k in range(2 * cache.period):
            assert cache.at(k) == cache.at(k + cache.period)

    def test_at_matches_simulation(self):
        basin = load("example_basin.txt")
        cache = CycleCache.build(basin)
        trajectory = run(basin, 30)
        for t, snapshot in enumerate(trajectory):
            assert cache.at(t) == snapshot, f"Mismatch at t={t}"

    def test_cycle_closes_on_initial(self):
        basin = load("small_basin.txt")
        cache = CycleCache.build(basin)
        assert run(cache.at(cache.period - 1), 1)[-1] == basin

    def test_negative_tick(self):
        cache = CycleCache.build(load("small_basin.txt"))
        with pytest.raises(ValueError):
            cache.at(-1)
