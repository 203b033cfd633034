"""Tests for the random basin generator."""

import pytest

from src.basin.generators import random_basin, random_basin_text
from src.basin.observables import particle_count
from src.basin.parser import is_valid_basin
from src.basin.types import Pos


class TestRandomBasin:
    def test_dimensions_and_openings(self):
        basin = random_basin(6, 4, 0.3, seed=1)
        assert basin.dimensions() == (8, 6)
        assert basin.start() == Pos(1, 0)
        assert basin.end() == Pos(6, 5)

    def test_density(self):
        assert particle_count(random_basin(6, 4, 0.0, seed=1)) == 0
        assert particle_count(random_basin(6, 4, 0.5, seed=1)) == 12
        assert particle_count(random_basin(6, 4, 1.0, seed=1)) == 24

    def test_deterministic(self):
        assert random_basin_text(5, 5, 0.4, seed=7) == random_basin_text(5, 5, 0.4, seed=7)

    def test_seed_changes_layout(self):
        texts = {random_basin_text(5, 5, 0.4, seed=s) for s in range(5)}
        assert len(texts) > 1

    def test_always_valid(self):
        for seed in range(10):
            assert is_valid_basin(random_basin_text(4, 3, 0.6, seed))

    def test_one_by_one(self):
        basin = random_basin(1, 1, 1.0, seed=0)
        assert basin.dimensions() == (3, 3)
        assert basin.start() == Pos(1, 0)
        assert basin.end() == Pos(1, 2)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            random_basin_text(0, 3, 0.5, seed=0)
        with pytest.raises(ValueError):
            random_basin_text(3, 3, 1.5, seed=0)
