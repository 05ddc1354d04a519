# tests/map/test_grid_generator.py
import numpy as np
import pytest

from crucible.map.generator import CostGridGenerator


def test_generated_grid_shape_and_range():
    grid = CostGridGenerator(min_cost=1, max_cost=9, seed=7).generate(15, 10)
    assert grid.width == 15
    assert grid.height == 10
    assert grid.data.min() >= 1
    assert grid.data.max() <= 9


def test_same_seed_gives_same_grid():
    a = CostGridGenerator(seed=42).generate(12, 12)
    b = CostGridGenerator(seed=42).generate(12, 12)
    assert np.array_equal(a.data, b.data)


def test_different_seeds_give_different_grids():
    a = CostGridGenerator(seed=1, smoothing_sigma=0).generate(12, 12)
    b = CostGridGenerator(seed=2, smoothing_sigma=0).generate(12, 12)
    assert not np.array_equal(a.data, b.data)


def test_constant_cost_range():
    grid = CostGridGenerator(min_cost=5, max_cost=5, seed=3).generate(4, 4)
    assert np.all(grid.data == 5)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        CostGridGenerator(min_cost=5, max_cost=1)
    with pytest.raises(ValueError):
        CostGridGenerator(seed=0).generate(0, 3)
