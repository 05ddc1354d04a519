# tests/planning/test_grid_dijkstra.py
import pytest

from crucible.map.cost_grid import CostGrid
from crucible.planning.planners import GridDijkstraPlanner, min_cost_lower_bound
from crucible.errors import OutOfBoundsError


def test_unconstrained_path_on_small_grid():
    grid = CostGrid.from_text("199\n191\n211")
    result = GridDijkstraPlanner().plan(grid, (0, 0), (2, 2))
    assert result.total_cost == 5
    assert result.positions == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
    assert result.policy_name == "unconstrained"


def test_unconstrained_allows_long_straight_runs():
    # 5 格的单行走廊：约束策略下 bounded 不可达，但无约束时可以一直直行
    grid = CostGrid.from_text("11111")
    assert min_cost_lower_bound(grid, (0, 0), (4, 0)) == 4


def test_start_equals_goal():
    grid = CostGrid.from_text("5")
    result = GridDijkstraPlanner().plan(grid, (0, 0), (0, 0))
    assert result.total_cost == 0
    assert result.steps == []


def test_endpoint_out_of_bounds():
    grid = CostGrid.from_text("12\n34")
    with pytest.raises(OutOfBoundsError):
        GridDijkstraPlanner().plan(grid, (0, 0), (2, 2))
