# tests/visualization/test_renderer.py
from crucible.map.cost_grid import CostGrid
from crucible.planning.planners import find_min_cost_path
from crucible.planning.policies import BOUNDED, COMBINED_BOUND
from crucible.visualization.renderer import render_path


def test_render_small_grid_path():
    grid = CostGrid.from_text("199\n191\n211")
    result = find_min_cost_path(grid, (0, 0), (2, 2), BOUNDED)
    assert render_path(grid, result) == "X99\nv91\nv>>"


def test_render_marks_start_even_without_steps():
    grid = CostGrid.from_text("5")
    result = find_min_cost_path(grid, (0, 0), (0, 0), BOUNDED)
    assert render_path(grid, result) == "X"


def test_render_keeps_raw_costs_off_path():
    grid = CostGrid.from_text("12345\n67891")
    result = find_min_cost_path(grid, (0, 0), (4, 0), COMBINED_BOUND)
    assert render_path(grid, result).splitlines() == ["X>>>>", "67891"]


def test_render_west_and_north_glyphs():
    grid = CostGrid.from_text("11\n11")
    result = find_min_cost_path(grid, (1, 1), (0, 0), BOUNDED)
    rendered = render_path(grid, result)
    lines = rendered.splitlines()
    assert lines[1][1] == "X"
    # 两条等价路径之一：先向上再向左，或先向左再向上
    assert rendered in ("<^\n1X", "^1\n<X")
