import pytest
import os
import glob
from crucible.map.cost_grid import CostGrid
from crucible.visualization.observers import (
    EfficientObserver, ExperimentObserver, DebugObserver, make_observer
)
from crucible.planning.planners import ConstrainedDijkstraPlanner
from crucible.planning.policies import BOUNDED, COMBINED_BOUND
from crucible.errors import UnreachableError

@pytest.fixture
def planner_setup():
    grid_map = CostGrid.from_text("2413\n3215\n3255\n3446")
    planner = ConstrainedDijkstraPlanner(BOUNDED)
    start = (0, 0)
    goal = (3, 3)
    return planner, start, goal, grid_map

def test_efficient_mode(planner_setup, capsys):
    planner, start, goal, grid_map = planner_setup
    observer = EfficientObserver()

    result = planner.plan(grid_map, start, goal, debugger=observer)
    assert result.total_cost > 0

    # 规划过程中的 INFO 日志不应该输出到控制台
    assert capsys.readouterr().out == ""

    # 只有 ERROR 级别会打印
    observer.log("quiet", level='INFO')
    observer.log("loud", level='ERROR')
    assert capsys.readouterr().out == "[ERROR] loud\n"

def test_experiment_mode(planner_setup):
    planner, start, goal, grid_map = planner_setup
    observer = ExperimentObserver()

    result = planner.plan(grid_map, start, goal, debugger=observer)

    # 每个被确定的状态都会被记录一次
    assert len(observer.expanded_nodes) == result.expanded
    assert len(observer.open_set_history) > 0
    assert len(observer.edges) > 0
    assert observer.map_info is grid_map

    levels = [level for level, _, _ in observer.messages]
    assert levels == ['INFO', 'INFO']
    assert observer.messages[-1][2]['cost'] == result.total_cost

def test_experiment_mode_records_unreachable_warning():
    grid_map = CostGrid.from_text("11\n11")
    observer = ExperimentObserver()
    planner = ConstrainedDijkstraPlanner(COMBINED_BOUND)

    with pytest.raises(UnreachableError):
        planner.plan(grid_map, (0, 0), (1, 1), debugger=observer)

    assert observer.messages[-1][0] == 'WARN'

def test_debug_mode(planner_setup, tmp_path):
    planner, start, goal, grid_map = planner_setup
    log_dir = str(tmp_path / "test_planning_debug")

    observer = DebugObserver(log_dir=log_dir)
    result = planner.plan(grid_map, start, goal, debugger=observer)
    observer.close()

    # 可视化数据仍然可用
    assert len(observer.expanded_nodes) == result.expanded

    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1
    with open(log_files[0], "r", encoding="utf-8") as f:
        content = f.read()
    assert "Debug Session Started" in content
    assert "Plan requested" in content
    assert "Goal reached" in content
    assert "Expanding:" in content

def test_make_observer():
    assert isinstance(make_observer("efficient"), EfficientObserver)
    assert isinstance(make_observer("experiment"), ExperimentObserver)
    with pytest.raises(ValueError):
        make_observer("verbose")
