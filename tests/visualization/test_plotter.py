# tests/visualization/test_plotter.py
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from crucible.map.cost_grid import CostGrid
from crucible.planning.planners import ConstrainedDijkstraPlanner
from crucible.planning.policies import BOUNDED
from crucible.visualization.observers import ExperimentObserver
from crucible.visualization.plotter import plot_result


def test_plot_result_saves_figure(tmp_path):
    grid = CostGrid.from_text("2413\n3215\n3255\n3446")
    observer = ExperimentObserver()
    result = ConstrainedDijkstraPlanner(BOUNDED).plan(grid, (0, 0), (3, 3), debugger=observer)

    save_path = tmp_path / "path.png"
    fig = plot_result(grid, result, debugger=observer, save_path=str(save_path))

    assert save_path.exists()
    ax = fig.axes[0]
    assert ax.get_title() == "Policy: bounded"
    # 路径线经过起点 + 每一步
    line = ax.lines[0]
    assert len(line.get_xdata()) == len(result.steps) + 1
    plt.close(fig)


def test_plot_result_on_existing_axes():
    grid = CostGrid.from_text("11\n11")
    result = ConstrainedDijkstraPlanner(BOUNDED).plan(grid, (0, 0), (1, 1))

    fig, ax = plt.subplots()
    returned = plot_result(grid, result, title="tiny", ax=ax)
    assert returned is fig
    assert ax.get_title() == "tiny"
    plt.close(fig)
