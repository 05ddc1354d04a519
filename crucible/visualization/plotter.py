# 绘图逻辑 (Matplotlib)

import matplotlib.pyplot as plt
from typing import Optional

from crucible.map.base import MapBase
from crucible.types import SearchResult


def plot_result(grid_map: MapBase,
                result: SearchResult,
                debugger=None,
                title: Optional[str] = None,
                save_path: Optional[str] = None,
                ax=None):
    """
    把代价网格画成热力图，再叠加搜索结果的路径。
    :param debugger: 可选的 ExperimentObserver / DebugObserver，用于画出已扩展的格子
    :param save_path: 如果给出，保存为图片文件
    :return: matplotlib Figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    # A. 代价热力图 (data 是 (height, width)，origin='upper' 与文本行序一致)
    im = ax.imshow(grid_map.data, cmap='YlOrRd', origin='upper', interpolation='nearest')
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label='Cell cost')

    # B. 已扩展的状态 (同一格子可能有多个状态，只画位置)
    expanded = getattr(debugger, 'expanded_nodes', None)
    if expanded:
        ex_x = [getattr(n, 'x', None) for n in expanded]
        ex_y = [getattr(n, 'y', None) for n in expanded]
        if None not in ex_x:
            ax.scatter(ex_x, ex_y, c='grey', s=4, alpha=0.3, label='Expanded')

    # C. 路径
    positions = result.positions
    path_x = [p[0] for p in positions]
    path_y = [p[1] for p in positions]
    ax.plot(path_x, path_y, 'b-', linewidth=2.0, label=f'Path (cost={result.total_cost})')

    # D. 起点和终点
    ax.plot(path_x[0], path_y[0], 'go', markersize=8, label='Start')
    ax.plot(path_x[-1], path_y[-1], 'bx', markersize=8, label='Goal')

    ax.set_title(title or f"Policy: {result.policy_name}")
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")
    ax.legend(loc='upper right', fontsize='small')
    ax.set_aspect('equal')

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=120)
    return fig
