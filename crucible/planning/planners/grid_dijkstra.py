# crucible/planning/planners/grid_dijkstra.py
import heapq
from typing import Dict, List, Optional, Tuple

from crucible.types import Direction, PathStep, Position, SearchResult
from crucible.map.base import MapBase
from crucible.planning.planners.base import PlannerBase
from crucible.planning.interfaces import IPlannerObserver
from crucible.visualization.observers import EfficientObserver
from crucible.errors import UnreachableError

class GridDijkstraPlanner(PlannerBase):
    """
    无方向约束的 4-连通格子 Dijkstra。
    状态就是格子本身，没有 run length 的限制，
    因此它的结果是任何 RunLengthPolicy 下最小代价的下界。
    """

    name = "unconstrained"

    def plan(self,
             grid_map: MapBase,
             start: Position,
             goal: Position,
             debugger: IPlannerObserver = None) -> SearchResult:

        # 1. 初始化观察者
        if debugger is None:
            debugger = EfficientObserver()
        debugger.set_map_info(grid_map)

        self._check_endpoints(grid_map, start, goal)

        # 2. 初始化核心容器
        # OpenSet: 存储 (g, (x_idx, y_idx))，heapq 按 g 排序，相同时比较坐标
        open_set = [(0, start)]
        came_from: Dict[Position, Tuple[Position, Direction]] = {}
        g_scores: Dict[Position, int] = {start: 0}
        expanded = 0

        # 3. 主循环
        while open_set:
            current_g, current_idx = heapq.heappop(open_set)

            # 过期条目直接跳过
            if current_g != g_scores[current_idx]:
                continue

            expanded += 1
            debugger.record_current_expansion(current_idx)

            # A. 终止条件
            if current_idx == goal:
                return SearchResult(
                    total_cost=current_g,
                    steps=self._reconstruct_path(came_from, current_idx),
                    start=start,
                    policy_name=self.name,
                    expanded=expanded,
                )

            # B. 扩展邻居
            for d in Direction:
                neighbor_idx = d.step(current_idx)
                if not grid_map.is_inside(neighbor_idx):
                    continue

                new_g = current_g + grid_map.cost(neighbor_idx)
                if neighbor_idx not in g_scores or new_g < g_scores[neighbor_idx]:
                    g_scores[neighbor_idx] = new_g
                    came_from[neighbor_idx] = (current_idx, d)
                    heapq.heappush(open_set, (new_g, neighbor_idx))
                    debugger.record_open_set_node(neighbor_idx, new_g, 0.0)

        debugger.log("Open set is empty, no path found.", level='WARN')
        raise UnreachableError(start, goal, self.name)

    def _reconstruct_path(self, came_from, current_idx) -> List[PathStep]:
        """从索引回溯并转换为 PathStep 列表"""
        path = []
        while current_idx in came_from:
            parent_idx, d = came_from[current_idx]
            path.append(PathStep(current_idx, d))
            current_idx = parent_idx
        return path[::-1]


def min_cost_lower_bound(grid_map: MapBase, start: Position, end: Position,
                         debugger: Optional[IPlannerObserver] = None) -> int:
    """不考虑方向约束时的最小代价"""
    return GridDijkstraPlanner().plan(grid_map, start, end, debugger=debugger).total_cost
