# crucible/planning/heuristics/manhattan.py
from typing import Optional

from .base import Heuristic

class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1) 乘以单步最小代价.
    Cost = unit_cost * (|dx| + |dy|)
    4-连通网格上每一步恰好改变 L1 距离 1，且进入任何格子的代价 >= unit_cost，
    所以它是一致的 (consistent)，A* 的结果仍然最优。
    unit_cost 为 None 时，在 bind() 时取地图的最小格子代价。
    """
    def __init__(self, unit_cost: Optional[int] = None):
        self.unit_cost = unit_cost

    def bind(self, grid) -> "ManhattanHeuristic":
        if self.unit_cost is not None:
            return self
        return ManhattanHeuristic(unit_cost=grid.min_cost)

    def estimate(self, current, goal) -> float:
        unit = 1 if self.unit_cost is None else self.unit_cost
        return unit * (abs(current[0] - goal[0]) + abs(current[1] - goal[1]))
