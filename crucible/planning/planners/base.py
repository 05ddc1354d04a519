# crucible/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from crucible.types import SearchResult
from crucible.map.base import MapBase
from crucible.planning.interfaces import IPlannerObserver
from crucible.errors import OutOfBoundsError

class PlannerBase(ABC):
    """
    所有路径规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             grid_map: MapBase,
             start: Tuple[int, int],
             goal: Tuple[int, int],
             debugger: Optional[IPlannerObserver] = None) -> SearchResult:
        """
        执行路径规划
        :param grid_map: 代价网格 (只读)
        :param start: 起点格子 (col, row)
        :param goal: 终点格子 (col, row)
        :param debugger: 观察者钩子 (用于记录搜索过程)
        :return: SearchResult (总代价 + 有向步骤序列)
        :raises UnreachableError: 开集耗尽仍未到达终点
        """
        pass

    @staticmethod
    def _check_endpoints(grid_map: MapBase, start: Tuple[int, int], goal: Tuple[int, int]):
        """起点/终点越界属于调用方的契约错误，直接抛出"""
        for p in (start, goal):
            if not grid_map.is_inside(p):
                raise OutOfBoundsError(p, grid_map.width, grid_map.height)
