from abc import ABC, abstractmethod
from typing import Tuple

from crucible.map.base import MapBase


class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Tuple[int, int], goal: Tuple[int, int]) -> float:
        """统一接口：只接受当前格子和目标格子"""
        pass

    def bind(self, grid: MapBase) -> "Heuristic":
        """
        依赖地图信息的启发式在这里返回一个绑定了地图参数的新实例。
        默认不需要地图，直接返回自身。
        """
        return self
