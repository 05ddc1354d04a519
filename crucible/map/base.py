# crucible/map/base.py
from abc import ABC, abstractmethod
import numpy as np
from typing import Tuple


class MapBase(ABC):
    """
    地图抽象基类
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回地图数据矩阵 (height, width)，通常用于可视化或底层计算。
        约定：每个元素是进入该格子的代价 (非负整数)。
        """
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """网格宽度 (x方向数量)"""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """网格高度 (y方向数量)"""
        pass

    @abstractmethod
    def cost(self, position: Tuple[int, int]) -> int:
        """
        [关键接口] 查询格子代价
        越界时抛出 OutOfBoundsError
        """
        pass

    def is_inside(self, position: Tuple[int, int]) -> bool:
        """检查栅格索引是否在地图范围内"""
        x, y = position
        return (0 <= x < self.width) and (0 <= y < self.height)
