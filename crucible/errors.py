# crucible/errors.py
from typing import Optional, Tuple


class CrucibleError(Exception):
    """所有本项目异常的基类"""


class MalformedInputError(CrucibleError, ValueError):
    """
    代价网格文本非法：行长度不一致、出现非数字字符、或者为空。
    在解析阶段抛出，任何搜索开始之前。
    """


class OutOfBoundsError(CrucibleError, IndexError):
    """访问了网格范围之外的位置 (调用方的逻辑错误，不可恢复)"""

    def __init__(self, position: Tuple[int, int], width: int, height: int):
        self.position = position
        self.width = width
        self.height = height
        super().__init__(f"Position {position} is outside the {width}x{height} grid")


class UnreachableError(CrucibleError, RuntimeError):
    """开集耗尽仍未到达满足条件的终点状态"""

    def __init__(self, start: Tuple[int, int], end: Tuple[int, int], policy_name: Optional[str] = None):
        self.start = start
        self.end = end
        self.policy_name = policy_name
        label = f" under policy '{policy_name}'" if policy_name else ""
        super().__init__(f"No path from {start} to {end}{label}")
