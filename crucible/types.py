# crucible/types.py
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

# (col, row)，row 0 对应文本的第一行
Position = Tuple[int, int]


class Direction(Enum):
    """
    四个基本方向。值为 (dx, dy, glyph)。
    注意：y 轴向下增长，所以 NORTH 是 dy = -1。
    """
    NORTH = (0, -1, "^")
    SOUTH = (0, 1, "v")
    EAST = (1, 0, ">")
    WEST = (-1, 0, "<")

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def glyph(self) -> str:
        return self.value[2]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return _OPPOSITES[self] is other

    def step(self, position: Position) -> Position:
        """沿该方向移动一格 (不做边界检查)"""
        return (position[0] + self.dx, position[1] + self.dy)


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class SearchState:
    """
    增广状态图的节点：(位置, 进入该位置的方向, 该方向上的连续步数)
    同一个格子可以由不同的方向历史到达，所以距离表/前驱表都以它为 key。
    """
    position: Position
    direction: Direction
    run: int

    @property
    def x(self): return self.position[0]

    @property
    def y(self): return self.position[1]


@dataclass(frozen=True)
class PathStep:
    """路径中的一步：进入的格子 + 进入时的方向"""
    position: Position
    direction: Direction


@dataclass
class SearchResult:
    """
    一次查询的结果。
    steps 不包含起点格子，所以 len(steps) == 访问格子数 - 1。
    """
    total_cost: int
    steps: List[PathStep]
    start: Position
    policy_name: str = ""
    expanded: int = 0
    frontier_peak: int = 0

    @property
    def positions(self) -> List[Position]:
        return [self.start] + [s.position for s in self.steps]

    @property
    def directions(self) -> List[Direction]:
        return [s.direction for s in self.steps]

    def __iter__(self) -> Iterator:
        # 允许 `cost, steps = result` 的解包写法
        yield self.total_cost
        yield self.steps
