# crucible/map/cost_grid.py
import numpy as np
from typing import Iterable, Tuple

from .base import MapBase
from crucible.errors import MalformedInputError, OutOfBoundsError


class CostGrid(MapBase):
    """
    不可变的代价网格。
    内部是一个 (height, width) 的 int64 矩阵，构造后设置为只读。
    """

    def __init__(self, costs: np.ndarray):
        grid = np.array(costs, dtype=np.int64)  # 复制一份，外部修改不会影响网格
        if grid.ndim != 2 or grid.size == 0:
            raise MalformedInputError(f"Cost grid must be a non-empty 2-D array, got shape {grid.shape}")
        if np.any(grid < 0):
            raise MalformedInputError("Cost grid contains negative costs")
        grid.setflags(write=False)
        self._grid = grid
        self._height, self._width = grid.shape

    @classmethod
    def from_text(cls, text: str) -> "CostGrid":
        """
        每行一行格子，每个字符是 0-9 的一个数字。
        只忽略首尾的空行；行内的空格、制表符等都按非法字符处理。
        """
        lines = text.splitlines()
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()
        return cls.from_rows(lines)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "CostGrid":
        rows = list(rows)
        if not rows or not rows[0]:
            raise MalformedInputError("Cost grid text is empty")

        width = len(rows[0])
        for row_idx, row in enumerate(rows):
            if len(row) != width:
                raise MalformedInputError(
                    f"Row {row_idx} has length {len(row)}, expected {width}")
            for col_idx, ch in enumerate(row):
                # str.isdigit 对全角数字等也返回 True，这里只接受 ASCII
                if ch not in "0123456789":
                    raise MalformedInputError(
                        f"Non-digit character {ch!r} at row {row_idx}, column {col_idx}")

        data = np.array([[int(ch) for ch in row] for row in rows], dtype=np.int64)
        return cls(data)

    @classmethod
    def from_file(cls, path: str) -> "CostGrid":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_text(f.read())

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def min_cost(self) -> int:
        return int(self._grid.min())

    def cost(self, position: Tuple[int, int]) -> int:
        if not self.is_inside(position):
            raise OutOfBoundsError(position, self._width, self._height)
        x, y = position
        return int(self._grid[y, x])

    def to_text(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self._grid)

    def __repr__(self) -> str:
        return f"CostGrid(width={self._width}, height={self._height})"
