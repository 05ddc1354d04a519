# crucible/visualization/renderer.py
from typing import Dict

from crucible.types import Position, SearchResult
from crucible.map.base import MapBase

START_GLYPH = "X"


def render_path(grid_map: MapBase, result: SearchResult) -> str:
    """
    文本渲染：起点画 X，路径经过的格子画进入方向的箭头 (^ v < >)，
    其余格子画原始代价数字。每行一行，不带结尾换行。
    """
    glyphs: Dict[Position, str] = {}
    for step in result.steps:
        # 同一格子被经过多次时保留第一次的方向
        glyphs.setdefault(step.position, step.direction.glyph)
    glyphs[result.start] = START_GLYPH

    lines = []
    for y in range(grid_map.height):
        row = []
        for x in range(grid_map.width):
            pos = (x, y)
            row.append(glyphs[pos] if pos in glyphs else str(grid_map.cost(pos)))
        lines.append("".join(row))
    return "\n".join(lines)
