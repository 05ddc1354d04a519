# crucible/planning/heuristics/__init__.py

from .base import Heuristic
from .zero import ZeroHeuristic
from .manhattan import ManhattanHeuristic


def get_heuristic(name: str) -> Heuristic:
    if name == "zero":
        return ZeroHeuristic()
    if name == "manhattan":
        return ManhattanHeuristic()
    raise ValueError(f"Unknown heuristic: {name!r} (choices: zero, manhattan)")


__all__ = [
    "Heuristic",
    "ZeroHeuristic",
    "ManhattanHeuristic",
    "get_heuristic",
]
