# crucible/planning/heuristics/zero.py
from .base import Heuristic

class ZeroHeuristic(Heuristic):
    """
    零启发式 (h=0).
    这将使 A* 退化为 Dijkstra 算法，保证最优性，按距离均匀向外扩散。
    """
    def estimate(self, current, goal) -> float:
        return 0.0
