# crucible/planning/planners/__init__.py

from .base import PlannerBase
from .constrained_dijkstra import ConstrainedDijkstraPlanner, find_min_cost_path
from .grid_dijkstra import GridDijkstraPlanner, min_cost_lower_bound



__all__ = [
    "PlannerBase",
    "ConstrainedDijkstraPlanner",
    "GridDijkstraPlanner",
    "find_min_cost_path",
    "min_cost_lower_bound",
]
