import heapq
import itertools
from typing import Dict, List, Optional, Tuple

from crucible.types import Direction, PathStep, Position, SearchResult, SearchState
from crucible.map.base import MapBase
from crucible.planning.planners.base import PlannerBase
from crucible.planning.policies import RunLengthPolicy, get_policy
from crucible.planning.heuristics import Heuristic, ZeroHeuristic
from crucible.planning.interfaces import IPlannerObserver
from crucible.visualization.observers import EfficientObserver
from crucible.errors import UnreachableError

# The synthetic start state has no real entering direction. Any fixed value works
# because the start state is exempt from the reversal and turn rules.
START_DIRECTION = Direction.EAST


class ConstrainedDijkstraPlanner(PlannerBase):
    """
    Dijkstra over the augmented state space (position, direction, run length).

    Workflow:
    1. Seed the frontier with a synthetic start state (run 0).
    2. Pop the cheapest entry; skip it if its distance is stale.
    3. Stop when the popped state sits on the goal and the policy allows stopping.
    4. Otherwise expand into the four cardinal neighbours, rejecting reversals
       and moves that break the run-length policy, and relax.

    With a non-zero heuristic this becomes A*; the heuristic must be consistent.
    """

    def __init__(self,
                 policy: RunLengthPolicy,
                 heuristic: Optional[Heuristic] = None):
        self.policy = get_policy(policy)
        self.h_fn = heuristic if heuristic is not None else ZeroHeuristic()

    def plan(self,
             grid_map: MapBase,
             start: Position,
             goal: Position,
             debugger: IPlannerObserver = None) -> SearchResult:

        if debugger is None:
            debugger = EfficientObserver()
        debugger.set_map_info(grid_map)

        self._check_endpoints(grid_map, start, goal)
        policy = self.policy
        h_fn = self.h_fn.bind(grid_map)

        debugger.log("Plan requested", payload={
            "start": start, "goal": goal, "policy": policy.name,
            "max_run": policy.max_run,
            "min_run_before_turn": policy.min_run_before_turn,
            "min_run_before_stop": policy.min_run_before_stop,
        })

        start_state = SearchState(start, START_DIRECTION, 0)

        # Best-known distance per state; entries are only ever lowered.
        g_scores: Dict[SearchState, int] = {start_state: 0}
        came_from: Dict[SearchState, SearchState] = {}

        # Frontier items: (f, g, seq, state). seq keeps the ordering total and
        # deterministic without having to compare SearchState objects.
        counter = itertools.count()
        open_set: List[Tuple[float, int, int, SearchState]] = []
        heapq.heappush(open_set, (h_fn.estimate(start, goal), 0, next(counter), start_state))

        expanded = 0
        frontier_peak = 1

        while open_set:
            _, g, _, current = heapq.heappop(open_set)

            # Stale entry: a cheaper route to this exact state was found after the push.
            if g != g_scores[current]:
                continue

            expanded += 1
            debugger.record_current_expansion(current)

            if current.position == goal and policy.allows_stop(current.run):
                steps = self._reconstruct_path(came_from, current)
                debugger.log("Goal reached", payload={
                    "cost": g, "steps": len(steps), "expanded": expanded,
                    "frontier_peak": frontier_peak, "states_seen": len(g_scores),
                })
                return SearchResult(
                    total_cost=g,
                    steps=steps,
                    start=start,
                    policy_name=policy.name,
                    expanded=expanded,
                    frontier_peak=frontier_peak,
                )

            for neighbor in self._expand(current, grid_map):
                new_g = g + grid_map.cost(neighbor.position)
                if neighbor not in g_scores or new_g < g_scores[neighbor]:
                    g_scores[neighbor] = new_g
                    came_from[neighbor] = current

                    h_val = h_fn.estimate(neighbor.position, goal)
                    f_val = new_g + h_val
                    heapq.heappush(open_set, (f_val, new_g, next(counter), neighbor))

                    debugger.record_edge(current, neighbor)
                    debugger.record_open_set_node(neighbor, f_val, h_val)

            frontier_peak = max(frontier_peak, len(open_set))

        debugger.log("Open set is empty, no path found.", level='WARN', payload={
            "expanded": expanded, "states_seen": len(g_scores),
        })
        raise UnreachableError(start, goal, policy.name)

    def _expand(self, state: SearchState, grid_map: MapBase) -> List[SearchState]:
        """Successor states of `state` that are inside the grid and legal under the policy."""
        successors = []
        from_start = state.run == 0

        for d in Direction:
            nxt = d.step(state.position)
            if not grid_map.is_inside(nxt):
                continue

            # No reversal, except out of the synthetic start state.
            if not from_start and d.is_opposite(state.direction):
                continue

            is_turn = d is not state.direction
            new_run = 1 if is_turn else state.run + 1

            if not self.policy.allows_move(state.run, is_turn, new_run, from_start):
                continue

            successors.append(SearchState(nxt, d, new_run))

        return successors

    def _reconstruct_path(self,
                          came_from: Dict[SearchState, SearchState],
                          current: SearchState) -> List[PathStep]:
        """Walk predecessors back to the start state; the start cell itself is not a step."""
        path = []
        while current in came_from:
            path.append(PathStep(current.position, current.direction))
            current = came_from[current]
        return path[::-1]


def find_min_cost_path(grid_map: MapBase,
                       start: Position,
                       end: Position,
                       policy,
                       heuristic: Optional[Heuristic] = None,
                       debugger: Optional[IPlannerObserver] = None) -> SearchResult:
    """
    Minimum total cost from `start` to `end` under `policy`.

    `policy` is a RunLengthPolicy, a PolicyKind or its string value
    ("bounded" / "combined"). The result unpacks as `(total_cost, steps)`.
    Raises UnreachableError when no path satisfies the policy.
    """
    planner = ConstrainedDijkstraPlanner(get_policy(policy), heuristic=heuristic)
    return planner.plan(grid_map, start, end, debugger=debugger)
