import argparse
import sys
import time
from typing import List, Optional, Tuple

from crucible.config import SolverConfig
from crucible.errors import MalformedInputError, UnreachableError
from crucible.map.cost_grid import CostGrid
from crucible.planning.heuristics import get_heuristic
from crucible.planning.planners import ConstrainedDijkstraPlanner
from crucible.planning.policies import PolicyKind, get_policy
from crucible.visualization.observers import make_observer
from crucible.visualization.renderer import render_path

EXIT_MALFORMED = 2
EXIT_UNREACHABLE = 3


def parse_position(text: str) -> Tuple[int, int]:
    """'col,row' -> (col, row)"""
    try:
        col, row = (int(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'col,row', got {text!r}") from None
    return col, row


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crucible",
        description="Minimum-cost grid path with run-length constraints")
    parser.add_argument("input", nargs="?", default="input.txt", help="Cost grid text file")
    parser.add_argument("--policy", action="append", choices=[k.value for k in PolicyKind],
                        help="Policy to run (repeatable, default: all)")
    parser.add_argument("--start", type=parse_position, default=None, help="Start cell 'col,row' (default: top-left)")
    parser.add_argument("--end", type=parse_position, default=None, help="End cell 'col,row' (default: bottom-right)")
    parser.add_argument("--heuristic", type=str, default="zero", choices=["zero", "manhattan"], help="Search heuristic")
    parser.add_argument("--observer", type=str, default="efficient", choices=["efficient", "experiment", "debug"],
                        help="Observer mode")
    parser.add_argument("--log-dir", type=str, default="logs/planning_debug", help="Debug log directory")
    parser.add_argument("--no-render", action="store_true", help="Do not print the path overlay")
    parser.add_argument("--plot", type=str, default=None,
                        help="Save a heat-map figure per policy (a '{policy}' placeholder is filled in)")
    return parser


def config_from_args(args: argparse.Namespace) -> SolverConfig:
    config = SolverConfig(
        input_path=args.input,
        start=args.start,
        end=args.end,
        heuristic=args.heuristic,
        observer_mode=args.observer,
        log_dir=args.log_dir,
        render=not args.no_render,
        plot_path=args.plot,
    )
    if args.policy:
        config.policies = list(args.policy)
    return config


def run(config: SolverConfig) -> int:
    grid = CostGrid.from_file(config.input_path)
    start = config.start if config.start is not None else (0, 0)
    end = config.end if config.end is not None else (grid.width - 1, grid.height - 1)
    heuristic = get_heuristic(config.heuristic)

    exit_code = 0
    for name in config.policies:
        policy = get_policy(name)
        print(f"=== Policy: {policy.name} (max_run={policy.max_run}, "
              f"min_turn={policy.min_run_before_turn}, min_stop={policy.min_run_before_stop}) ===")

        observer = make_observer(config.observer_mode, config.log_dir)
        try:
            if not _run_policy(config, grid, start, end, policy, heuristic, observer):
                exit_code = EXIT_UNREACHABLE
        finally:
            observer.close()

    return exit_code


def _run_policy(config, grid, start, end, policy, heuristic, observer) -> bool:
    """运行单个策略并打印结果；不可达时返回 False"""
    planner = ConstrainedDijkstraPlanner(policy, heuristic=heuristic)

    t0 = time.perf_counter()
    try:
        result = planner.plan(grid, start, end, debugger=observer)
    except UnreachableError as e:
        print(f"No path: {e}")
        return False
    duration_ms = (time.perf_counter() - t0) * 1000

    if config.render:
        print(render_path(grid, result))
    print(f"Minimized cost: {result.total_cost}")
    print(f"Expanded states: {result.expanded}, Time: {duration_ms:.2f} ms")

    if config.plot_path:
        # 延迟导入，未使用 --plot 时不需要加载 matplotlib
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from crucible.visualization.plotter import plot_result

        save_path = config.plot_path.replace("{policy}", policy.name)
        fig = plot_result(grid, result, debugger=observer, save_path=save_path)
        plt.close(fig)
        print(f"Figure saved: {save_path}")

    return True


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    try:
        return run(config)
    except MalformedInputError as e:
        print(f"Malformed input: {e}", file=sys.stderr)
        return EXIT_MALFORMED


if __name__ == "__main__":
    sys.exit(main())
