# [关键] 全局配置定义

# crucible/config.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class SolverConfig:
    input_path: str = "input.txt"
    # None 表示使用默认角点：起点左上，终点右下
    start: Optional[Tuple[int, int]] = None
    end: Optional[Tuple[int, int]] = None
    policies: List[str] = field(default_factory=lambda: ["bounded", "combined"])
    heuristic: str = "zero"           # "zero" (Dijkstra) | "manhattan" (A*)
    observer_mode: str = "efficient"  # "efficient" | "experiment" | "debug"
    log_dir: str = "logs/planning_debug"
    render: bool = True
    plot_path: Optional[str] = None
