import sys
import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 crucible 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from crucible.map.generator import CostGridGenerator
from crucible.planning.planners import ConstrainedDijkstraPlanner, GridDijkstraPlanner
from crucible.planning.heuristics import get_heuristic
from crucible.errors import UnreachableError
from experiments.benchmark_config import BenchmarkConfig as cfg

def run_benchmark():
    results = []

    print(f"{'Size':<6} | {'Algo':<22} | {'Solved%':<8} | {'Time(ms)':<10} | {'Nodes':<10} | {'Cost':<8}")
    print("-" * 80)

    for size in cfg.GRID_SIZES:
        start, goal = (0, 0), (size - 1, size - 1)

        # 统计变量: algo -> {...}
        stats = {}

        for i in range(cfg.NUM_TRIALS):
            # A. 生成网格 (相同 Seed 确保所有算法跑在同一张图上)
            seed = cfg.RANDOM_SEED_BASE + i + size * 100
            generator = CostGridGenerator(cfg.MIN_COST, cfg.MAX_COST, cfg.SMOOTHING_SIGMA, seed=seed)
            grid = generator.generate(size, size)

            # B. 下界：无约束 Dijkstra
            runs = [("unconstrained", GridDijkstraPlanner())]
            # C. 各策略 x 各启发式
            for policy in cfg.POLICIES:
                for h_name in cfg.HEURISTICS:
                    planner = ConstrainedDijkstraPlanner(policy, heuristic=get_heuristic(h_name))
                    runs.append((f"{policy.name}/{h_name}", planner))

            for algo, planner in runs:
                entry = stats.setdefault(algo, {'solved': 0, 'time': [], 'nodes': [], 'cost': []})
                t0 = time.perf_counter()
                try:
                    result = planner.plan(grid, start, goal)
                except UnreachableError:
                    continue
                t1 = time.perf_counter()

                entry['solved'] += 1
                entry['time'].append((t1 - t0) * 1000)
                entry['nodes'].append(result.expanded)
                entry['cost'].append(result.total_cost)

        # --- 汇总当前 Size 的数据 ---
        for algo, entry in stats.items():
            solved = entry['solved'] / cfg.NUM_TRIALS * 100
            avg_time = np.mean(entry['time']) if entry['time'] else 0
            avg_nodes = np.mean(entry['nodes']) if entry['nodes'] else 0
            avg_cost = np.mean(entry['cost']) if entry['cost'] else 0

            print(f"{size:<6} | {algo:<22} | {solved:<8.1f} | {avg_time:<10.2f} | {avg_nodes:<10.1f} | {avg_cost:<8.1f}")

            results.append({
                'Size': size,
                'Algorithm': algo,
                'SolvedRate': solved,
                'TimeMean': avg_time,
                'NodesMean': avg_nodes,
                'CostMean': avg_cost
            })

    return pd.DataFrame(results)

def plot_comparisons(df):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))

    metrics = [
        ('TimeMean', 'Computation Time (ms)', 'Time Complexity'),
        ('NodesMean', 'Expanded States', 'Space Complexity'),
        ('CostMean', 'Path Cost', 'Optimality')
    ]

    for i, (metric, ylabel, title) in enumerate(metrics):
        ax = axes[i]
        for algo in df['Algorithm'].unique():
            data = df[df['Algorithm'] == algo]
            ax.plot(data['Size'], data[metric], 'o-', label=algo)

        ax.set_xlabel('Grid Side Length')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)

        # 仅在第一个图显示图例，避免遮挡
        if i == 0:
            ax.legend(fontsize='small')

    plt.tight_layout()
    return fig

if __name__ == "__main__":
    print("=== 开始约束路径搜索基准实验 ===")
    df_results = run_benchmark()

    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    csv_path = os.path.join(cfg.LOG_DIR, "benchmark_results.csv")
    df_results.to_csv(csv_path, index=False)
    print(f"\n结果已保存: {csv_path}")

    print("正在绘图...")
    plot_comparisons(df_results)
    plt.show()
