# crucible/map/generator.py
import numpy as np
from scipy.ndimage import gaussian_filter

from crucible.map.cost_grid import CostGrid


class CostGridGenerator:
    """
    随机代价网格生成器
    先生成均匀噪声，再用高斯滤波做平滑，得到类似“地形”的连续代价分布，
    最后量化到 [min_cost, max_cost] 的整数区间。
    """

    def __init__(
        self,
        min_cost: int = 1,
        max_cost: int = 9,
        smoothing_sigma: float = 1.5,
        seed: int = None
    ):
        if min_cost < 0 or max_cost < min_cost:
            raise ValueError(f"Invalid cost range [{min_cost}, {max_cost}]")
        self.min_cost = min_cost
        self.max_cost = max_cost
        self.smoothing_sigma = smoothing_sigma
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def generate(self, width: int, height: int) -> CostGrid:
        if width < 1 or height < 1:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")

        # 1. 均匀噪声底图
        noise = self._rng.random((height, width))

        # 2. 平滑 (sigma=0 时保持纯噪声)
        if self.smoothing_sigma > 0:
            noise = gaussian_filter(noise, sigma=self.smoothing_sigma, mode="reflect")

        # 3. 归一化到 [0, 1]
        lo, hi = noise.min(), noise.max()
        if hi - lo < 1e-12:
            normalized = np.zeros_like(noise)
        else:
            normalized = (noise - lo) / (hi - lo)

        # 4. 量化到整数代价
        span = self.max_cost - self.min_cost
        costs = np.rint(self.min_cost + normalized * span).astype(np.int64)
        return CostGrid(costs)
