# crucible/planning/policies.py
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RunLengthPolicy:
    """
    连续同向移动步数 (run length) 的约束策略。
    所有策略共享同一个扩展规则，只在“拒绝谓词”上不同：
      - max_run:              同一方向最多连续走几步
      - min_run_before_turn:  至少直行几步之后才允许转弯
      - min_run_before_stop:  至少直行几步之后才允许停在终点
    合成的起点状态 (run == 0) 不受转弯限制。
    """
    name: str
    max_run: int
    min_run_before_turn: int = 0
    min_run_before_stop: int = 0

    def __post_init__(self):
        if self.max_run < 1:
            raise ValueError(f"max_run must be >= 1, got {self.max_run}")
        if self.min_run_before_turn < 0 or self.min_run_before_stop < 0:
            raise ValueError("Minimum run lengths must be non-negative")
        if self.min_run_before_turn > self.max_run:
            raise ValueError(
                f"min_run_before_turn ({self.min_run_before_turn}) exceeds max_run ({self.max_run})")
        if self.min_run_before_stop > self.max_run:
            raise ValueError(
                f"min_run_before_stop ({self.min_run_before_stop}) exceeds max_run ({self.max_run})")

    def allows_move(self, run: int, is_turn: bool, new_run: int, from_start: bool = False) -> bool:
        if new_run > self.max_run:
            return False
        if is_turn and not from_start and run < self.min_run_before_turn:
            return False
        return True

    def allows_stop(self, run: int) -> bool:
        return run >= self.min_run_before_stop


class PolicyKind(Enum):
    BOUNDED = "bounded"
    COMBINED_BOUND = "combined"


# 最多连续 3 步，无最小值
BOUNDED = RunLengthPolicy(name=PolicyKind.BOUNDED.value, max_run=3)

# 连续 4..10 步，且必须直行至少 4 步才能停在终点
COMBINED_BOUND = RunLengthPolicy(
    name=PolicyKind.COMBINED_BOUND.value,
    max_run=10,
    min_run_before_turn=4,
    min_run_before_stop=4,
)

_PRESETS = {
    PolicyKind.BOUNDED: BOUNDED,
    PolicyKind.COMBINED_BOUND: COMBINED_BOUND,
}


def get_policy(kind) -> RunLengthPolicy:
    """按 PolicyKind 或其字符串值查找预设策略"""
    if isinstance(kind, RunLengthPolicy):
        return kind
    try:
        return _PRESETS[PolicyKind(kind)]
    except ValueError:
        choices = ", ".join(k.value for k in PolicyKind)
        raise ValueError(f"Unknown policy: {kind!r} (choices: {choices})") from None
