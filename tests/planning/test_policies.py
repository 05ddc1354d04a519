# tests/planning/test_policies.py
import pytest

from crucible.planning.policies import (
    BOUNDED, COMBINED_BOUND, PolicyKind, RunLengthPolicy, get_policy
)


def test_bounded_policy_limits():
    assert BOUNDED.allows_move(run=2, is_turn=False, new_run=3)
    assert not BOUNDED.allows_move(run=3, is_turn=False, new_run=4)
    # 没有最小值：走一步就可以转弯
    assert BOUNDED.allows_move(run=1, is_turn=True, new_run=1)
    assert BOUNDED.allows_stop(0)
    assert BOUNDED.allows_stop(1)


def test_combined_policy_limits():
    assert COMBINED_BOUND.allows_move(run=9, is_turn=False, new_run=10)
    assert not COMBINED_BOUND.allows_move(run=10, is_turn=False, new_run=11)
    assert not COMBINED_BOUND.allows_move(run=3, is_turn=True, new_run=1)
    assert COMBINED_BOUND.allows_move(run=4, is_turn=True, new_run=1)
    assert not COMBINED_BOUND.allows_stop(3)
    assert COMBINED_BOUND.allows_stop(4)


def test_start_state_is_exempt_from_turn_minimum():
    assert COMBINED_BOUND.allows_move(run=0, is_turn=True, new_run=1, from_start=True)
    assert not COMBINED_BOUND.allows_move(run=0, is_turn=True, new_run=1, from_start=False)


def test_get_policy_lookup():
    assert get_policy("bounded") is BOUNDED
    assert get_policy("combined") is COMBINED_BOUND
    assert get_policy(PolicyKind.COMBINED_BOUND) is COMBINED_BOUND
    custom = RunLengthPolicy(name="custom", max_run=5)
    assert get_policy(custom) is custom


def test_get_policy_unknown_name():
    with pytest.raises(ValueError, match="Unknown policy"):
        get_policy("diagonal")


@pytest.mark.parametrize("kwargs", [
    dict(max_run=0),
    dict(max_run=3, min_run_before_turn=4),
    dict(max_run=3, min_run_before_stop=5),
    dict(max_run=3, min_run_before_turn=-1),
])
def test_invalid_policy_bounds(kwargs):
    with pytest.raises(ValueError):
        RunLengthPolicy(name="bad", **kwargs)


def test_policies_are_hashable_value_objects():
    a = RunLengthPolicy(name="p", max_run=4, min_run_before_turn=2)
    b = RunLengthPolicy(name="p", max_run=4, min_run_before_turn=2)
    assert a == b
    assert hash(a) == hash(b)
