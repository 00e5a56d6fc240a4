import math
from datetime import date

import pytest

from portfoliotree.backtest.snapshot import WeightSnapshot, WeightSnapshotList

SNAPSHOTS = WeightSnapshotList(
    [
        WeightSnapshot(date(2021, 1, 8), [0.2, 0.8], is_rebalance_day=True),
        WeightSnapshot(date(2021, 1, 7), [0.4, 0.6]),
        WeightSnapshot(date(2021, 1, 6), [0.5, 0.5], is_policy_update_day=True),
    ]
)


def test_times_in_order():
    assert SNAPSHOTS.times() == [date(2021, 1, 8), date(2021, 1, 7), date(2021, 1, 6)]


def test_average_of_identical_snapshots():
    weights = [0.25, 0.75]
    snapshots = WeightSnapshotList(
        WeightSnapshot(date(2021, 1, d), list(weights)) for d in (1, 2, 3)
    )
    assert snapshots.average_weight_for_index(1) == pytest.approx(weights[1])


def test_averages_sum_to_one():
    total = SNAPSHOTS.average_weight_for_index(0) + SNAPSHOTS.average_weight_for_index(1)
    assert total == pytest.approx(1.0)


@pytest.mark.parametrize("index", [2, -1])
def test_index_out_of_range(index):
    with pytest.raises(IndexError, match="index out of range"):
        SNAPSHOTS.average_weight_for_index(index)


def test_empty_average_is_nan():
    value = WeightSnapshotList().average_weight_for_index(0)
    assert value == pytest.approx(math.nan, nan_ok=True)


def test_empty_times():
    assert WeightSnapshotList().times() == []