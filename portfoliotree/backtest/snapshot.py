"""Snapshots of portfolio asset weights recorded during a back-test.

These calculations are for informational purposes only and are not financial
advice.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date


@dataclass
class WeightSnapshot:
    """The asset weights held at one time."""

    time: date
    weights: list[float] = field(default_factory=list)
    is_rebalance_day: bool = False
    is_policy_update_day: bool = False


class WeightSnapshotList(list):
    """Weight snapshots ordered with the most recent first."""

    def times(self) -> list[date]:
        return [snapshot.time for snapshot in self]

    def average_weight_for_index(self, index: int) -> float:
        """Return the mean weight of the asset at index across all snapshots."""
        total = 0.0
        for snapshot in self:
            if index < 0 or index >= len(snapshot.weights):
                raise IndexError("index out of range")
            total += snapshot.weights[index]
        if not self:
            return math.nan
        return total / len(self)