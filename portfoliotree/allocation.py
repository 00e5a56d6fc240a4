"""Policy weight algorithms used to allocate a portfolio among its assets.

Asset returns are given as a sequence of columns, one per asset, each holding
that asset's return values with the most recent first.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from typing import Optional, Protocol

from portfoliotree.calculate.risk import correlation_matrix, risk_from_std_dev
from portfoliotree.calculate.weights import (
    equal_inverse_volatility_weights,
    equal_risk_contribution_weights,
    equal_volatility_weights,
    equal_weights,
    inverse_variance_weights,
)

AssetReturns = Sequence[Sequence[float]]

CONSTANT_WEIGHTS_ALGORITHM_NAME = "Constant Weights"
EQUAL_WEIGHTS_ALGORITHM_NAME = "Equal Weights"


class NotEnoughDataError(Exception):
    """Raised when there are too few returns to calculate a policy."""

    def __init__(self, message: str = "not enough data") -> None:
        super().__init__(message)


class _Algorithm(Protocol):
    name: str

    def policy_weights(
        self, today: Optional[date], asset_returns: AssetReturns, weights: Sequence[float]
    ) -> list[float]: ...


def _columns(asset_returns: AssetReturns) -> list[list[float]]:
    return [[float(v) for v in column] for column in asset_returns]


def _ensure_enough_returns(columns: list[list[float]]) -> None:
    if not columns or min(len(column) for column in columns) < 2:
        raise NotEnoughDataError()


def _starting_weights(weights: Sequence[float]) -> list[float]:
    ws = [float(w) for w in weights]
    if all(w == 0 for w in ws) and ws:
        return equal_weights(len(ws))
    return ws


def _checked_risks(columns: list[list[float]], weights: Sequence[float]) -> list[float]:
    risks = [risk_from_std_dev(column) for column in columns]
    if len(risks) != len(weights):
        raise ValueError("length of weights and volatilities must be equal")
    return risks


class ConstantWeights:
    """Always returns the weights it was given."""

    name = CONSTANT_WEIGHTS_ALGORITHM_NAME

    def __init__(self, weights: Optional[Iterable[float]] = None) -> None:
        self.weights: list[float] = [] if weights is None else [float(w) for w in weights]

    def set_weights(self, weights: Iterable[float]) -> None:
        self.weights = [float(w) for w in weights]

    def policy_weights(
        self, today: Optional[date], asset_returns: AssetReturns, weights: Sequence[float]
    ) -> list[float]:
        if len(self.weights) != len(weights):
            raise ValueError(
                "expected the number of policy weights to be the same as the number of assets"
            )
        return list(self.weights)


class EqualWeights:
    """Gives every asset the same weight."""

    name = EQUAL_WEIGHTS_ALGORITHM_NAME

    def policy_weights(
        self, today: Optional[date], asset_returns: AssetReturns, weights: Sequence[float]
    ) -> list[float]:
        if not weights:
            return []
        return equal_weights(len(weights))


class EqualInverseVariance:
    """Weights assets in proportion to the inverse of their variance."""

    name = "Equal Inverse Variance"

    def policy_weights(
        self, today: Optional[date], asset_returns: AssetReturns, weights: Sequence[float]
    ) -> list[float]:
        ws = _starting_weights(weights)
        columns = _columns(asset_returns)
        _ensure_enough_returns(columns)
        return inverse_variance_weights(_checked_risks(columns, ws))


class EqualRiskContribution:
    """Searches for weights where every asset contributes the same risk."""

    name = "Equal Risk Contribution"

    def policy_weights(
        self, today: Optional[date], asset_returns: AssetReturns, weights: Sequence[float]
    ) -> list[float]:
        ws = _starting_weights(weights)
        columns = _columns(asset_returns)
        _ensure_enough_returns(columns)
        risks = _checked_risks(columns, ws)
        return equal_risk_contribution_weights(ws, risks, correlation_matrix(columns))


class EqualVolatility:
    """Weights assets in proportion to their volatility."""

    name = "Equal Volatility"

    def policy_weights(
        self, today: Optional[date], asset_returns: AssetReturns, weights: Sequence[float]
    ) -> list[float]:
        ws = _starting_weights(weights)
        columns = _columns(asset_returns)
        _ensure_enough_returns(columns)
        return equal_volatility_weights(_checked_risks(columns, ws))


class EqualInverseVolatility:
    """Weights assets in proportion to the inverse of their volatility."""

    name = "Equal Inverse Volatility"

    def policy_weights(
        self, today: Optional[date], asset_returns: AssetReturns, weights: Sequence[float]
    ) -> list[float]:
        ws = _starting_weights(weights)
        columns = _columns(asset_returns)
        _ensure_enough_returns(columns)
        return equal_inverse_volatility_weights(_checked_risks(columns, ws))


def new_default_algorithms_list() -> list[_Algorithm]:
    """Return a fresh instance of every built-in algorithm."""
    return [
        ConstantWeights(),
        EqualWeights(),
        EqualInverseVariance(),
        EqualRiskContribution(),
        EqualVolatility(),
        EqualInverseVolatility(),
    ]


def algorithm_names(algorithms: Iterable[_Algorithm]) -> list[str]:
    """Return the sorted, distinct names of the algorithms."""
    return sorted({algorithm.name for algorithm in algorithms})


def algorithm_requires_weights(algorithm: object) -> bool:
    """Return whether the algorithm needs weights to be set on it."""
    return callable(getattr(algorithm, "set_weights", None))