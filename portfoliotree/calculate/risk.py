"""Risk measures: volatility, correlation and portfolio risk contributions."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


def variance(volatility: float) -> float:
    """Return the variance for a volatility (standard deviation)."""
    return volatility * volatility


def number_of_bets(weighted_average_risk: float, portfolio_risk: float) -> float:
    """Return the squared ratio of weighted average risk to portfolio risk."""
    if portfolio_risk == 0:
        raise ZeroDivisionError("can't divide by 0")
    ratio = weighted_average_risk / portfolio_risk
    return ratio * ratio


def risk_from_std_dev(values: Sequence[float]) -> float:
    """Return the sample standard deviation, or 0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    return float(np.std(_as_array(values), ddof=1))


def weighted_average_risk(weights: Sequence[float], risks: Sequence[float]) -> float:
    """Return the mean of the risks weighted by the weights."""
    if len(weights) != len(risks):
        raise ValueError("weights and risks must have the same length")
    w = _as_array(weights)
    r = _as_array(risks)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sum(w * r) / np.sum(w))


def risk_weights(
    portfolio_volatility: float, risk_contributions: Sequence[float]
) -> list[float]:
    """Return each risk contribution as a fraction of the portfolio volatility."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return (_as_array(risk_contributions) / np.float64(portfolio_volatility)).tolist()


def portfolio_volatility(
    weights: Sequence[float],
    std_devs: Sequence[float],
    correlations: Sequence[Sequence[float]],
) -> tuple[float, list[float]]:
    """Return the total portfolio risk and each asset's risk contribution."""
    weighted = _as_array(weights) * _as_array(std_devs)
    n = len(weighted)
    corr = np.asarray(correlations, dtype=float).reshape(n, n)
    covariances = np.outer(weighted, weighted) * corr
    with np.errstate(divide="ignore", invalid="ignore"):
        total_risk = np.sqrt(np.sum(covariances))
        contributions = np.sum(covariances, axis=1) / total_risk
    return float(total_risk), contributions.tolist()


def _correlation(x: Sequence[float], y: Sequence[float]) -> float:
    if len(x) != len(y):
        raise ValueError("correlation requires series of equal length")
    if len(x) == 0:
        return float("nan")
    a = _as_array(x)
    b = _as_array(y)
    da = a - a.mean()
    db = b - b.mean()
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sum(da * db) / np.sqrt(np.sum(da * da) * np.sum(db * db)))


def correlation_matrix(values: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the Pearson correlation matrix for a list of series."""
    n = len(values)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 1.0
        for j in range(i + 1, n):
            c = _correlation(values[i], values[j])
            matrix[i][j] = c
            matrix[j][i] = c
    return matrix