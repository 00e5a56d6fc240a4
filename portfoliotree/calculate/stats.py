"""Portfolio statistics: drawdowns, risk adjusted ratios and value at risk."""

from __future__ import annotations

import math
import operator
from collections.abc import Sequence
from itertools import accumulate
from statistics import NormalDist

import numpy as np

from portfoliotree.calculate.returns import (
    annualize_risk,
    annualized_arithmetic_return,
    annualized_time_weighted_return,
)


def _ratio(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return math.nan
    return sum(values) / len(values)


def _pop_std_dev(values: Sequence[float]) -> float:
    if len(values) == 0:
        return math.nan
    return float(np.std(np.asarray(values, dtype=float)))


def _retained_after_drawdown(values: Sequence[float]) -> list[float]:
    growth = [1.0 + v for v in values]
    cumulative = list(accumulate(reversed(growth), operator.mul))[::-1]
    peaks = list(accumulate(reversed(cumulative), max))[::-1]
    retained = [c / max(p, 1.0) for c, p in zip(cumulative, peaks)]
    if retained:
        retained[-1] = 1.0
    return retained


def downside_volatility(values: Sequence[float], periods_per_year: float) -> float:
    """Return the annualized root mean square of the negative returns."""
    squares = [v * v for v in values if v < 0]
    return math.sqrt(_mean(squares)) * math.sqrt(periods_per_year)


def sortino_ratio(
    portfolio: Sequence[float],
    risk_free: Sequence[float],
    downside_vol: float,
    periods_per_year: float,
) -> float:
    """Return the excess annualized return per unit of downside volatility."""
    pr = annualized_arithmetic_return(portfolio, periods_per_year)
    rr = annualized_arithmetic_return(risk_free, periods_per_year)
    return _ratio(pr - rr, downside_vol)


def max_drawdown(values: Sequence[float]) -> tuple[float, int]:
    """Return the largest drawdown and the index where it bottoms out."""
    retained = _retained_after_drawdown(values)
    if not retained:
        raise ValueError("max drawdown requires at least one return")
    index = min(range(len(retained)), key=retained.__getitem__)
    return 1 - retained[index], index


def calmar_ratio(
    portfolio: Sequence[float],
    risk_free: Sequence[float],
    max_drawdown: float,
    periods_per_year: float,
) -> float:
    """Return the excess annualized return per unit of maximum drawdown."""
    pr = annualized_arithmetic_return(portfolio, periods_per_year)
    rr = annualized_arithmetic_return(risk_free, periods_per_year)
    return _ratio(pr - rr, max_drawdown)


def ulcer_index(values: Sequence[float], periods_per_year: float) -> float:
    """Return the annualized root mean square of the retained value after drawdowns."""
    squares = [r * r for r in _retained_after_drawdown(values)]
    return math.sqrt(_mean(squares)) * math.sqrt(periods_per_year)


def tracking_error(excess_returns: Sequence[float], periods_per_year: float) -> float:
    """Return the annualized population standard deviation of excess returns."""
    return _pop_std_dev(excess_returns) * math.sqrt(periods_per_year)


def information_ratio(
    portfolio: Sequence[float], benchmark: Sequence[float], periods_per_year: float
) -> float:
    """Return the annualized excess return over the benchmark per tracking error."""
    if len(portfolio) != len(benchmark):
        raise ValueError("portfolio and benchmark must have the same length")
    pr = annualized_time_weighted_return(portfolio, periods_per_year)
    br = annualized_time_weighted_return(benchmark, periods_per_year)
    excess = [p - b for p, b in zip(portfolio, benchmark)]
    return _ratio(pr - br, tracking_error(excess, periods_per_year))


def beta_to_benchmark(portfolio: Sequence[float], benchmark: Sequence[float]) -> float:
    """Return the least squares slope of portfolio returns on benchmark returns."""
    if len(portfolio) != len(benchmark):
        raise ValueError("portfolio and benchmark must have the same length")
    x = np.asarray(benchmark, dtype=float)
    y = np.asarray(portfolio, dtype=float)
    dx = x - x.mean()
    dy = y - y.mean()
    return _ratio(float(np.sum(dx * dy)), float(np.sum(dx * dx)))


def value_at_risk(
    values: Sequence[float],
    portfolio_value: float,
    confidence_level: float,
    periods_per_year: float,
) -> float:
    """Return the parametric (normal) value at risk of the portfolio."""
    z_score = NormalDist(0.0, 1.0).inv_cdf(confidence_level)
    risk = annualize_risk(_pop_std_dev(values), periods_per_year)
    return portfolio_value * -z_score * risk