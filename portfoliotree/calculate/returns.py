"""Finance equations for returns: holding period, time weighted and annualized.

These calculations are for informational purposes only and are not financial
advice.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from portfoliotree.calculate.risk import risk_from_std_dev

PERIODS_PER_YEAR = 252.0


def annualize_risk(risk: float, periods_per_year: float) -> float:
    """Scale a per-period risk to an annual risk."""
    return risk * math.sqrt(periods_per_year)


def _product_of_return_values(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return math.prod(1.0 + v for v in reversed(values))


def annualized_time_weighted_return(values: Sequence[float], periods: float) -> float:
    """Return the geometric annualized return, or 0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    return _product_of_return_values(values) ** (periods / len(values)) - 1


def annualized_arithmetic_return(values: Sequence[float], periods: float) -> float:
    """Return the mean return times periods, or 0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    return sum(values) / len(values) * periods


def holding_period_returns(quotes: Sequence[float]) -> list[float]:
    """Return the returns between consecutive quotes ordered newest first."""
    return [newer / older - 1 for newer, older in zip(quotes, quotes[1:])]


def time_weighted_return(values: Sequence[float]) -> float:
    """Return the compounded return of the values."""
    return _product_of_return_values(values) - 1


def sharpe_ratio(
    portfolio_values: Sequence[float],
    risk_free_values: Sequence[float],
    periods: float,
) -> float:
    """Return the annualized excess return per unit of risk."""
    portfolio_return = annualized_arithmetic_return(portfolio_values, periods)
    portfolio_risk = risk_from_std_dev(portfolio_values)
    risk_free_return = annualized_time_weighted_return(risk_free_values, periods)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(portfolio_return - risk_free_return) / np.float64(portfolio_risk))