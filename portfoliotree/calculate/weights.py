"""Asset weighting schemes, including an optimized equal risk contribution."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
from scipy.optimize import minimize

from portfoliotree.calculate.risk import portfolio_volatility, risk_weights, variance

MAX_TRIES = 50_000


def _scale_to_unit_range(values: np.ndarray) -> np.ndarray:
    total = values.sum()
    if total == 0:
        return values.copy()
    return values / total


def _optimize_weights(
    initial: Sequence[float], objective: Callable[[np.ndarray], float]
) -> list[float]:
    start = np.asarray(initial, dtype=float)
    result = minimize(
        lambda x: objective(_scale_to_unit_range(x)),
        start,
        method="Nelder-Mead",
        options={"xatol": 1e-8, "fatol": 1e-10, "maxiter": MAX_TRIES},
    )
    if not result.success:
        raise RuntimeError("reached max tries to calculate policy")
    return _scale_to_unit_range(np.asarray(result.x, dtype=float)).tolist()


def _normalized(values: np.ndarray) -> list[float]:
    with np.errstate(divide="ignore", invalid="ignore"):
        return (values / values.sum()).tolist()


def equal_weights(count: int) -> list[float]:
    """Return count weights of equal size."""
    return [1.0 / count] * count


def inverse_variance_weights(vols: Sequence[float]) -> list[float]:
    """Return weights proportional to the inverse of each variance."""
    with np.errstate(divide="ignore", invalid="ignore"):
        inverse = 1.0 / np.array([variance(v) for v in vols], dtype=float)
    return _normalized(inverse)


def equal_risk_contribution_weights(
    weights: Sequence[float],
    vols: Sequence[float],
    correlations: Sequence[Sequence[float]],
) -> list[float]:
    """Search from the given weights for weights whose risk contributions are equal."""
    if len(weights) != len(vols):
        raise ValueError("length of weights and volatilities must be equal")
    if len(weights) != len(correlations):
        raise ValueError("length of weights and correlations must be equal")
    if any(len(row) != len(correlations) for row in correlations):
        raise ValueError("correlations must be a square matrix")
    if not weights:
        raise ValueError("at least one weight is required")

    target = 1.0 / len(vols)

    def objective(ws: np.ndarray) -> float:
        shares = risk_weights(*portfolio_volatility(vols, ws, correlations))
        return sum(abs(target - share) for share in shares)

    return _optimize_weights(weights, objective)


def equal_inverse_volatility_weights(vols: Sequence[float]) -> list[float]:
    """Return weights proportional to the inverse of each volatility."""
    with np.errstate(divide="ignore", invalid="ignore"):
        inverse = 1.0 / np.asarray(vols, dtype=float)
    return _normalized(inverse)


def equal_volatility_weights(vols: Sequence[float]) -> list[float]:
    """Return weights proportional to each volatility."""
    return _normalized(np.asarray(vols, dtype=float))