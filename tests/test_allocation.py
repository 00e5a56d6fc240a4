import pytest

from portfoliotree.allocation import (
    ConstantWeights,
    EqualInverseVariance,
    EqualInverseVolatility,
    EqualRiskContribution,
    EqualVolatility,
    EqualWeights,
    NotEnoughDataError,
    algorithm_names,
    algorithm_requires_weights,
    new_default_algorithms_list,
)
from portfoliotree.calculate.risk import (
    correlation_matrix,
    portfolio_volatility,
    risk_from_std_dev,
    risk_weights,
)
from portfoliotree.calculate.weights import equal_inverse_volatility_weights

ASSET_RETURNS = [
    [0.01, -0.02, 0.03, -0.01, 0.02],
    [0.05, -0.04, 0.02, 0.06, -0.03],
    [0.10, -0.12, 0.08, -0.05, 0.15],
]
TWO_ASSETS = ASSET_RETURNS[:2]


def _statistical_algorithms():
    return [
        EqualInverseVariance(),
        EqualRiskContribution(),
        EqualVolatility(),
        EqualInverseVolatility(),
    ]


def _risks(columns):
    return [risk_from_std_dev(c) for c in columns]


def test_constant_weights_returns_set_weights():
    alg = ConstantWeights()
    alg.set_weights([60, 40])
    assert alg.policy_weights(None, TWO_ASSETS, [0, 0]) == [60, 40]


def test_constant_weights_returns_copy():
    alg = ConstantWeights([0.7, 0.3])
    out = alg.policy_weights(None, TWO_ASSETS, [0, 0])
    out[0] = 99
    assert alg.weights == [0.7, 0.3]


def test_constant_weights_length_mismatch():
    alg = ConstantWeights([1.0])
    with pytest.raises(ValueError, match="number of policy weights"):
        alg.policy_weights(None, TWO_ASSETS, [0, 0])


def test_equal_weights_are_equal_and_sum_to_one():
    out = EqualWeights().policy_weights(None, ASSET_RETURNS, [0.5, 0.2, 0.3])
    assert len(out) == 3
    assert len(set(out)) == 1
    assert sum(out) == pytest.approx(1.0)


def test_equal_weights_empty():
    assert EqualWeights().policy_weights(None, [], []) == []


def test_not_enough_rows():
    with pytest.raises(NotEnoughDataError, match="not enough data"):
        EqualInverseVariance().policy_weights(None, [[0.1], [0.2]], [0, 0])
    with pytest.raises(NotEnoughDataError, match="not enough data"):
        EqualRiskContribution().policy_weights(None, [[0.1], [0.2]], [0, 0])
    with pytest.raises(NotEnoughDataError, match="not enough data"):
        EqualVolatility().policy_weights(None, [[0.1], [0.2]], [0, 0])
    with pytest.raises(NotEnoughDataError, match="not enough data"):
        EqualInverseVolatility().policy_weights(None, [[0.1], [0.2]], [0, 0])


def test_no_columns():
    with pytest.raises(NotEnoughDataError):
        EqualInverseVariance().policy_weights(None, [], [])
    with pytest.raises(NotEnoughDataError):
        EqualRiskContribution().policy_weights(None, [], [])
    with pytest.raises(NotEnoughDataError):
        EqualVolatility().policy_weights(None, [], [])
    with pytest.raises(NotEnoughDataError):
        EqualInverseVolatility().policy_weights(None, [], [])


def test_statistical_algorithms_share_error_message():
    messages = []
    for alg in _statistical_algorithms():
        with pytest.raises(NotEnoughDataError) as info:
            alg.policy_weights(None, [[0.1], [0.2]], [0, 0])
        messages.append(str(info.value))
    assert messages == ["not enough data"] * 4


def test_inverse_variance_weights_invariant():
    out = EqualInverseVariance().policy_weights(None, ASSET_RETURNS, [0, 0, 0])
    risks = _risks(ASSET_RETURNS)
    products = [w * r * r for w, r in zip(out, risks)]
    assert sum(out) == pytest.approx(1.0)
    assert products == pytest.approx([products[0]] * 3)


def test_inverse_variance_length_mismatch():
    with pytest.raises(ValueError):
        EqualInverseVariance().policy_weights(None, ASSET_RETURNS, [1, 1])


def test_inverse_volatility_weights_invariant():
    out = EqualInverseVolatility().policy_weights(None, ASSET_RETURNS, [1, 2, 3])
    risks = _risks(ASSET_RETURNS)
    products = [w * r for w, r in zip(out, risks)]
    assert sum(out) == pytest.approx(1.0)
    assert products == pytest.approx([products[0]] * 3)


def test_equal_volatility_weights_invariant():
    out = EqualVolatility().policy_weights(None, ASSET_RETURNS, [0, 0, 0])
    risks = _risks(ASSET_RETURNS)
    ratios = [w / r for w, r in zip(out, risks)]
    assert sum(out) == pytest.approx(1.0)
    assert ratios == pytest.approx([ratios[0]] * 3)


def test_equal_risk_contribution_two_assets_matches_inverse_volatility():
    out = EqualRiskContribution().policy_weights(None, TWO_ASSETS, [0, 0])
    expected = equal_inverse_volatility_weights(_risks(TWO_ASSETS))
    assert sum(out) == pytest.approx(1.0)
    assert out == pytest.approx(expected, abs=1e-3)


def test_equal_risk_contribution_contributions_are_equal():
    out = EqualRiskContribution().policy_weights(None, TWO_ASSETS, [0, 0])
    shares = risk_weights(
        *portfolio_volatility(out, _risks(TWO_ASSETS), correlation_matrix(TWO_ASSETS))
    )
    assert shares[0] == pytest.approx(shares[1], abs=1e-3)


def test_default_algorithm_names_in_order():
    names = [alg.name for alg in new_default_algorithms_list()]
    assert names == [
        "Constant Weights",
        "Equal Weights",
        "Equal Inverse Variance",
        "Equal Risk Contribution",
        "Equal Volatility",
        "Equal Inverse Volatility",
    ]


def test_algorithm_names_sorted_and_distinct():
    algorithms = new_default_algorithms_list() + [EqualWeights(), ConstantWeights()]
    names = algorithm_names(algorithms)
    assert names == sorted(names)
    assert len(names) == len(set(names)) == 6


def test_algorithm_requires_weights():
    flags = {alg.name: algorithm_requires_weights(alg) for alg in new_default_algorithms_list()}
    assert flags.pop("Constant Weights") is True
    assert not any(flags.values())