# portfoliotree

Portfolio analytics for Python. The package provides:

- risk and return measures;
- weighting algorithms for asset allocation;
- the rebalancing schedules and look-back windows used when back-testing a
  portfolio;
- helpers for naming portfolio components and for calling a JSON returns API.

Investing carries risk, including the loss of principal. Past performance
is no guarantee of future results. The calculations here are for
information only and are not financial advice.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

The package depends on `numpy` and `scipy`.

## What is inside

### `portfoliotree.calculate`

Every calculation takes plain sequences of floats. Return series are
ordered with the most recent value first.

- `calculate.returns`
  - `holding_period_returns(quotes)` gives the return between each pair of
    consecutive quotes.
  - `time_weighted_return(values)` gives the compounded return.
  - `annualized_time_weighted_return(values, periods)` and
    `annualized_arithmetic_return(values, periods)` return 0 for fewer
    than two values.
  - `annualize_risk(risk, periods_per_year)` scales a per-period risk to a
    yearly one.
  - `sharpe_ratio(portfolio_values, risk_free_values, periods)`.
  - `PERIODS_PER_YEAR` is 252.
- `calculate.risk`
  - `risk_from_std_dev(values)` is the sample standard deviation. It is 0
    for fewer than two values.
  - `variance`, `weighted_average_risk` and `risk_weights`.
  - `number_of_bets(weighted_average_risk, portfolio_risk)` raises
    `ZeroDivisionError` when the portfolio risk is 0.
  - `portfolio_volatility(weights, std_devs, correlations)` returns the
    total risk and the risk contribution of each asset.
  - `correlation_matrix(values)` returns the Pearson correlation matrix of
    a list of series.
- `calculate.stats`
  - `downside_volatility`, `sortino_ratio`, `calmar_ratio`,
    `ulcer_index`, `tracking_error`, `information_ratio`,
    `beta_to_benchmark` and `value_at_risk`.
  - `value_at_risk` is parametric and uses the normal distribution.
  - `max_drawdown(values)` returns the drawdown together with the index at
    which it bottoms out. It raises `ValueError` for an empty series.
- `calculate.weights`
  - `equal_weights(count)`, `inverse_variance_weights(vols)`,
    `equal_inverse_volatility_weights(vols)` and
    `equal_volatility_weights(vols)` return new lists of weights.
  - `equal_risk_contribution_weights(weights, vols, correlations)` starts
    from the given weights and runs a Nelder–Mead search for weights whose
    risk contributions are equal. It raises `ValueError` when the inputs
    have inconsistent sizes. It raises `RuntimeError` when the search does
    not converge.

```python
from portfoliotree.calculate.returns import holding_period_returns
from portfoliotree.calculate.risk import portfolio_volatility

holding_period_returns([50, 100, 100])   # [-0.5, 0.0]

vol, contributions = portfolio_volatility(
    [0.5, 0.5],
    [0.1668, 0.0428],
    [[1.0, 0.25], [0.25, 1.0]],
)
```

### `portfoliotree.allocation`

Asset returns are passed as a sequence of columns, one per asset. Each
column holds that asset's returns, most recent first. Every algorithm has a
`name` and a `policy_weights(today, asset_returns, weights)` method that
returns a new list of target weights.

| Algorithm | What it does |
| --- | --- |
| `ConstantWeights` | Returns the weights given to its constructor or to `set_weights`. It raises `ValueError` when their number does not match the number of assets. |
| `EqualWeights` | Gives every asset the same weight. |
| `EqualInverseVariance` | Weights each asset by the inverse of its variance. |
| `EqualRiskContribution` | Searches for weights with equal risk contributions. |
| `EqualVolatility` | Weights each asset in proportion to its volatility. |
| `EqualInverseVolatility` | Weights each asset by the inverse of its volatility. |

For the algorithms based on risk, starting weights that are all zero are
replaced by equal weights. These algorithms raise `NotEnoughDataError` when
there are no columns, or when a column has fewer than two returns.

Three helper functions go with the algorithms:

- `new_default_algorithms_list()` returns one new instance of each
  algorithm.
- `algorithm_names(algorithms)` returns the distinct names, sorted.
- `algorithm_requires_weights(algorithm)` is true for algorithms that have
  a `set_weights` method.

### `portfoliotree.backtest`

#### `backtest.snapshot`

- `WeightSnapshot` holds the asset weights at one time. It also has two
  flags: one for a rebalance day and one for a policy-update day.
- `WeightSnapshotList` is a list of snapshots, most recent first. Its
  `times()` method returns the snapshot times.
  `average_weight_for_index(index)` returns the mean weight of one asset
  and raises `IndexError` for an index out of range.

#### `backtest.config.interval`

`Interval` sets how often to rebalance or to update the policy. Its values
are Never, Daily, Weekly, Monthly, Quarterly and Annually, and
`Interval.DEFAULT` is Never.

- `intervals()` lists them.
- `validate_interval(value)` returns the interval named by a string. An
  empty string gives the default, and an unknown name raises `ValueError`.
- `Interval.check_function()` returns a new trigger function, and so does
  the module-level `check_function(value)`. The module-level function
  falls back to a trigger that never fires when the name is unknown.
- The trigger factories `never`, `daily`, `weekly`, `monthly`, `quarterly`
  and `annually` can also be called directly. Triggers are called as
  `trigger(current_date, current_weights=None)`. They fire on the first
  call and at the start of each new period.
- `Interval.start_date(now)` returns the start of the period that contains
  `now`. For weekly intervals this is the Monday.

```python
import datetime
from portfoliotree.backtest.config.interval import Interval, monthly

Interval.QUARTERLY.start_date(datetime.date(2024, 5, 23))  # 2024-04-01

trigger = monthly()
trigger(datetime.date(2024, 1, 31))   # True: first call
trigger(datetime.date(2024, 2, 1))    # True: new month
trigger(datetime.date(2024, 2, 2))    # False
```

#### `backtest.config.window`

`Window` names a look-back period from "1 Day" to "5 Years". It also has
`Window.NOT_SET`, whose value is the empty string.

- `windows()` lists the set windows.
- `validate_window(value)` raises `ValueError` for an unknown name.
- `Window.add(t)` moves a date forward by the window.
- `Window.sub(t)` returns the first day of the window that ends on `t`.
  For example, one month before 2024-03-15 gives 2024-02-16.

### `portfoliotree.component`

`Component` identifies a security or a portfolio by `type`, `id` and
`label`.

- `Component.validate()` raises `ValueError` in these cases:
  - the ID is empty or `"undefined"`;
  - the ID does not match `^[a-zA-Z0-9.:]{1,24}$`;
  - the type is not one of `component_types()`.
- `Component.from_value(value)` accepts either a bare identifier or a
  mapping with `type`, `id` and `label` keys.

### `portfoliotree.api`

- `portfolio_tree_url()` returns the server URL. It is taken from the
  `PORTFOLIO_TREE_URL` environment variable when that is set, and is
  `DEFAULT_URL` otherwise.
- `parse_components_from_url(values, prefix)` turns query parameters such
  as `{"asset-id": [...]}` into components. A 24-digit hexadecimal ID
  becomes a Portfolio and any other ID a Security. It raises `ValueError`
  when the `<prefix>-id` key is missing.
- `do_json_request(send, request)` works with a request object that has
  `add_header`, such as `urllib.request.Request`. It sets the `accept`
  header, sends the request with `send` and decodes the JSON body.
  - A status other than 200 or 201 raises `RuntimeError`. The message is
    the response text when the body is plain text.
  - The response is closed afterwards.

## What the package does not do

- It has no back-test runner. It provides the pieces a back-test needs:
  allocation algorithms, trigger functions, look-back windows and weight
  snapshots. Stepping through a returns history and producing portfolio
  returns is left to the caller.
- It has no returns table type. Asset returns are plain lists of floats.
- It does not read portfolio specification files.
- It does not fetch asset returns from a server by itself. `api` only
  supplies the URL settings, component parsing and a JSON request helper.
- There is no command-line program.

## Running the tests

```
pytest
```