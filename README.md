# momentumbt

A small backtester for a cross-sectional momentum strategy on daily stock
prices. On each rebalance date it ranks every ticker by its price momentum
over a lookback window, goes long the strongest names and short the weakest,
and tracks the equally weighted next-day return of both baskets.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input data

A CSV file with a header row, followed by one row per ticker per day:

```
date,ticker,open,high,low,close,volume
2024-01-02,AAA,10.0,10.5,9.8,10.2,120000
2024-01-02,BBB,20.0,20.4,19.7,20.1,85000
```

The first line is always skipped as a header. Fields beyond the seventh are
ignored. A number field may carry trailing characters after a valid leading
number; volume takes the leading integer (`1500.7` reads as `1500`). A row
with fewer than seven fields or a field that does not start with a number
makes `load_csv` raise `ValueError`, naming the file and line. A file that
cannot be opened raises `OSError`.

Dates are compared as text, so use a sortable form such as `YYYY-MM-DD`.

## Command line

```
momentumbt
```

Options:

| Option        | Default                   | Meaning                              |
|---------------|---------------------------|--------------------------------------|
| `--data`      | `../data/sample_data.csv` | input CSV file                       |
| `--out-dir`   | `../out`                  | directory that receives `results.csv` |
| `--lookback`  | `60`                      | momentum lookback in days            |
| `--top`       | `1`                       | number of long names                 |
| `--bottom`    | `1`                       | number of short names                |
| `--rebalance` | `181`                     | days between rebalances              |

For example:

```
momentumbt --data prices.csv --out-dir out --lookback 20 --top 5 --bottom 5 --rebalance 5
```

The command creates the output directory if needed, writes
`results.csv` into it and prints the number of periods, the total return,
the annualized Sharpe ratio (252 trading days) and the maximum drawdown.
If writing fails, the last line reads `Results CSV: write failed`. If the
input cannot be opened or holds no rows, it prints
`No data loaded. Check file path.` and exits with status 1.

## How the backtest works

`run_backtest` walks through every distinct date except the last (each
result needs the next day's price):

- A rebalance is due when at least `rebalance_every` dates have passed
  since the last successful one (the first date always qualifies).
- On a rebalance date, every ticker with a price on that date and at least
  `lookback_days` earlier observations is scored by
  `(close_today - close_then) / close_then`. Tickers whose earlier close is
  zero are skipped.
- If at least `top_n + bottom_n` tickers were scored, the `bottom_n` lowest
  become the shorts and the `top_n` highest the longs. Otherwise the
  previous baskets are kept and the rebalance is retried the next date.
- Each basket's return is the average one-day forward return of its members
  that trade on that date and the next one in their own series; an empty
  basket returns 0.
- The long/short return is the long return minus the short return, and the
  cumulative return compounds it from 1.0.

## Library use

```python
from momentumbt.data_loader import load_csv
from momentumbt.backtester import (
    BacktestParams,
    compute_annualized_sharpe,
    compute_max_drawdown,
    run_backtest,
    write_results_csv,
)

data = load_csv("prices.csv")
params = BacktestParams(lookback_days=20, top_n=5, bottom_n=5, rebalance_every=5)
results = run_backtest(data, params)

print("Sharpe:", compute_annualized_sharpe(results, 252))
print("Max drawdown:", compute_max_drawdown(results))
write_results_csv("results.csv", results)
```

- `StockData` is a frozen dataclass with `date`, `ticker`, `open`, `high`,
  `low`, `close` and `volume`.
- `BacktestParams` defaults to `lookback_days=20`, `top_n=5`, `bottom_n=5`,
  `rebalance_every=5`.
- `DailyResult` is a frozen dataclass with `date`, `long_return`,
  `short_return`, `long_short` and `cum_return`.
- `compute_annualized_sharpe(results, trading_days=252)` returns the mean
  of the daily long/short returns over their population standard deviation,
  times the square root of `trading_days`; it returns 0.0 for fewer than two
  results or zero volatility.
- `compute_max_drawdown(results)` returns the largest fractional fall of
  `cum_return` from its running peak, or 0.0 for no results.
- `write_results_csv(path, results)` writes the columns listed in
  `RESULTS_HEADER` (`date,long_return,short_return,long_short,cum_return`),
  with numbers in `%g` form, and raises `OSError` when the file cannot be
  written.

The `momentumbt.factors` module offers standalone helpers that the backtest
itself does not use:

- `calc_momentum(prices, lookback_days)`: percentage change from the price
  `lookback_days` before the last one to the last one; 0.0 when there are
  too few prices or the lookback is not positive.
- `calc_volatility(prices, lookback_days)`: population standard deviation of
  the last `lookback_days` daily returns; 0.0 when there are too few prices
  or the lookback is below 2.
- `get_closing_prices(data, ticker)`: closing prices of one ticker, in the
  order they appear in the data.

## What it does not do

The backtest ignores transaction costs, slippage, borrowing fees and
position sizing beyond equal weights, and it fetches no market data: prices
come only from the CSV file given to it.