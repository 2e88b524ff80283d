"""Cross-sectional momentum long/short backtest and its metrics."""

from __future__ import annotations

import csv
import math
from bisect import bisect_left
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from momentumbt.data_loader import StockData

_NEVER_REBALANCED = -100_000
RESULTS_HEADER = ("date", "long_return", "short_return", "long_short", "cum_return")


@dataclass(frozen=True)
class DailyResult:
    """Returns of the long and short baskets from one date to the next."""

    date: str
    long_return: float
    short_return: float
    long_short: float
    cum_return: float


@dataclass
class BacktestParams:
    """Settings of the momentum strategy."""

    lookback_days: int = 20
    top_n: int = 5
    bottom_n: int = 5
    rebalance_every: int = 5


@dataclass
class _Series:
    dates: list[str] = field(default_factory=list)
    closes: list[float] = field(default_factory=list)

    def index_on(self, date: str) -> int | None:
        idx = bisect_left(self.dates, date)
        if idx < len(self.dates) and self.dates[idx] == date:
            return idx
        return None

    def momentum_at(self, idx: int, lookback: int) -> float | None:
        past_idx = idx - lookback
        if past_idx < 0 or past_idx >= len(self.closes):
            return None
        past = self.closes[past_idx]
        if past == 0.0:
            return None
        return (self.closes[idx] - past) / past

    def forward_return_on(self, date: str) -> float | None:
        idx = self.index_on(date)
        if idx is None or idx + 1 >= len(self.closes):
            return None
        p0, p1 = self.closes[idx], self.closes[idx + 1]
        if p0 == 0.0:
            return None
        return (p1 - p0) / p0


def _build_series(data: Iterable[StockData]) -> dict[str, _Series]:
    grouped: defaultdict[str, list[StockData]] = defaultdict(list)
    for row in data:
        grouped[row.ticker].append(row)
    series = {}
    for ticker, rows in grouped.items():
        rows.sort(key=lambda r: r.date)
        series[ticker] = _Series([r.date for r in rows], [r.close for r in rows])
    return series


def _basket_return(tickers: Iterable[str], series: dict[str, _Series], date: str) -> float:
    returns = [
        r for t in sorted(tickers) if (r := series[t].forward_return_on(date)) is not None
    ]
    return sum(returns) / len(returns) if returns else 0.0


def run_backtest(data: Sequence[StockData], params: BacktestParams) -> list[DailyResult]:
    """Run the strategy over every date but the last, returning one result per date."""
    dates = sorted({row.date for row in data})
    series = _build_series(data)
    universe = sorted(series)

    results: list[DailyResult] = []
    longs: set[str] = set()
    shorts: set[str] = set()
    last_rebalance = _NEVER_REBALANCED

    for di, date in enumerate(dates[:-1]):
        if di - last_rebalance >= params.rebalance_every:
            scores = []
            for ticker in universe:
                ser = series[ticker]
                idx = ser.index_on(date)
                if idx is None:
                    continue
                mom = ser.momentum_at(idx, params.lookback_days)
                if mom is not None:
                    scores.append((ticker, mom))
            if len(scores) >= params.top_n + params.bottom_n:
                scores.sort(key=lambda item: item[1])
                bottom = max(params.bottom_n, 0)
                top = max(params.top_n, 0)
                shorts = {t for t, _ in scores[:bottom]}
                longs = {t for t, _ in scores[len(scores) - top:]} if top else set()
                last_rebalance = di

        long_ret = _basket_return(longs, series, date)
        short_ret = _basket_return(shorts, series, date)
        spread = long_ret - short_ret
        previous = results[-1].cum_return if results else 1.0
        results.append(DailyResult(date, long_ret, short_ret, spread, previous * (1.0 + spread)))

    return results


def compute_annualized_sharpe(results: Sequence[DailyResult], trading_days: int = 252) -> float:
    """Annualized Sharpe ratio of the daily long/short returns (population volatility)."""
    if len(results) < 2:
        return 0.0
    returns = [r.long_short for r in results]
    mean = sum(returns) / len(returns)
    vol = math.sqrt(sum((x - mean) ** 2 for x in returns) / len(returns))
    if vol == 0.0:
        return 0.0
    return mean / vol * math.sqrt(trading_days)


def compute_max_drawdown(results: Sequence[DailyResult]) -> float:
    """Largest fractional fall of the cumulative return from its running peak."""
    if not results:
        return 0.0
    peak = results[0].cum_return
    max_dd = 0.0
    for r in results:
        peak = max(peak, r.cum_return)
        max_dd = max(max_dd, (peak - r.cum_return) / peak)
    return max_dd


def write_results_csv(path: str | PathLike[str], results: Iterable[DailyResult]) -> None:
    """Write the results as CSV; raises OSError when the file cannot be written."""
    with Path(path).open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(RESULTS_HEADER)
        for r in results:
            writer.writerow(
                [
                    r.date,
                    f"{r.long_return:g}",
                    f"{r.short_return:g}",
                    f"{r.long_short:g}",
                    f"{r.cum_return:g}",
                ]
            )