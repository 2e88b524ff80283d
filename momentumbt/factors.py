"""Single-series factor calculations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from momentumbt.data_loader import StockData


def calc_momentum(prices: Sequence[float], lookback_days: int) -> float:
    """Percent change between the last price and the price lookback_days earlier."""
    if len(prices) <= lookback_days or lookback_days <= 0:
        return 0.0
    past = prices[-lookback_days - 1]
    latest = prices[-1]
    return (latest - past) / past * 100.0


def calc_volatility(prices: Sequence[float], lookback_days: int) -> float:
    """Population standard deviation of the last lookback_days daily returns."""
    if len(prices) <= lookback_days or lookback_days <= 1:
        return 0.0
    window = prices[-lookback_days - 1:]
    returns = [(cur - prev) / prev for prev, cur in zip(window, window[1:])]
    mean = sum(returns) / len(returns)
    return math.sqrt(sum((r - mean) ** 2 for r in returns) / len(returns))


def get_closing_prices(data: Iterable[StockData], ticker: str) -> list[float]:
    """Closing prices of one ticker, in the order they appear in data."""
    return [row.close for row in data if row.ticker == ticker]