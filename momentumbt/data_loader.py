"""Loading of daily OHLCV rows from CSV files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_FIELD_COUNT = 7
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True)
class StockData:
    """One daily bar for one ticker."""

    date: str
    ticker: str
    open: float
    high: float
    low: float
    close: float
    volume: int


def _parse_float(text: str) -> float:
    """Parse a number, accepting trailing garbage after a valid leading number."""
    try:
        return float(text)
    except ValueError:
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise ValueError(f"not a number: {text!r}") from None
        return float(match.group())


def _parse_int(text: str) -> int:
    """Parse the leading integer of a field, as in '1500.7' -> 1500."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group())


def _parse_row(line: str) -> StockData:
    fields = line.rstrip("\r\n").split(",")
    if len(fields) < _FIELD_COUNT:
        raise ValueError(f"expected {_FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    date, ticker, open_, high, low, close, volume = fields[:_FIELD_COUNT]
    return StockData(
        date=date,
        ticker=ticker,
        open=_parse_float(open_),
        high=_parse_float(high),
        low=_parse_float(low),
        close=_parse_float(close),
        volume=_parse_int(volume),
    )


def load_csv(filename: str | PathLike[str]) -> list[StockData]:
    """Read a CSV of date,ticker,open,high,low,close,volume rows after a header line.

    Raises OSError when the file cannot be opened and ValueError on a malformed row.
    """
    dataset: list[StockData] = []
    with Path(filename).open(encoding="utf-8", newline="") as handle:
        next(handle, None)
        for line_number, line in enumerate(handle, start=2):
            try:
                dataset.append(_parse_row(line))
            except ValueError as exc:
                raise ValueError(f"{filename}:{line_number}: {exc}") from exc
    return dataset