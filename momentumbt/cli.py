"""Command line entry point: run the momentum backtest on a CSV file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from momentumbt.backtester import (
    BacktestParams,
    compute_annualized_sharpe,
    compute_max_drawdown,
    run_backtest,
    write_results_csv,
)
from momentumbt.data_loader import load_csv


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cross-sectional momentum long/short backtest.")
    parser.add_argument("--data", default="../data/sample_data.csv", help="input CSV file")
    parser.add_argument("--out-dir", default="../out", help="directory for results.csv")
    parser.add_argument("--lookback", type=int, default=60, help="momentum lookback in days")
    parser.add_argument("--top", type=int, default=1, help="number of longs")
    parser.add_argument("--bottom", type=int, default=1, help="number of shorts")
    parser.add_argument("--rebalance", type=int, default=181, help="days between rebalances")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the backtest, write results.csv and print a summary."""
    args = _parser().parse_args(argv)

    try:
        market_data = load_csv(args.data)
    except OSError as exc:
        print(f"Error: Could not open file {args.data} ({exc.strerror})", file=sys.stderr)
        market_data = []
    if not market_data:
        print("No data loaded. Check file path.")
        return 1

    params = BacktestParams(
        lookback_days=args.lookback,
        top_n=args.top,
        bottom_n=args.bottom,
        rebalance_every=args.rebalance,
    )
    results = run_backtest(market_data, params)

    sharpe = compute_annualized_sharpe(results)
    max_dd = compute_max_drawdown(results)
    total_return = results[-1].cum_return - 1.0 if results else 0.0

    out_path = Path(args.out_dir) / "results.csv"
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        write_results_csv(out_path, results)
        written = str(out_path)
    except OSError:
        written = "write failed"

    print("Backtest complete.")
    print(f"Periods: {len(results)}")
    print(f"Total Return: {total_return * 100.0:g}%")
    print(f"Annualized Sharpe: {sharpe:g}")
    print(f"Max Drawdown: {max_dd * 100.0:g}%")
    print(f"Results CSV: {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main())