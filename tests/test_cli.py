import csv
from datetime import date, timedelta

from momentumbt.cli import main

GROWTH = {"AAA": 0.01, "BBB": 0.02, "CCC": -0.01}
DAYS = 20


def _write_market(path):
    start = date(2024, 3, 1)
    lines = ["date,ticker,open,high,low,close,volume"]
    for i in range(DAYS):
        d = (start + timedelta(days=i)).isoformat()
        for ticker, g in GROWTH.items():
            close = 50.0 * (1.0 + g) ** i
            lines.append(f"{d},{ticker},{close},{close},{close},{close},100")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _args(data, out_dir):
    return [
        "--data", str(data), "--out-dir", str(out_dir),
        "--lookback", "3", "--top", "1", "--bottom", "1", "--rebalance", "5",
    ]


def test_successful_run_writes_results(tmp_path, capsys):
    data = _write_market(tmp_path / "prices.csv")
    out_dir = tmp_path / "out" / "nested"
    assert main(_args(data, out_dir)) == 0
    output = capsys.readouterr().out
    assert "Backtest complete." in output
    assert f"Periods: {DAYS - 1}" in output
    assert f"Results CSV: {out_dir / 'results.csv'}" in output
    with (out_dir / "results.csv").open(newline="") as handle:
        rows = list(csv.reader(handle))
    assert len(rows) == DAYS


def test_rising_spread_reports_no_drawdown(tmp_path, capsys):
    data = _write_market(tmp_path / "prices.csv")
    main(_args(data, tmp_path / "out"))
    output = capsys.readouterr().out
    assert "Max Drawdown: 0%" in output


def test_missing_file_returns_one(tmp_path, capsys):
    assert main(_args(tmp_path / "absent.csv", tmp_path / "out")) == 1
    assert "No data loaded. Check file path." in capsys.readouterr().out


def test_header_only_file_returns_one(tmp_path, capsys):
    data = tmp_path / "empty.csv"
    data.write_text("date,ticker,open,high,low,close,volume\n", encoding="utf-8")
    assert main(_args(data, tmp_path / "out")) == 1
    assert "No data loaded. Check file path." in capsys.readouterr().out


def test_unwritable_output_reports_failure(tmp_path, capsys):
    data = _write_market(tmp_path / "prices.csv")
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    assert main(_args(data, blocker)) == 0
    assert "Results CSV: write failed" in capsys.readouterr().out