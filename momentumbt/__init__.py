"""Cross-sectional momentum long/short backtesting on daily stock data from CSV files."""

__version__ = "0.1.0"