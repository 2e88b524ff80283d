import pytest

from momentumbt.data_loader import StockData
from momentumbt.factors import calc_momentum, calc_volatility, get_closing_prices


def test_momentum_too_short_is_zero():
    assert calc_momentum([1.0, 2.0], 2) == 0.0


def test_momentum_nonpositive_lookback_is_zero():
    assert calc_momentum([1.0, 2.0, 3.0], 0) == 0.0
    assert calc_momentum([1.0, 2.0, 3.0], -1) == 0.0


def test_momentum_doubling_is_one_hundred_percent():
    assert calc_momentum([50.0, 70.0, 100.0], 2) == pytest.approx(100.0)


def test_momentum_flat_prices_is_zero():
    assert calc_momentum([5.0] * 10, 4) == 0.0


def test_momentum_uses_only_window_end_points():
    a = calc_momentum([1.0, 3.0, 9.0, 4.0, 6.0], 2)
    b = calc_momentum([100.0, 7.0, 9.0, 8.0, 6.0], 2)
    assert a == b
    assert a < 0


def test_volatility_guards_return_zero():
    assert calc_volatility([1.0, 2.0, 3.0], 3) == 0.0
    assert calc_volatility([1.0, 2.0, 3.0], 1) == 0.0


def test_volatility_constant_growth_is_zero():
    prices = [100.0 * 1.03**i for i in range(12)]
    assert calc_volatility(prices, 10) == pytest.approx(0.0, abs=1e-12)


def test_volatility_is_scale_invariant():
    prices = [10.0, 11.0, 9.5, 12.0, 11.5, 13.0]
    scaled = [p * 7.0 for p in prices]
    assert calc_volatility(scaled, 4) == pytest.approx(calc_volatility(prices, 4))


def test_volatility_ignores_prices_before_window():
    tail = [10.0, 11.0, 9.5, 12.0, 11.5]
    assert calc_volatility([3.0, 50.0] + tail, 4) == pytest.approx(calc_volatility(tail, 4))
    assert calc_volatility(tail, 4) > 0


def test_get_closing_prices_filters_and_keeps_order():
    data = [
        StockData("2024-01-02", "AAA", 1, 1, 1, 1.5, 1),
        StockData("2024-01-02", "BBB", 1, 1, 1, 9.0, 1),
        StockData("2024-01-03", "AAA", 1, 1, 1, 2.5, 1),
    ]
    assert get_closing_prices(data, "AAA") == [1.5, 2.5]
    assert get_closing_prices(data, "ZZZ") == []