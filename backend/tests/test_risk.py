"""Tests for risk metrics."""

import math

import numpy as np
import pytest

from alphacore.services.risk import (
    calculate_max_drawdown,
    calculate_risk_metrics,
    calculate_volatility,
)

from conftest import rising_prices


class TestDegenerateSeries:
    def test_single_point(self):
        risk = calculate_risk_metrics([100.0])
        assert risk.volatility == 0.0
        assert risk.max_drawdown == 0.0
        assert risk.sharpe_ratio is None
        assert risk.beta is None

    def test_empty(self):
        risk = calculate_risk_metrics([])
        assert risk.volatility == 0.0
        assert risk.sharpe_ratio is None

    def test_two_points_has_no_sample_variance(self):
        risk = calculate_risk_metrics([100.0, 110.0])
        assert risk.volatility == 0.0
        assert risk.sharpe_ratio is None
        assert risk.max_drawdown == 0.0

    def test_constant_prices(self):
        risk = calculate_risk_metrics([50.0] * 10)
        assert risk.volatility == 0.0
        assert risk.sharpe_ratio is None
        assert risk.max_drawdown == 0.0


class TestMaxDrawdown:
    def test_non_decreasing_series_has_no_drawdown(self):
        assert calculate_risk_metrics(rising_prices(60)).max_drawdown == 0.0
        assert calculate_risk_metrics([10.0, 10.0, 11.0, 11.0, 12.0]).max_drawdown == 0.0

    def test_peak_to_trough(self):
        # peak 120, trough 90 -> 25%
        assert calculate_max_drawdown(np.array([100.0, 120.0, 90.0, 130.0])) == pytest.approx(0.25)

    def test_largest_of_several_drawdowns(self):
        prices = np.array([100.0, 90.0, 110.0, 77.0, 120.0])
        assert calculate_max_drawdown(prices) == pytest.approx(0.3)

    def test_bounded(self):
        prices = [100.0, 102.0, 98.0, 105.0, 95.0, 110.0]
        risk = calculate_risk_metrics(prices)
        assert 0.0 <= risk.max_drawdown <= 1.0


class TestVolatilityAndSharpe:
    def test_volatility_is_annualized_sample_std(self):
        prices = [100.0, 102.0, 98.0, 105.0, 95.0, 110.0]
        returns = [(b - a) / a for a, b in zip(prices, prices[1:])]
        mean = sum(returns) / len(returns)
        variance = sum((r - mean) ** 2 for r in returns) / (len(returns) - 1)
        expected = math.sqrt(variance) * math.sqrt(252)

        risk = calculate_risk_metrics(prices)
        assert risk.volatility == pytest.approx(expected)

    def test_sharpe_uses_linear_annual_return(self):
        prices = [100.0, 102.0, 98.0, 105.0, 95.0, 110.0]
        risk = calculate_risk_metrics(prices)

        annual_return = (110.0 / 100.0 - 1.0) * 252 / len(prices)
        assert risk.sharpe_ratio == pytest.approx((annual_return - 0.02) / risk.volatility)

    def test_custom_rate_and_trading_days(self):
        prices = [100.0, 101.0, 99.5, 102.0, 103.5]
        base = calculate_risk_metrics(prices)
        weekly = calculate_risk_metrics(prices, risk_free_rate=0.0, trading_days=52)

        assert weekly.volatility == pytest.approx(base.volatility * math.sqrt(52 / 252))
        annual_return = (103.5 / 100.0 - 1.0) * 52 / len(prices)
        assert weekly.sharpe_ratio == pytest.approx(annual_return / weekly.volatility)

    def test_calculate_volatility_single_return(self):
        assert calculate_volatility(np.array([0.05]), 252) == 0.0

    def test_volatility_sums_left_to_right(self):
        returns = np.array([0.1, 0.2, 0.3, -0.15, 0.07, 0.01, -0.02, 0.33, 0.12, -0.4])
        total = 0.0
        for r in returns:
            total += float(r)
        mean = total / len(returns)
        squares = 0.0
        for r in returns:
            squares += (float(r) - mean) * (float(r) - mean)
        expected = math.sqrt(squares / (len(returns) - 1)) * math.sqrt(252)

        assert calculate_volatility(returns, 252) == expected

    def test_beta_always_absent(self):
        assert calculate_risk_metrics([100.0, 101.0, 99.0, 104.0]).beta is None
