"""Tests for settings and logging setup."""

import logging

from alphacore.core.config import Settings, get_settings
from alphacore.core.logging import configure_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.precision == 4
        assert settings.risk_free_rate == 0.02
        assert settings.trading_days_per_year == 252
        assert (settings.rsi_period, settings.rsi_overbought, settings.rsi_oversold) == (14, 70.0, 30.0)
        assert (settings.macd_fast, settings.macd_slow, settings.macd_signal) == (12, 26, 9)
        assert settings.macd_vote_lookback == 9
        assert settings.high_volatility_threshold == 0.5
        assert settings.drawdown_threshold == 0.2

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ALPHA_PRECISION", "6")
        monkeypatch.setenv("ALPHA_RSI_PERIOD", "21")
        settings = Settings(_env_file=None)
        assert settings.precision == 6
        assert settings.rsi_period == 21

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    def test_configure_logging_sets_package_level(self):
        configure_logging("DEBUG")
        assert logging.getLogger("alphacore").level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger("alphacore").level == logging.WARNING
