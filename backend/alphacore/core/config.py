"""
Application Configuration

All settings loaded from environment variables (prefix ``ALPHA_``).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Analytics engine settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ALPHA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Alpha Analytics Core"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Numeric policy
    precision: int = 4  # Decimal places for every indicator output

    # Risk metrics
    risk_free_rate: float = 0.02
    trading_days_per_year: int = 252  # One observation per trading day

    # RSI
    rsi_period: int = 14
    rsi_overbought: float = 70.0
    rsi_oversold: float = 30.0

    # Moving averages
    sma_short_period: int = 20
    sma_long_period: int = 50

    # MACD
    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9
    macd_vote_lookback: int = 9  # Bars back for the MACD momentum vote

    # Bollinger Bands
    bollinger_period: int = 20
    bollinger_k: float = 2.0

    # Decision fusion
    high_volatility_threshold: float = 0.5
    drawdown_threshold: float = 0.2

    # Trading calendar
    market_timezone: str = "America/New_York"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
