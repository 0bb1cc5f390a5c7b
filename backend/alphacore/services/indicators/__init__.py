"""
Indicator Library

CONTRACT:
    Input:  price sequence (list or NumPy array) + integer parameters
    Output: list[float] of the same length (0.0 = not yet available)

RESPONSIBILITIES:
    - SMA, EMA, RSI (Wilder), MACD, Bollinger Bands
    - Uniform round-half-away-from-zero at a configurable precision

PURE PYTHON/NumPy - stateless, no I/O.
All math is deterministic and reproducible.
"""

from alphacore.services.indicators.calculations import (
    PLACEHOLDER,
    MACDResult,
    BollingerBands,
    IndicatorBundle,
    sma,
    ema,
    rsi,
    macd,
    bollinger_bands,
    calculate_all_indicators,
    get_last_valid,
    has_valid_values,
)

__all__ = [
    "PLACEHOLDER",
    "MACDResult",
    "BollingerBands",
    "IndicatorBundle",
    "sma",
    "ema",
    "rsi",
    "macd",
    "bollinger_bands",
    "calculate_all_indicators",
    "get_last_valid",
    "has_valid_values",
]
