"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
All math is deterministic and reproducible across runtimes.

Conventions:
    - Every function returns a list the same length as its input.
    - Indices without enough history hold PLACEHOLDER (0.0).
    - Every computed value goes through round_to() at the given precision.
    - Accumulations are sequential loops; builtin sum() and np.sum() use
      compensated/pairwise summation and would not match bit for bit.
    - Nothing here raises: degenerate input yields placeholders.
"""

from dataclasses import dataclass
import math
from typing import Optional, Sequence, Union
import numpy as np

from alphacore.core.numeric import DEFAULT_PRECISION, round_to

PLACEHOLDER = 0.0

PriceInput = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram (x1000)."""

    macd_line: list[float]
    signal_line: list[float]
    histogram: list[float]


@dataclass(frozen=True)
class BollingerBands:
    upper: list[float]
    middle: list[float]
    lower: list[float]


@dataclass(frozen=True)
class IndicatorBundle:
    """Result of calculate_all_indicators()."""

    rsi: list[float]
    sma_short: list[float]
    sma_long: list[float]
    macd: MACDResult
    bollinger: BollingerBands


def _as_array(prices: PriceInput) -> np.ndarray:
    return np.asarray(prices, dtype=np.float64).reshape(-1)


def _placeholders(n: int) -> list[float]:
    return [PLACEHOLDER] * n


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(prices: PriceInput, period: int, precision: int = DEFAULT_PRECISION) -> list[float]:
    """Simple Moving Average (running-sum sliding window)."""
    data = _as_array(prices)
    n = len(data)
    if period < 1 or n < period:
        return _placeholders(n)

    result = _placeholders(n)

    window_sum = 0.0
    for i in range(period):
        window_sum += float(data[i])
    result[period - 1] = round_to(window_sum / period, precision)

    for i in range(period, n):
        window_sum = window_sum - float(data[i - period]) + float(data[i])
        result[i] = round_to(window_sum / period, precision)

    return result


def ema(prices: PriceInput, period: int, precision: int = DEFAULT_PRECISION) -> list[float]:
    """
    Exponential Moving Average.

    Seeded with the first price (not an SMA), so every index is defined;
    there is no warm-up gap as with sma(). The seed itself is not rounded.
    """
    data = _as_array(prices)
    n = len(data)
    if n == 0:
        return []
    if period < 1:
        return _placeholders(n)

    multiplier = 2 / (period + 1)
    result = _placeholders(n)
    result[0] = float(data[0])

    for i in range(1, n):
        prev = result[i - 1]
        result[i] = round_to((float(data[i]) - prev) * multiplier + prev, precision)

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(prices: PriceInput, period: int = 14, precision: int = DEFAULT_PRECISION) -> list[float]:
    """Relative Strength Index with Wilder smoothing."""
    data = _as_array(prices)
    n = len(data)
    if period < 1 or n < period + 1:
        return _placeholders(n)

    result = _placeholders(n)

    # First averages from the first `period` deltas
    gains = 0.0
    losses = 0.0
    for i in range(1, period + 1):
        change = float(data[i]) - float(data[i - 1])
        if change > 0:
            gains += change
        else:
            losses -= change

    avg_gain = gains / period
    avg_loss = losses / period

    for i in range(period, n):
        if avg_loss == 0:
            result[i] = 100.0
        else:
            rs = avg_gain / avg_loss
            result[i] = round_to(100 - (100 / (1 + rs)), precision)

        if i < n - 1:
            change = float(data[i + 1]) - float(data[i])
            gain = change if change > 0 else 0.0
            loss = -change if change < 0 else 0.0
            avg_gain = (avg_gain * (period - 1) + gain) / period
            avg_loss = (avg_loss * (period - 1) + loss) / period

    return result


def macd(
    prices: PriceInput,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
    precision: int = DEFAULT_PRECISION,
) -> MACDResult:
    """
    MACD (Moving Average Convergence Divergence).

    The histogram is scaled by 1000 for display; consumers depend on it.
    """
    data = _as_array(prices)
    n = len(data)
    fast = ema(data, fast_period, precision)
    slow = ema(data, slow_period, precision)

    macd_line = [round_to(fast[i] - slow[i], precision) for i in range(n)]

    # Signal line is EMA of MACD line
    signal_line = ema(macd_line, signal_period, precision)

    histogram = [
        round_to((macd_line[i] - signal_line[i]) * 1000.0, precision) for i in range(n)
    ]

    return MACDResult(macd_line=macd_line, signal_line=signal_line, histogram=histogram)


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    prices: PriceInput,
    period: int = 20,
    std_dev: float = 2.0,
    precision: int = DEFAULT_PRECISION,
) -> BollingerBands:
    """
    Bollinger Bands.

    Uses the population standard deviation (divide by period) around the
    rounded SMA.
    """
    data = _as_array(prices)
    n = len(data)
    middle = sma(data, period, precision)
    upper = _placeholders(n)
    lower = _placeholders(n)

    if period < 1:
        return BollingerBands(upper=upper, middle=middle, lower=lower)

    for i in range(period - 1, n):
        mean = middle[i]
        squared = 0.0
        for price in data[i - period + 1 : i + 1]:
            diff = float(price) - mean
            squared += diff * diff
        std = math.sqrt(squared / period)

        upper[i] = round_to(mean + std_dev * std, precision)
        lower[i] = round_to(mean - std_dev * std, precision)

    return BollingerBands(upper=upper, middle=middle, lower=lower)


# =============================================================================
# BATCH
# =============================================================================


def calculate_all_indicators(
    prices: PriceInput,
    rsi_period: int = 14,
    sma_short: int = 20,
    sma_long: int = 50,
    macd_fast: int = 12,
    macd_slow: int = 26,
    macd_signal: int = 9,
    bollinger_period: int = 20,
    bollinger_k: float = 2.0,
    precision: int = DEFAULT_PRECISION,
) -> IndicatorBundle:
    """Calculate the full indicator set over one price sequence."""
    data = _as_array(prices)
    return IndicatorBundle(
        rsi=rsi(data, rsi_period, precision),
        sma_short=sma(data, sma_short, precision),
        sma_long=sma(data, sma_long, precision),
        macd=macd(data, macd_fast, macd_slow, macd_signal, precision),
        bollinger=bollinger_bands(data, bollinger_period, bollinger_k, precision),
    )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def has_valid_values(values: Sequence[float]) -> bool:
    """True if at least one value is not a placeholder."""
    return any(v != PLACEHOLDER for v in values)


def get_last_valid(values: Sequence[float]) -> Optional[float]:
    """Get last non-placeholder value."""
    for v in reversed(values):
        if v != PLACEHOLDER:
            return float(v)
    return None
