"""
Risk Metrics Implementation

Volatility, Sharpe ratio and max drawdown from a raw price sequence.
PURE PYTHON/NumPy - deterministic.
"""

import logging
import math
from typing import Sequence, Union
import numpy as np

from alphacore.core.config import settings
from alphacore.schemas.analysis import RiskMetrics

logger = logging.getLogger(__name__)


def _empty_risk() -> RiskMetrics:
    return RiskMetrics(volatility=0.0, sharpe_ratio=None, max_drawdown=0.0, beta=None)


def calculate_volatility(returns: np.ndarray, trading_days: int) -> float:
    """Annualized sample standard deviation (ddof=1) of simple returns."""
    n = len(returns)
    if n < 2:
        # Sample variance is undefined for a single return
        return 0.0
    # Left-to-right sums; np.std sums pairwise and drifts in the last bits
    total = 0.0
    for r in returns:
        total += float(r)
    mean = total / n
    squares = 0.0
    for r in returns:
        deviation = float(r) - mean
        squares += deviation * deviation
    variance = squares / (n - 1)
    return math.sqrt(variance) * math.sqrt(trading_days)


def calculate_max_drawdown(prices: np.ndarray) -> float:
    """Largest (running_max - price) / running_max, scanning left to right."""
    if len(prices) == 0:
        return 0.0
    running_max = np.maximum.accumulate(prices)
    drawdowns = (running_max - prices) / running_max
    return float(np.max(drawdowns))


def calculate_risk_metrics(
    prices: Union[Sequence[float], np.ndarray],
    risk_free_rate: float = settings.risk_free_rate,
    trading_days: int = settings.trading_days_per_year,
) -> RiskMetrics:
    """
    Calculate risk metrics for one instrument.

    Annualization assumes one observation per trading day; intraday series
    will be misreported. The annualized return is a linear approximation
    ((last/first - 1) * trading_days / n), not a compounded CAGR. Beta needs
    a benchmark series and is always None.
    """
    closes = np.asarray(prices, dtype=np.float64).reshape(-1)
    if len(closes) < 2:
        return _empty_risk()

    returns = np.diff(closes) / closes[:-1]

    volatility = calculate_volatility(returns, trading_days)
    max_drawdown = calculate_max_drawdown(closes)

    annual_return = (closes[-1] / closes[0] - 1.0) * trading_days / len(closes)
    sharpe_ratio = (
        float((annual_return - risk_free_rate) / volatility) if volatility > 0 else None
    )

    logger.debug(
        "Risk metrics: n=%d volatility=%.6f max_drawdown=%.6f sharpe=%s",
        len(closes), volatility, max_drawdown, sharpe_ratio,
    )

    return RiskMetrics(
        volatility=volatility,
        sharpe_ratio=sharpe_ratio,
        max_drawdown=max_drawdown,
        beta=None,
    )
