"""
Risk Metrics

CONTRACT:
    Input:  raw price sequence for one instrument
    Output: RiskMetrics

RESPONSIBILITIES:
    - Annualized volatility of simple returns
    - Max drawdown from the running peak
    - Sharpe ratio against a fixed risk-free rate

PURE PYTHON/NumPy - No benchmark data, so beta is never computed.
"""

from alphacore.services.risk.service import (
    calculate_risk_metrics,
    calculate_volatility,
    calculate_max_drawdown,
)

__all__ = [
    "calculate_risk_metrics",
    "calculate_volatility",
    "calculate_max_drawdown",
]
