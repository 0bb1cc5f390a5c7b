"""
Analysis Engine Service

CONTRACT:
    Input:  list[PricePoint] for one symbol, ascending by time
    Output: AnalysisResult

RESPONSIBILITIES:
    - Compute RSI, SMA(short/long) and MACD series
    - Compute risk metrics (volatility, Sharpe, max drawdown)
    - Fuse indicator votes into BUY / SELL / HOLD
    - Report confidence as indicator availability

PURE PYTHON - synchronous and stateless; execute() is a thin async wrapper.
"""

from alphacore.services.analysis.interface import AnalysisServiceInterface
from alphacore.services.analysis.service import AnalysisService, get_analysis_service

__all__ = [
    "AnalysisServiceInterface",
    "AnalysisService",
    "get_analysis_service",
]
