"""
Analysis Engine Service Interface

Defines the contract for the analysis layer.
"""

from abc import abstractmethod

from alphacore.services.base import BaseService
from alphacore.schemas.market import PricePoint
from alphacore.schemas.analysis import AnalysisResult


class AnalysisServiceInterface(BaseService[list[PricePoint], AnalysisResult]):
    """
    Analysis Engine Service Contract.

    INPUT: list[PricePoint]
        - One symbol, sorted ascending by timestamp (not verified)

    OUTPUT: AnalysisResult
        - indicators: RSI(14) with per-point signals, SMA(20), SMA(50), MACD line
        - risk: volatility, sharpe_ratio, max_drawdown, beta (None)
        - recommendation: BUY / SELL / HOLD from vote fusion
        - confidence: share of indicators with data, 0-100

    ERRORS:
        InvalidInputError if the series is empty. Nothing else raises;
        short series produce placeholder values.
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    @abstractmethod
    def analyze(self, series: list[PricePoint]) -> AnalysisResult:
        """Analyze one instrument synchronously."""
        pass

    @abstractmethod
    async def execute(self, input_data: list[PricePoint]) -> AnalysisResult:
        """Async wrapper around analyze(); same result, no suspension point."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Analysis service is always healthy (pure computation)."""
        pass
