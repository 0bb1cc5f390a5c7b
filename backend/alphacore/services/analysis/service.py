"""
Analysis Engine Service Implementation

Runs the indicator library over one instrument, computes risk metrics,
and fuses indicator votes into a recommendation.
Pure Python/NumPy calculations.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
import numpy as np

from alphacore.core.config import settings
from alphacore.schemas.market import PricePoint, SignalType
from alphacore.schemas.analysis import AnalysisResult, IndicatorSeries, RiskMetrics
from alphacore.services.base import InvalidInputError
from alphacore.services.analysis.interface import AnalysisServiceInterface
from alphacore.services.indicators.calculations import (
    sma,
    rsi,
    macd,
    has_valid_values,
)
from alphacore.services.risk.service import calculate_risk_metrics

logger = logging.getLogger(__name__)

MACD_SERIES_NAME = "MACD"


class AnalysisService(AnalysisServiceInterface):
    """
    Analysis Engine Service.

    Produces indicator series, risk metrics and a recommendation for a
    single instrument. Stateless apart from its configuration, so one
    instance can serve concurrent callers.
    """

    def __init__(
        self,
        precision: Optional[int] = None,
        *,
        rsi_overbought: Optional[float] = None,
        rsi_oversold: Optional[float] = None,
        high_volatility_threshold: Optional[float] = None,
        drawdown_threshold: Optional[float] = None,
    ):
        self.precision = settings.precision if precision is None else precision

        self.rsi_period = settings.rsi_period
        self.rsi_overbought = settings.rsi_overbought if rsi_overbought is None else rsi_overbought
        self.rsi_oversold = settings.rsi_oversold if rsi_oversold is None else rsi_oversold
        self.sma_short_period = settings.sma_short_period
        self.sma_long_period = settings.sma_long_period
        self.macd_fast = settings.macd_fast
        self.macd_slow = settings.macd_slow
        self.macd_signal = settings.macd_signal
        self.macd_vote_lookback = settings.macd_vote_lookback
        self.high_volatility_threshold = (
            settings.high_volatility_threshold
            if high_volatility_threshold is None
            else high_volatility_threshold
        )
        self.drawdown_threshold = (
            settings.drawdown_threshold if drawdown_threshold is None else drawdown_threshold
        )
        self.risk_free_rate = settings.risk_free_rate
        self.trading_days = settings.trading_days_per_year

    @classmethod
    def with_precision(cls, precision: int) -> "AnalysisService":
        return cls(precision=precision)

    @property
    def rsi_name(self) -> str:
        return f"RSI({self.rsi_period})"

    async def execute(self, input_data: list[PricePoint]) -> AnalysisResult:
        """Analyze one instrument (async call convention)."""
        return self.analyze(input_data)

    def analyze(self, series: list[PricePoint]) -> AnalysisResult:
        """Analyze a single-symbol, time-ascending series."""
        if not series:
            raise InvalidInputError(self.name, "No market data provided")

        symbol = series[0].symbol
        prices = np.array([p.price for p in series], dtype=np.float64)
        timestamps = [p.timestamp for p in series]

        logger.debug("Analyzing %s over %d points", symbol, len(series))

        indicators = [
            self._rsi_series(prices, timestamps),
            IndicatorSeries(
                name=f"SMA({self.sma_short_period})",
                timestamps=timestamps,
                values=sma(prices, self.sma_short_period, self.precision),
            ),
            IndicatorSeries(
                name=f"SMA({self.sma_long_period})",
                timestamps=timestamps,
                values=sma(prices, self.sma_long_period, self.precision),
            ),
            # Only the MACD line is reported; signal/histogram are dropped
            IndicatorSeries(
                name=MACD_SERIES_NAME,
                timestamps=timestamps,
                values=macd(
                    prices, self.macd_fast, self.macd_slow, self.macd_signal, self.precision
                ).macd_line,
            ),
        ]

        risk = calculate_risk_metrics(prices, self.risk_free_rate, self.trading_days)

        recommendation = self._generate_recommendation(indicators, risk)
        confidence = self._calculate_confidence(indicators)

        logger.debug(
            "%s: recommendation=%s confidence=%.1f", symbol, recommendation.value, confidence
        )

        return AnalysisResult(
            symbol=symbol,
            computed_at=datetime.now(timezone.utc),
            indicators=indicators,
            risk=risk,
            recommendation=recommendation,
            confidence=confidence,
        )

    def analyze_many(
        self, series_by_symbol: dict[str, list[PricePoint]]
    ) -> dict[str, AnalysisResult]:
        """Analyze several instruments independently."""
        results = {}

        for symbol, series in series_by_symbol.items():
            try:
                results[symbol] = self.analyze(series)
            except InvalidInputError as e:
                # Log error but continue with other symbols
                logger.warning("Skipping %s: %s", symbol, e.message)

        return results

    def _classify_rsi(self, value: float) -> SignalType:
        if value > self.rsi_overbought:
            return SignalType.SELL
        if value < self.rsi_oversold:
            return SignalType.BUY
        return SignalType.HOLD

    def _rsi_series(self, prices: np.ndarray, timestamps: list[datetime]) -> IndicatorSeries:
        values = rsi(prices, self.rsi_period, self.precision)
        return IndicatorSeries(
            name=self.rsi_name,
            timestamps=timestamps,
            values=values,
            signals=[self._classify_rsi(v) for v in values],
        )

    def _generate_recommendation(
        self, indicators: list[IndicatorSeries], risk: RiskMetrics
    ) -> SignalType:
        """
        Fuse indicator votes with risk adjustments.

        RSI votes from its latest value. MACD votes by comparing its latest
        value to the one `macd_vote_lookback` bars earlier, standing in for
        a signal-line crossover. SMA series do not vote.
        """
        buy_signals = 0
        sell_signals = 0

        for indicator in indicators:
            if not indicator.values:
                continue

            latest = indicator.values[-1]

            if indicator.name == self.rsi_name:
                vote = self._classify_rsi(latest)
                if vote == SignalType.BUY:
                    buy_signals += 1
                elif vote == SignalType.SELL:
                    sell_signals += 1
            elif indicator.name == MACD_SERIES_NAME:
                earlier_index = max(len(indicator.values) - 1 - self.macd_vote_lookback, 0)
                if latest > indicator.values[earlier_index]:
                    buy_signals += 1
                else:
                    sell_signals += 1

        if risk.volatility > self.high_volatility_threshold:
            buy_signals //= 2

        if risk.max_drawdown > self.drawdown_threshold:
            sell_signals += 1

        logger.debug("Votes: buy=%d sell=%d", buy_signals, sell_signals)

        if buy_signals > sell_signals:
            return SignalType.BUY
        if sell_signals > buy_signals:
            return SignalType.SELL
        return SignalType.HOLD

    def _calculate_confidence(self, indicators: list[IndicatorSeries]) -> float:
        """Share of indicators with at least one real (non-placeholder) value."""
        if not indicators:
            return 0.0

        available = sum(1 for i in indicators if has_valid_values(i.values))
        confidence = (available / len(indicators)) * 100
        return min(max(confidence, 0.0), 100.0)

    async def health_check(self) -> bool:
        """Analysis service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance
