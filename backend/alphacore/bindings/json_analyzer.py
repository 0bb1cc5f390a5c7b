"""
JSON Analyzer Binding

Adapter for hosts that exchange JSON with the engine (browser-embedded
runtimes, worker processes). Accepts raw payloads, returns JSON-ready dicts
and lists, and maps engine errors onto binding errors.
"""

import logging
import uuid
from typing import Any, Optional, Union

from pydantic import TypeAdapter, ValidationError

from alphacore.core.config import settings
from alphacore.core.market_hours import current_timestamp_ms
from alphacore.core.numeric import percent_change, round_to
from alphacore.core.validation import is_valid_symbol
from alphacore.schemas.market import PricePoint
from alphacore.services.base import InvalidInputError
from alphacore.services.analysis.service import AnalysisService
from alphacore.services.indicators.calculations import (
    PriceInput,
    sma,
    ema,
    rsi,
    macd,
    bollinger_bands,
    calculate_all_indicators,
)
from alphacore.bindings.errors import AnalysisFailedError, SerializationError

logger = logging.getLogger(__name__)

_POINTS_ADAPTER = TypeAdapter(list[PricePoint])

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CNY": "¥",
    "EUR": "€",
}

Payload = Union[str, bytes, list[dict[str, Any]]]


class JsonAnalyzer:
    """JSON-in/JSON-out facade over the analysis engine and indicator library."""

    name = "JsonAnalyzer"

    def __init__(self, precision: Optional[int] = None):
        self.precision = settings.precision if precision is None else precision
        self.engine = AnalysisService(precision=self.precision)

    @classmethod
    def with_precision(cls, precision: int) -> "JsonAnalyzer":
        return cls(precision=precision)

    # =========================================================================
    # ANALYSIS
    # =========================================================================

    def _decode_points(self, payload: Payload) -> list[PricePoint]:
        try:
            if isinstance(payload, (str, bytes)):
                return _POINTS_ADAPTER.validate_json(payload)
            return _POINTS_ADAPTER.validate_python(payload)
        except ValidationError as e:
            raise SerializationError(
                self.name, "Could not decode price points", details={"errors": e.errors()}
            ) from e

    async def analyze_symbol(self, symbol: str, payload: Payload) -> dict[str, Any]:
        """
        Analyze one symbol from a JSON payload of price points.

        Points for other symbols are dropped and the rest sorted by time,
        so the engine's single-symbol/ascending precondition holds.
        """
        points = self._decode_points(payload)
        series = sorted((p for p in points if p.symbol == symbol), key=lambda p: p.timestamp)

        if len(series) != len(points):
            logger.debug(
                "Dropped %d points not matching %s", len(points) - len(series), symbol
            )

        try:
            result = await self.engine.execute(series)
        except InvalidInputError as e:
            raise AnalysisFailedError(
                self.name, f"Analysis failed for {symbol}: {e.message}", details={"symbol": symbol}
            ) from e

        return result.model_dump(mode="json")

    # =========================================================================
    # INDICATORS
    # =========================================================================

    def calculate_rsi(self, prices: PriceInput, period: int) -> list[float]:
        return rsi(prices, period, self.precision)

    def calculate_sma(self, prices: PriceInput, period: int) -> list[float]:
        return sma(prices, period, self.precision)

    def calculate_ema(self, prices: PriceInput, period: int) -> list[float]:
        return ema(prices, period, self.precision)

    def calculate_bollinger_bands(
        self, prices: PriceInput, period: int, std_dev: float
    ) -> dict[str, list[float]]:
        bands = bollinger_bands(prices, period, std_dev, self.precision)
        return {"upper": bands.upper, "middle": bands.middle, "lower": bands.lower}

    def calculate_macd(
        self, prices: PriceInput, fast_period: int, slow_period: int, signal_period: int
    ) -> dict[str, list[float]]:
        result = macd(prices, fast_period, slow_period, signal_period, self.precision)
        return {
            "macd": result.macd_line,
            "signal": result.signal_line,
            "histogram": result.histogram,
        }

    def calculate_all_indicators(
        self,
        prices: PriceInput,
        rsi_period: int,
        sma_short: int,
        sma_long: int,
        macd_fast: int,
        macd_slow: int,
        macd_signal: int,
    ) -> dict[str, Any]:
        """Batch calculation; Bollinger uses the configured period and k."""
        bundle = calculate_all_indicators(
            prices,
            rsi_period=rsi_period,
            sma_short=sma_short,
            sma_long=sma_long,
            macd_fast=macd_fast,
            macd_slow=macd_slow,
            macd_signal=macd_signal,
            bollinger_period=settings.bollinger_period,
            bollinger_k=settings.bollinger_k,
            precision=self.precision,
        )
        return {
            "rsi": bundle.rsi,
            "sma_short": bundle.sma_short,
            "sma_long": bundle.sma_long,
            "macd": {
                "line": bundle.macd.macd_line,
                "signal": bundle.macd.signal_line,
                "histogram": bundle.macd.histogram,
            },
            "bollinger": {
                "upper": bundle.bollinger.upper,
                "middle": bundle.bollinger.middle,
                "lower": bundle.bollinger.lower,
            },
        }

    # =========================================================================
    # UTILITY FUNCTIONS
    # =========================================================================

    @staticmethod
    def round_to(value: float, precision: int) -> float:
        return round_to(value, precision)

    @staticmethod
    def percent_change(old_value: float, new_value: float) -> float:
        return percent_change(old_value, new_value)

    @staticmethod
    def validate_symbol(symbol: str) -> bool:
        return is_valid_symbol(symbol)

    @staticmethod
    def format_currency(value: float, currency: str) -> str:
        """Two-decimal amount with a symbol prefix for USD/CNY/EUR."""
        prefix = CURRENCY_SYMBOLS.get(currency.upper(), "")
        return f"{prefix}{value:.2f}"

    @staticmethod
    def current_timestamp_ms() -> int:
        return current_timestamp_ms()

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())
