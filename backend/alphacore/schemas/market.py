"""
CONTRACT 1: Price Series

Input to the analysis engine: time-ordered observations for one instrument.

Callers (ingestion collaborators) must supply points for a single symbol,
sorted ascending by timestamp. The engine relies on this but does not check it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class SignalType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"
    NONE = "NONE"


# =============================================================================
# INPUT: PricePoint
# =============================================================================


class PricePoint(BaseModel):
    """
    Single price/volume observation.
    Sent by: Data acquisition layer
    Received by: Analysis Engine
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Instrument symbol (e.g., 'AAPL')")
    timestamp: datetime
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Last/close price")
    volume: int = Field(..., ge=0)
    bid: Optional[float] = None
    ask: Optional[float] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None

    @classmethod
    def from_ohlcv(
        cls,
        symbol: str,
        timestamp: datetime,
        open: float,
        high: float,
        low: float,
        close: float,
        volume: int,
    ) -> "PricePoint":
        """Build a point from a candle; the close becomes the price."""
        return cls(
            symbol=symbol,
            timestamp=timestamp,
            price=close,
            volume=volume,
            open=open,
            high=high,
            low=low,
        )
