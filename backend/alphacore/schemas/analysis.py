"""
CONTRACT 2: Analysis Engine

Input: list[PricePoint] (single symbol, ascending time)
Output: AnalysisResult

Pure Python/NumPy - all math is deterministic.
Field names are the serialized (JSON) contract consumed by UI, HTTP and
export layers.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from alphacore.schemas.market import SignalType


# =============================================================================
# OUTPUT: Components
# =============================================================================


class IndicatorSeries(BaseModel):
    """
    One indicator aligned to the input series.

    Leading 0.0 values are placeholders ("not yet available"), not readings.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="e.g. 'RSI(14)', 'SMA(20)', 'MACD'")
    timestamps: list[datetime]
    values: list[float]
    signals: list[SignalType] = Field(
        default_factory=list, description="Per-point signal, or empty if the indicator has none"
    )

    @model_validator(mode="after")
    def _check_alignment(self) -> "IndicatorSeries":
        if len(self.values) != len(self.timestamps):
            raise ValueError(
                f"{self.name}: {len(self.values)} values for {len(self.timestamps)} timestamps"
            )
        if self.signals and len(self.signals) != len(self.values):
            raise ValueError(
                f"{self.name}: {len(self.signals)} signals for {len(self.values)} values"
            )
        return self


class RiskMetrics(BaseModel):
    """Risk summary computed from the raw price sequence."""

    model_config = ConfigDict(frozen=True)

    volatility: float = Field(..., ge=0, description="Annualized std of simple returns")
    sharpe_ratio: Optional[float] = None
    max_drawdown: float = Field(..., ge=0, le=1, description="Largest peak-to-trough decline")
    beta: Optional[float] = Field(default=None, description="Always None: no benchmark series")


# =============================================================================
# OUTPUT: AnalysisResult
# =============================================================================


class AnalysisResult(BaseModel):
    """
    Complete analysis for one instrument.
    Sent by: Analysis Engine
    Received by: UI / HTTP layer / exporters
    """

    model_config = ConfigDict(frozen=True)

    symbol: str
    computed_at: datetime
    indicators: list[IndicatorSeries]
    risk: RiskMetrics
    recommendation: SignalType
    confidence: float = Field(..., ge=0, le=100, description="Indicator availability, 0-100")
