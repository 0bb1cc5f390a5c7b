"""
Alpha Analytics Schema Contracts

Value types exchanged with the analysis engine.
All records are immutable and serialize to JSON with these field names.
"""

from alphacore.schemas.market import (
    PricePoint,
    SignalType,
)
from alphacore.schemas.analysis import (
    IndicatorSeries,
    RiskMetrics,
    AnalysisResult,
)

__all__ = [
    # Market
    "PricePoint",
    "SignalType",
    # Analysis
    "IndicatorSeries",
    "RiskMetrics",
    "AnalysisResult",
]
