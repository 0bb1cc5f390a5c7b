"""Shared fixtures and factories for the analytics tests."""

from datetime import datetime, timedelta, timezone

import pytest

from alphacore.schemas.market import PricePoint
from alphacore.services.analysis.service import AnalysisService


START = datetime(2025, 1, 2, 21, 0, tzinfo=timezone.utc)


def make_series(
    prices: list[float],
    symbol: str = "AAPL",
    start: datetime = START,
    step: timedelta = timedelta(days=1),
) -> list[PricePoint]:
    """Build a time-ascending single-symbol series, one point per step."""
    return [
        PricePoint(
            symbol=symbol,
            timestamp=start + step * i,
            price=price,
            volume=1000 + 100 * i,
        )
        for i, price in enumerate(prices)
    ]


def rising_prices(n: int, start: float = 100.0, step: float = 1.0) -> list[float]:
    return [start + step * i for i in range(n)]


@pytest.fixture
def service() -> AnalysisService:
    return AnalysisService()
