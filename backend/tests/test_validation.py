"""Tests for price data validation utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from alphacore.core.validation import is_valid_symbol, validate_price_point, validate_price_range
from alphacore.schemas.market import PricePoint
from alphacore.services.base import InvalidInputError


def make_point(**overrides) -> PricePoint:
    fields = {
        "symbol": "AAPL",
        "timestamp": datetime.now(timezone.utc) - timedelta(minutes=5),
        "price": 150.0,
        "volume": 1000,
        "bid": 149.5,
        "ask": 150.5,
    }
    fields.update(overrides)
    return PricePoint(**fields)


class TestSymbol:
    @pytest.mark.parametrize("symbol", ["AAPL", "BRK.B", "0700", "A"])
    def test_valid(self, symbol):
        assert is_valid_symbol(symbol)

    @pytest.mark.parametrize("symbol", ["", "TOO_LONG_SYMBOL_12345", "AB-C", "A B"])
    def test_invalid(self, symbol):
        assert not is_valid_symbol(symbol)


class TestPricePoint:
    def test_valid_point(self):
        validate_price_point(make_point())

    def test_naive_timestamp_treated_as_utc(self):
        validate_price_point(make_point(timestamp=datetime(2024, 5, 1, 12, 0)))

    def test_empty_symbol(self):
        with pytest.raises(InvalidInputError, match="Symbol cannot be empty"):
            validate_price_point(make_point(symbol=""))

    def test_future_timestamp(self):
        future = datetime.now(timezone.utc) + timedelta(days=1)
        with pytest.raises(InvalidInputError, match="future"):
            validate_price_point(make_point(timestamp=future))


class TestPriceRange:
    def test_reasonable_price(self):
        validate_price_range(150.0, "AAPL")

    def test_non_positive(self):
        with pytest.raises(InvalidInputError):
            validate_price_range(0.0, "AAPL")

    def test_unreasonably_high(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_price_range(2_000_000.0, "AAPL")
        assert exc_info.value.details["symbol"] == "AAPL"
