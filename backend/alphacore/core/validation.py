"""
Price Data Validation

Checks used by ingestion-side callers before a series reaches the engine.
The engine itself does not run them.
"""

from datetime import datetime, timezone

from alphacore.schemas.market import PricePoint
from alphacore.services.base import InvalidInputError

MAX_SYMBOL_LENGTH = 10
MAX_REASONABLE_PRICE = 1_000_000.0

_SERVICE = "Validation"


def is_valid_symbol(symbol: str) -> bool:
    """Non-empty, at most 10 chars, alphanumerics and dots only."""
    return (
        bool(symbol)
        and len(symbol) <= MAX_SYMBOL_LENGTH
        and all(c.isalnum() or c == "." for c in symbol)
    )


def validate_price_point(point: PricePoint) -> None:
    if not point.symbol:
        raise InvalidInputError(_SERVICE, "Symbol cannot be empty")

    if point.price <= 0:
        raise InvalidInputError(_SERVICE, "Price must be positive")

    timestamp = point.timestamp
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if timestamp > datetime.now(timezone.utc):
        raise InvalidInputError(
            _SERVICE,
            "Timestamp cannot be in the future",
            details={"symbol": point.symbol, "timestamp": point.timestamp.isoformat()},
        )


def validate_price_range(price: float, symbol: str) -> None:
    """Basic sanity bounds on a quoted price."""
    if price <= 0:
        raise InvalidInputError(_SERVICE, "Price must be positive", details={"symbol": symbol})

    if price > MAX_REASONABLE_PRICE:
        raise InvalidInputError(
            _SERVICE, "Price seems unreasonably high", details={"symbol": symbol, "price": price}
        )
