"""
Market Hours Utility

Trading-session helpers for the regular US equity session and
epoch-millisecond timestamp conversion.
"""

from datetime import datetime, date, timedelta, timezone
from enum import Enum
from typing import Optional
import pytz

from alphacore.core.config import settings
from alphacore.services.base import InvalidInputError

MARKET_TZ = pytz.timezone(settings.market_timezone)

# Regular session (exchange local time)
MARKET_OPEN = "09:30"
MARKET_CLOSE = "16:00"


class MarketSession(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


def current_timestamp_ms() -> int:
    """Current UTC time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def timestamp_to_datetime(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    try:
        return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInputError("MarketHours", f"Invalid timestamp: {timestamp_ms}") from e


def to_market_time(dt: datetime) -> datetime:
    """Express a datetime in exchange local time (naive values are UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(MARKET_TZ)


def is_weekend(dt: date) -> bool:
    """Check if date is a weekend."""
    return dt.weekday() >= 5  # Saturday = 5, Sunday = 6


def is_trading_day(dt: date) -> bool:
    """Check if date is a trading day (holidays are not modelled)."""
    return not is_weekend(dt)


def get_market_session(dt: datetime) -> MarketSession:
    local = to_market_time(dt)

    if not is_trading_day(local.date()):
        return MarketSession.CLOSED

    time_str = local.strftime("%H:%M")
    if MARKET_OPEN <= time_str <= MARKET_CLOSE:
        return MarketSession.OPEN
    return MarketSession.CLOSED


def is_trading_time(dt: datetime) -> bool:
    """Check if a moment falls inside the regular session, 16:00 inclusive."""
    return get_market_session(dt) == MarketSession.OPEN


def get_next_trading_day(dt: Optional[datetime] = None) -> datetime:
    """Same instant one day later, repeated until it falls on a New York weekday."""
    if dt is None:
        dt = datetime.now(timezone.utc)

    next_day = dt + timedelta(days=1)
    while not is_trading_day(to_market_time(next_day).date()):
        next_day += timedelta(days=1)

    return next_day
