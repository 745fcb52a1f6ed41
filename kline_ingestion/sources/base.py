"""Base classes for exchange adapters."""

from enum import Enum


class ExchangeError(Exception):
    """Base exception for exchange-related errors."""

    pass


class KlineFetchError(ExchangeError):
    """Raised when the klines request fails at the transport or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class KlineParseError(ExchangeError):
    """Raised when the klines response body does not match the row contract."""

    pass


class Interval(str, Enum):
    """Kline interval codes accepted by the Binance spot API."""

    ONE_SECOND = "1s"
    ONE_MINUTE = "1m"
    THREE_MINUTE = "3m"
    FIVE_MINUTE = "5m"
    FIFTEEN_MINUTE = "15m"
    THIRTY_MINUTE = "30m"
    ONE_HOUR = "1h"
    TWO_HOUR = "2h"
    FOUR_HOUR = "4h"
    SIX_HOUR = "6h"
    EIGHT_HOUR = "8h"
    TWELVE_HOUR = "12h"
    ONE_DAY = "1d"
    THREE_DAY = "3d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1M"


def interval_value(interval: "Interval | str") -> str:
    """Return the wire code for an interval.

    Unknown strings pass through untouched; the API is the one that rejects them.
    """
    if hasattr(interval, "value"):
        return interval.value
    return interval
