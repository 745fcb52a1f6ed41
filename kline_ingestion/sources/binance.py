"""Binance spot REST adapter for kline/candlestick data."""

import logging
from typing import List

import requests

from ..models.candle import Candle
from ..models.kline_row import KlineRow
from .base import Interval, KlineFetchError, KlineParseError, interval_value

logger = logging.getLogger(__name__)

KLINES_PATH = "/api/v3/klines"


class BinanceKlinesAdapter:
    """Binance public market data adapter (no authentication)."""

    def __init__(
        self,
        base_url: str = "https://api.binance.com",
        timeout: float = 30,
    ):
        """Initialize Binance adapter.

        Args:
            base_url: API host including scheme (default: https://api.binance.com)
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def build_url(self, symbol: str, interval: Interval | str) -> str:
        """Build the klines request URI.

        Args:
            symbol: Trading pair (e.g., "BTCUSDT")
            interval: Interval enum or raw interval code (e.g., "1d")

        Returns:
            Full request URI (e.g., "https://api.binance.com/api/v3/klines?symbol=BTCUSDT&interval=1d")
        """
        params = {"symbol": symbol, "interval": interval_value(interval)}
        request = requests.Request("GET", f"{self.base_url}{KLINES_PATH}", params=params)
        return request.prepare().url

    def get_klines(self, symbol: str, interval: Interval | str) -> List[Candle]:
        """Fetch klines for a symbol and interval.

        Args:
            symbol: Trading pair (e.g., "BTCUSDT")
            interval: Interval enum or raw interval code

        Returns:
            Candles in the order returned by the API (oldest first)

        Raises:
            KlineFetchError: If the request fails or returns a non-success status
            KlineParseError: If the body is not a JSON array of valid kline rows
        """
        url = self.build_url(symbol, interval)
        logger.info(f"Fetching klines: {url}")

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            detail = self._error_detail(e.response)
            logger.error(f"Binance API returned HTTP {status_code} for {symbol}: {detail}")
            raise KlineFetchError(
                f"Failed to fetch klines for {symbol} {interval_value(interval)}: "
                f"HTTP {status_code} {detail}".rstrip(),
                status_code=status_code,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Binance API request failed: {e}")
            raise KlineFetchError(f"Failed to fetch klines: {e}") from e

        # raise_for_status only covers 4xx/5xx
        if not 200 <= response.status_code < 300:
            status_code = response.status_code
            logger.error(f"Binance API returned HTTP {status_code} for {symbol}")
            raise KlineFetchError(
                f"Failed to fetch klines for {symbol} {interval_value(interval)}: "
                f"unexpected HTTP {status_code}",
                status_code=status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise KlineParseError(f"Klines response is not valid JSON: {e}") from e

        candles = self.parse_klines(payload)
        logger.info(f"Successfully fetched {len(candles)} klines for {symbol}")
        return candles

    def parse_klines(self, payload) -> List[Candle]:
        """Parse a decoded klines response into Candle objects.

        Any malformed row fails the whole payload; no partial list is returned.
        """
        if not isinstance(payload, list):
            raise KlineParseError(
                f"Klines response must be a JSON array, got {type(payload).__name__}"
            )

        candles = []
        for index, row in enumerate(payload):
            try:
                candles.append(KlineRow.from_array(row).to_candle())
            except ValueError as e:
                raise KlineParseError(f"Invalid kline row at index {index}: {e}") from e
        return candles

    @staticmethod
    def _error_detail(response) -> str:
        """Extract Binance's error message ({"code": ..., "msg": ...}) if present."""
        if response is None:
            return ""
        try:
            body = response.json()
        except ValueError:
            return (response.text or "")[:200]
        if isinstance(body, dict) and "msg" in body:
            return f"(code {body.get('code')}): {body['msg']}"
        return str(body)[:200]
