"""Kline ingestion logic: fetch from the exchange, then write to a file."""

import logging
from datetime import datetime, timezone
from typing import Iterable

from ..models.candle import Candle
from ..models.results import ErrorKind, FetchResult, IngestionResult, WriteResult
from ..sources.base import Interval, KlineFetchError, KlineParseError, interval_value
from ..sources.binance import BinanceKlinesAdapter
from ..writers.jsonl_writer import JsonLinesWriter

logger = logging.getLogger(__name__)


def _elapsed_ms(op_start: datetime) -> int:
    return int((datetime.now(timezone.utc) - op_start).total_seconds() * 1000)


class KlineIngestor:
    """Orchestrates a single fetch-then-write run."""

    def __init__(
        self,
        exchange_adapter: BinanceKlinesAdapter,
        writer: JsonLinesWriter | None = None,
    ) -> None:
        """Initialize kline ingestor.

        Args:
            exchange_adapter: Handles exchange communication
            writer: Handles file output (default: JsonLinesWriter)
        """
        self.exchange = exchange_adapter
        self.writer = writer or JsonLinesWriter()

    def fetch(self, symbol: str, interval: Interval | str) -> FetchResult:
        """Fetch klines and report the outcome as a result value.

        Args:
            symbol: Trading pair (e.g., "BTCUSDT")
            interval: Interval enum or raw interval code

        Returns:
            FetchResult holding every candle on success, none on failure
        """
        interval_code = interval_value(interval)
        op_start = datetime.now(timezone.utc)

        try:
            candles = self.exchange.get_klines(symbol, interval_code)
        except KlineParseError as e:
            logger.error(f"Failed to parse klines for {symbol} {interval_code}: {e}", exc_info=True)
            return FetchResult(
                symbol=symbol,
                interval=interval_code,
                status="error",
                execution_time_ms=_elapsed_ms(op_start),
                error_kind=ErrorKind.PARSE_FAILED,
                errors=[str(e)],
            )
        except KlineFetchError as e:
            logger.error(f"Failed to fetch klines for {symbol} {interval_code}: {e}", exc_info=True)
            return FetchResult(
                symbol=symbol,
                interval=interval_code,
                status="error",
                execution_time_ms=_elapsed_ms(op_start),
                error_kind=ErrorKind.FETCH_FAILED,
                errors=[str(e)],
            )

        return FetchResult(
            symbol=symbol,
            interval=interval_code,
            status="success",
            execution_time_ms=_elapsed_ms(op_start),
            candles=candles,
        )

    def write(self, candles: Iterable[Candle], path: str) -> WriteResult:
        """Write candles as JSON lines to ``path``."""
        return self.writer.write(candles, path)

    def run(self, symbol: str, interval: Interval | str, path: str) -> IngestionResult:
        """Fetch klines then write them to ``path``.

        A failed fetch short-circuits the run: the output file is left untouched.
        """
        interval_code = interval_value(interval)
        logger.info(f"Ingesting {symbol} {interval_code} klines into {path}")
        op_start = datetime.now(timezone.utc)

        fetch_result = self.fetch(symbol, interval_code)
        if not fetch_result.ok:
            return IngestionResult(
                symbol=symbol,
                interval=interval_code,
                output_path=str(path),
                candles_fetched=0,
                lines_written=0,
                status="error",
                execution_time_ms=_elapsed_ms(op_start),
                error_kind=fetch_result.error_kind,
                errors=fetch_result.errors,
            )

        write_result = self.write(fetch_result.candles, path)

        return IngestionResult(
            symbol=symbol,
            interval=interval_code,
            output_path=str(path),
            candles_fetched=len(fetch_result.candles),
            lines_written=write_result.lines_written,
            status=write_result.status,
            execution_time_ms=_elapsed_ms(op_start),
            error_kind=write_result.error_kind,
            errors=write_result.errors,
        )
