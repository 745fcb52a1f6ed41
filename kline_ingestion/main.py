"""Binance kline ingestion job.

Fetches klines for one symbol/interval pair and writes them to a JSON-lines file.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import IngestionConfig
from .ingestion.kline_ingestor import KlineIngestor
from .sources.binance import BinanceKlinesAdapter

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line flags. Unset flags fall back to environment configuration."""
    parser = argparse.ArgumentParser(
        prog="fetch-klines",
        description="Fetch Binance klines and write them as JSON lines.",
    )
    parser.add_argument("--symbol", help="Trading pair, e.g. BTCUSDT (env: KLINE_SYMBOL)")
    parser.add_argument("--interval", help="Kline interval, e.g. 1d (env: KLINE_INTERVAL)")
    parser.add_argument("--output", dest="output_path", help="Output file (env: KLINE_OUTPUT_PATH)")
    parser.add_argument("--base-url", dest="base_url", help="API host (env: BINANCE_BASE_URL)")
    parser.add_argument(
        "--timeout",
        dest="timeout_seconds",
        type=float,
        help="Request timeout in seconds (env: BINANCE_TIMEOUT_SECONDS)",
    )
    parser.add_argument("--log-level", dest="log_level", help="Logging level (env: LOG_LEVEL)")
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main(argv=None) -> int:
    """Main entry point. Returns the process exit code."""
    # Load .env file if it exists
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    args = parse_args(argv)

    try:
        config = IngestionConfig.from_env().with_overrides(**vars(args))
        setup_logging(config.log_level)
        config.validate()
    except ValueError as e:
        setup_logging("INFO")
        logger.error(f"❌ Invalid configuration: {e}")
        return 1

    logger.info("🚀 Starting Binance kline ingestion...")
    logger.info(f"   - Symbol: {config.symbol}")
    logger.info(f"   - Interval: {config.interval}")
    logger.info(f"   - Output: {config.output_path}")

    adapter = BinanceKlinesAdapter(base_url=config.base_url, timeout=config.timeout_seconds)
    ingestor = KlineIngestor(adapter)

    result = ingestor.run(config.symbol, config.interval, config.output_path)

    if not result.ok:
        logger.error(f"❌ Job failed ({result.error_kind.value}): {'; '.join(result.errors)}")
        return 1

    logger.info(
        f"✅ Data fetched and serialized to file: {result.output_path} "
        f"({result.lines_written} candles, {result.execution_time_ms} ms)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
