"""Configuration management."""

import os
from dataclasses import dataclass, replace


@dataclass
class IngestionConfig:
    """Kline ingestion configuration from environment variables."""

    base_url: str = "https://api.binance.com"
    symbol: str = "BTCUSDT"
    interval: str = "1d"
    output_path: str = "binance_kline_data.json"
    timeout_seconds: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "IngestionConfig":
        """Load configuration from environment variables.

        Reads:
        - BINANCE_BASE_URL (default: https://api.binance.com)
        - KLINE_SYMBOL (default: BTCUSDT)
        - KLINE_INTERVAL (default: 1d)
        - KLINE_OUTPUT_PATH (default: binance_kline_data.json)
        - BINANCE_TIMEOUT_SECONDS (default: 30)
        - LOG_LEVEL (default: INFO)
        """
        timeout_str = os.getenv("BINANCE_TIMEOUT_SECONDS", "30")
        try:
            timeout_seconds = float(timeout_str)
        except ValueError as e:
            raise ValueError(
                f"BINANCE_TIMEOUT_SECONDS must be a number of seconds. Got: {timeout_str}"
            ) from e

        return cls(
            base_url=os.getenv("BINANCE_BASE_URL", "https://api.binance.com"),
            symbol=os.getenv("KLINE_SYMBOL", "BTCUSDT").strip(),
            interval=os.getenv("KLINE_INTERVAL", "1d").strip(),
            output_path=os.getenv("KLINE_OUTPUT_PATH", "binance_kline_data.json"),
            timeout_seconds=timeout_seconds,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def with_overrides(self, **overrides) -> "IngestionConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> None:
        """Validate configuration."""
        if not self.symbol:
            raise ValueError("KLINE_SYMBOL is required")
        if not self.interval:
            raise ValueError("KLINE_INTERVAL is required")
        if not self.output_path:
            raise ValueError("KLINE_OUTPUT_PATH is required")
        if self.timeout_seconds <= 0:
            raise ValueError("BINANCE_TIMEOUT_SECONDS must be greater than 0")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("BINANCE_BASE_URL must start with http:// or https://")
