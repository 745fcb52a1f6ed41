"""Strict validation model for raw kline rows."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .candle import Candle

# Position of each field in the /api/v3/klines row array
KLINE_FIELDS = (
    "open_time",
    "open_price",
    "high_price",
    "low_price",
    "close_price",
    "volume",
    "close_time",
    "quote_asset_volume",
    "number_of_trades",
    "taker_buy_base_asset_volume",
    "taker_buy_quote_asset_volume",
    "unused_field",
)


class KlineRow(BaseModel):
    """Validated kline structure.

    Strict mode rejects numeric strings at integer positions and numbers at
    string positions, so a row that does not match the API contract never
    becomes a half-filled candle.
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    open_time: int = Field(..., description="Kline open time (ms epoch)")
    open_price: str = Field(..., description="Open price")
    high_price: str = Field(..., description="High price")
    low_price: str = Field(..., description="Low price")
    close_price: str = Field(..., description="Close price")
    volume: str = Field(..., description="Base asset volume")
    close_time: int = Field(..., description="Kline close time (ms epoch)")
    quote_asset_volume: str = Field(..., description="Quote asset volume")
    number_of_trades: int = Field(..., description="Number of trades")
    taker_buy_base_asset_volume: str = Field(..., description="Taker buy base asset volume")
    taker_buy_quote_asset_volume: str = Field(..., description="Taker buy quote asset volume")
    unused_field: str = Field(..., description="Unused field, ignored by the API")

    @classmethod
    def from_array(cls, row: Any) -> "KlineRow":
        """Validate a positional kline array.

        Args:
            row: Decoded JSON array from the klines response

        Returns:
            Validated KlineRow

        Raises:
            ValueError: If the row is not a list of exactly 12 elements or an
                element has the wrong type
        """
        if not isinstance(row, list):
            raise ValueError(f"Kline row must be an array, got {type(row).__name__}")
        if len(row) != len(KLINE_FIELDS):
            raise ValueError(
                f"Kline row must have {len(KLINE_FIELDS)} elements, got {len(row)}"
            )
        return cls.model_validate(dict(zip(KLINE_FIELDS, row)))

    def to_candle(self) -> Candle:
        """Convert to the canonical candle model."""
        return Candle(**self.model_dump())
