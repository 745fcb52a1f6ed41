"""Canonical kline candle model."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Candle:
    """One Binance kline.

    Prices and volumes are kept as the decimal strings sent by the API so no
    precision is lost on the way to the output file.
    """

    open_time: int
    open_price: str
    high_price: str
    low_price: str
    close_price: str
    volume: str
    close_time: int
    quote_asset_volume: str
    number_of_trades: int
    taker_buy_base_asset_volume: str
    taker_buy_quote_asset_volume: str
    unused_field: str

    @classmethod
    def from_row(cls, row: Any) -> "Candle":
        """Build a candle from a 12-element positional kline array.

        Raises:
            ValueError: If the row has the wrong length or a wrong type at any position
        """
        from .kline_row import KlineRow

        return KlineRow.from_array(row).to_candle()

    @classmethod
    def from_dict(cls, data: Any) -> "Candle":
        """Build a candle from a mapping keyed by field name (one written line)."""
        from .kline_row import KlineRow

        return KlineRow.model_validate(data).to_candle()

    def to_dict(self) -> dict[str, Any]:
        """Field name to value mapping, in field order."""
        return asdict(self)
