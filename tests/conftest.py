"""Shared test fixtures and utilities."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from kline_ingestion.models.candle import Candle

SAMPLE_ROW = [
    1499040000000,
    "0.01634790",
    "0.80000000",
    "0.01575800",
    "0.01577100",
    "148976.11427815",
    1499644799999,
    "2434.19055334",
    308,
    "1756.87402397",
    "28.46694368",
    "0",
]


def create_kline_row(open_time: int, close: str = "50050.00000000", trades: int = 100) -> list:
    """Helper to create a well-formed kline row.

    Args:
        open_time: Kline open time (ms epoch)
        close: Close price string
        trades: Number of trades

    Returns:
        12-element kline row
    """
    return [
        open_time,
        "50000.00000000",
        "50100.00000000",
        "49900.00000000",
        close,
        "1.50000000",
        open_time + 86_399_999,
        "75075.00000000",
        trades,
        "0.75000000",
        "37537.50000000",
        "0",
    ]


def create_mock_response(status_code: int = 200, payload=None, text: str | None = None) -> MagicMock:
    """Helper to create a mock requests.Response.

    Args:
        status_code: HTTP status code
        payload: Decoded JSON body; ignored when ``text`` is given
        text: Raw body that is not valid JSON

    Returns:
        MagicMock behaving like requests.Response
    """
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400

    if text is not None:
        response.text = text
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", text, 0)
    else:
        response.text = json.dumps(payload)
        response.json.return_value = payload

    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def sample_row():
    """The documented example kline row."""
    return list(SAMPLE_ROW)


@pytest.fixture
def sample_rows():
    """Three consecutive daily kline rows, oldest first."""
    base_time = 1735689600000  # 2025-01-01T00:00:00Z
    day = 86_400_000
    return [
        create_kline_row(base_time, close="50050.00000000", trades=100),
        create_kline_row(base_time + day, close="50100.12345678", trades=200),
        create_kline_row(base_time + 2 * day, close="49999.99999999", trades=300),
    ]


@pytest.fixture
def sample_candles(sample_rows):
    """Candle objects built from ``sample_rows``."""
    return [Candle.from_row(row) for row in sample_rows]
