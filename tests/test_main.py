"""Tests for the command line entry point."""

import json
from unittest.mock import patch

import pytest

from kline_ingestion.main import main, parse_args
from tests.conftest import create_mock_response
from tests.test_config import ENV_VARS


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep any developer .env out of the tests
    monkeypatch.chdir(tmp_path)


class TestParseArgs:
    def test_unset_flags_are_none(self):
        args = parse_args([])
        assert vars(args) == {
            "symbol": None,
            "interval": None,
            "output_path": None,
            "base_url": None,
            "timeout_seconds": None,
            "log_level": None,
        }

    def test_flags(self):
        args = parse_args(["--symbol", "ETHUSDT", "--interval", "1h", "--timeout", "5"])
        assert args.symbol == "ETHUSDT"
        assert args.interval == "1h"
        assert args.timeout_seconds == 5.0


class TestMain:
    @patch("kline_ingestion.sources.binance.requests.get")
    def test_success_writes_file_and_returns_zero(self, mock_get, sample_rows, tmp_path):
        mock_get.return_value = create_mock_response(200, sample_rows)
        output = tmp_path / "out.json"

        exit_code = main(["--symbol", "ETHUSDT", "--interval", "1h", "--output", str(output)])

        assert exit_code == 0
        url = mock_get.call_args[0][0]
        assert url == "https://api.binance.com/api/v3/klines?symbol=ETHUSDT&interval=1h"
        lines = output.read_text(encoding="utf-8").splitlines()
        assert len(lines) == len(sample_rows)
        assert json.loads(lines[0])["number_of_trades"] == sample_rows[0][8]

    @patch("kline_ingestion.sources.binance.requests.get")
    def test_defaults_come_from_environment(self, mock_get, monkeypatch, tmp_path):
        monkeypatch.setenv("KLINE_SYMBOL", "BNBUSDT")
        monkeypatch.setenv("KLINE_OUTPUT_PATH", str(tmp_path / "bnb.json"))
        mock_get.return_value = create_mock_response(200, [])

        assert main([]) == 0
        assert "symbol=BNBUSDT&interval=1d" in mock_get.call_args[0][0]
        assert (tmp_path / "bnb.json").exists()

    @patch("kline_ingestion.sources.binance.requests.get")
    def test_fetch_failure_returns_one_without_output(self, mock_get, tmp_path):
        mock_get.return_value = create_mock_response(400, {"code": -1120, "msg": "Invalid interval."})
        output = tmp_path / "out.json"

        assert main(["--interval", "7x", "--output", str(output)]) == 1
        assert not output.exists()

    @patch("kline_ingestion.sources.binance.requests.get")
    def test_invalid_configuration_returns_one(self, mock_get):
        assert main(["--timeout", "-1"]) == 1
        mock_get.assert_not_called()
