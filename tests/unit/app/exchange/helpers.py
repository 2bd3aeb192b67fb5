"""Test helpers for exchange access tests."""

import json
from typing import Any
from unittest.mock import Mock

import requests

from src.exchange.config import HitbtcConfig

BASE_URL = "https://api.hitbtc.test/api/2"


def symbol_record(symbol: str, base: str, quote: str) -> dict[str, Any]:
    """Build one ``/public/symbol`` catalog entry."""
    return {
        "id": symbol,
        "baseCurrency": base,
        "quoteCurrency": quote,
        "quantityIncrement": "0.001",
        "tickSize": "0.000001",
    }


DEFAULT_SYMBOLS: list[Any] = [
    symbol_record("ETHBTC", "ETH", "BTC"),
    symbol_record("BTCUSD", "BTC", "USD"),
    symbol_record("ETHUSD", "ETH", "USD"),
    symbol_record("EOSETH", "EOS", "ETH"),
]


class TickerBuilder:
    """Builder for ``/public/ticker`` records."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "ask": "64001.00",
            "bid": "63999.00",
            "last": "64000.12",
            "open": "63000.00",
            "low": "62500.00",
            "high": "64500.00",
            "volume": "250.75",
            "volumeQuote": "16048000.03",
            "timestamp": "2024-01-01T10:00:00.000Z",
            "symbol": "BTCUSD",
        }

    def with_symbol(self, symbol: str) -> "TickerBuilder":
        """Set the exchange symbol."""
        self._data["symbol"] = symbol
        return self

    def with_last(self, last: Any) -> "TickerBuilder":
        """Set the last trade price (raw value)."""
        self._data["last"] = last
        return self

    def with_volume(self, volume: Any) -> "TickerBuilder":
        """Set the traded volume (raw value)."""
        self._data["volume"] = volume
        return self

    def without(self, field: str) -> "TickerBuilder":
        """Drop a field from the record."""
        self._data.pop(field, None)
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return dict(self._data)


def ticker(symbol: str, last: str, volume: str) -> dict[str, Any]:
    """Shortcut for a ticker record with the given values."""
    return (
        TickerBuilder()
        .with_symbol(symbol)
        .with_last(last)
        .with_volume(volume)
        .build_json()
    )


DEFAULT_TICKERS: list[Any] = [
    ticker("ETHBTC", "0.0321", "1500.5"),
    ticker("BTCUSD", "64000.12", "250.75"),
    ticker("ETHUSD", "2050.5", "9000"),
    ticker("EOSETH", "0.00021", "120000"),
]


class MockResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        """Raise like requests does for error statuses."""
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self) -> Any:
        """Decode the body; string payloads are treated as raw text."""
        if isinstance(self.payload, str):
            return json.loads(self.payload)
        return self.payload


class MockHitbtcSession:
    """
    Mock HTTP session serving the HitBTC public endpoints.

    This allows us to:
    - Serve arbitrary symbol and ticker payloads
    - Simulate transport errors per endpoint
    - Count requests made to each endpoint
    """

    def __init__(
        self,
        symbols: Any = None,
        tickers: Any = None,
    ) -> None:
        """Initialize with default catalog and ticker payloads."""
        self.payloads: dict[str, Any] = {
            "symbol": DEFAULT_SYMBOLS if symbols is None else symbols,
            "ticker": DEFAULT_TICKERS if tickers is None else tickers,
        }
        self.status_codes: dict[str, int] = {}
        self.errors: dict[str, Exception] = {}
        self.get = Mock(side_effect=self._get)

    def _get(self, url: str, timeout: float | None = None) -> MockResponse:
        command = url.rsplit("/", 1)[-1]
        if command in self.errors:
            raise self.errors[command]
        return MockResponse(
            self.payloads[command], self.status_codes.get(command, 200)
        )

    def fail(self, command: str, error: Exception | None = None) -> None:
        """Make requests to an endpoint raise a transport error."""
        self.errors[command] = error or requests.ConnectionError("connection refused")

    def recover(self, command: str) -> None:
        """Stop failing requests to an endpoint."""
        self.errors.pop(command, None)

    def calls_to(self, command: str) -> int:
        """Count requests made to an endpoint."""
        return sum(
            1
            for call in self.get.call_args_list
            if call.args[0].endswith(f"/public/{command}")
        )


class FakeClock:
    """Monotonic clock driven by the test."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        self.now += seconds


def make_config(**overrides: Any) -> HitbtcConfig:
    """Build a HitBTC config pointing at the test base URL."""
    values: dict[str, Any] = {"base_url": BASE_URL, "rate_cache_seconds": 30.0}
    values.update(overrides)
    return HitbtcConfig(**values)
