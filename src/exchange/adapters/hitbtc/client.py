"""
HitBTC public REST transport.

Thin wrapper around ``requests`` that turns transport failures into
``FetchError`` and malformed bodies into ``ParseError``. It knows the
endpoint names but nothing about their records.
"""

import logging
from typing import Any

import requests

from src.exchange.config import HitbtcConfig
from src.exchange.errors import FetchError, ParseError

logger = logging.getLogger(__name__)


class HitbtcPublicClient:
    """HTTP client for the unauthenticated HitBTC endpoints."""

    def __init__(
        self,
        config: HitbtcConfig,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: HitBTC configuration (base URL, timeout, identifier)
            session: Optional HTTP session; useful for injecting mocks in tests

        """
        self.config = config
        self._session = session or requests.Session()

    @property
    def exchange_id(self) -> str:
        """Get the exchange identifier."""
        return self.config.exchange_id

    def symbols(self) -> list[Any]:
        """Fetch the symbol catalog."""
        return self._get_list("symbol")

    def tickers(self) -> list[Any]:
        """Fetch the ticker snapshot for every symbol."""
        return self._get_list("ticker")

    def _get_list(self, command: str) -> list[Any]:
        """GET a public endpoint whose body must be a JSON array."""
        url = self.config.public_api_url(command)
        logger.debug(f"GET {url}")

        try:
            response = self._session.get(url, timeout=self.config.request_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, self.exchange_id) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(
                f"failed to parse json from {url}", self.exchange_id
            ) from e

        if not isinstance(payload, list):
            raise ParseError(
                f"expected a JSON array from {url}, got {type(payload).__name__}",
                self.exchange_id,
            )
        return payload
