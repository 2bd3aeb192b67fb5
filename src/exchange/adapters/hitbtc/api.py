"""
HitBTC exchange API.

Public entry point for HitBTC market data. Satisfies ExchangeApiProtocol
through structural typing.
"""

import logging
import time
from collections.abc import Callable

import requests

from src.exchange.adapters.hitbtc.client import HitbtcPublicClient
from src.exchange.adapters.hitbtc.settlements import discover_settlements
from src.exchange.adapters.hitbtc.ticker import fetch_ticker
from src.exchange.config import HitbtcConfig
from src.exchange.errors import ExchangeApiError, PairNotFoundError
from src.exchange.model.pair import CurrencyPair
from src.exchange.model.snapshot import TickerSnapshot
from src.exchange.service.models import CacheStats
from src.exchange.service.rate_cache import RateCache

logger = logging.getLogger(__name__)


class HitbtcApi:
    """
    Rates, volumes and pair listings for HitBTC.

    The settlement currencies are discovered once, when the instance is
    created, and never again. Settlement currencies the exchange lists
    after that are not recognised until a new instance is created, so
    long-running processes should recreate the API to pick them up.

    Tickers are cached for ``config.rate_cache_seconds`` and refreshed
    on the first read after expiry.
    """

    def __init__(
        self,
        config: HitbtcConfig | None = None,
        session: requests.Session | None = None,
        client: HitbtcPublicClient | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the API and discover settlement currencies.

        Args:
            config: HitBTC configuration (defaults to environment settings)
            session: Optional HTTP session for the default client
            client: Optional pre-built REST client; its config is used, so it
                cannot be combined with config or session
            clock: Monotonic seconds source for cache expiry

        Raises:
            ValueError: client was given together with config or session
            FetchError: The symbol catalog could not be retrieved
            ParseError: The symbol catalog could not be parsed

        """
        if client is not None:
            if config is not None or session is not None:
                raise ValueError("Pass either client or config/session, not both")
            self.config = client.config
            self.client = client
        else:
            self.config = config or HitbtcConfig()
            self.client = HitbtcPublicClient(self.config, session=session)

        try:
            self._settlements = discover_settlements(self.client)
        except ExchangeApiError as e:
            logger.error(f"Settlement discovery failed for {self.exchange_id}: {e}")
            raise

        self._cache = RateCache(
            fetch=self._fetch_snapshot,
            ttl=self.config.rate_cache_duration,
            clock=clock,
            name=self.exchange_id,
        )

    @property
    def exchange_id(self) -> str:
        """Get the exchange identifier."""
        return self.config.exchange_id

    @property
    def settlements(self) -> tuple[str, ...]:
        """Settlement currencies discovered at construction."""
        return self._settlements

    def currency_pairs(self) -> list[CurrencyPair]:
        """
        List every pair with a rate.

        Raises:
            FetchError: A required refresh could not reach the exchange
            ParseError: A required refresh returned malformed data

        """
        with self._cache.fresh() as snapshot:
            return snapshot.pairs()

    def volume(self, trading: str, settlement: str) -> float:
        """
        Get the traded volume of a pair.

        Raises:
            PairNotFoundError: The pair is not listed
            FetchError: A required refresh could not reach the exchange
            ParseError: A required refresh returned malformed data

        """
        with self._cache.fresh() as snapshot:
            volume = snapshot.volume_of(trading, settlement)
        if volume is None:
            raise PairNotFoundError(trading, settlement, self.exchange_id)
        return volume

    def rate(self, trading: str, settlement: str) -> float:
        """
        Get the last trade rate of trading priced in settlement.

        A currency priced in itself is 1.0 and needs no lookup.

        Raises:
            PairNotFoundError: The pair is not listed
            FetchError: A required refresh could not reach the exchange
            ParseError: A required refresh returned malformed data

        """
        if trading == settlement:
            return 1.0

        with self._cache.fresh() as snapshot:
            rate = snapshot.rate_of(trading, settlement)
        if rate is None:
            raise PairNotFoundError(trading, settlement, self.exchange_id)
        return rate

    def cache_stats(self) -> CacheStats:
        """Get rate cache statistics."""
        return self._cache.stats()

    def _fetch_snapshot(self) -> TickerSnapshot:
        return fetch_ticker(self.client, self._settlements)
