"""
Time-bounded rate cache.

The cache owns the current TickerSnapshot and the time of the last
successful refresh. Every read goes through one lock which is held across
the expiry check, the refresh (network round trip included) and the read
itself, so readers never observe rates and volumes from different fetches.
Callers that arrive while the cache is expired each pay for their own
refresh, one after another.
"""

import logging
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime, timedelta

from src.exchange.errors import ExchangeApiError
from src.exchange.model.snapshot import TickerSnapshot
from src.exchange.service.models import CacheStats

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(seconds=30)


class RateCache:
    """
    Lazily refreshed cache of rates and volumes.

    Features:
    - Refresh on read once the TTL has elapsed, never in the background
    - Atomic swap of rates and volumes as one snapshot
    - Failed refreshes keep the old snapshot and leave the cache expired
    - Thread-safe operations
    """

    def __init__(
        self,
        fetch: Callable[[], TickerSnapshot],
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
        name: str = "rates",
    ) -> None:
        """
        Initialize the cache.

        Args:
            fetch: Produces a fresh snapshot; may raise ExchangeApiError
            ttl: Age after which the next read refreshes
            clock: Monotonic seconds source; injectable for tests
            name: Label used in log messages

        """
        if ttl < timedelta(0):
            raise ValueError(f"TTL must not be negative: {ttl}")

        self.ttl = ttl
        self.name = name
        self._fetch = fetch
        self._clock = clock
        self._lock = threading.Lock()

        self._snapshot = TickerSnapshot.empty()
        self._last_updated: float | None = None
        self._last_updated_at: datetime | None = None
        self._refresh_count = 0
        self._failed_refresh_count = 0

    def ensure_fresh(self) -> TickerSnapshot:
        """
        Refresh if expired and return the current snapshot.

        Raises:
            ExchangeApiError: The refresh failed; the cache is unchanged

        """
        with self._lock:
            return self._refresh_if_expired()

    @contextmanager
    def fresh(self) -> Iterator[TickerSnapshot]:
        """
        Hold the cache lock while the caller reads a fresh snapshot.

        Raises:
            ExchangeApiError: The refresh failed; the cache is unchanged

        """
        with self._lock:
            yield self._refresh_if_expired()

    def stats(self) -> CacheStats:
        """Get cache statistics."""
        with self._lock:
            return CacheStats(
                ttl_seconds=self.ttl.total_seconds(),
                refresh_count=self._refresh_count,
                failed_refresh_count=self._failed_refresh_count,
                pair_count=self._snapshot.pair_count,
                last_updated=self._last_updated_at,
            )

    def _is_expired(self, now: float) -> bool:
        if self._last_updated is None:
            return True
        return now - self._last_updated >= self.ttl.total_seconds()

    def _refresh_if_expired(self) -> TickerSnapshot:
        """Refresh under the lock held by the caller."""
        now = self._clock()
        if not self._is_expired(now):
            return self._snapshot

        logger.debug(f"Refreshing {self.name} cache")
        try:
            snapshot = self._fetch()
        except ExchangeApiError as e:
            self._failed_refresh_count += 1
            logger.warning(f"Failed to refresh {self.name} cache: {e}")
            raise

        self._snapshot = snapshot
        self._last_updated = now
        self._last_updated_at = datetime.now(UTC)
        self._refresh_count += 1
        logger.info(f"Refreshed {self.name} cache with {snapshot.pair_count} pairs")
        return snapshot
