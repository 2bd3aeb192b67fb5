"""
HitBTC ticker fetching.

Turns the ``/public/ticker`` array into a TickerSnapshot. Records that do
not carry ``symbol``, ``last`` and ``volume`` as strings, or whose symbol
does not split, are skipped. A record whose numeric text is malformed fails
the whole fetch, so a half-parsed snapshot never reaches the cache.
"""

import logging
from collections.abc import Sequence

from src.exchange.adapters.hitbtc.client import HitbtcPublicClient
from src.exchange.adapters.hitbtc.data import HitbtcTickerRecord
from src.exchange.adapters.hitbtc.symbols import split_symbol
from src.exchange.model.snapshot import NestedRates, TickerSnapshot

logger = logging.getLogger(__name__)


def fetch_ticker(
    client: HitbtcPublicClient, settlements: Sequence[str]
) -> TickerSnapshot:
    """
    Fetch every ticker and index rates and volumes by pair.

    Args:
        client: Public REST client
        settlements: Known settlement codes used to split symbols

    Returns:
        Snapshot with rates and volumes from this fetch

    Raises:
        FetchError: The ticker could not be retrieved
        ParseError: The body is not a JSON array, or a rate or volume
            is not a number

    """
    rates: NestedRates = {}
    volumes: NestedRates = {}
    skipped = 0

    for item in client.tickers():
        record = HitbtcTickerRecord.parse_or_none(item)
        if record is None:
            skipped += 1
            continue

        pair = split_symbol(record.symbol, settlements)
        if pair is None:
            skipped += 1
            continue

        last = record.last
        volume = record.volume
        rates.setdefault(pair.trading, {})[pair.settlement] = last
        volumes.setdefault(pair.trading, {})[pair.settlement] = volume

    if skipped:
        logger.debug(f"Skipped {skipped} ticker records on {client.exchange_id}")

    return TickerSnapshot(rates=rates, volumes=volumes)
