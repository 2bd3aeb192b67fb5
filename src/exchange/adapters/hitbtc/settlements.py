"""HitBTC settlement currency discovery."""

import logging

from src.exchange.adapters.hitbtc.client import HitbtcPublicClient
from src.exchange.adapters.hitbtc.data import HitbtcSymbolRecord

logger = logging.getLogger(__name__)


def discover_settlements(client: HitbtcPublicClient) -> tuple[str, ...]:
    """
    Collect the distinct quote currencies of the symbol catalog.

    Catalog entries without a string ``quoteCurrency`` are ignored.

    Args:
        client: Public REST client

    Returns:
        Settlement codes in first-seen order

    Raises:
        FetchError: The catalog could not be retrieved
        ParseError: The catalog is not a JSON array

    """
    records = client.symbols()

    seen: dict[str, None] = {}
    for item in records:
        record = HitbtcSymbolRecord.parse_or_none(item)
        if record is None:
            continue
        seen.setdefault(record.quote_currency, None)

    settlements = tuple(seen)
    logger.info(
        f"Discovered {len(settlements)} settlement currencies on "
        f"{client.exchange_id}: {', '.join(settlements)}"
    )
    return settlements
