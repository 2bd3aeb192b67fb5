"""
Ticker snapshot model.

A snapshot holds the rates and volumes produced by a single ticker fetch.
Both maps are keyed trading currency -> settlement currency -> value, which
mirrors the natural lookup "given a currency, which markets settle it".
"""

from pydantic import BaseModel, ConfigDict, Field

from src.exchange.model.pair import CurrencyPair

NestedRates = dict[str, dict[str, float]]


class TickerSnapshot(BaseModel):
    """
    Rates and volumes from one refresh generation.

    Snapshots are never mutated after construction; the cache replaces the
    whole object so rates and volumes always come from the same fetch.
    """

    model_config = ConfigDict(frozen=True)

    rates: NestedRates = Field(default_factory=dict)
    volumes: NestedRates = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "TickerSnapshot":
        """Snapshot with no markets, used before the first refresh."""
        return cls()

    def rate_of(self, trading: str, settlement: str) -> float | None:
        """Get the last trade rate for a pair, or None if absent."""
        return self.rates.get(trading, {}).get(settlement)

    def volume_of(self, trading: str, settlement: str) -> float | None:
        """Get the traded volume for a pair, or None if absent."""
        return self.volumes.get(trading, {}).get(settlement)

    def pairs(self) -> list[CurrencyPair]:
        """Enumerate every pair that has a rate."""
        return [
            CurrencyPair(trading=trading, settlement=settlement)
            for trading, markets in self.rates.items()
            for settlement in markets
        ]

    @property
    def pair_count(self) -> int:
        """Number of pairs with a rate."""
        return sum(len(markets) for markets in self.rates.values())
