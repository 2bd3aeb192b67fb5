"""Exchange data models."""

from src.exchange.model.pair import CurrencyPair
from src.exchange.model.snapshot import NestedRates, TickerSnapshot

__all__ = [
    "CurrencyPair",
    "NestedRates",
    "TickerSnapshot",
]
