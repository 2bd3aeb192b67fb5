"""HitBTC public REST adapter."""

from src.exchange.adapters.hitbtc.api import HitbtcApi
from src.exchange.adapters.hitbtc.client import HitbtcPublicClient
from src.exchange.adapters.hitbtc.symbols import split_symbol

__all__ = [
    "HitbtcApi",
    "HitbtcPublicClient",
    "split_symbol",
]
