"""Exchange market data access package."""

from src.exchange.model import CurrencyPair
from src.exchange.service import new_exchange_api

__all__ = ["CurrencyPair", "new_exchange_api"]
