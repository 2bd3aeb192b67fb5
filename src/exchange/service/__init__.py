"""Exchange service layer."""

from src.exchange.service.exchange_api import new_exchange_api
from src.exchange.service.models import CacheStats
from src.exchange.service.rate_cache import RateCache

__all__ = [
    "CacheStats",
    "RateCache",
    "new_exchange_api",
]
