"""Exchange protocols."""

from src.exchange.protocols.exchange import ExchangeApiProtocol

__all__ = [
    "ExchangeApiProtocol",
]
