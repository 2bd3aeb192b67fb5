"""
Exchange API factory.

This module provides a clean, exchange-agnostic way to obtain market data
access. It delegates to exchange-specific implementations while returning
the common ExchangeApiProtocol to the rest of the application.
"""

from collections.abc import Callable

import requests

from src.exchange.adapters.hitbtc.api import HitbtcApi
from src.exchange.config import HitbtcConfig
from src.exchange.protocols.exchange import ExchangeApiProtocol


def new_exchange_api(
    exchange: str = "hitbtc",
    config: HitbtcConfig | None = None,
    configure: Callable[[HitbtcConfig], None] | None = None,
    session: requests.Session | None = None,
) -> ExchangeApiProtocol:
    """
    Create market data access for the specified exchange.

    Args:
        exchange: Exchange to read from (currently only "hitbtc")
        config: Configuration; defaults to environment settings
        configure: Optional callback adjusting a copy of the configuration
            before the API is built; the caller's config is left untouched
        session: Optional HTTP session

    Returns:
        Exchange API ready for use; settlement discovery has completed

    Raises:
        ValueError: If exchange is not supported
        FetchError: Settlement discovery could not reach the exchange
        ParseError: Settlement discovery returned malformed data

    """
    match exchange.lower():
        case "hitbtc":
            conf = config.model_copy() if config is not None else HitbtcConfig()
            if configure is not None:
                configure(conf)
            return HitbtcApi(config=conf, session=session)
        case _:
            raise ValueError(f"Unsupported exchange: {exchange}")
