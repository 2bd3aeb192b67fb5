"""Logging setup for processes embedding the exchange access layer."""

import logging

from src.exchange.config import ExchangeConfig


def configure_logging(config: ExchangeConfig) -> None:
    """
    Apply the configured log level to the root logger.

    ``debug=True`` forces DEBUG regardless of ``log_level``.
    """
    level = "DEBUG" if config.debug else config.log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
