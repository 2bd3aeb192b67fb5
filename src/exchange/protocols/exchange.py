"""
Exchange API protocol.

This module defines the contract every exchange implementation offers to
calling code. Implementations satisfy it through structure, not inheritance,
so an adapter only needs the right properties and methods.

Semantic guarantees shared by all implementations:
- Currency codes are the exchange-agnostic codes (e.g. "BTC", "USD")
- ``rate`` and ``volume`` refer to the last trade on the pair's market
- Lookups of pairs the exchange does not list raise ``PairNotFoundError``
- Transport and payload failures raise ``FetchError`` / ``ParseError``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.exchange.model.pair import CurrencyPair


@runtime_checkable
class ExchangeApiProtocol(Protocol):
    """
    Protocol for read-only exchange market data access.

    Semantic Role: Uniform market data source
    Relationships:
    - Produces: CurrencyPair listings
    - Identified by: exchange_id
    """

    @property
    def exchange_id(self) -> str:
        """
        Get the exchange identifier.

        Returns:
            Label of the exchange instance

        """
        ...

    def currency_pairs(self) -> list[CurrencyPair]:
        """
        List the pairs currently traded on the exchange.

        Returns:
            Pairs in unspecified order

        """
        ...

    def rate(self, trading: str, settlement: str) -> float:
        """
        Get the last trade rate of trading priced in settlement.

        Args:
            trading: Base currency code
            settlement: Quote currency code

        Returns:
            Rate; 1.0 when both codes are the same

        """
        ...

    def volume(self, trading: str, settlement: str) -> float:
        """
        Get the traded volume of a pair.

        Args:
            trading: Base currency code
            settlement: Quote currency code

        Returns:
            Volume as reported by the exchange

        """
        ...
