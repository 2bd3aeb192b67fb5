"""
Exchange API error types.

Every failure surfaced by the access layer is an ``ExchangeApiError`` so
callers can catch the whole family at once, while the subclasses keep
transport, payload and lookup failures distinguishable:

- ``FetchError``: the exchange could not be reached or answered with an
  error status
- ``ParseError``: the response body is not the document we expect, or a
  numeric field does not parse
- ``PairNotFoundError``: the pair is absent from a freshly validated cache
"""


class ExchangeApiError(Exception):
    """Base class for all exchange access errors."""

    def __init__(self, message: str, exchange_id: str | None = None) -> None:
        super().__init__(message)
        self.exchange_id = exchange_id


class FetchError(ExchangeApiError):
    """Transport-level failure reaching the exchange."""

    def __init__(self, url: str, exchange_id: str | None = None) -> None:
        super().__init__(f"failed to fetch {url}", exchange_id)
        self.url = url


class ParseError(ExchangeApiError):
    """Response body or one of its numeric fields could not be parsed."""


class PairNotFoundError(ExchangeApiError, LookupError):
    """Requested pair is not present in the current cache."""

    def __init__(
        self, trading: str, settlement: str, exchange_id: str | None = None
    ) -> None:
        super().__init__(f"{trading}/{settlement}", exchange_id)
        self.trading = trading
        self.settlement = settlement
