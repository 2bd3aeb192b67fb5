"""
HitBTC symbol splitting.

HitBTC encodes a market as the plain concatenation of its currency codes
("ETHBTC", "BTCUSD"), so the boundary has to be recovered from the set of
known settlement currencies.
"""

from collections.abc import Iterable

from src.exchange.model.pair import CurrencyPair


def split_symbol(symbol: str, settlements: Iterable[str]) -> CurrencyPair | None:
    """
    Split an exchange symbol into trading and settlement currency.

    Every settlement code that is a proper suffix of ``symbol`` is a
    candidate; the last candidate in iteration order wins. With
    ``["SD", "USD"]`` the symbol "BTCUSD" resolves to BTC/USD, and with
    ``["USD", "SD"]`` it resolves to BTCU/SD.

    Args:
        symbol: Exchange-native symbol, e.g. "ETHBTC"
        settlements: Known settlement currency codes, in stored order

    Returns:
        The pair, or None when no settlement leaves a non-empty trading part

    """
    match: CurrencyPair | None = None
    for settlement in settlements:
        if (
            settlement
            and len(symbol) > len(settlement)
            and symbol.endswith(settlement)
        ):
            match = CurrencyPair(
                trading=symbol[: -len(settlement)], settlement=settlement
            )
    return match
