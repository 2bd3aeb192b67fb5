"""
Currency pair domain model.

A pair names a market by its trading (base) currency and its settlement
(quote) currency, independent of how any exchange encodes it in a symbol.
"""

from pydantic import BaseModel, ConfigDict, Field


class CurrencyPair(BaseModel):
    """
    Market identified by trading and settlement currency.

    Frozen so pairs compare and hash by value and can be used as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    trading: str = Field(..., min_length=1, description="Base currency code")
    settlement: str = Field(..., min_length=1, description="Quote currency code")

    def __str__(self) -> str:
        return f"{self.trading}/{self.settlement}"

