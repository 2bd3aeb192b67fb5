"""
HitBTC REST API Pydantic Models.

This module implements Pydantic models for the records returned by the
HitBTC public REST endpoints.

Key design principles:
- Raw fields store exchange data as-is (with _raw suffix)
- Fields are strict strings: a record whose field is absent or not a
  string does not validate, and callers skip it
- Numeric text is converted in properties, where a malformed value raises
  ParseError instead of being skipped
"""

import re
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from src.exchange.errors import ParseError

# Plain decimal or exponent notation, or inf/infinity/nan; no padding or
# digit separators.
NUMERIC_TEXT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


class HitbtcRecord(BaseModel):
    """Base model for HitBTC list records."""

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def parse_or_none(cls, item: Any) -> Self | None:
        """
        Validate one array element.

        Returns:
            The record, or None when the element lacks a required field

        """
        try:
            return cls.model_validate(item)
        except ValidationError:
            return None


class HitbtcSymbolRecord(HitbtcRecord):
    """Entry of the ``/public/symbol`` catalog."""

    quote_currency: StrictStr = Field(alias="quoteCurrency")


class HitbtcTickerRecord(HitbtcRecord):
    """Entry of the ``/public/ticker`` snapshot."""

    symbol: StrictStr
    last_raw: StrictStr = Field(alias="last")
    volume_raw: StrictStr = Field(alias="volume")

    def _to_float(self, name: str, value: str) -> float:
        """Convert numeric text, failing the whole record on bad input."""
        if NUMERIC_TEXT.fullmatch(value) is None:
            raise ParseError(f"invalid {name} {value!r} for symbol {self.symbol}")
        return float(value)

    @property
    def last(self) -> float:
        """Get last trade price."""
        return self._to_float("last", self.last_raw)

    @property
    def volume(self) -> float:
        """Get traded volume."""
        return self._to_float("volume", self.volume_raw)
