"""
Pydantic models for the exchange service layer.

These models provide type-safe reporting structures at service boundaries.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CacheStats(BaseModel):
    """Rate cache statistics with validation."""

    ttl_seconds: float = Field(default=0.0, ge=0, description="Cache TTL in seconds")
    refresh_count: int = Field(default=0, ge=0, description="Successful refreshes")
    failed_refresh_count: int = Field(default=0, ge=0, description="Failed refreshes")
    pair_count: int = Field(default=0, ge=0, description="Pairs in the cache")
    last_updated: datetime | None = Field(
        default=None, description="Wall-clock time of the last successful refresh"
    )

    @property
    def failure_rate(self) -> float:
        """Share of refresh attempts that failed."""
        attempts = self.refresh_count + self.failed_refresh_count
        return self.failed_refresh_count / attempts if attempts > 0 else 0.0

    def to_summary(self) -> str:
        """Generate human-readable summary."""
        if self.last_updated is None:
            updated = "never"
        else:
            updated = self.last_updated.isoformat(timespec="seconds")
        return (
            f"Cache: {self.pair_count} pairs, TTL: {self.ttl_seconds:g}s, "
            f"refreshes: {self.refresh_count} "
            f"({self.failure_rate:.1%} failed), last updated: {updated}"
        )
