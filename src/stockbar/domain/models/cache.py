"""Cache model for the last known quote."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from stockbar.domain.models.quote import Quote


@dataclass(frozen=True)
class CacheRecord:
    """
    Last known quote for a symbol.

    IMPORTANT: Only written after a successful live fetch.
    """

    symbol: str
    price: Decimal
    previous_close: Decimal
    written_at: datetime

    def to_quote(self) -> Quote:
        """Return the cached values as a non-live quote."""
        return Quote(price=self.price, previous_close=self.previous_close, is_live=False)
