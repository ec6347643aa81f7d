"""Quote cache repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from stockbar.domain.models import CacheRecord, Quote


class QuoteCacheRepository(Protocol):
    """Interface for the last-known-quote cache (one record per symbol)."""

    def load(self, symbol: str) -> Optional[CacheRecord]:
        """Read the record for a symbol, fresh or not."""
        ...

    def is_stale(self, record: CacheRecord, now: datetime) -> bool:
        """True if the record was written before the most recent market close."""
        ...

    def save(self, symbol: str, quote: Quote) -> CacheRecord:
        """Overwrite the record for a symbol."""
        ...

    def delete(self, symbol: str) -> None:
        """Delete the record for a symbol (for rebuild)."""
        ...
