"""Repository protocols."""

from stockbar.repositories.protocols.quote_cache_repo import QuoteCacheRepository

__all__ = [
    "QuoteCacheRepository",
]
