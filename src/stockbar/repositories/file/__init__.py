"""File-backed repository implementations."""

from stockbar.repositories.file.quote_cache_repo import FileQuoteCacheRepository

__all__ = [
    "FileQuoteCacheRepository",
]
