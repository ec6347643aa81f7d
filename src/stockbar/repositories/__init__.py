"""Repository layer: protocols and file implementations."""

from stockbar.repositories.protocols import QuoteCacheRepository
from stockbar.repositories.file import FileQuoteCacheRepository

__all__ = [
    "QuoteCacheRepository",
    "FileQuoteCacheRepository",
]
