"""Quote provider protocol."""

from typing import Protocol

from stockbar.domain.models import FetchOutcome


class QuoteProvider(Protocol):
    """
    Protocol for quote providers.

    Implementations make at most one network request per call, never retry,
    and never raise: every failure is returned as a classified FetchOutcome.
    """

    name: str

    def fetch(self, symbol: str) -> FetchOutcome:
        """Fetch the current price and previous close for an uppercase symbol."""
        ...
