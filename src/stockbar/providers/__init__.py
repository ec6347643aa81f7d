"""Quote providers module."""

from stockbar.providers.quote_provider import QuoteProvider
from stockbar.providers.twelvedata_provider import TwelveDataProvider
from stockbar.providers.nasdaq_provider import NasdaqProvider

__all__ = [
    "QuoteProvider",
    "TwelveDataProvider",
    "NasdaqProvider",
]
