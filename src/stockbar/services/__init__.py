"""Service layer - quote resolution and presentation."""

from stockbar.services.market_clock import MarketClock
from stockbar.services.quote_resolver import QuoteResolver
from stockbar.services.presenter import Presenter

__all__ = [
    "MarketClock",
    "QuoteResolver",
    "Presenter",
]
