"""Domain models."""

from stockbar.domain.models.enums import MarketState, Direction, FailureKind
from stockbar.domain.models.quote import Quote
from stockbar.domain.models.cache import CacheRecord
from stockbar.domain.models.outcome import (
    INVALID_DATA_MESSAGE,
    FetchSuccess,
    HttpFailure,
    ApiFailure,
    Unreachable,
    FetchFailure,
    FetchOutcome,
)

__all__ = [
    "MarketState",
    "Direction",
    "FailureKind",
    "Quote",
    "CacheRecord",
    "INVALID_DATA_MESSAGE",
    "FetchSuccess",
    "HttpFailure",
    "ApiFailure",
    "Unreachable",
    "FetchFailure",
    "FetchOutcome",
]
