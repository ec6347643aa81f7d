"""Enumerations for domain models."""

from enum import Enum


class MarketState(str, Enum):
    """Whether the exchange is trading right now."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class Direction(str, Enum):
    """Direction of a price move; an unchanged price counts as UP."""

    UP = "UP"
    DOWN = "DOWN"


class FailureKind(str, Enum):
    """Classification of a failed fetch."""

    UNREACHABLE = "UNREACHABLE"  # transport error, empty body, missing key
    HTTP_OUTAGE = "HTTP_OUTAGE"  # status >= 500
    RATE_LIMITED = "RATE_LIMITED"  # 401 / 429
    UNEXPECTED_HTTP = "UNEXPECTED_HTTP"  # any other non-200
    API_ERROR = "API_ERROR"  # provider-reported error on a 200
    INVALID_DATA = "INVALID_DATA"  # 200 without usable price fields
