"""Core utilities and shared functionality."""

from stockbar.core.timezone import (
    now_eastern,
    to_eastern,
    from_timestamp_eastern,
    parse_datetime_eastern,
    EASTERN_TZ,
)
from stockbar.core.exceptions import (
    AppError,
    ConfigurationError,
    QuoteUnavailableError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "from_timestamp_eastern",
    "parse_datetime_eastern",
    "EASTERN_TZ",
    "AppError",
    "ConfigurationError",
    "QuoteUnavailableError",
]
