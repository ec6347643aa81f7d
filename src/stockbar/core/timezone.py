"""Exchange-time helpers. All market decisions are made in US/Eastern."""

from datetime import datetime

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern; naive values are taken as Eastern already."""
    if dt.tzinfo is None:
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def from_timestamp_eastern(timestamp: float) -> datetime:
    """Convert a POSIX timestamp, such as a file mtime, to US/Eastern."""
    return datetime.fromtimestamp(timestamp, EASTERN_TZ)


def parse_datetime_eastern(value: str) -> datetime:
    """
    Parse a user-supplied time ("2024-06-14 10:00", ISO-8601, ...).

    A string without a zone is read as US/Eastern wall-clock time.
    """
    return to_eastern(date_parser.parse(value))
