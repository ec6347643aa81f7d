"""Helpers for turning provider strings into Decimals."""

from decimal import Decimal, InvalidOperation
from typing import Optional

# Characters providers use for currency and grouping, e.g. "$1,234.50" or "+0.70"
_FORMATTING_CHARS = str.maketrans("", "", "$,+ ")

# Anything this large is a broken response, not a share price
MAX_MAGNITUDE = Decimal("1e12")

UNCHANGED_MARKERS = frozenset({"UNCH", "UNCHANGED"})


def parse_decimal(raw: Optional[str]) -> Optional[Decimal]:
    """
    Parse a provider-formatted number.

    Returns None for missing, empty or non-numeric values rather than zero,
    so a broken response is never mistaken for a real zero price.
    """
    if raw is None:
        return None
    cleaned = str(raw).translate(_FORMATTING_CHARS)
    # Plain decimal notation only: "1e30" is not a price
    if not cleaned or "e" in cleaned.lower():
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite() or abs(value) >= MAX_MAGNITUDE:
        return None
    return value


def parse_net_change(raw: Optional[str]) -> Optional[Decimal]:
    """Parse a net change value; "UNCH" means no change."""
    if raw is not None and str(raw).strip().upper() in UNCHANGED_MARKERS:
        return Decimal("0")
    return parse_decimal(raw)
