"""View models for service outputs."""

from stockbar.domain.views.display import DisplayQuote, round2

__all__ = [
    "DisplayQuote",
    "round2",
]
