"""View model handed to the presenter."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from stockbar.domain.models import Direction

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def round2(value: Decimal) -> Decimal:
    """Round half away from zero to two places; never returns -0.00."""
    rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
    return ZERO if rounded.is_zero() else rounded


@dataclass(frozen=True)
class DisplayQuote:
    """Resolved quote plus the figures derived from it."""

    price: Decimal
    previous_close: Decimal
    is_live: bool

    @property
    def change(self) -> Decimal:
        return round2(self.price - self.previous_close)

    @property
    def percent_change(self) -> Decimal:
        """Percent move vs. previous close; 0.00 when there is no reference."""
        if self.previous_close.is_zero():
            return ZERO
        return round2(100 * (self.price - self.previous_close) / self.previous_close)

    @property
    def direction(self) -> Direction:
        return Direction.DOWN if self.change.is_signed() else Direction.UP

    @property
    def color(self) -> str:
        # Closed market: neutral color, the arrow still shows direction
        if not self.is_live:
            return "gray"
        return "red" if self.direction == Direction.DOWN else "green"
