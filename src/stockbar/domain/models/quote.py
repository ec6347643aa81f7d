"""Quote model shared by providers, cache and resolver."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Quote:
    """
    A price and the previous session close for one symbol.

    previous_close == 0 means there is no change reference.
    """

    price: Decimal
    previous_close: Decimal
    is_live: bool = True

    def __post_init__(self) -> None:
        if self.price < 0 or self.previous_close < 0:
            raise ValueError(
                f"Quote values must be non-negative: {self.price}, {self.previous_close}"
            )
