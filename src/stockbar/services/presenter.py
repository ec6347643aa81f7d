"""Presenter: renders the status line for the status-bar host."""

from stockbar.domain.models import Direction
from stockbar.domain.views import DisplayQuote, round2

ARROW_UP = "△"
ARROW_DOWN = "▽"
DEFAULT_FONT = "SF Pro Text"
DEFAULT_FONT_SIZE = 13


class Presenter:
    """Formats quotes and status messages as SwiftBar lines."""

    def __init__(self, font: str = DEFAULT_FONT, font_size: int = DEFAULT_FONT_SIZE):
        self._font = font
        self._font_size = font_size

    def _style(self, color: str) -> str:
        return f"color={color} font={self._font} size={self._font_size}"

    def format_quote(self, symbol: str, quote: DisplayQuote) -> str:
        arrow = ARROW_DOWN if quote.direction == Direction.DOWN else ARROW_UP
        return (
            f"{arrow} {symbol} {round2(quote.price):.2f} "
            f"(${quote.change:.2f} / {quote.percent_change:.2f}%) | {self._style(quote.color)}"
        )

    def format_error(self, symbol: str, message: str, color: str = "gray") -> str:
        return f"{symbol} {message} | {self._style(color)}"
