#!/usr/bin/env python3
"""Command-line entry point.

Prints one status line for the status-bar host and exits. The ticker is the
first argument, or is taken from the program name so the plugin can be
installed as e.g. ``orcl.5m.sh``.

Run with: stockbar ORCL   or   python -m stockbar ORCL
"""

import argparse
import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from pydantic import ValidationError

from stockbar.config import Settings, get_settings, get_api_key, setup_logging
from stockbar.config.logging_config import LOG_LEVELS
from stockbar.core.exceptions import ConfigurationError, QuoteUnavailableError
from stockbar.core.timezone import now_eastern, parse_datetime_eastern
from stockbar.providers import NasdaqProvider, TwelveDataProvider
from stockbar.repositories.file import FileQuoteCacheRepository
from stockbar.services import MarketClock, Presenter, QuoteResolver

logger = logging.getLogger(__name__)

APP_NAME = "stockbar"
SYMBOL_PATTERN = re.compile(r"^[A-Z][A-Z0-9.\-]{0,9}$")
_NOT_A_TICKER = {"STOCKBAR", "MAIN", "__MAIN__"}


def normalize_symbol(raw: str) -> str:
    """Upper-case and validate a ticker."""
    symbol = raw.strip().upper()
    if not SYMBOL_PATTERN.match(symbol) or symbol in _NOT_A_TICKER:
        raise ConfigurationError(f"Not a ticker symbol: {raw!r}")
    return symbol


def symbol_from_program_name(program: str) -> str:
    """Derive the ticker from a plugin file name: "orcl.5m.sh" -> "ORCL"."""
    return normalize_symbol(Path(program).name.split(".", 1)[0])


def build_resolver(settings: Settings) -> QuoteResolver:
    """Wire the resolver from settings."""
    clock = MarketClock(tolerance_minutes=settings.open_tolerance_minutes)
    return QuoteResolver(
        primary=TwelveDataProvider(
            api_key=get_api_key(settings),
            base_url=settings.twelvedata_base_url,
            timeout=settings.primary_timeout_seconds,
        ),
        secondary=NasdaqProvider(
            base_url=settings.nasdaq_base_url,
            timeout=settings.secondary_timeout_seconds,
        ),
        cache=FileQuoteCacheRepository(settings.get_cache_dir(), clock=clock),
        clock=clock,
    )


def run(
    symbol: str,
    now: datetime,
    resolver: QuoteResolver,
    presenter: Presenter,
    out: Optional[TextIO] = None,
) -> int:
    """Resolve one quote, write one line to `out` (stdout), return the exit code."""
    out = out or sys.stdout
    try:
        quote = resolver.resolve(symbol, now)
    except QuoteUnavailableError as e:
        logger.error("No quote for %s: %s (%s)", symbol, e.message, e.code)
        print(presenter.format_error(symbol, e.message, e.color), file=out)
        return e.exit_code

    print(presenter.format_quote(symbol, quote), file=out)
    return 0


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stockbar",
        description="Print a status-bar line with a stock's price and daily change.",
    )
    parser.add_argument(
        "symbol",
        nargs="?",
        help="ticker to quote (default: derived from the program name)",
    )
    parser.add_argument(
        "--now",
        help="resolve as of this time, e.g. '2024-06-14 10:00' (US/Eastern if no zone)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        help=f"override STOCKBAR_LOG_LEVEL ({', '.join(LOG_LEVELS)})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the widget once."""
    args = parse_args(argv)
    # Default styling until settings are known to load
    presenter = Presenter()

    # Bad configuration still yields one status line and exit code 0
    try:
        settings = get_settings()
        presenter = Presenter(font=settings.font, font_size=settings.font_size)
        setup_logging(args.log_level)
        symbol = (
            normalize_symbol(args.symbol)
            if args.symbol
            else symbol_from_program_name(sys.argv[0])
        )
        now = parse_datetime_eastern(args.now) if args.now else now_eastern()
    except (ConfigurationError, ValidationError, ValueError, OverflowError) as e:
        logger.error("Invalid configuration: %s", e)
        print(presenter.format_error(APP_NAME, "bad configuration", "red"))
        return 0

    try:
        return run(symbol, now, build_resolver(settings), presenter)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print(presenter.format_error(symbol, "Error", "red"))
        return 1


if __name__ == "__main__":
    sys.exit(main())
