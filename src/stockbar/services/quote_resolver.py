"""Quote resolver: picks a source by market state, falls back, caches."""

import logging
from datetime import datetime

from stockbar.core.exceptions import QuoteUnavailableError
from stockbar.domain.models import (
    FailureKind,
    FetchFailure,
    FetchOutcome,
    MarketState,
    Quote,
)
from stockbar.domain.views import DisplayQuote
from stockbar.providers.quote_provider import QuoteProvider
from stockbar.repositories.protocols import QuoteCacheRepository
from stockbar.services.market_clock import MarketClock

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "N/A"
RATE_LIMIT_MESSAGE = "Rate or plan limit"


def failure_to_error(failure: FetchFailure) -> QuoteUnavailableError:
    """
    Map the primary provider's failure to what the status bar shows.

    Only an unexpected HTTP status exits non-zero.
    """
    kind = failure.kind
    if kind == FailureKind.RATE_LIMITED:
        return QuoteUnavailableError(RATE_LIMIT_MESSAGE, color="red", code=kind.value)
    if kind == FailureKind.UNEXPECTED_HTTP:
        return QuoteUnavailableError(
            f"HTTP {failure.status}", color="red", exit_code=1, code=kind.value
        )
    if kind in (FailureKind.API_ERROR, FailureKind.INVALID_DATA):
        return QuoteUnavailableError(failure.message, color="red", code=kind.value)
    # Unreachable or provider outage
    return QuoteUnavailableError(UNAVAILABLE_MESSAGE, color="gray", code=kind.value)


class QuoteResolver:
    """
    Resolve the quote to display for one symbol at one instant.

    Market open: primary, then secondary. Market closed: a fresh cache
    record if there is one, otherwise secondary (it carries the settled
    official close) then primary. Every live success is written to the
    cache; nothing is retried beyond the one cross-source fallback.
    """

    def __init__(
        self,
        primary: QuoteProvider,
        secondary: QuoteProvider,
        cache: QuoteCacheRepository,
        clock: MarketClock,
    ):
        self._primary = primary
        self._secondary = secondary
        self._cache = cache
        self._clock = clock

    def resolve(self, symbol: str, now: datetime) -> DisplayQuote:
        """
        Return the quote to display.

        Raises:
            QuoteUnavailableError: if every source for the market state failed.
        """
        symbol = symbol.upper()
        state = self._clock.market_state(now)
        logger.debug("Resolving %s at %s (market %s)", symbol, now.isoformat(), state.value)

        if state == MarketState.OPEN:
            quote = self._resolve_open(symbol)
        else:
            quote = self._resolve_closed(symbol, now)

        return DisplayQuote(
            price=quote.price,
            previous_close=quote.previous_close,
            is_live=state == MarketState.OPEN,
        )

    def _resolve_open(self, symbol: str) -> Quote:
        primary_outcome = self._primary.fetch(symbol)
        if primary_outcome.ok:
            self._check_market_flag(symbol, primary_outcome, MarketState.OPEN)
            return self._persist(symbol, primary_outcome.quote)

        logger.info(
            "%s failed for %s (%s); trying %s",
            self._primary.name,
            symbol,
            primary_outcome.kind.value,
            self._secondary.name,
        )
        secondary_outcome = self._secondary.fetch(symbol)
        if secondary_outcome.ok:
            return self._persist(symbol, secondary_outcome.quote)

        raise failure_to_error(primary_outcome)

    def _resolve_closed(self, symbol: str, now: datetime) -> Quote:
        record = self._cache.load(symbol)
        if record is not None:
            if not self._cache.is_stale(record, now):
                return record.to_quote()
            logger.info("Cached quote for %s is stale; rebuilding", symbol)
            self._cache.delete(symbol)

        for provider in (self._secondary, self._primary):
            outcome = provider.fetch(symbol)
            if outcome.ok:
                self._check_market_flag(symbol, outcome, MarketState.CLOSED)
                return self._persist(symbol, outcome.quote)
            logger.info("%s failed for %s (%s)", provider.name, symbol, outcome.kind.value)

        raise QuoteUnavailableError(UNAVAILABLE_MESSAGE, color="gray", code="CACHE_MISSING")

    def _persist(self, symbol: str, quote: Quote) -> Quote:
        self._cache.save(symbol, quote)
        return quote

    @staticmethod
    def _check_market_flag(symbol: str, outcome: FetchOutcome, state: MarketState) -> None:
        flag = getattr(outcome, "market_open", None)
        if flag is not None and flag != (state == MarketState.OPEN):
            logger.debug(
                "Provider says market open=%s for %s but clock says %s",
                flag,
                symbol,
                state.value,
            )
