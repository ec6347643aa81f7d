"""Secondary quote provider: Nasdaq's public quote API."""

import logging
from decimal import Decimal
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from stockbar.domain.models import FetchOutcome, FetchSuccess, Quote, Unreachable
from stockbar.providers.parsing import parse_decimal, parse_net_change

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.nasdaq.com"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Nasdaq rejects default client identifiers
BROWSER_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Safari/605.1.15"
    ),
    "Connection": "keep-alive",
}


class NasdaqSessionData(BaseModel):
    """One trading session's figures, e.g. {"lastSalePrice": "$119.80", "netChange": "-0.70"}."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    lastSalePrice: Optional[str] = None
    netChange: Optional[str] = None


class NasdaqQuoteData(BaseModel):
    # primaryData follows the live/after-hours session; secondaryData, when
    # present, holds the official close of the regular session.
    primaryData: Optional[NasdaqSessionData] = None
    secondaryData: Optional[NasdaqSessionData] = None


class NasdaqQuotePayload(BaseModel):
    data: Optional[NasdaqQuoteData] = None


class NasdaqProvider:
    """
    Fetch quotes from Nasdaq. No API key is needed.

    Nasdaq reports a last sale price and a net change, so the previous close
    is derived from the two. Any missing field makes the whole quote
    unusable: there is no partial success.
    """

    name = "nasdaq"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def fetch(self, symbol: str) -> FetchOutcome:
        try:
            with httpx.Client(
                timeout=self._timeout,
                headers=BROWSER_HEADERS,
                transport=self._transport,
            ) as client:
                response = client.get(
                    f"{self._base_url}/api/quote/{symbol}/info",
                    params={"assetclass": "stocks"},
                )
        except httpx.HTTPError as e:
            logger.warning("Nasdaq request for %s failed: %s", symbol, e)
            return Unreachable(str(e))

        if response.status_code != 200:
            logger.warning("Nasdaq returned HTTP %s for %s", response.status_code, symbol)
            return Unreachable(f"HTTP {response.status_code}")

        try:
            payload = NasdaqQuotePayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Nasdaq sent an unreadable body for %s: %s", symbol, e)
            return Unreachable("invalid body")

        session = self._pick_session(payload)
        if session is None:
            return Unreachable("no quote data")

        price = parse_decimal(session.lastSalePrice)
        net_change = parse_net_change(session.netChange)
        if price is None or net_change is None:
            logger.warning(
                "Nasdaq quote for %s incomplete: %r / %r",
                symbol,
                session.lastSalePrice,
                session.netChange,
            )
            return Unreachable("incomplete quote")

        previous_close = derive_previous_close(price, net_change)
        if price < 0 or previous_close < 0:
            return Unreachable("negative price")

        return FetchSuccess(
            quote=Quote(price=price, previous_close=previous_close, is_live=True)
        )

    @staticmethod
    def _pick_session(payload: NasdaqQuotePayload) -> Optional[NasdaqSessionData]:
        """Prefer the official close; fall back to the primary session."""
        if payload.data is None:
            return None
        official = payload.data.secondaryData
        if (
            official is not None
            and parse_decimal(official.lastSalePrice) is not None
            and parse_net_change(official.netChange) is not None
        ):
            return official
        return payload.data.primaryData


def derive_previous_close(price: Decimal, net_change: Decimal) -> Decimal:
    """Work back from the last price and the reported net change."""
    if net_change.is_signed():
        return price + abs(net_change)
    return price - net_change
