"""Primary quote provider: Twelve Data REST API."""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from stockbar.domain.models import (
    INVALID_DATA_MESSAGE,
    ApiFailure,
    FetchOutcome,
    FetchSuccess,
    HttpFailure,
    Quote,
    Unreachable,
)
from stockbar.providers.parsing import parse_decimal

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.twelvedata.com"
DEFAULT_TIMEOUT_SECONDS = 10.0


class TwelveDataQuotePayload(BaseModel):
    """Fields of the /quote response that matter here."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    status: Optional[str] = None
    message: Optional[str] = None
    close: Optional[str] = None
    previous_close: Optional[str] = None
    # Only used for a logged cross-check, so any value is accepted here
    is_market_open: Optional[Any] = None


class TwelveDataProvider:
    """
    Fetch quotes from Twelve Data.

    Without an API key the provider reports itself unreachable and makes no
    request.
    """

    name = "twelvedata"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def fetch(self, symbol: str) -> FetchOutcome:
        if not self._api_key:
            return Unreachable("no API key")

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(
                    f"{self._base_url}/quote",
                    params={"symbol": symbol, "apikey": self._api_key},
                )
        except httpx.HTTPError as e:
            logger.warning("Twelve Data request for %s failed: %s", symbol, e)
            return Unreachable(str(e))

        if not response.content.strip():
            return Unreachable("empty body")
        if response.status_code != 200:
            logger.warning("Twelve Data returned HTTP %s for %s", response.status_code, symbol)
            return HttpFailure(response.status_code)

        try:
            payload = TwelveDataQuotePayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Twelve Data sent an unreadable body for %s: %s", symbol, e)
            return ApiFailure(INVALID_DATA_MESSAGE)

        if payload.status == "error":
            message = payload.message or "API error"
            logger.warning("Twelve Data error for %s: %s", symbol, message)
            return ApiFailure(message)

        return self._to_outcome(symbol, payload)

    @staticmethod
    def _to_outcome(symbol: str, payload: TwelveDataQuotePayload) -> FetchOutcome:
        price = parse_decimal(payload.close)
        previous_close = parse_decimal(payload.previous_close)
        if price is None or previous_close is None or price < 0 or previous_close < 0:
            logger.warning(
                "Twelve Data quote for %s lacks close/previous_close: %r / %r",
                symbol,
                payload.close,
                payload.previous_close,
            )
            return ApiFailure(INVALID_DATA_MESSAGE)

        return FetchSuccess(
            quote=Quote(price=price, previous_close=previous_close, is_live=True),
            market_open=(
                payload.is_market_open if isinstance(payload.is_market_open, bool) else None
            ),
        )
