"""
Pytest configuration and fixtures for stockbar tests.

This module provides:
- Time helpers for Eastern timezone
- Scripted fake quote providers
- httpx mock transports for provider tests
- Cache, clock and resolver fixtures backed by a temporary directory
"""

import json
import os
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Callable, Optional

import httpx
import pytest

from stockbar.config.settings import reset_settings
from stockbar.core.timezone import EASTERN_TZ
from stockbar.domain.models import (
    FetchOutcome,
    FetchSuccess,
    Quote,
    Unreachable,
)
from stockbar.repositories.file import FileQuoteCacheRepository
from stockbar.services import MarketClock, Presenter, QuoteResolver


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


# 2024-06-11 is a Tuesday, 2024-06-14 a Friday, 2024-06-15 a Saturday
TUESDAY_10AM = eastern_datetime(2024, 6, 11, 10, 0)
FRIDAY_AFTER_CLOSE = eastern_datetime(2024, 6, 14, 16, 30)
FRIDAY_BEFORE_CLOSE = eastern_datetime(2024, 6, 14, 15, 45)
SATURDAY_NOON = eastern_datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' during a regular session."""
    return TUESDAY_10AM


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate each test from STOCKBAR_* variables and cached settings."""
    for key in list(os.environ):
        if key.startswith("STOCKBAR_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# QUOTE HELPERS
# =============================================================================


def make_quote(price: str, previous_close: str, is_live: bool = True) -> Quote:
    """Build a Quote from decimal strings."""
    return Quote(
        price=Decimal(price),
        previous_close=Decimal(previous_close),
        is_live=is_live,
    )


def success(price: str, previous_close: str) -> FetchSuccess:
    """Build a successful fetch outcome."""
    return FetchSuccess(quote=make_quote(price, previous_close))


# =============================================================================
# FAKE PROVIDERS
# =============================================================================


class ScriptedProvider:
    """
    Quote provider that returns a fixed outcome and records every call.

    Pass the same `log` list to several providers to see the order they
    were asked in.
    """

    def __init__(
        self,
        name: str,
        outcome: Optional[FetchOutcome] = None,
        log: Optional[list] = None,
    ):
        self.name = name
        self._outcome = outcome or Unreachable("scripted")
        self._log = log
        self.calls: list[str] = []

    def fetch(self, symbol: str) -> FetchOutcome:
        self.calls.append(symbol)
        if self._log is not None:
            self._log.append(self.name)
        return self._outcome


# =============================================================================
# HTTP MOCKS
# =============================================================================


def json_transport(
    body, status_code: int = 200, seen: Optional[list] = None
) -> httpx.MockTransport:
    """Transport answering every request with `body` (dict/list -> JSON, str -> raw)."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, content=json.dumps(body).encode())
        return httpx.Response(status_code, content=(body or "").encode())

    return httpx.MockTransport(handler)


def failing_transport(seen: Optional[list] = None) -> httpx.MockTransport:
    """Transport that fails every request at the connection level."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


def nasdaq_body(
    last_sale: Optional[str] = "$119.80",
    net_change: Optional[str] = "-0.70",
    official: Optional[dict] = None,
) -> dict:
    """Nasdaq /info payload with the given primary session figures."""
    return {
        "data": {
            "symbol": "ORCL",
            "primaryData": {
                "lastSalePrice": last_sale,
                "netChange": net_change,
                "percentageChange": "-0.58%",
                "isRealTime": True,
            },
            "secondaryData": official,
        },
        "message": None,
        "status": {"rCode": 200},
    }


def twelvedata_body(close="120.50", previous_close="118.00", **extra) -> dict:
    """Twelve Data /quote payload."""
    body = {
        "symbol": "ORCL",
        "name": "Oracle Corporation",
        "exchange": "NYSE",
        "close": close,
        "previous_close": previous_close,
        "change": "2.50",
        "percent_change": "2.11864",
        "is_market_open": True,
    }
    body.update(extra)
    return body


# =============================================================================
# CACHE / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def cache_dir(tmp_path) -> Path:
    """Cache directory that does not exist yet."""
    return tmp_path / "cache" / "swiftbar-stock"


@pytest.fixture
def clock() -> MarketClock:
    return MarketClock()


@pytest.fixture
def cache_repo(cache_dir, clock) -> FileQuoteCacheRepository:
    """Provide a file cache repository in a temp directory."""
    return FileQuoteCacheRepository(cache_dir, clock=clock)


@pytest.fixture
def presenter() -> Presenter:
    return Presenter()


def write_cache_file(
    cache_dir: Path, symbol: str, price: str, previous_close: str, written_at: datetime
) -> Path:
    """Write a cache file by hand and set its mtime."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    path = cache_dir / f"{symbol}.last"
    path.write_text(f"{price}\n{previous_close}\n", encoding="utf-8")
    ts = written_at.timestamp()
    os.utime(path, (ts, ts))
    return path


@pytest.fixture
def resolver_factory(cache_repo, clock) -> Callable[..., QuoteResolver]:
    """Factory for resolvers over scripted providers and the temp cache."""

    def _create(primary: ScriptedProvider, secondary: ScriptedProvider) -> QuoteResolver:
        return QuoteResolver(
            primary=primary,
            secondary=secondary,
            cache=cache_repo,
            clock=clock,
        )

    return _create
