"""Fetch outcomes returned by quote providers."""

from dataclasses import dataclass
from typing import Optional, Union

from stockbar.domain.models.enums import FailureKind
from stockbar.domain.models.quote import Quote

INVALID_DATA_MESSAGE = "invalid data"


@dataclass(frozen=True)
class FetchSuccess:
    """Provider returned a usable quote."""

    quote: Quote
    # Provider's own open/closed flag, if it reports one
    market_open: Optional[bool] = None
    ok = True


@dataclass(frozen=True)
class HttpFailure:
    """Provider answered with a non-200 status."""

    status: int
    ok = False

    @property
    def kind(self) -> FailureKind:
        if self.status >= 500:
            return FailureKind.HTTP_OUTAGE
        if self.status in (401, 429):
            return FailureKind.RATE_LIMITED
        return FailureKind.UNEXPECTED_HTTP


@dataclass(frozen=True)
class ApiFailure:
    """Provider answered 200 but reported an error or unusable data."""

    message: str
    ok = False

    @property
    def kind(self) -> FailureKind:
        if self.message == INVALID_DATA_MESSAGE:
            return FailureKind.INVALID_DATA
        return FailureKind.API_ERROR


@dataclass(frozen=True)
class Unreachable:
    """Provider could not be reached, or was never asked."""

    reason: str = ""
    ok = False

    @property
    def kind(self) -> FailureKind:
        return FailureKind.UNREACHABLE


FetchFailure = Union[HttpFailure, ApiFailure, Unreachable]
FetchOutcome = Union[FetchSuccess, HttpFailure, ApiFailure, Unreachable]
