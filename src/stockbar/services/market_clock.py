"""Market clock for the US equity session (no holiday calendar)."""

from datetime import datetime, time, timedelta

from stockbar.core.timezone import EASTERN_TZ, to_eastern
from stockbar.domain.models import MarketState

NOMINAL_OPEN = time(9, 30)
NOMINAL_CLOSE = time(16, 0)
DEFAULT_TOLERANCE_MINUTES = 2

# datetime.weekday(): Saturday=5, Sunday=6
_WEEKEND = (5, 6)


def _shift(t: time, minutes: int) -> time:
    return (datetime.combine(datetime.min, t) + timedelta(minutes=minutes)).time()


class MarketClock:
    """
    Decide whether the market is open from wall-clock time alone.

    The window is widened by a small tolerance at both ends so a scheduled
    refresh a minute off the session boundary still counts.
    """

    def __init__(self, tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES):
        self._window_start = _shift(NOMINAL_OPEN, -tolerance_minutes)
        self._window_end = _shift(NOMINAL_CLOSE, tolerance_minutes)

    def is_market_open(self, now: datetime) -> bool:
        local = to_eastern(now)
        if local.weekday() in _WEEKEND:
            return False
        # Minute resolution, both ends inclusive (09:28..16:02)
        hhmm = local.time().replace(second=0, microsecond=0)
        return self._window_start <= hhmm <= self._window_end

    def market_state(self, now: datetime) -> MarketState:
        return MarketState.OPEN if self.is_market_open(now) else MarketState.CLOSED

    @staticmethod
    def most_recent_close(now: datetime) -> datetime:
        """Return the latest weekday 16:00 ET at or before `now`."""
        local = to_eastern(now)
        day = local.date()
        if local.time() < NOMINAL_CLOSE:
            day -= timedelta(days=1)
        while day.weekday() in _WEEKEND:
            day -= timedelta(days=1)
        return EASTERN_TZ.localize(datetime.combine(day, NOMINAL_CLOSE))
