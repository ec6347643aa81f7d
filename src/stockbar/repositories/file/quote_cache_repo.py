"""File-backed implementation of QuoteCacheRepository."""

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

from stockbar.core.timezone import from_timestamp_eastern, to_eastern
from stockbar.domain.models import CacheRecord, Quote
from stockbar.domain.views import round2
from stockbar.providers.parsing import parse_decimal
from stockbar.services.market_clock import MarketClock

logger = logging.getLogger(__name__)

CACHE_SUFFIX = ".last"
DIR_MODE = 0o700
FILE_MODE = 0o600


class FileQuoteCacheRepository:
    """
    One "<SYMBOL>.last" file per symbol holding two lines: price and
    previous close. The file's mtime is the record's written_at.

    Files are readable by the owning user only; a cached ticker reveals
    what the user is watching.
    """

    def __init__(self, cache_dir: Path, clock: Optional[MarketClock] = None):
        self._cache_dir = Path(cache_dir)
        self._clock = clock or MarketClock()

    def path_for(self, symbol: str) -> Path:
        return self._cache_dir / f"{symbol.upper()}{CACHE_SUFFIX}"

    def load(self, symbol: str) -> Optional[CacheRecord]:
        """Read the record for a symbol; unreadable files count as missing."""
        path = self.path_for(symbol)
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
            written_at = from_timestamp_eastern(path.stat().st_mtime)
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("Cannot read cache file %s: %s", path, e)
            return None

        try:
            price = parse_decimal(lines[0])
            previous_close = parse_decimal(lines[1])
        except IndexError:
            logger.warning("Ignoring malformed cache file %s", path)
            return None
        if price is None or previous_close is None or price < 0 or previous_close < 0:
            logger.warning("Ignoring malformed cache file %s", path)
            return None

        return CacheRecord(
            symbol=symbol.upper(),
            price=price,
            previous_close=previous_close,
            written_at=written_at,
        )

    def is_stale(self, record: CacheRecord, now: datetime) -> bool:
        """True if the record predates the most recent 16:00 ET close."""
        return to_eastern(record.written_at) < self._clock.most_recent_close(now)

    def save(self, symbol: str, quote: Quote) -> CacheRecord:
        """Atomically replace the record for a symbol."""
        self._cache_dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        path = self.path_for(symbol)
        content = f"{round2(quote.price):.2f}\n{round2(quote.previous_close):.2f}\n"

        # mkstemp creates the file with mode 0600; os.replace is atomic on
        # the same filesystem, so readers see the old record or the new one.
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{symbol.upper()}.", suffix=".tmp", dir=self._cache_dir
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug("Cached %s: %s", symbol, content.replace("\n", " ").strip())
        return CacheRecord(
            symbol=symbol.upper(),
            price=round2(quote.price),
            previous_close=round2(quote.previous_close),
            written_at=from_timestamp_eastern(path.stat().st_mtime),
        )

    def delete(self, symbol: str) -> None:
        """Delete the record for a symbol; a missing file is fine."""
        self.path_for(symbol).unlink(missing_ok=True)
