"""Logging configuration."""

import logging
import sys
from typing import Optional

from stockbar.config.settings import get_settings
from stockbar.core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging.

    Logs go to stderr: stdout carries the single status line read by the
    status-bar host.

    Raises:
        ConfigurationError: if the level is not one of LOG_LEVELS.
    """
    settings = get_settings()
    name = (level or settings.log_level).strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {name!r}")

    logging.basicConfig(
        level=getattr(logging, name),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
