"""Configuration: settings, logging and credentials."""

from stockbar.config.settings import Settings, get_settings, set_settings, reset_settings
from stockbar.config.logging_config import setup_logging
from stockbar.config.credentials import get_api_key

__all__ = [
    "Settings",
    "get_settings",
    "set_settings",
    "reset_settings",
    "setup_logging",
    "get_api_key",
]
