"""API key lookup from the environment or the OS keychain."""

import logging
from typing import Optional

import keyring
from keyring.errors import KeyringError

from stockbar.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_api_key(settings: Optional[Settings] = None) -> Optional[str]:
    """
    Return the Twelve Data API key, or None if it cannot be found.

    A key set through STOCKBAR_TWELVEDATA_API_KEY takes precedence; otherwise
    the keychain entry for the current user is read. A missing key is not
    fatal: it only disables the primary provider for this run.
    """
    settings = settings or get_settings()

    if settings.twelvedata_api_key is not None:
        key = settings.twelvedata_api_key.get_secret_value().strip()
        if key:
            return key

    try:
        key = keyring.get_password(
            settings.keychain_service, settings.get_keychain_account()
        )
    except KeyringError as e:
        logger.warning("Keychain lookup for %s failed: %s", settings.keychain_service, e)
        return None

    if not key:
        logger.info("No API key stored under %s", settings.keychain_service)
        return None
    return key.strip()
