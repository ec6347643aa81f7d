"""Widget settings and configuration."""

import getpass
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_cache_dir() -> Path:
    """Return the default per-user cache directory."""
    return Path.home() / ".cache" / "swiftbar-stock"


class Settings(BaseSettings):
    """Widget configuration loaded from STOCKBAR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOCKBAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "stockbar"

    # Cache directory (one "<SYMBOL>.last" file per symbol)
    cache_dir: Optional[Path] = None

    log_level: str = "WARNING"

    # Quote providers
    twelvedata_base_url: str = "https://api.twelvedata.com"
    nasdaq_base_url: str = "https://api.nasdaq.com"
    primary_timeout_seconds: float = Field(default=10.0, gt=0)
    secondary_timeout_seconds: float = Field(default=10.0, gt=0)

    # Credentials: an explicit key wins over the keychain entry
    twelvedata_api_key: Optional[SecretStr] = None
    keychain_service: str = "twelvedata_api_key"
    keychain_account: Optional[str] = None

    # Market hours tolerance around the 09:30-16:00 ET session
    open_tolerance_minutes: int = Field(default=2, ge=0, le=15)

    # Status line styling
    font: str = "SF Pro Text"
    font_size: int = 13

    def get_cache_dir(self) -> Path:
        """Get the cache directory (not created here; the cache does that)."""
        return self.cache_dir or get_default_cache_dir()

    def get_keychain_account(self) -> str:
        """Get the keychain account, defaulting to the current OS user."""
        return self.keychain_account or getpass.getuser()


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
