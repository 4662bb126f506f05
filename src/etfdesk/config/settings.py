"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_TRENDING_SYMBOLS = ["SPY", "QQQ", "VTI", "IWM", "EFA", "VWO", "GLD", "BND"]


def get_default_data_dir() -> Path:
    """Return the default data directory based on platform."""
    return Path.home() / ".etfdesk"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "ETF Desk"
    app_version: str = "0.1.0"

    # Data directory (UI state database lives here)
    data_dir: Optional[Path] = None

    # Database URL (derived from data_dir if not set explicitly)
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Twelve Data (free tier: 8 calls/minute, 800/day)
    twelve_data_api_key: str = ""
    twelve_data_base_url: str = "https://api.twelvedata.com"
    request_timeout_seconds: float = 10.0

    # Market data settings
    market_data_cache_ttl_seconds: int = 60
    max_parallel_requests: int = 8
    trending_symbols: list[str] = DEFAULT_TRENDING_SYMBOLS
    synthetic_volatility: float = 0.02

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "etfdesk.db"
        return f"sqlite:///{db_path}"


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
