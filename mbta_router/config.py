"""Centralized configuration using Pydantic Settings.

Credentials and endpoints are passed explicitly to the adapters that
need them; nothing reads them from a hidden global.

Configuration can be overridden via environment variables:
- MBTA_API_KEY=...
- MBTA_API_ROUTE_TYPES=0,1
- MBTA_DATA_SOURCE=csv
- MBTA_DATA_CSV_PATH=/path/to/routes.csv
- MBTA_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class MBTAConfig(BaseSettings):
    """MBTA v3 API configuration.

    Environment variables prefixed with MBTA_API_.
    """

    model_config = SettingsConfigDict(env_prefix="MBTA_API_")

    base_url: str = "https://api-v3.mbta.com"
    key: Optional[str] = None
    key_file: Path = Path("api_key.txt")
    route_types: str = "0,1"  # light rail, heavy rail
    timeout_seconds: float = 10.0
    max_workers: int = Field(default=4, ge=1)

    def resolve_api_key(self) -> Optional[str]:
        """Return the API key, reading ``key_file`` if none is set.

        Trailing newlines of the file are stripped. A missing file
        means the API is used anonymously.

        Raises:
            ConfigurationError: If the key file exists but cannot be read.
        """
        if self.key:
            return self.key
        if not self.key_file.exists():
            return None
        try:
            text = self.key_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read API key file {self.key_file}",
                setting_name="key_file",
                cause=e,
            )
        return text.rstrip("\n") or None


class DataConfig(BaseSettings):
    """Route data source configuration.

    Environment variables prefixed with MBTA_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="MBTA_DATA_")

    source: Literal["api", "csv"] = "api"
    csv_path: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent
        / "data"
        / "routes.csv"
    )


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with MBTA_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MBTA_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.api.base_url)
        print(config.data.csv_path)
    """

    model_config = SettingsConfigDict(env_prefix="MBTA_")

    api: MBTAConfig = Field(default_factory=MBTAConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
