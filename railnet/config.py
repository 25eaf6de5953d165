"""Configuration using Pydantic Settings.

Every setting can be overridden through the environment:
- RAILNET_NETWORK_DATA_DIR=/path/to/data
- RAILNET_SEARCH_MAX_RESULTS=10
- RAILNET_SEARCH_MAX_DEPTH=12
- RAILNET_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkConfig(BaseSettings):
    """Location of the network description.

    Environment variables prefixed with RAILNET_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_NETWORK_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    network_file: str = "network.json"

    @property
    def path(self) -> Path:
        """Full path to the network JSON file."""
        return self.data_dir / self.network_file


class SearchConfig(BaseSettings):
    """Journey search settings.

    Environment variables prefixed with RAILNET_SEARCH_.

    ``max_journeys`` and ``max_depth`` are unset by default, which keeps
    the search exhaustive. Set them on large, densely connected networks.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_SEARCH_")

    max_results: int = Field(default=5, ge=0)
    max_journeys: Optional[int] = Field(default=None, ge=1)
    max_depth: Optional[int] = Field(default=None, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RAILNET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Application configuration aggregating all sub-configs.

        config = get_config()
        print(config.search.max_results)
        print(config.network.path)
    """

    model_config = SettingsConfigDict(env_prefix="RAILNET_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the cached application configuration.

    Call reset_config() first to pick up environment changes (e.g. in tests).
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
