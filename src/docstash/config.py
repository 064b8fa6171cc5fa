"""Configuration management."""
from functools import lru_cache
from typing import Literal

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from docstash.exceptions import ConfigError


class DocstashConfig(BaseSettings):
    """Configuration for docstash."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSTASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage settings
    id_strategy: Literal["counter", "uuid"] = "counter"

    # Search settings
    search_order: Literal["insertion", "id"] = "insertion"

    # Logging
    verbose: bool = False


@lru_cache
def _get_config_cached() -> DocstashConfig:
    """Cached configuration lookup."""
    try:
        return DocstashConfig()
    except ValidationError as e:
        raise ConfigError(f"Invalid docstash configuration: {e}") from e


def get_config(clear_cache: bool = False) -> DocstashConfig:
    """Get configuration instance.

    Args:
        clear_cache: If True, clear the cache before returning config, so
            environment changes since the last call are picked up.
    """
    if clear_cache:
        _get_config_cached.cache_clear()
    return _get_config_cached()
