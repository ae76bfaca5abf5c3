"""Configuration management for forecast-client.

Endpoint settings come from the packaged ``data/providers.yaml`` file, with
environment variable overrides. A ``.env`` file in the working directory is
loaded lazily the first time settings are read.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from forecast_client.logging_config import get_logger

logger = get_logger(__name__)


class ProviderConfig(BaseModel):
    """Configuration for the Forecast service endpoint."""

    endpoint: str
    timeout_s: float = 30.0
    api_key_env: str = "FORECAST_API_KEY"
    api_calls_header: str = "X-Forecast-API-Calls"
    coordinate_precision: int = 4
    default_units: str = "us"
    default_language: str = "en"


@lru_cache(maxsize=1)
def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_dir = Path(__file__).resolve().parent / "data"

    if not config_dir.exists():
        raise FileNotFoundError(f"Configuration directory not found: {config_dir}")

    return config_dir


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file."""
    config_file = get_config_dir() / filename

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        logger.debug(f"Loaded configuration from {config_file}")
        return data or {}

    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_file}: {e}") from e


@lru_cache(maxsize=1)
def get_providers_config() -> dict[str, Any]:
    """Load provider configuration."""
    return load_yaml_config("providers.yaml")


@lru_cache(maxsize=1)
def get_settings() -> ProviderConfig:
    """Get Forecast service settings with environment override support."""
    # Load .env file if present (but not at import time)
    from dotenv import load_dotenv

    load_dotenv(override=False)

    provider_dict = dict(get_providers_config().get("forecast", {}))

    base_url = os.getenv("FORECAST_BASE_URL")
    if base_url:
        provider_dict["endpoint"] = base_url

    timeout = os.getenv("FORECAST_TIMEOUT_S")
    if timeout:
        try:
            provider_dict["timeout_s"] = float(timeout)
        except ValueError:
            logger.warning(f"Ignoring invalid FORECAST_TIMEOUT_S value: {timeout!r}")

    return ProviderConfig(**provider_dict)


def get_api_key(env_var_name: str) -> str | None:
    """Get API key from environment variable.

    Args:
        env_var_name: Name of environment variable containing API key

    Returns:
        API key string, or None if not set
    """
    api_key = os.getenv(env_var_name)
    if not api_key:
        logger.debug(f"API key environment variable {env_var_name} not set")
        return None

    # Don't log the actual key
    logger.debug(f"Loaded API key from {env_var_name}")
    return api_key


def clear_config_cache() -> None:
    """Clear all cached configuration to force reload from current environment.

    This is useful in tests when environment variables are modified.
    """
    get_config_dir.cache_clear()
    get_providers_config.cache_clear()
    get_settings.cache_clear()
