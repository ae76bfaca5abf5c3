"""
Exceptions raised by forecast-client.

Transport and HTTP status failures are not wrapped: they surface as the
``requests`` exceptions that produced them.
"""

from typing import Any


class ForecastError(Exception):
    """Base class for all forecast-client failures."""


class UnrecognizedVariantError(ForecastError, ValueError):
    """An option value has no token for the Forecast service."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unrecognized request option: {value!r}")
        self.value = value


class ForecastParseError(ForecastError, ValueError):
    """The service response could not be shaped into a Forecast."""


class ConfigurationError(ForecastError):
    """The client is missing required configuration (e.g. the API key)."""
