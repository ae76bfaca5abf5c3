"""Forecast Client: typed access to the Forecast weather service."""

__version__ = "0.1.0"

from .client import ForecastApi
from .errors import (
    ConfigurationError,
    ForecastError,
    ForecastParseError,
    UnrecognizedVariantError,
)
from .models import Alert, DataBlock, DataPoint, Flags, Forecast, parse_forecast
from .parameters import Exclude, Extend, Language, Unit, build_query, to_value
from .time_utils import from_unix_time, to_unix_time

__all__ = [
    "ForecastApi",
    "Forecast",
    "DataPoint",
    "DataBlock",
    "Alert",
    "Flags",
    "parse_forecast",
    "Unit",
    "Extend",
    "Exclude",
    "Language",
    "to_value",
    "build_query",
    "from_unix_time",
    "to_unix_time",
    "ForecastError",
    "UnrecognizedVariantError",
    "ForecastParseError",
    "ConfigurationError",
]
