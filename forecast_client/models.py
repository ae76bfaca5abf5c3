"""
Pydantic models for Forecast service responses.

Each field is declared under a descriptive Python name with the service's
own JSON name as its alias, so ``DataPoint.model_validate(raw)`` reads the
raw payload and attribute access uses the descriptive names. The service
does not guarantee every field for every location, so all fields are
optional: a missing key and an explicit ``null`` both produce ``None``.
"""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from forecast_client.errors import ForecastParseError
from forecast_client.logging_config import get_logger
from forecast_client.time_utils import from_unix_time

logger = get_logger(__name__)


class ForecastModel(BaseModel):
    """Base for all response models."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


def _unix_to_datetime(value: Any) -> Any:
    """Convert raw Unix seconds to an aware UTC datetime, leaving other input to pydantic."""
    if isinstance(value, int | float) and not isinstance(value, bool):
        try:
            return from_unix_time(value)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e
    return value


def _none_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


class DataPoint(ForecastModel):
    """Weather conditions at a single moment (or for a single day)."""

    time: datetime | None = Field(None, alias="time")
    summary: str | None = Field(None, alias="summary")
    icon: str | None = Field(None, alias="icon")

    # Daily only
    sunrise_time: datetime | None = Field(None, alias="sunriseTime")
    sunset_time: datetime | None = Field(None, alias="sunsetTime")
    moon_phase: float | None = Field(None, alias="moonPhase")

    # Currently only
    nearest_storm_distance: float | None = Field(None, alias="nearestStormDistance")
    nearest_storm_bearing: float | None = Field(None, alias="nearestStormBearing")

    precipitation_intensity: float | None = Field(None, alias="precipIntensity")
    precipitation_intensity_error: float | None = Field(
        None, alias="precipIntensityError"
    )
    max_precipitation_intensity: float | None = Field(
        None, alias="precipIntensityMax"
    )
    max_precipitation_intensity_time: datetime | None = Field(
        None, alias="precipIntensityMaxTime"
    )
    precipitation_probability: float | None = Field(None, alias="precipProbability")
    precipitation_type: str | None = Field(None, alias="precipType")
    precipitation_accumulation: float | None = Field(
        None, alias="precipAccumulation"
    )

    temperature: float | None = Field(None, alias="temperature")
    min_temperature: float | None = Field(None, alias="temperatureMin")
    min_temperature_time: datetime | None = Field(None, alias="temperatureMinTime")
    max_temperature: float | None = Field(None, alias="temperatureMax")
    max_temperature_time: datetime | None = Field(None, alias="temperatureMaxTime")

    apparent_temperature: float | None = Field(None, alias="apparentTemperature")
    min_apparent_temperature: float | None = Field(
        None, alias="apparentTemperatureMin"
    )
    min_apparent_temperature_time: datetime | None = Field(
        None, alias="apparentTemperatureMinTime"
    )
    max_apparent_temperature: float | None = Field(
        None, alias="apparentTemperatureMax"
    )
    max_apparent_temperature_time: datetime | None = Field(
        None, alias="apparentTemperatureMaxTime"
    )

    dew_point: float | None = Field(None, alias="dewPoint")
    wind_speed: float | None = Field(None, alias="windSpeed")
    wind_bearing: float | None = Field(None, alias="windBearing")
    cloud_cover: float | None = Field(None, alias="cloudCover")
    humidity: float | None = Field(None, alias="humidity")
    pressure: float | None = Field(None, alias="pressure")
    visibility: float | None = Field(None, alias="visibility")
    ozone: float | None = Field(None, alias="ozone")

    parse_time_fields = field_validator(
        "time",
        "sunrise_time",
        "sunset_time",
        "max_precipitation_intensity_time",
        "min_temperature_time",
        "max_temperature_time",
        "min_apparent_temperature_time",
        "max_apparent_temperature_time",
        mode="before",
    )(_unix_to_datetime)


class DataBlock(ForecastModel):
    """A series of data points (minutely, hourly or daily) with a summary."""

    summary: str | None = Field(None, alias="summary")
    icon: str | None = Field(None, alias="icon")
    data: list[DataPoint] = Field(default_factory=list, alias="data")

    default_data = field_validator("data", mode="before")(_none_to_empty_list)


class Alert(ForecastModel):
    """A severe weather alert issued for the requested location."""

    title: str | None = Field(None, alias="title")
    time: datetime | None = Field(None, alias="time")
    expires: datetime | None = Field(None, alias="expires")
    description: str | None = Field(None, alias="description")
    uri: str | None = Field(None, alias="uri")
    severity: str | None = Field(None, alias="severity")
    regions: list[str] = Field(default_factory=list, alias="regions")

    parse_times = field_validator("time", "expires", mode="before")(_unix_to_datetime)
    default_regions = field_validator("regions", mode="before")(_none_to_empty_list)


class Flags(ForecastModel):
    """Metadata about how the response was produced."""

    darksky_unavailable: str | None = Field(None, alias="darksky-unavailable")
    darksky_stations: list[str] = Field(default_factory=list, alias="darksky-stations")
    datapoint_stations: list[str] = Field(
        default_factory=list, alias="datapoint-stations"
    )
    isd_stations: list[str] = Field(default_factory=list, alias="isd-stations")
    lamp_stations: list[str] = Field(default_factory=list, alias="lamp-stations")
    madis_stations: list[str] = Field(default_factory=list, alias="madis-stations")
    metar_stations: list[str] = Field(default_factory=list, alias="metar-stations")
    metno_license: str | None = Field(None, alias="metno-license")
    nearest_station: float | None = Field(None, alias="nearest-station")
    sources: list[str] = Field(default_factory=list, alias="sources")
    units: str | None = Field(None, alias="units")

    default_lists = field_validator(
        "darksky_stations",
        "datapoint_stations",
        "isd_stations",
        "lamp_stations",
        "madis_stations",
        "metar_stations",
        "sources",
        mode="before",
    )(_none_to_empty_list)


class Forecast(ForecastModel):
    """
    A complete Forecast service response.

    Any block excluded from the request, or not offered by the service for
    the location, is None (``alerts`` is an empty list).
    """

    latitude: float | None = Field(None, alias="latitude")
    longitude: float | None = Field(None, alias="longitude")
    timezone: str | None = Field(None, alias="timezone")
    offset: float | None = Field(None, alias="offset")

    currently: DataPoint | None = Field(None, alias="currently")
    minutely: DataBlock | None = Field(None, alias="minutely")
    hourly: DataBlock | None = Field(None, alias="hourly")
    daily: DataBlock | None = Field(None, alias="daily")
    alerts: list[Alert] = Field(default_factory=list, alias="alerts")
    flags: Flags | None = Field(None, alias="flags")

    default_alerts = field_validator("alerts", mode="before")(_none_to_empty_list)


def parse_forecast(payload: dict[str, Any] | str | bytes) -> Forecast:
    """
    Shape a raw Forecast service response.

    Args:
        payload: Decoded JSON object, or the raw JSON text

    Returns:
        Parsed Forecast

    Raises:
        ForecastParseError: If the JSON is invalid, is not an object, or holds
            a field whose type does not match its expected shape
    """
    if isinstance(payload, str | bytes):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            logger.error(f"Forecast response is not valid JSON: {e}")
            raise ForecastParseError(f"Invalid JSON in forecast response: {e}") from e

    if not isinstance(payload, dict):
        raise ForecastParseError(
            f"Forecast response must be a JSON object, got {type(payload).__name__}"
        )

    try:
        return Forecast.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Forecast response failed validation: {e}")
        raise ForecastParseError(f"Unexpected forecast response shape: {e}") from e
