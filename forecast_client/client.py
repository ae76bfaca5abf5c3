"""
Forecast service client.

Builds forecast and time machine request URLs, performs the GET through the
shared HTTP session, tracks the service's API call counter and shapes the
JSON response into a Forecast.
"""

from collections.abc import Iterable
from datetime import datetime

from forecast_client.config import get_api_key, get_settings
from forecast_client.errors import ConfigurationError, UnrecognizedVariantError
from forecast_client.http_session import request
from forecast_client.logging_config import get_logger
from forecast_client.models import Forecast, parse_forecast
from forecast_client.parameters import (
    Exclude,
    Extend,
    Language,
    Unit,
    build_query,
    from_value,
)
from forecast_client.time_utils import to_unix_time

logger = get_logger(__name__)


class ForecastApi:
    """
    Client for the Forecast service's forecast and time machine endpoints.

    Network failures and non-2xx responses are raised as the ``requests``
    exceptions that produced them; nothing is retried.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout_s: float | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Forecast service API key (if None, loads from configuration)
            base_url: Endpoint override (defaults to the configured endpoint)
            timeout_s: Request timeout in seconds (defaults to configuration)

        Raises:
            ConfigurationError: If no API key is available, or the configured
                default units or language are not service tokens
        """
        config = get_settings()

        self.api_key = api_key or get_api_key(config.api_key_env)
        if not self.api_key:
            raise ConfigurationError(
                f"Forecast API key required. Set {config.api_key_env} environment "
                "variable or pass api_key parameter."
            )

        self.base_url = (base_url or config.endpoint).rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else config.timeout_s
        self.coordinate_precision = config.coordinate_precision
        self.api_calls_header = config.api_calls_header

        try:
            self.default_unit = from_value(Unit, config.default_units)
            self.default_language = from_value(Language, config.default_language)
        except UnrecognizedVariantError as e:
            raise ConfigurationError(f"Invalid default request option: {e}") from e

        self._api_calls_made: int | None = None

        logger.info("Forecast API client initialized")

    @property
    def api_calls_made(self) -> int | None:
        """API calls made today with this key, as reported by the last successful response."""
        return self._api_calls_made

    def get_weather_data(
        self,
        latitude: float,
        longitude: float,
        *,
        unit: Unit | None = None,
        extends: Iterable[Extend] | None = None,
        excludes: Iterable[Exclude] | None = None,
        language: Language | None = None,
    ) -> Forecast:
        """
        Get the current forecast for a location.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            unit: Units of measurement (defaults to the configured units)
            extends: Data blocks to extend
            excludes: Data blocks to leave out of the response
            language: Language for text summaries (defaults to configuration)

        Returns:
            Parsed Forecast
        """
        url = self._build_url(latitude, longitude)
        params = build_query(
            unit=unit or self.default_unit,
            extends=extends,
            excludes=excludes,
            language=language or self.default_language,
        )
        return self._get(url, params)

    def get_time_machine_weather(
        self,
        latitude: float,
        longitude: float,
        when: datetime | int,
        *,
        unit: Unit | None = None,
        excludes: Iterable[Exclude] | None = None,
        language: Language | None = None,
    ) -> Forecast:
        """
        Get observed or forecast conditions for a location at a given time.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            when: Moment to look up (naive datetimes are local time) or Unix seconds
            unit: Units of measurement (defaults to the configured units)
            excludes: Data blocks to leave out of the response
            language: Language for text summaries (defaults to configuration)

        Returns:
            Parsed Forecast
        """
        if isinstance(when, datetime):
            unix_time = to_unix_time(when)
        elif isinstance(when, int) and not isinstance(when, bool):
            unix_time = when
        else:
            raise TypeError(f"when must be a datetime or Unix seconds, got {when!r}")

        url = self._build_url(latitude, longitude, unix_time)
        params = build_query(
            unit=unit or self.default_unit,
            excludes=excludes,
            language=language or self.default_language,
        )
        return self._get(url, params)

    def _build_url(
        self, latitude: float, longitude: float, unix_time: int | None = None
    ) -> str:
        """Build the request URL with coordinates (and time) in the path."""
        self._validate_coordinates(latitude, longitude)

        precision = self.coordinate_precision
        location = f"{latitude:.{precision}f},{longitude:.{precision}f}"
        if unix_time is not None:
            location = f"{location},{unix_time}"

        return f"{self.base_url}/{self.api_key}/{location}"

    def _get(self, url: str, params: dict[str, str]) -> Forecast:
        """Perform the request, update the call counter and shape the response."""
        response = request(
            "GET",
            url,
            secret=self.api_key,
            params=params,
            timeout=self.timeout_s,
        )

        if not response.ok:
            logger.error(f"Forecast API request failed: {response.status_code}")
        response.raise_for_status()

        forecast = parse_forecast(response.content)

        self._update_api_calls(response.headers.get(self.api_calls_header))
        return forecast

    def _update_api_calls(self, header_value: str | None) -> None:
        if header_value is None:
            return
        try:
            self._api_calls_made = int(header_value)
        except ValueError:
            logger.warning(
                f"Ignoring non-numeric {self.api_calls_header} header: {header_value!r}"
            )
            return
        logger.debug(f"Forecast API calls made: {self._api_calls_made}")

    @staticmethod
    def _validate_coordinates(latitude: float, longitude: float) -> None:
        if not -90 <= latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {latitude}")
        if not -180 <= longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {longitude}")
