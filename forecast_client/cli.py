"""CLI interface for Forecast service lookups."""

import json
import sys
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from forecast_client import __version__
from forecast_client.client import ForecastApi
from forecast_client.logging_config import get_logger, setup_logging
from forecast_client.models import Forecast
from forecast_client.parameters import (
    Exclude,
    Extend,
    Language,
    Unit,
    from_value,
    tokens_for,
)

console = Console()
logger = get_logger(__name__)


def _request_options(func):
    """Attach the options shared by every lookup command."""
    options = [
        click.option(
            "--lat", type=float, required=True, help="Latitude in decimal degrees"
        ),
        click.option(
            "--lon", type=float, required=True, help="Longitude in decimal degrees"
        ),
        click.option(
            "--units",
            type=click.Choice(tokens_for(Unit), case_sensitive=False),
            default=None,
            help="Units of measurement (default: configured units)",
        ),
        click.option(
            "--lang",
            type=click.Choice(tokens_for(Language), case_sensitive=False),
            default=None,
            help="Language for text summaries (default: configured language)",
        ),
        click.option(
            "--exclude",
            "excludes",
            type=click.Choice(tokens_for(Exclude), case_sensitive=False),
            multiple=True,
            help="Data block to exclude (repeatable)",
        ),
        click.option("--api-key", envvar="FORECAST_API_KEY", help="Forecast API key"),
        click.option("--timeout", type=float, help="Request timeout in seconds"),
        click.option("--output", "-o", help="Output file path (JSON)"),
        click.option(
            "--json", "as_json", is_flag=True, help="Print the JSON response to stdout"
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _parse_time(value: str) -> datetime | int:
    """Accept Unix seconds or an ISO 8601 datetime."""
    if value.lstrip("-").isdigit():
        return int(value)
    # fromisoformat only accepts a Z suffix from Python 3.11
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise click.BadParameter(
            f"{value!r} is neither Unix seconds nor an ISO 8601 datetime"
        ) from e


def _fmt(value: float | None, suffix: str = "") -> str:
    return "-" if value is None else f"{value:.1f}{suffix}"


def _print_summary(forecast: Forecast, api: ForecastApi) -> None:
    """Render a human-readable view of a forecast."""
    console.print(
        f"📍 {forecast.latitude}, {forecast.longitude} ({forecast.timezone or 'unknown timezone'})"
    )

    current = forecast.currently
    if current:
        console.print(f"\n🌤️  Now: {current.summary or 'No summary'}")
        console.print(
            f"🌡️  Temperature: {_fmt(current.temperature, '°')} "
            f"(feels like {_fmt(current.apparent_temperature, '°')})"
        )
        console.print(f"💨 Wind: {_fmt(current.wind_speed)}")
        if current.humidity is not None:
            console.print(f"💧 Humidity: {current.humidity * 100:.0f}%")

    if forecast.daily and forecast.daily.data:
        table = Table(title=forecast.daily.summary or "Daily outlook")
        table.add_column("Date")
        table.add_column("Summary")
        table.add_column("Min", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Precip", justify="right")
        for day in forecast.daily.data:
            probability = day.precipitation_probability
            table.add_row(
                day.time.date().isoformat() if day.time else "-",
                day.summary or "",
                _fmt(day.min_temperature, "°"),
                _fmt(day.max_temperature, "°"),
                "-" if probability is None else f"{probability * 100:.0f}%",
            )
        console.print(table)

    for alert in forecast.alerts:
        expires = alert.expires.isoformat() if alert.expires else "unknown"
        console.print(f"⚠️  {alert.title} (expires {expires})")
        if alert.uri:
            console.print(f"   {alert.uri}")

    if api.api_calls_made is not None:
        console.print(f"\n📊 API calls made: {api.api_calls_made}")


def _emit(forecast: Forecast, api: ForecastApi, output: str | None, as_json: bool) -> None:
    data = forecast.model_dump(mode="json")

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(data, f, indent=2)
        console.print(f"💾 Saved results to {output_path}")

    if as_json:
        print(json.dumps(data, indent=2))
    else:
        _print_summary(forecast, api)


@click.group()
@click.version_option(__version__)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Set logging level",
)
def forecast_cli(log_level: str) -> None:
    """Forecast service weather lookups."""
    setup_logging(level=log_level.upper(), enable_file_logging=False)


@forecast_cli.command(name="current")
@_request_options
@click.option(
    "--extend-hourly", is_flag=True, help="Extend the hourly block to seven days"
)
def current(
    lat: float,
    lon: float,
    units: str | None,
    lang: str | None,
    excludes: tuple[str, ...],
    api_key: str | None,
    timeout: float | None,
    output: str | None,
    as_json: bool,
    extend_hourly: bool,
) -> None:
    """Get the current forecast for a coordinate."""
    try:
        api = ForecastApi(api_key, timeout_s=timeout)
        forecast = api.get_weather_data(
            lat,
            lon,
            unit=from_value(Unit, units) if units else None,
            extends=[Extend.HOURLY] if extend_hourly else None,
            excludes=[from_value(Exclude, e) for e in excludes],
            language=from_value(Language, lang) if lang else None,
        )
        _emit(forecast, api, output, as_json)

    except Exception as e:
        logger.error(f"Forecast lookup failed: {e}")
        console.print(f"❌ Error: {e}")
        sys.exit(1)


@forecast_cli.command(name="history")
@_request_options
@click.option(
    "--time",
    "when",
    required=True,
    help="Moment to look up: Unix seconds or ISO 8601 datetime",
)
def history(
    lat: float,
    lon: float,
    units: str | None,
    lang: str | None,
    excludes: tuple[str, ...],
    api_key: str | None,
    timeout: float | None,
    output: str | None,
    as_json: bool,
    when: str,
) -> None:
    """Get time machine weather for a coordinate at a given time."""
    moment = _parse_time(when)
    try:
        api = ForecastApi(api_key, timeout_s=timeout)
        forecast = api.get_time_machine_weather(
            lat,
            lon,
            moment,
            unit=from_value(Unit, units) if units else None,
            excludes=[from_value(Exclude, e) for e in excludes],
            language=from_value(Language, lang) if lang else None,
        )
        _emit(forecast, api, output, as_json)

    except Exception as e:
        logger.error(f"Time machine lookup failed: {e}")
        console.print(f"❌ Error: {e}")
        sys.exit(1)


def main() -> None:
    """Console script entry point."""
    forecast_cli()


if __name__ == "__main__":
    main()
