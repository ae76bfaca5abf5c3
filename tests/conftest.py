"""
pytest configuration for forecast-client tests.

Loads a project .env if present and isolates module-level state
(HTTP session, cached configuration, root logging handlers) between tests.
"""

import copy
import json
import logging
from pathlib import Path
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TEST_API_KEY = "test-api-key-0123456789"


def pytest_configure(config):
    """Configure pytest session - load environment variables."""
    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)


@pytest.fixture(autouse=True)
def _reset_http_session():
    """Reset the http_session module's singleton between tests."""
    import forecast_client.http_session as hs

    hs.reset_session()
    yield
    hs.reset_session()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Give every test a known API key and fresh configuration caches."""
    from forecast_client.config import clear_config_cache

    monkeypatch.setenv("FORECAST_API_KEY", TEST_API_KEY)
    monkeypatch.delenv("FORECAST_BASE_URL", raising=False)
    monkeypatch.delenv("FORECAST_TIMEOUT_S", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo setup_logging() calls made by a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(scope="session")
def _forecast_payload_raw() -> dict:
    with open(FIXTURES_DIR / "forecast.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def forecast_payload(_forecast_payload_raw) -> dict:
    """A full forecast response (all blocks present), safe to mutate."""
    return copy.deepcopy(_forecast_payload_raw)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def make_response():
    """Build a mock requests.Response carrying a JSON body."""

    def _make(payload, status_code=200, headers=None):
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.headers = headers or {}
        response.content = (
            payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        )
        if response.ok:
            response.raise_for_status.return_value = None
        else:
            import requests

            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Error", response=response
            )
        return response

    return _make
