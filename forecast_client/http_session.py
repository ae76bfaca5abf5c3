"""
Shared HTTP session for Forecast service requests.
"""

from typing import Any

import requests

from forecast_client.logging_config import get_logger

logger = get_logger(__name__)

# Module-level singleton (tests can override/reset)
_SESSION: requests.Session | None = None


def get_session() -> requests.Session:
    """Get the shared session, creating it on first use."""
    global _SESSION
    if _SESSION is None:
        _SESSION = requests.Session()
        _SESSION.headers.update({"Accept-Encoding": "gzip, deflate"})
    return _SESSION


def reset_session() -> None:
    """Close and clear the module session (for tests)."""
    global _SESSION
    if _SESSION is not None:
        _SESSION.close()
    _SESSION = None


def set_session_for_tests(session: requests.Session) -> None:
    """Force get_session() to return a provided session (for tests)."""
    global _SESSION
    _SESSION = session


def redact(url: str, secret: str | None) -> str:
    """Replace a secret embedded in a URL before it is logged."""
    if secret:
        return url.replace(secret, "***")
    return url


def request(
    method: str, url: str, *, secret: str | None = None, **kwargs: Any
) -> requests.Response:
    """
    Make an HTTP request through the shared session.

    Args:
        method: HTTP method
        url: Request URL
        secret: Value to mask in log output (e.g. an API key in the path)
        **kwargs: Additional request parameters

    Returns:
        HTTP response
    """
    safe_url = redact(url, secret)
    logger.debug(f"Making {method} request to {safe_url}")

    response = get_session().request(method, url, **kwargs)

    logger.debug(f"{method} {safe_url} -> {response.status_code}")
    return response
