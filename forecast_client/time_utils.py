"""Conversions between Unix epoch seconds and calendar datetimes."""

from datetime import datetime, timezone, tzinfo


def from_unix_time(seconds: int | float, tz: tzinfo | None = timezone.utc) -> datetime:
    """
    Convert seconds since the Unix epoch to an aware datetime.

    Args:
        seconds: Seconds since 1970-01-01T00:00:00Z
        tz: Target timezone (UTC by default, None for the host's local zone)

    Returns:
        Timezone-aware datetime
    """
    if tz is None:
        return datetime.fromtimestamp(seconds, timezone.utc).astimezone()
    return datetime.fromtimestamp(seconds, tz)


def to_unix_time(moment: datetime) -> int:
    """
    Convert a datetime to whole seconds since the Unix epoch.

    Naive datetimes are taken to be in the host's local zone. Sub-second
    precision is truncated.
    """
    return int(moment.timestamp() // 1)
