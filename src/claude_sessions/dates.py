"""ISO-8601 timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 string (a trailing 'Z' included) into an aware datetime."""
    if not isinstance(value, str):
        return None
    token = value.strip()
    if not token:
        return None
    try:
        dt = datetime.fromisoformat(token.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def epoch_to_iso(seconds: float) -> str:
    """Format a POSIX timestamp the way the logs do: '2026-01-15T10:00:01.000Z'."""
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sort_key(value: str) -> datetime:
    """Comparable key for a timestamp string; unparseable values sort oldest."""
    return parse_timestamp(value) or EPOCH
