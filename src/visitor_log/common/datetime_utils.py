from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_iso_timestamp(value: datetime) -> str:
    """Format as ``2025-03-01T08:15:00.000Z`` (UTC, millisecond precision)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp.

    A bare date is UTC midnight; a date-time without an offset is server local time.
    """
    text = value.strip()
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        if len(text) == 10:
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            parsed = parsed.astimezone()
    return parsed


def to_local_display(value: str | None) -> str:
    """Render a stored timestamp as ``3/1/2025, 4:15:00 PM`` in server local time.

    Values that are not ISO-8601 or fall outside the representable range
    (restored data can hold anything) are returned unchanged.
    """
    if value is None:
        return ""
    try:
        local = parse_iso_timestamp(str(value)).astimezone()
    except (ValueError, OverflowError):
        return str(value)

    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local.minute:02d}:{local.second:02d} {suffix}"
