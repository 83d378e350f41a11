"""Date/time parsing helpers.

Provides tolerant ISO 8601 parsing, calendar-day bounds for date-range
filters, and the human-readable format used in search results.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional

from ..errors import BadRequestError

DISPLAY_FORMAT = "%b %d, %Y, %I:%M %p"


def _replace_z_suffix(value: str) -> str:
    if value.endswith("Z"):
        return value[:-1] + "+00:00"
    return value


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 string into a timezone-aware datetime.

    Accepts values ending with 'Z' by converting to '+00:00'.

    Raises:
        ValueError: If the timestamp cannot be parsed.
    """

    normalized = _replace_z_suffix(value)
    # Try fromisoformat which supports offsets like +00:00
    dt = datetime.fromisoformat(normalized)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_calendar_date(value: str, tz: tzinfo = timezone.utc) -> date:
    """Return the calendar day named by a date or timestamp string.

    `YYYY-MM-DD` is taken as-is; a full timestamp is converted to `tz`
    first so the day matches what the user sees.

    Raises:
        BadRequestError: If the value is neither a date nor a timestamp.
    """

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return parse_iso8601(text).astimezone(tz).date()
    except ValueError as exc:
        raise BadRequestError(
            f"Invalid date: {value!r}; expected YYYY-MM-DD", {"value": value}
        ) from exc


def start_of_day(value: str, tz: tzinfo = timezone.utc) -> datetime:
    """00:00:00.000 of the named calendar day in `tz`."""
    return datetime.combine(parse_calendar_date(value, tz), time.min, tzinfo=tz)


def end_of_day(value: str, tz: tzinfo = timezone.utc) -> datetime:
    """23:59:59.999 of the named calendar day in `tz`.

    Millisecond precision matches the granularity of upstream timestamps.
    """
    return datetime.combine(
        parse_calendar_date(value, tz), time(23, 59, 59, 999000), tzinfo=tz
    )


def format_display_time(
    value: Optional[datetime], tz: tzinfo = timezone.utc
) -> Optional[str]:
    """Render a timestamp for display, e.g. 'Jan 02, 2024, 10:00 AM'.

    Example:
        >>> format_display_time(parse_iso8601("2024-01-02T15:30:00Z"))
        'Jan 02, 2024, 03:30 PM'
    """

    if value is None:
        return None
    return value.astimezone(tz).strftime(DISPLAY_FORMAT)
