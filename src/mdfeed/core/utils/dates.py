"""Lenient timestamp parsing and JS-compatible formatting"""

from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional


def truncate_ms(value: datetime) -> datetime:
    """Drop sub-millisecond precision, matching what a JS Date can hold."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def _parse(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return _parse(datetime.fromisoformat(text))
    except ValueError:
        pass
    try:
        return _parse(parsedate_to_datetime(text))
    except (TypeError, ValueError):
        return None


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a meta.date value into an aware datetime, or None if it cannot be parsed.

    Dates become UTC midnight, naive datetimes are taken as UTC, numbers are
    epoch milliseconds. Strings may be ISO-8601 or RFC-822. The result is
    truncated to milliseconds so it survives a trip through the listing.
    """
    parsed = _parse(value)
    return truncate_ms(parsed) if parsed is not None else None


def to_js_iso(value: datetime) -> str:
    """Format as UTC ISO-8601 with milliseconds, e.g. 2020-06-01T00:00:00.000Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
