"""Pure functions that turn free-form event input into canonical values."""

import re
from datetime import datetime, timezone

from dateutil import parser as dateparser

from events.domain.errors import InvalidFormatError

_QUOTES_RE = re.compile(r"['\"]")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

# Tried in this order; the first match wins.
_MERIDIEM_RE = re.compile(r"^(\d{1,2})(?::(\d{2}))?\s*([ap]m)$", re.ASCII)
_COLON_RE = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)
_HOUR_RE = re.compile(r"^(\d{1,2})$", re.ASCII)

# Two defaults that differ in year, month and day: any part the input leaves
# out shows up as a mismatch between the two parses.
_DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 12, 28))


def slugify(title: str) -> str:
    """Return a URL-safe slug of lowercase letters, digits and single hyphens."""
    slug = _QUOTES_RE.sub("", title.lower().strip())
    slug = _NON_ALNUM_RE.sub("-", slug)
    return slug.strip("-")


def normalize_date(value: str) -> str:
    """Parse a date-like string and return it as ``YYYY-MM-DD`` in UTC.

    The input must name a year, month and day; nothing is filled in from
    today. Naive inputs are read as UTC; aware inputs are converted to UTC
    first, so the calendar date never drifts with the server's local timezone.
    """
    try:
        parsed, check = (dateparser.parse(value, default=d) for d in _DATE_DEFAULTS)
    except (ValueError, OverflowError) as exc:
        raise InvalidFormatError("Invalid date format", field="date") from exc
    if parsed.date() != check.date():
        raise InvalidFormatError("Incomplete date", field="date")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Return ``value`` as a zero-padded 24-hour ``HH:MM`` string.

    Accepts ``"9"``, ``"21:30"``, ``"9pm"`` and ``"9:30 PM"``.
    """
    text = " ".join(value.strip().lower().split())

    if m := _MERIDIEM_RE.match(text):
        hour = int(m.group(1))
        minute = int(m.group(2) or 0)
        is_pm = m.group(3) == "pm"
        if hour == 12:
            hour = 12 if is_pm else 0
        elif is_pm:
            hour += 12
        return _format_time(hour, minute)

    if m := _COLON_RE.match(text):
        return _format_time(int(m.group(1)), int(m.group(2)))

    if m := _HOUR_RE.match(text):
        return _format_time(int(m.group(1)), 0)

    raise InvalidFormatError("Invalid time", field="time")


def _format_time(hour: int, minute: int) -> str:
    if hour > 23 or minute > 59:
        raise InvalidFormatError("Invalid time", field="time")
    return f"{hour:02d}:{minute:02d}"
