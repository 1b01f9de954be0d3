"""
Date helpers for content documents.

Documents reach us with dates in several shapes: python ``datetime``/``date``
objects, ISO-like strings, plain ``YYYY-MM-DD`` strings and structured
``{"seconds": ..., "nanoseconds": ...}`` timestamp records. Everything here
returns ``None`` for input it cannot read instead of raising.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from numbers import Real
from typing import Any, Mapping

from dateutil import parser as dateparser

YMD_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
PARSE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _aware(dt: datetime) -> datetime:
    # naive values are stored as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _timestamp_seconds(value: Any) -> float | None:
    if isinstance(value, Mapping):
        seconds = value.get("seconds")
    else:
        seconds = getattr(value, "seconds", None)
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        return None
    return float(seconds)


def _parse_string(value: str) -> datetime | None:
    text = value.strip()
    if not text:
        return None

    if YMD_RE.match(text):
        # anchor to midnight UTC so the calendar day never shifts
        try:
            d = date.fromisoformat(text)
        except ValueError:
            return None
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)

    try:
        return _aware(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    # dateutil fills missing parts from `default`; a string only counts as a
    # date when both defaults give the same result
    try:
        first = _aware(dateparser.parse(text, default=PARSE_DEFAULTS[0]))
        second = _aware(dateparser.parse(text, default=PARSE_DEFAULTS[1]))
    except (ValueError, OverflowError):
        return None
    return first if first == second else None


def to_utc_datetime(value: Any) -> datetime | None:
    """Coerce any supported date representation to an aware UTC datetime."""
    try:
        if isinstance(value, datetime):
            return _aware(value)
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        if isinstance(value, str):
            return _parse_string(value)

        seconds = _timestamp_seconds(value)
        if seconds is not None:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None
    return None


def format_suggested_date(value: Any) -> str | None:
    """Return ``YYYY-MM-DD`` (UTC calendar day) or None."""
    dt = to_utc_datetime(value)
    if dt is None:
        return None
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"


def timestamp_to_iso(value: Any) -> str | None:
    """Return an ISO-8601 UTC string like ``2024-07-10T10:00:00.000Z`` or None."""
    dt = to_utc_datetime(value)
    if dt is None:
        return None
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_suggested_date(value: Any) -> date | None:
    s = format_suggested_date(value)
    return date.fromisoformat(s) if s else None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
