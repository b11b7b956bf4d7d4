from __future__ import annotations

import math
from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzseries.errors import InvalidDateError, InvalidTimezoneError

_DAY_MS = 86_400_000


def load_zone(name: str) -> ZoneInfo:
    """Return the IANA zone for name, raising InvalidTimezoneError when unknown."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidTimezoneError(name)
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezoneError(name) from exc


def ensure_utc(value: datetime) -> datetime:
    """Return value as a UTC-aware datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(text: str) -> datetime:
    """Parse an ISO-8601 string into a UTC-aware datetime.

    Accepts a trailing ``Z`` and date-only strings (midnight UTC).
    """
    raw = text.strip()
    if raw.endswith(("Z", "z")):
        raw = raw[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(raw))


def coerce_instant(value: object, bound: str) -> datetime:
    """Convert value into a UTC instant or raise InvalidDateError for bound."""
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            return parse_datetime(value)
        except ValueError as exc:
            raise InvalidDateError(bound, value) from exc
    raise InvalidDateError(bound, value)


def isoformat_utc(value: datetime) -> str:
    """Serialize an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    text = ensure_utc(value).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def ms_day_span(start: datetime, end: datetime) -> int:
    """Signed day count from the raw millisecond difference, rounded up."""
    delta = end - start
    ms = (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds / 1000
    return math.ceil(ms / _DAY_MS)
