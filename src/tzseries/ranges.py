from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from tzseries.config.range import DEFAULT_TIMEZONE, MAX_RANGE_DAYS, DateRangeConfig
from tzseries.domain.range import DateRange
from tzseries.errors import InvalidRangeError, RangeTooLargeError
from tzseries.keyer import DAY_KEY_FORMAT, TimezoneDayKeyer, default_keyer
from tzseries.utils.time import coerce_instant, ensure_utc, load_zone, ms_day_span

logger = logging.getLogger(__name__)


def normalize_date_range(
    config: DateRangeConfig,
    *,
    now: Optional[datetime] = None,
) -> DateRange:
    """Fill a missing bound with a window of ``config.default_range_days`` days.

    - neither bound: the window ends at ``now``;
    - start only: the end is start plus the window;
    - end only: the start is end minus the window.

    Raises InvalidRangeError when the resulting end precedes the start.
    """
    window = timedelta(days=config.default_range_days)
    start = config.start_date
    end = config.end_date

    if start is None and end is None:
        end = ensure_utc(now) if now is not None else datetime.now(timezone.utc)
        start = end - window
    elif end is None:
        end = start + window
    elif start is None:
        start = end - window

    if end < start:
        raise InvalidRangeError()

    normalized = DateRange(start_date=start, end_date=end, timezone=config.timezone)
    logger.debug("Normalized date range: %s", normalized.describe())
    return normalized


def validate_date_range(
    start_date: object,
    end_date: object,
    max_range_days: int = MAX_RANGE_DAYS,
) -> None:
    """Reject invalid bounds, reversed ranges and spans over max_range_days.

    The span is ``ceil(ms difference / 86_400_000)``; it is not calendar
    aware and can be off by one across DST transitions.
    """
    start = coerce_instant(start_date, "start")
    end = coerce_instant(end_date, "end")

    if end < start:
        raise InvalidRangeError()

    span = ms_day_span(start, end)
    if span > max_range_days:
        raise RangeTooLargeError(max_range_days, span)


def date_range(
    start_date: object,
    end_date: object,
    timezone_name: str = DEFAULT_TIMEZONE,
    *,
    keyer: TimezoneDayKeyer = default_keyer,
) -> list[str]:
    """Return every local day key between the two instants, inclusive."""
    validate_date_range(start_date, end_date)
    start = coerce_instant(start_date, "start")
    end = coerce_instant(end_date, "end")
    return [
        day.strftime(DAY_KEY_FORMAT)
        for day in keyer.iter_days(start, end, timezone_name)
    ]


def format_in_timezone(
    instant: datetime,
    pattern: str = DAY_KEY_FORMAT,
    timezone_name: str = DEFAULT_TIMEZONE,
) -> str:
    """Format instant with a strftime pattern after converting to timezone_name."""
    zone = load_zone(timezone_name)
    return ensure_utc(instant).astimezone(zone).strftime(pattern)


def days_difference(start_date: datetime, end_date: datetime) -> int:
    """Signed day count, positive when end_date follows start_date."""
    return ms_day_span(ensure_utc(start_date), ensure_utc(end_date))
